"""HTTP adapter – transport port and httpx implementation."""
from mp_cloudsearch.adapters.http.client import HttpResponse, HttpxTransport, Transport

__all__ = ["HttpResponse", "HttpxTransport", "Transport"]
