"""Testing fakes – in-memory doubles for the client's ports."""
from mp_cloudsearch.testing.fakes.transport import FakeTransport, RecordedRequest, search_response

__all__ = ["FakeTransport", "RecordedRequest", "search_response"]
