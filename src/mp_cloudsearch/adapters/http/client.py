"""HTTP adapter – Transport port and the httpx implementation."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

import httpx

from mp_cloudsearch.kernel.errors import InfrastructureTimeoutError, TransportError
from mp_cloudsearch.observability.logging import get_logger

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class HttpResponse:
    """Status line plus the JSON-decoded body (``None`` when not JSON)."""

    status_code: int
    reason: str = ""
    body: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@runtime_checkable
class Transport(Protocol):
    """Port: the HTTP collaborator used by the client.

    Implementations return a :class:`HttpResponse` for every status code
    and raise :class:`~mp_cloudsearch.kernel.errors.TransportError` (or an
    ``OSError``) when no response was received.
    """

    def get(self, url: str) -> HttpResponse: ...
    def post(self, url: str, body: str, headers: Mapping[str, str]) -> HttpResponse: ...
    def close(self) -> None: ...


class HttpxTransport:
    """Thin synchronous httpx wrapper with structured error mapping.

    Request signing, proxies and retries belong in the ``httpx.Client``
    handed in via *client* (auth flows, transports, event hooks).
    """

    def __init__(
        self,
        timeout: float = 10.0,
        *,
        client: httpx.Client | None = None,
        **kwargs: Any,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout, **kwargs)

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def get(self, url: str) -> HttpResponse:
        return self._request("GET", url)

    def post(self, url: str, body: str, headers: Mapping[str, str]) -> HttpResponse:
        return self._request("POST", url, content=body, headers=dict(headers))

    def _request(self, method: str, url: str, **kwargs: Any) -> HttpResponse:
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.TimeoutException as exc:
            raise InfrastructureTimeoutError(url, f"HTTP request timed out: {method} {url}", cause=exc) from exc
        except httpx.HTTPError as exc:
            raise TransportError(url, f"{type(exc).__name__}: {exc}", cause=exc) from exc
        _log.debug("http_response", method=method, url=url, status_code=response.status_code)
        return HttpResponse(
            status_code=response.status_code,
            reason=response.reason_phrase,
            body=_decode_body(response),
        )


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


__all__ = ["HttpResponse", "HttpxTransport", "Transport"]
