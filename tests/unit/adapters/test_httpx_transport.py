"""Unit tests – httpx transport adapter."""
from __future__ import annotations

import httpx
import pytest
import respx

from mp_cloudsearch.adapters.http import HttpResponse, HttpxTransport, Transport
from mp_cloudsearch.kernel.errors import InfrastructureTimeoutError, TransportError


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class TestResponses:
    @respx.mock
    def test_get_decodes_json(self) -> None:
        respx.get("http://svc/search").mock(
            return_value=httpx.Response(200, json={"hits": {"found": 0}})
        )
        with HttpxTransport() as transport:
            response = transport.get("http://svc/search")
        assert response == HttpResponse(200, "OK", {"hits": {"found": 0}})
        assert response.ok

    @respx.mock
    def test_error_status_is_returned_not_raised(self) -> None:
        respx.get("http://svc/search").mock(return_value=httpx.Response(503))
        with HttpxTransport() as transport:
            response = transport.get("http://svc/search")
        assert response.status_code == 503
        assert response.reason == "Service Unavailable"
        assert not response.ok

    @respx.mock
    def test_non_json_body_is_none(self) -> None:
        respx.get("http://svc/search").mock(return_value=httpx.Response(200, text="<html/>"))
        with HttpxTransport() as transport:
            assert transport.get("http://svc/search").body is None

    @respx.mock
    def test_post_sends_body_and_headers(self) -> None:
        route = respx.post("http://svc/documents/batch").mock(
            return_value=httpx.Response(200, json={"status": "success"})
        )
        with HttpxTransport() as transport:
            response = transport.post(
                "http://svc/documents/batch", '[{"type": "delete", "id": "1"}]', {"Content-Type": "application/json"}
            )
        sent = route.calls.last.request
        assert sent.content == b'[{"type": "delete", "id": "1"}]'
        assert sent.headers["content-type"] == "application/json"
        assert response.body == {"status": "success"}


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class TestFailures:
    @respx.mock
    def test_connect_error_maps_to_transport_error(self) -> None:
        respx.get("http://svc/search").mock(side_effect=httpx.ConnectError("refused"))
        with HttpxTransport() as transport, pytest.raises(TransportError) as exc_info:
            transport.get("http://svc/search")
        assert exc_info.value.url == "http://svc/search"
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @respx.mock
    def test_timeout_maps_to_timeout_error(self) -> None:
        respx.get("http://svc/search").mock(side_effect=httpx.ReadTimeout("slow"))
        with HttpxTransport() as transport, pytest.raises(InfrastructureTimeoutError) as exc_info:
            transport.get("http://svc/search")
        assert isinstance(exc_info.value, TransportError)
        assert exc_info.value.code == "infrastructure_timeout"


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


class TestLifecycle:
    def test_satisfies_transport_protocol(self) -> None:
        with HttpxTransport() as transport:
            assert isinstance(transport, Transport)

    def test_borrowed_client_is_left_open(self) -> None:
        client = httpx.Client()
        transport = HttpxTransport(client=client)
        transport.close()
        assert not client.is_closed
        client.close()
