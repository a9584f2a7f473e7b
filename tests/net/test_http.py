from __future__ import annotations

import httpx
import pytest

from paypal_rest.errors import HttpError, PayPalConnectionError
from paypal_rest.net.http import ConnectionManager, HttpConnection, HttpRequest


def test_get_connection_applies_timeout_and_proxy() -> None:
    manager = ConnectionManager()
    request = manager.get_connection(
        {
            "connectionTimeout": "2500",
            "proxyAddress": "http://proxy.local:3128",
            "proxyCredentials": "user:pass",
        },
        "https://api.sandbox.paypal.com/v1/payments/payment",
    )
    assert request.url == "https://api.sandbox.paypal.com/v1/payments/payment"
    assert request.timeout_seconds == pytest.approx(2.5)
    assert request.proxy is not None
    assert request.proxy.url.host == "proxy.local"
    assert request.content_type == "application/json"


def test_get_connection_ignores_invalid_timeout() -> None:
    request = ConnectionManager().get_connection({"connectionTimeout": "soon"}, "https://x.local/")
    assert request.timeout_seconds == pytest.approx(360.0)
    assert request.proxy is None


def test_execute_sends_payload_and_records_details() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.path == "/v1/payments/payment"
        assert request.headers.get("content-type") == "application/json"
        assert request.headers.get("authorization") == "Bearer tok"
        assert request.content == b'{"intent":"sale"}'
        return httpx.Response(
            201,
            content=b'{"id":"PAY-1"}',
            headers={"Content-Type": "application/json", "PayPal-Debug-Id": "dbg-1"},
            request=request,
        )

    request = HttpRequest(url="https://api.local/v1/payments/payment", method="POST")
    request.headers["Authorization"] = "Bearer tok"
    connection = HttpConnection({}, transport=httpx.MockTransport(handler))

    body = connection.execute('{"intent":"sale"}', request)

    assert body == '{"id":"PAY-1"}'
    assert connection.request_details.method == "POST"
    assert connection.request_details.url == "https://api.local/v1/payments/payment"
    assert connection.request_details.body == '{"intent":"sale"}'
    assert connection.request_details.headers["Authorization"] == "Bearer tok"
    assert connection.response_details.status_code == 201
    assert connection.response_details.headers["PayPal-Debug-Id"] == "dbg-1"
    assert connection.response_details.exception is None


def test_execute_sends_no_body_for_empty_payload() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.content == b""
        return httpx.Response(204, request=request)

    connection = HttpConnection({}, transport=httpx.MockTransport(handler))
    assert connection.execute("", HttpRequest(url="https://api.local/v1/x", method="DELETE")) == ""
    assert connection.request_details.body is None


def test_execute_raises_http_error_with_status_and_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, content=b"not found", request=request)

    connection = HttpConnection({}, transport=httpx.MockTransport(handler))
    with pytest.raises(HttpError) as excinfo:
        connection.execute("", HttpRequest(url="https://api.local/missing"))
    assert excinfo.value.status_code == 404
    assert excinfo.value.response == "not found"
    assert "not found" in str(excinfo.value)
    assert connection.response_details.status_code == 404
    assert connection.response_details.exception is excinfo.value


def test_execute_maps_transport_failures_to_connection_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    connection = HttpConnection({}, transport=httpx.MockTransport(handler))
    with pytest.raises(PayPalConnectionError, match="HTTP request failed") as excinfo:
        connection.execute("", HttpRequest(url="https://api.local/"))
    assert not isinstance(excinfo.value, HttpError)
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)
    assert connection.response_details.status_code is None


def test_execute_maps_timeouts_to_connection_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    connection = HttpConnection({}, transport=httpx.MockTransport(handler))
    with pytest.raises(PayPalConnectionError):
        connection.execute("", HttpRequest(url="https://api.local/"))
    assert isinstance(connection.response_details.exception, httpx.ReadTimeout)
