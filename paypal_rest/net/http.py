"""HTTP transport built on top of httpx.

This module turns a resolved config map and URL into a request handle
(``HttpRequest``), executes it with a short-lived ``httpx.Client`` and maps
httpx failures into the SDK error taxonomy. Each ``HttpConnection`` records
what it sent and received in ``request_details``/``response_details``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

import httpx
from loguru import logger

from paypal_rest.constants import (
    CONNECTION_TIMEOUT_CONFIG,
    CONTENT_TYPE_HEADER,
    CONTENT_TYPE_JSON,
    DEFAULT_CONNECTION_TIMEOUT_MS,
    PROXY_ADDRESS_CONFIG,
    PROXY_CREDENTIALS_CONFIG,
)
from paypal_rest.errors import HttpError, PayPalConnectionError

log = logger.bind(module="net.http")

__all__ = [
    "ConnectionManager",
    "HttpConnection",
    "HttpRequest",
    "RequestDetails",
    "ResponseDetails",
    "get_connection_manager",
]

_MIN_TIMEOUT_SECONDS = 0.1
_MAX_ERROR_TEXT_CHARS = 2048

# Latin-1 lets the transliterated User-Agent pass through unchanged.
_HEADER_ENCODING = "iso-8859-1"


@dataclass(slots=True)
class RequestDetails:
    """Snapshot of the most recent outgoing request."""

    method: str | None = None
    url: str | None = None
    headers: dict[str, str] = field(default_factory=dict)
    body: str | None = None


@dataclass(slots=True)
class ResponseDetails:
    """Snapshot of the most recent response (or transport failure)."""

    status_code: int | None = None
    headers: dict[str, str] = field(default_factory=dict)
    body: str | None = None
    exception: BaseException | None = None


@dataclass(slots=True)
class HttpRequest:
    """Mutable request handle filled in by the dispatcher before execution."""

    url: str
    method: str = "GET"
    content_type: str = CONTENT_TYPE_JSON
    headers: httpx.Headers = field(default_factory=lambda: httpx.Headers(encoding=_HEADER_ENCODING))
    timeout_seconds: float = DEFAULT_CONNECTION_TIMEOUT_MS / 1000.0
    proxy: httpx.Proxy | None = None


def _truncate(text: str, *, limit: int) -> str:
    """Return a truncated string with an ellipsis when needed."""
    if limit <= 0:
        return ""
    if len(text) <= limit:
        return text
    head = text[: max(0, limit - 3)].rstrip()
    return f"{head}..."


def _raw_header_dict(raw: list[tuple[bytes, bytes]]) -> dict[str, str]:
    """Decode raw header pairs keeping the names exactly as sent on the wire."""
    return {
        key.decode(_HEADER_ENCODING): value.decode(_HEADER_ENCODING)
        for key, value in raw
    }


def _timeout_seconds(config: Mapping[str, str]) -> float:
    raw = config.get(CONNECTION_TIMEOUT_CONFIG)
    try:
        millis = float(raw) if raw else float(DEFAULT_CONNECTION_TIMEOUT_MS)
    except ValueError:
        log.warning("Ignoring invalid {} value {!r}", CONNECTION_TIMEOUT_CONFIG, raw)
        millis = float(DEFAULT_CONNECTION_TIMEOUT_MS)
    return max(_MIN_TIMEOUT_SECONDS, millis / 1000.0)


def _proxy(config: Mapping[str, str]) -> httpx.Proxy | None:
    address = (config.get(PROXY_ADDRESS_CONFIG) or "").strip()
    if not address:
        return None
    credentials = (config.get(PROXY_CREDENTIALS_CONFIG) or "").strip()
    if credentials and ":" in credentials:
        username, _, password = credentials.partition(":")
        return httpx.Proxy(address, auth=(username, password))
    return httpx.Proxy(address)


class ConnectionManager:
    """Creates request handles and connections for a resolved config map.

    A custom ``transport`` (e.g. ``httpx.MockTransport``) replaces the network
    for every connection this manager opens.
    """

    def __init__(self, *, transport: httpx.BaseTransport | None = None) -> None:
        self.transport = transport

    def get_connection(self, config: Mapping[str, str], url: str) -> HttpRequest:
        """Return a request handle for ``url`` honouring timeout/proxy settings."""
        return HttpRequest(
            url=url,
            timeout_seconds=_timeout_seconds(config),
            proxy=_proxy(config),
        )

    def new_connection(self, config: Mapping[str, str]) -> "HttpConnection":
        return HttpConnection(config, transport=self.transport)


_default_manager = ConnectionManager()


def get_connection_manager() -> ConnectionManager:
    """Return the process-wide default connection manager."""
    return _default_manager


class HttpConnection:
    """Executes a single ``HttpRequest`` and records request/response details."""

    def __init__(
        self,
        config: Mapping[str, str],
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.config = dict(config)
        self.transport = transport
        self.request_details = RequestDetails()
        self.response_details = ResponseDetails()

    def _build_client(self, request: HttpRequest) -> httpx.Client:
        kwargs: dict[str, object] = {
            "timeout": max(_MIN_TIMEOUT_SECONDS, float(request.timeout_seconds)),
            "follow_redirects": False,
        }
        if self.transport is not None:
            kwargs["transport"] = self.transport
        elif request.proxy is not None:
            kwargs["proxy"] = request.proxy
        return httpx.Client(**kwargs)  # type: ignore[arg-type]

    def execute(self, payload: str | None, request: HttpRequest) -> str:
        """Send ``payload`` with ``request`` and return the response body.

        Raises:
            HttpError: When the server answers with a 4xx/5xx status.
            PayPalConnectionError: When the request fails or times out.
        """
        headers = httpx.Headers(request.headers, encoding=_HEADER_ENCODING)
        headers[CONTENT_TYPE_HEADER] = request.content_type
        content = payload.encode("utf-8") if payload else None

        self.request_details.method = request.method
        self.request_details.url = request.url
        self.request_details.headers = _raw_header_dict(headers.raw)
        self.request_details.body = payload or None

        try:
            with self._build_client(request) as client:
                response = client.request(
                    request.method,
                    request.url,
                    headers=headers,
                    content=content,
                )
        except httpx.RequestError as exc:
            self.response_details.exception = exc
            raise PayPalConnectionError(f"HTTP request failed: {exc}") from exc

        body = response.text or ""
        self.response_details.status_code = int(response.status_code)
        self.response_details.headers = _raw_header_dict(response.headers.raw)
        self.response_details.body = body
        log.debug("{} {} -> {}", request.method, request.url, response.status_code)

        if response.is_error:
            reason = response.reason_phrase or "Error"
            error = HttpError(
                f"The remote server returned an error: ({response.status_code}) {reason}. "
                f"{_truncate(body.strip(), limit=_MAX_ERROR_TEXT_CHARS)}".rstrip(),
                status_code=int(response.status_code),
                response=body,
            )
            self.response_details.exception = error
            raise error
        return body
