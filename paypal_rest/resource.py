"""Request dispatch for PayPal REST resources.

``configure_and_execute`` is the single entry point every resource call goes
through: it builds headers, resolves the endpoint, sends one HTTP request,
records diagnostics for the current context and decodes the response into
the shape the caller asked for. Failures are mapped onto ``paypal_rest.errors``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar, overload

import httpx
from loguru import logger
from pydantic import BaseModel, ConfigDict, PrivateAttr

from paypal_rest import codec
from paypal_rest.config import resolve_endpoint
from paypal_rest.constants import (
    AUTHORIZATION_HEADER,
    CONTENT_TYPE_HEADER,
    CONTENT_TYPE_JSON,
    PAYPAL_DEBUG_ID_HEADER,
    USER_AGENT_HEADER,
)
from paypal_rest.context import APIContext
from paypal_rest.diagnostics import record_exchange
from paypal_rest.errors import SDKError, classify_failure
from paypal_rest.headers import build_headers
from paypal_rest.net.http import ConnectionManager, get_connection_manager

log = logger.bind(module="resource")

__all__ = [
    "HttpMethod",
    "PayPalResource",
    "compose_url",
    "configure_and_execute",
    "to_latin1",
]

T = TypeVar("T")

_REDACTED = "***"


class HttpMethod(str, Enum):
    """HTTP methods supported by the REST API."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


class PayPalResource(BaseModel):
    """Base class for objects returned by the REST API.

    The ``PayPal-Debug-Id`` header of the response that produced the object
    is exposed as ``debug_id``; it changes if the object is used for further
    API calls.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    _debug_id: str | None = PrivateAttr(default=None)

    @property
    def debug_id(self) -> str | None:
        return self._debug_id

    def set_debug_id(self, debug_id: str | None) -> None:
        self._debug_id = debug_id


def to_latin1(value: str) -> str:
    """Drop characters ISO-8859-1 cannot represent."""
    return value.encode("iso-8859-1", errors="ignore").decode("iso-8859-1")


def compose_url(endpoint: str, resource: str) -> str:
    """Resolve ``resource`` against ``endpoint`` (RFC 3986 relative resolution).

    Raises:
        SDKError: When the result is not an absolute http(s) URL.
    """
    try:
        url = httpx.URL(endpoint).join(resource or "")
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise SDKError(
            f"Cannot create URL; baseURI={endpoint}, resourcePath={resource}"
        ) from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise SDKError(f"Cannot create URL; baseURI={endpoint}, resourcePath={resource}")
    return str(url)


def _log_headers(headers: httpx.Headers) -> None:
    for name, value in headers.items():
        if name.lower() == AUTHORIZATION_HEADER.lower():
            value = _REDACTED
        log.debug("{}:{}", name, value)


def _pop_header(headers: dict[str, str], name: str) -> str | None:
    """Remove every spelling of ``name`` from ``headers``; the last one wins."""
    wanted = name.lower()
    value = None
    for key in [k for k in headers if k.lower() == wanted]:
        value = headers.pop(key)
    return value


def _coerce_method(method: HttpMethod | str) -> HttpMethod:
    if isinstance(method, HttpMethod):
        return method
    try:
        return HttpMethod(str(method).strip().upper())
    except ValueError as exc:
        raise SDKError(f"Unsupported HTTP method: {method!r}") from exc


@overload
def configure_and_execute(
    context: APIContext | None,
    method: HttpMethod | str,
    resource: str,
    payload: Any = ...,
    *,
    response_type: None = ...,
    endpoint: str | None = ...,
    set_authorization_header: bool = ...,
    connection_manager: ConnectionManager | None = ...,
) -> None: ...


@overload
def configure_and_execute(
    context: APIContext | None,
    method: HttpMethod | str,
    resource: str,
    payload: Any = ...,
    *,
    response_type: type[T],
    endpoint: str | None = ...,
    set_authorization_header: bool = ...,
    connection_manager: ConnectionManager | None = ...,
) -> T: ...


def configure_and_execute(
    context: APIContext | None,
    method: HttpMethod | str,
    resource: str,
    payload: Any = "",
    *,
    response_type: Any = None,
    endpoint: str | None = None,
    set_authorization_header: bool = True,
    connection_manager: ConnectionManager | None = None,
) -> Any:
    """Configure and execute a REST call.

    Args:
        context: Credentials, config map and idempotency settings for the call.
        method: HTTP method (``HttpMethod`` or its name).
        resource: Resource path relative to the endpoint, e.g. ``v1/payments/payment``.
        payload: JSON text or a model serialized by ``codec.to_json``.
        response_type: ``None`` returns nothing, ``str`` returns the raw body,
            anything else is decoded from JSON into that type.
        endpoint: Endpoint override; defaults to ``resolve_endpoint(config)``.
        set_authorization_header: When False no ``Authorization`` header is sent.
        connection_manager: Transport factory; defaults to the shared manager.

    Raises:
        HttpError: The server answered with an error status.
        PaymentsValidationError: A 400 response carried a Payments API error.
        IdentityError: A 401 response carried an Identity API error.
        PayPalConnectionError: The request could not be completed.
        SDKError: Anything else; the original exception is the ``__cause__``.
    """
    if context is None:
        raise SDKError("APIContext object is null")

    try:
        return _execute(
            context,
            _coerce_method(method),
            resource,
            payload,
            response_type=response_type,
            endpoint=endpoint,
            set_authorization_header=set_authorization_header,
            manager=connection_manager or get_connection_manager(),
        )
    except Exception as exc:
        classified = classify_failure(exc)
        if classified is exc:
            raise
        raise classified from exc


def _execute(
    context: APIContext,
    method: HttpMethod,
    resource: str,
    payload: Any,
    *,
    response_type: Any,
    endpoint: str | None,
    set_authorization_header: bool,
    manager: ConnectionManager,
) -> Any:
    config = context.get_config_with_defaults()
    headers: dict[str, str] = build_headers(context)
    if not set_authorization_header:
        headers.pop(AUTHORIZATION_HEADER, None)

    if not endpoint:
        endpoint = resolve_endpoint(config)
    url = compose_url(endpoint, resource)

    request = manager.get_connection(config, url)
    request.method = method.value

    content_type = _pop_header(headers, CONTENT_TYPE_HEADER)
    request.content_type = content_type.strip() if content_type is not None else CONTENT_TYPE_JSON

    user_agent = _pop_header(headers, USER_AGENT_HEADER)
    if user_agent is not None:
        request.headers[USER_AGENT_HEADER] = to_latin1(user_agent)

    for name, value in headers.items():
        request.headers[name] = value
    _log_headers(request.headers)

    connection = manager.new_connection(config)
    # Publish before executing so failed calls are visible too.
    record_exchange(connection.request_details, connection.response_details)
    body = connection.execute(codec.to_json(payload), request)

    if response_type is None:
        return None
    if response_type is str:
        return body

    decoded = codec.from_json(body, response_type)
    if isinstance(decoded, PayPalResource):
        decoded.set_debug_id(connection.response_details.headers.get(PAYPAL_DEBUG_ID_HEADER))
    return decoded
