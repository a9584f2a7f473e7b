"""Last request/response details, scoped to the current execution context.

The slots are ``contextvars.ContextVar`` values: every thread and every
asyncio task sees only what its own calls wrote, and each call replaces the
previous snapshot instead of appending to it.

An asyncio task starts with a copy of its creator's context, so a child task
reports its parent's last exchange until it makes a call of its own. Writes
from the child never reach the parent.
"""

from __future__ import annotations

from contextvars import ContextVar

from paypal_rest.net.http import RequestDetails, ResponseDetails

__all__ = [
    "last_request_details",
    "last_response_details",
    "record_exchange",
]

_last_request: ContextVar[RequestDetails | None] = ContextVar(
    "paypal_last_request_details", default=None
)
_last_response: ContextVar[ResponseDetails | None] = ContextVar(
    "paypal_last_response_details", default=None
)


def record_exchange(request: RequestDetails, response: ResponseDetails) -> None:
    """Make ``request``/``response`` the current context's latest snapshot."""
    _last_request.set(request)
    _last_response.set(response)


def last_request_details() -> RequestDetails | None:
    """Return the last request sent from the current context, if any."""
    return _last_request.get()


def last_response_details() -> ResponseDetails | None:
    """Return the last response received in the current context, if any."""
    return _last_response.get()
