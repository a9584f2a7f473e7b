"""Outgoing header construction.

Entries are applied in a fixed order and later entries overwrite earlier ones
with the same name: Authorization, idempotency id, user agent, then the
caller's custom headers. Custom headers are applied last with no guard, so a
caller may replace ``Authorization`` or ``Content-Type`` on purpose.
"""

from __future__ import annotations

from paypal_rest.constants import (
    AUTHORIZATION_HEADER,
    CLIENT_ID_CONFIG,
    CLIENT_SECRET_CONFIG,
    PAYPAL_REQUEST_ID_HEADER,
)
from paypal_rest.context import APIContext
from paypal_rest.credentials import encode_basic
from paypal_rest.user_agent import get_user_agent_headers

__all__ = ["build_headers"]


def _authorization_value(context: APIContext) -> str:
    if context.access_token:
        return context.access_token
    config = context.get_config_with_defaults()
    encoded = encode_basic(config.get(CLIENT_ID_CONFIG), config.get(CLIENT_SECRET_CONFIG))
    return f"Basic {encoded}"


def build_headers(context: APIContext) -> dict[str, str]:
    """Return a fresh header map for a request made with ``context``."""
    headers: dict[str, str] = {AUTHORIZATION_HEADER: _authorization_value(context)}

    if not context.mask_request_id and context.request_id:
        headers[PAYPAL_REQUEST_ID_HEADER] = context.request_id

    user_agent_headers = get_user_agent_headers()
    if user_agent_headers:
        headers.update(user_agent_headers)

    if context.http_headers:
        headers.update(context.http_headers)
    return headers
