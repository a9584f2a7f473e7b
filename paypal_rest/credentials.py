"""Basic-auth token encoding for client credentials."""

from __future__ import annotations

import base64

from paypal_rest.errors import InvalidCredentialError, MissingCredentialError

__all__ = ["encode_basic"]


def encode_basic(client_id: str | None, client_secret: str | None) -> str:
    """Return ``base64("{client_id}:{client_secret}")`` for a Basic header.

    Raises:
        MissingCredentialError: When either value is empty (id checked first).
        InvalidCredentialError: When the pair cannot be encoded.
    """
    if not client_id:
        raise MissingCredentialError("clientId is missing.")
    if not client_secret:
        raise MissingCredentialError("clientSecret is missing.")

    try:
        raw = f"{client_id}:{client_secret}".encode("utf-8")
        return base64.b64encode(raw).decode("ascii")
    except (UnicodeError, TypeError, ValueError) as exc:
        raise InvalidCredentialError(
            "Unable to convert client credentials to base-64 string.\n"
            f'  clientId: "{client_id}"\n'
            f'  clientSecret: "{client_secret}"\n'
            f"  Error: {exc}",
            client_id=client_id,
            client_secret=client_secret,
        ) from exc
