"""User-Agent identification headers sent with every request."""

from __future__ import annotations

import platform
import struct
from functools import lru_cache

from paypal_rest.constants import SDK_NAME, SDK_VERSION, USER_AGENT_HEADER

__all__ = ["get_user_agent_headers", "user_agent"]


@lru_cache
def user_agent() -> str:
    """Return the SDK user agent string, e.g.

    ``PayPalSDK/PayPal-Python-SDK 0.1.0 (lang=Python; v=3.12.1; bit=64; os=Linux 6.8)``
    """
    bits = struct.calcsize("P") * 8
    os_name = f"{platform.system()} {platform.release()}".strip()
    details = "; ".join(
        [
            "lang=Python",
            f"v={platform.python_version()}",
            f"impl={platform.python_implementation()}",
            f"bit={bits}",
            f"os={os_name}",
        ]
    )
    return f"PayPalSDK/{SDK_NAME} {SDK_VERSION} ({details})"


def get_user_agent_headers() -> dict[str, str]:
    """Return the identification header entries (a fresh dict per call)."""
    return {USER_AGENT_HEADER: user_agent()}
