from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Mapping

from paypal_rest.config import get_settings, merge_with_defaults

__all__ = ["APIContext"]


@dataclass(slots=True)
class APIContext:
    """Per-call settings: credentials, config map and idempotency options.

    When ``config`` is None the environment settings (``PAYPAL_*``) provide
    the config map.
    """

    access_token: str | None = None
    config: Mapping[str, str] | None = None
    request_id: str | None = None
    mask_request_id: bool = False
    http_headers: dict[str, str] = field(default_factory=dict)

    def get_config_with_defaults(self) -> dict[str, str]:
        """Return this context's config map merged over the SDK defaults."""
        config = self.config
        if config is None:
            config = get_settings().as_config_map()
        return merge_with_defaults(config)

    def reset_request_id(self) -> str:
        """Assign and return a fresh idempotency request id."""
        self.request_id = str(uuid.uuid4())
        return self.request_id
