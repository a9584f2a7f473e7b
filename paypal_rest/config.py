"""Configuration for the PayPal REST client.

Two layers exist:

- ``Settings`` loads process-wide defaults from ``PAYPAL_*`` environment
  variables (and an optional ``.env`` file) via pydantic-settings.
- A *config map* is the plain ``dict[str, str]`` that travels with each call.
  ``merge_with_defaults()`` fills in anything the caller did not set, and
  ``resolve_endpoint()`` picks the REST endpoint from it.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping

from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from paypal_rest.constants import (
    APPLICATION_MODE_CONFIG,
    CLIENT_ID_CONFIG,
    CLIENT_SECRET_CONFIG,
    CONNECTION_TIMEOUT_CONFIG,
    DEFAULT_CONNECTION_TIMEOUT_MS,
    ENDPOINT_CONFIG,
    MODE_ENDPOINTS,
    PROXY_ADDRESS_CONFIG,
    PROXY_CREDENTIALS_CONFIG,
    REST_SANDBOX_ENDPOINT,
    SANDBOX_MODE,
)

log = logger.bind(module="config")

__all__ = [
    "DEFAULT_CONFIG",
    "Settings",
    "get_settings",
    "merge_with_defaults",
    "resolve_endpoint",
]

DEFAULT_CONFIG: Mapping[str, str] = {
    APPLICATION_MODE_CONFIG: SANDBOX_MODE,
    CONNECTION_TIMEOUT_CONFIG: str(DEFAULT_CONNECTION_TIMEOUT_MS),
}


class Settings(BaseSettings):
    """Environment-backed SDK configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    mode: str = Field(default=SANDBOX_MODE, alias="PAYPAL_MODE")
    endpoint: str | None = Field(default=None, alias="PAYPAL_ENDPOINT")
    client_id: str | None = Field(default=None, alias="PAYPAL_CLIENT_ID")
    client_secret: str | None = Field(default=None, alias="PAYPAL_CLIENT_SECRET")
    connection_timeout_ms: int = Field(
        default=DEFAULT_CONNECTION_TIMEOUT_MS,
        alias="PAYPAL_CONNECTION_TIMEOUT_MS",
    )
    proxy_address: str | None = Field(default=None, alias="PAYPAL_PROXY_ADDRESS")
    proxy_credentials: str | None = Field(default=None, alias="PAYPAL_PROXY_CREDENTIALS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    def as_config_map(self) -> dict[str, str]:
        """Return the settings as a per-call config map (unset values omitted)."""
        config: dict[str, str] = {
            APPLICATION_MODE_CONFIG: self.mode,
            CONNECTION_TIMEOUT_CONFIG: str(int(self.connection_timeout_ms)),
        }
        optional = {
            ENDPOINT_CONFIG: self.endpoint,
            CLIENT_ID_CONFIG: self.client_id,
            CLIENT_SECRET_CONFIG: self.client_secret,
            PROXY_ADDRESS_CONFIG: self.proxy_address,
            PROXY_CREDENTIALS_CONFIG: self.proxy_credentials,
        }
        for key, value in optional.items():
            if value:
                config[key] = value
        return config

    def export_safe(self) -> dict[str, Any]:
        """Return non-sensitive settings for debugging/logging."""
        return {
            "mode": self.mode,
            "endpoint": self.endpoint,
            "client_id_set": bool(self.client_id),
            "client_secret_set": bool(self.client_secret),
            "connection_timeout_ms": self.connection_timeout_ms,
            "proxy_address": self.proxy_address,
            "log_level": self.log_level,
        }


@lru_cache
def get_settings() -> Settings:
    """Load and cache SDK settings."""
    settings = Settings()
    log.debug("Settings initialised: {}", settings.export_safe())
    return settings


def merge_with_defaults(config: Mapping[str, str] | None) -> dict[str, str]:
    """Return a new config map with ``DEFAULT_CONFIG`` beneath ``config``."""
    merged = dict(DEFAULT_CONFIG)
    if config:
        merged.update({str(k): str(v) for k, v in config.items() if v is not None})
    return merged


def resolve_endpoint(config: Mapping[str, str]) -> str:
    """Return the REST endpoint for ``config``, always ending in a single ``/``.

    An explicit ``endpoint`` entry wins over ``mode``; an unknown or missing
    mode falls back to the sandbox endpoint.
    """
    endpoint = (config.get(ENDPOINT_CONFIG) or "").strip()
    if not endpoint:
        mode = (config.get(APPLICATION_MODE_CONFIG) or "").strip()
        endpoint = MODE_ENDPOINTS.get(mode, "")
    if not endpoint:
        endpoint = REST_SANDBOX_ENDPOINT
    return endpoint.rstrip("/") + "/"
