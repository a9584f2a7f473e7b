"""Fast configuration checks shared by ``script/doctor.py`` and tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import httpx

from paypal_rest.config import Settings, resolve_endpoint
from paypal_rest.constants import MODE_ENDPOINTS
from paypal_rest.errors import SDKError
from paypal_rest.resource import compose_url

__all__ = [
    "CheckResult",
    "Status",
    "check_connectivity",
    "check_credentials",
    "check_endpoint",
    "check_mode",
]

Status = Literal["ok", "warn", "fail"]


@dataclass(slots=True)
class CheckResult:
    name: str
    status: Status
    details: str


def check_credentials(settings: Settings) -> CheckResult:
    missing = [
        name
        for name, value in (
            ("PAYPAL_CLIENT_ID", settings.client_id),
            ("PAYPAL_CLIENT_SECRET", settings.client_secret),
        )
        if not (value or "").strip()
    ]
    if not missing:
        return CheckResult("credentials", "ok", "client id and secret configured")
    return CheckResult(
        "credentials",
        "warn",
        f"{', '.join(missing)} not set (required unless every call passes an access token).",
    )


def check_mode(settings: Settings) -> CheckResult:
    mode = (settings.mode or "").strip()
    if mode in MODE_ENDPOINTS:
        return CheckResult("mode", "ok", mode)
    if settings.endpoint:
        return CheckResult("mode", "warn", f"unknown mode {mode!r} (ignored: PAYPAL_ENDPOINT is set)")
    return CheckResult("mode", "fail", f"unknown mode {mode!r}; expected one of {sorted(MODE_ENDPOINTS)}")


def check_endpoint(settings: Settings) -> CheckResult:
    endpoint = resolve_endpoint(settings.as_config_map())
    try:
        compose_url(endpoint, "")
    except SDKError as exc:
        return CheckResult("endpoint", "fail", exc.message)
    return CheckResult("endpoint", "ok", endpoint)


def check_connectivity(
    settings: Settings,
    *,
    timeout_seconds: float = 2.0,
    transport: httpx.BaseTransport | None = None,
) -> CheckResult:
    """Return ok when the resolved endpoint answers at all (any HTTP status)."""
    endpoint = resolve_endpoint(settings.as_config_map())
    kwargs: dict[str, object] = {"timeout": max(0.1, float(timeout_seconds))}
    if transport is not None:
        kwargs["transport"] = transport
    try:
        with httpx.Client(**kwargs) as client:  # type: ignore[arg-type]
            response = client.head(endpoint)
    except httpx.HTTPError as exc:
        return CheckResult("connectivity", "fail", f"unreachable: {endpoint} ({exc})")
    return CheckResult("connectivity", "ok", f"reachable: {endpoint} (status={response.status_code})")
