from __future__ import annotations

import httpx
import pytest

from paypal_rest.config import Settings
from paypal_rest.preflight import check_connectivity, check_credentials, check_endpoint, check_mode


def test_check_credentials_missing(settings: Settings) -> None:
    result = check_credentials(settings)
    assert result.status == "warn"
    assert "PAYPAL_CLIENT_ID" in result.details


def test_check_credentials_configured(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PAYPAL_CLIENT_ID", "id")
    monkeypatch.setenv("PAYPAL_CLIENT_SECRET", "secret")
    assert check_credentials(Settings(_env_file=None)).status == "ok"


def test_check_mode_unknown_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PAYPAL_MODE", "production")
    assert check_mode(Settings(_env_file=None)).status == "fail"


def test_check_mode_unknown_with_endpoint_warns(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PAYPAL_MODE", "production")
    monkeypatch.setenv("PAYPAL_ENDPOINT", "https://proxy.local")
    assert check_mode(Settings(_env_file=None)).status == "warn"


def test_check_endpoint_reports_resolved_endpoint(settings: Settings) -> None:
    result = check_endpoint(settings)
    assert result.status == "ok"
    assert result.details == "https://api.sandbox.paypal.com/"


def test_check_endpoint_rejects_malformed_endpoint(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PAYPAL_ENDPOINT", "api.local")
    assert check_endpoint(Settings(_env_file=None)).status == "fail"


def test_check_connectivity_ok_for_any_status(settings: Settings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "HEAD"
        return httpx.Response(404, request=request)

    result = check_connectivity(settings, transport=httpx.MockTransport(handler))
    assert result.status == "ok"
    assert "status=404" in result.details


def test_check_connectivity_fails_on_transport_error(settings: Settings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    result = check_connectivity(settings, transport=httpx.MockTransport(handler))
    assert result.status == "fail"
