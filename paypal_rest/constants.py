"""Wire-level constants shared across the request pipeline."""

from __future__ import annotations

SDK_NAME: str = "PayPal-Python-SDK"
SDK_VERSION: str = "0.1.0"

# Headers.
AUTHORIZATION_HEADER: str = "Authorization"
CONTENT_TYPE_HEADER: str = "Content-Type"
USER_AGENT_HEADER: str = "User-Agent"
PAYPAL_REQUEST_ID_HEADER: str = "PayPal-Request-Id"
PAYPAL_DEBUG_ID_HEADER: str = "PayPal-Debug-Id"

CONTENT_TYPE_JSON: str = "application/json"

# Config map keys.
ENDPOINT_CONFIG: str = "endpoint"
APPLICATION_MODE_CONFIG: str = "mode"
CLIENT_ID_CONFIG: str = "clientId"
CLIENT_SECRET_CONFIG: str = "clientSecret"
CONNECTION_TIMEOUT_CONFIG: str = "connectionTimeout"
PROXY_ADDRESS_CONFIG: str = "proxyAddress"
PROXY_CREDENTIALS_CONFIG: str = "proxyCredentials"

# Deployment modes.
LIVE_MODE: str = "live"
SANDBOX_MODE: str = "sandbox"
SECURITY_TEST_SANDBOX_MODE: str = "security-test-sandbox"

REST_LIVE_ENDPOINT: str = "https://api.paypal.com/"
REST_SANDBOX_ENDPOINT: str = "https://api.sandbox.paypal.com/"
REST_SECURITY_TEST_SANDBOX_ENDPOINT: str = "https://test-api.sandbox.paypal.com/"

MODE_ENDPOINTS: dict[str, str] = {
    LIVE_MODE: REST_LIVE_ENDPOINT,
    SANDBOX_MODE: REST_SANDBOX_ENDPOINT,
    SECURITY_TEST_SANDBOX_MODE: REST_SECURITY_TEST_SANDBOX_ENDPOINT,
}

DEFAULT_CONNECTION_TIMEOUT_MS: int = 360000

__all__ = [
    "APPLICATION_MODE_CONFIG",
    "AUTHORIZATION_HEADER",
    "CLIENT_ID_CONFIG",
    "CLIENT_SECRET_CONFIG",
    "CONNECTION_TIMEOUT_CONFIG",
    "CONTENT_TYPE_HEADER",
    "CONTENT_TYPE_JSON",
    "DEFAULT_CONNECTION_TIMEOUT_MS",
    "ENDPOINT_CONFIG",
    "LIVE_MODE",
    "MODE_ENDPOINTS",
    "PAYPAL_DEBUG_ID_HEADER",
    "PAYPAL_REQUEST_ID_HEADER",
    "PROXY_ADDRESS_CONFIG",
    "PROXY_CREDENTIALS_CONFIG",
    "REST_LIVE_ENDPOINT",
    "REST_SANDBOX_ENDPOINT",
    "REST_SECURITY_TEST_SANDBOX_ENDPOINT",
    "SANDBOX_MODE",
    "SDK_NAME",
    "SDK_VERSION",
    "SECURITY_TEST_SANDBOX_MODE",
    "USER_AGENT_HEADER",
]
