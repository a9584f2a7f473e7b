"""Request-execution core for the PayPal REST API."""

from paypal_rest.config import Settings, get_settings, resolve_endpoint
from paypal_rest.context import APIContext
from paypal_rest.credentials import encode_basic
from paypal_rest.diagnostics import last_request_details, last_response_details
from paypal_rest.errors import (
    HttpError,
    IdentityError,
    InvalidCredentialError,
    MissingCredentialError,
    PayPalConnectionError,
    PaymentsValidationError,
    SDKError,
)
from paypal_rest.headers import build_headers
from paypal_rest.resource import HttpMethod, PayPalResource, configure_and_execute

__all__ = [
    "APIContext",
    "HttpError",
    "HttpMethod",
    "IdentityError",
    "InvalidCredentialError",
    "MissingCredentialError",
    "PayPalConnectionError",
    "PayPalResource",
    "PaymentsValidationError",
    "SDKError",
    "Settings",
    "build_headers",
    "configure_and_execute",
    "encode_basic",
    "get_settings",
    "last_request_details",
    "last_response_details",
    "resolve_endpoint",
]
