from __future__ import annotations

import json

import pytest

from paypal_rest.errors import (
    HttpError,
    IdentityError,
    InvalidCredentialError,
    MissingCredentialError,
    PayPalConnectionError,
    PaymentsValidationError,
    SDKError,
    classify_failure,
    classify_http_error,
)

PAYMENTS_BODY = json.dumps(
    {
        "name": "VALIDATION_ERROR",
        "message": "Invalid request - see details",
        "debug_id": "abc123",
        "information_link": "https://developer.paypal.com/docs/api/#VALIDATION_ERROR",
        "details": [{"field": "payer.funding_instruments", "issue": "Required field missing"}],
    }
)
IDENTITY_BODY = json.dumps(
    {"error": "invalid_client", "error_description": "Client Authentication failed"}
)


def test_taxonomy_hierarchy() -> None:
    assert issubclass(PayPalConnectionError, SDKError)
    assert issubclass(HttpError, PayPalConnectionError)
    assert issubclass(PaymentsValidationError, HttpError)
    assert issubclass(IdentityError, HttpError)
    assert issubclass(MissingCredentialError, SDKError)
    assert issubclass(InvalidCredentialError, SDKError)


def test_http_error_str_includes_status_but_message_does_not() -> None:
    error = HttpError("Service unavailable", status_code=503, response="down")
    assert str(error) == "Service unavailable (status=503)"
    assert error.message == "Service unavailable"
    assert str(SDKError("plain")) == "plain"


def test_classify_http_error_400_with_payments_payload() -> None:
    error = classify_http_error(400, PAYMENTS_BODY)
    assert isinstance(error, PaymentsValidationError)
    assert error.status_code == 400
    assert error.response == PAYMENTS_BODY
    assert error.details.name == "VALIDATION_ERROR"
    assert error.details.details[0].field == "payer.funding_instruments"
    assert error.message == "Invalid request - see details"


def test_classify_http_error_401_with_identity_payload() -> None:
    error = classify_http_error(401, IDENTITY_BODY)
    assert isinstance(error, IdentityError)
    assert error.details.error == "invalid_client"
    assert error.message == "Client Authentication failed"


@pytest.mark.parametrize(
    ("status", "body"),
    [
        (400, "<html>bad request</html>"),
        (400, ""),
        (400, "[]"),
        (400, IDENTITY_BODY),
        (401, "not json"),
        (401, PAYMENTS_BODY),
        (404, PAYMENTS_BODY),
        (500, IDENTITY_BODY),
    ],
)
def test_classify_http_error_returns_none_when_not_structured(status: int, body: str) -> None:
    assert classify_http_error(status, body) is None


def test_classify_failure_upgrades_http_error() -> None:
    original = HttpError("bad", status_code=400, response=PAYMENTS_BODY)
    assert isinstance(classify_failure(original), PaymentsValidationError)


def test_classify_failure_keeps_http_error_when_body_unparseable() -> None:
    original = HttpError("bad", status_code=400, response="oops")
    assert classify_failure(original) is original


def test_classify_failure_keeps_taxonomy_members() -> None:
    for error in (
        SDKError("x"),
        PayPalConnectionError("timeout"),
        MissingCredentialError("clientId is missing."),
        classify_http_error(401, IDENTITY_BODY),
    ):
        assert classify_failure(error) is error


def test_classify_failure_wraps_foreign_exceptions() -> None:
    original = KeyError("boom")
    classified = classify_failure(original)
    assert type(classified) is SDKError
    assert classified.message == str(original)
