"""Error taxonomy for the PayPal REST client.

Every exception raised by the request pipeline derives from ``SDKError``.
Transport failures are ``PayPalConnectionError``; responses with a 4xx/5xx
status are ``HttpError``. A 400 or 401 response whose body carries a
structured error payload is upgraded to ``PaymentsValidationError`` or
``IdentityError`` respectively (best effort: an unparseable body keeps the
original ``HttpError``).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError

__all__ = [
    "ErrorDetail",
    "HttpError",
    "IdentityError",
    "IdentityErrorDetails",
    "InvalidCredentialError",
    "MissingCredentialError",
    "PayPalConnectionError",
    "PaymentsErrorDetails",
    "PaymentsValidationError",
    "SDKError",
    "classify_failure",
    "classify_http_error",
]

_BAD_REQUEST = 400
_UNAUTHORIZED = 401


class SDKError(Exception):
    """Base class for every error raised by the SDK."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = str(message)


class PayPalConnectionError(SDKError):
    """Raised when the HTTP request could not be completed (connect, timeout, cancel)."""


class HttpError(PayPalConnectionError):
    """Raised when the remote service answers with an error status."""

    def __init__(self, message: str, *, status_code: int, response: str = "") -> None:
        super().__init__(message)
        self.status_code = int(status_code)
        self.response = response or ""

    def __str__(self) -> str:
        return f"{self.message} (status={self.status_code})"


class MissingCredentialError(SDKError):
    """Raised when a client id or secret is required but not configured."""


class InvalidCredentialError(SDKError):
    """Raised when client credentials cannot be turned into a Basic token."""

    def __init__(self, message: str, *, client_id: object, client_secret: object) -> None:
        super().__init__(message)
        self.client_id = client_id
        self.client_secret = client_secret


class ErrorDetail(BaseModel):
    """A single field-level issue inside a payments error payload."""

    model_config = ConfigDict(extra="allow")

    field: str | None = None
    issue: str | None = None


class PaymentsErrorDetails(BaseModel):
    """Structured error body returned by the Payments API on validation failures."""

    model_config = ConfigDict(extra="allow")

    name: str
    message: str | None = None
    information_link: str | None = None
    debug_id: str | None = None
    details: list[ErrorDetail] = Field(default_factory=list)


class IdentityErrorDetails(BaseModel):
    """OAuth-style error body returned by the Identity API on auth failures."""

    model_config = ConfigDict(extra="allow")

    error: str
    error_description: str | None = None
    error_uri: str | None = None


class PaymentsValidationError(HttpError):
    """A 400 response carrying a Payments API error payload."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        response: str,
        details: PaymentsErrorDetails,
    ) -> None:
        super().__init__(message, status_code=status_code, response=response)
        self.details = details


class IdentityError(HttpError):
    """A 401 response carrying an Identity API error payload."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        response: str,
        details: IdentityErrorDetails,
    ) -> None:
        super().__init__(message, status_code=status_code, response=response)
        self.details = details


def classify_http_error(status_code: int, body: str) -> HttpError | None:
    """Return a structured error for ``(status_code, body)``, or None.

    None means the response does not map onto a structured error and the
    caller should keep the plain ``HttpError``.
    """
    if status_code == _BAD_REQUEST:
        try:
            payments = PaymentsErrorDetails.model_validate_json(body or "")
        except ValidationError:
            return None
        return PaymentsValidationError(
            payments.message or payments.name,
            status_code=status_code,
            response=body,
            details=payments,
        )
    if status_code == _UNAUTHORIZED:
        try:
            identity = IdentityErrorDetails.model_validate_json(body or "")
        except ValidationError:
            return None
        return IdentityError(
            identity.error_description or identity.error,
            status_code=status_code,
            response=body,
            details=identity,
        )
    return None


def classify_failure(exc: BaseException) -> BaseException:
    """Map any failure escaping the request pipeline onto the SDK taxonomy.

    The returned exception is what the caller should raise; when it differs
    from ``exc`` the caller chains it with ``raise ... from exc``.
    """
    if type(exc) is HttpError:
        upgraded = classify_http_error(exc.status_code, exc.response)
        return upgraded if upgraded is not None else exc
    if isinstance(exc, SDKError):
        return exc
    return SDKError(str(exc))
