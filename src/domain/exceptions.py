"""
Domain exceptions - Semantic error types for authentication flows.

Every business rule violation is a DomainError carrying a name, a human
message and the HTTP status code the API boundary responds with.
"""

from typing import Any


class DomainError(Exception):
    """Base class for authentication domain errors."""

    status_code: int = 400

    def __init__(self, name: str, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.name = name
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error fields for the `error` key of a response body."""
        return {
            "name": self.name,
            "message": self.message,
            "status_code": self.status_code,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.message!r}, {self.status_code})"


class ValidationError(DomainError):
    """Malformed or missing input, or a verification code mismatch."""

    status_code = 400


class ConflictError(DomainError):
    """User already exists or is already verified."""

    status_code = 400


class EligibilityError(DomainError):
    """National id rejected by the criminal-record check."""

    status_code = 400


class AuthenticationError(DomainError):
    """Unknown email or wrong password."""

    status_code = 400


class AuthorizationError(DomainError):
    """Authenticated user is not allowed in (blocked)."""

    status_code = 403


class NotFoundError(DomainError):
    """User or verification code missing."""

    status_code = 404


class ExternalServiceError(DomainError):
    """A collaborator failed in a way that is not the client's fault."""

    status_code = 500


def is_business_error(error: object) -> bool:
    """
    Classify an error as client-caused.

    True only when the error carries a `status_code` in the 400-499 range.
    Errors without a status code (plain exceptions) are never business errors.
    """
    status_code = getattr(error, "status_code", None)
    if status_code is None:
        return False
    try:
        code = int(status_code)
    except (TypeError, ValueError):
        return False
    return 400 <= code <= 499
