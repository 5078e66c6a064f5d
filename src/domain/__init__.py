"""
Domain layer - Pure business logic with zero framework imports.

This package contains the login, registration and verification flows.
It defines its own port interfaces for infrastructure abstraction, so the
flows never import a web framework, database driver or HTTP client.
"""

from .exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    EligibilityError,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
    is_business_error,
)
from .login import LoginResult, LoginService
from .models import NewUser, User
from .ports import (
    CriminalRecordChecker,
    EmailSender,
    PasswordHasher,
    TokenService,
    UserRepository,
)
from .registration import RegistrationService
from .verification import VerificationService

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "CriminalRecordChecker",
    "DomainError",
    "EligibilityError",
    "EmailSender",
    "ExternalServiceError",
    "LoginResult",
    "LoginService",
    "NewUser",
    "NotFoundError",
    "PasswordHasher",
    "RegistrationService",
    "TokenService",
    "User",
    "UserRepository",
    "ValidationError",
    "VerificationService",
    "is_business_error",
]
