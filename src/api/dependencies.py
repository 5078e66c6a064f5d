"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

import httpx
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from psycopg_pool import AsyncConnectionPool

from src.adapters.registro_civil.http import HttpCriminalRecordChecker
from src.adapters.repository.postgres import PostgresUserRepository
from src.adapters.security.hashing import BcryptPasswordHasher
from src.adapters.security.tokens import JoseTokenService
from src.adapters.smtp.console import ConsoleEmailSender
from src.adapters.smtp.sender import SmtpEmailSender
from src.config.settings import get_settings
from src.domain.login import LoginService
from src.domain.ports import EmailSender, PasswordHasher, TokenService
from src.domain.registration import RegistrationService
from src.domain.verification import VerificationService

# Module-level singleton - ConsoleEmailSender is stateless
_console_sender = ConsoleEmailSender()


def get_pool(request: Request) -> AsyncConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Get the shared outbound HTTP client from app state."""
    return request.app.state.http_client


def get_repository(request: Request) -> PostgresUserRepository:
    """Create repository with connection pool from app state."""
    return PostgresUserRepository(get_pool(request))


def get_password_hasher() -> PasswordHasher:
    return BcryptPasswordHasher(cost=get_settings().bcrypt_cost)


def get_token_service() -> TokenService:
    settings = get_settings()
    return JoseTokenService(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expire_seconds=settings.token_expire_seconds,
    )


def get_criminal_record_checker(request: Request) -> HttpCriminalRecordChecker:
    settings = get_settings()
    return HttpCriminalRecordChecker(
        client=get_http_client(request),
        base_url=settings.registro_civil_url,
        ineligible_rut=settings.ineligible_rut,
    )


def get_email_sender() -> EmailSender:
    """Select the email backend configured in settings."""
    settings = get_settings()
    if settings.email_backend == "smtp":
        return SmtpEmailSender(
            host=settings.smtp_host,
            port=settings.smtp_port,
            sender=settings.smtp_sender,
            user=settings.smtp_user,
            password=settings.smtp_password,
            starttls=settings.smtp_starttls,
        )
    return _console_sender


def get_login_service(request: Request) -> LoginService:
    """Create login service with injected dependencies."""
    return LoginService(
        repository=get_repository(request),
        password_hasher=get_password_hasher(),
        token_service=get_token_service(),
    )


def get_registration_service(request: Request) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the repository, hasher, criminal-record checker and
    email sender for the domain service.
    """
    return RegistrationService(
        repository=get_repository(request),
        password_hasher=get_password_hasher(),
        criminal_records=get_criminal_record_checker(request),
        email_sender=get_email_sender(),
        code_length=get_settings().verification_code_length,
    )


def get_verification_service(request: Request) -> VerificationService:
    """Create verification service with injected repository."""
    return VerificationService(repository=get_repository(request))


# Bearer token security scheme for OpenAPI documentation
http_bearer = HTTPBearer()


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials = Depends(http_bearer),
    token_service: TokenService = Depends(get_token_service),
) -> str:
    """
    Resolve the authenticated user id from the bearer token.

    Raises:
        JWTError: Invalid or expired token, or a token without a user id
            (mapped to 403 by the error handlers)
    """
    payload = token_service.verify(credentials.credentials)
    user_id = payload.get("id")
    if not user_id:
        raise JWTError("Token does not identify a user")
    return str(user_id)
