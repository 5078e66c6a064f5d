"""
API routes - Login, registration and verification endpoints.

This module defines the HTTP endpoints:
- POST /login - Exchange credentials for a bearer token
- POST /register - Create an unverified user and email a code
- POST /verify - Confirm the emailed code for the authenticated user

Domain errors are not caught here; the handlers in src.api.errors
shape them into `{"error": ...}` responses.
"""

from fastapi import APIRouter, Depends, status

from src.api.dependencies import (
    get_current_user_id,
    get_login_service,
    get_registration_service,
    get_verification_service,
)
from src.api.models import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    VerifyRequest,
    VerifyResponse,
)
from src.domain import messages
from src.domain.login import LoginService
from src.domain.registration import RegistrationService
from src.domain.verification import VerificationService

router = APIRouter(tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input or credentials"},
        403: {"model": ErrorResponse, "description": "User is blocked"},
    },
    summary="Log in with email and password",
)
async def login(
    request_data: LoginRequest,
    service: LoginService = Depends(get_login_service),
) -> LoginResponse:
    """
    Authenticate and receive a bearer token.

    - **email**: Registered email address (case-insensitive)
    - **password**: Account password
    """
    result = await service.login(request_data.email, request_data.password)
    return LoginResponse(token=result.token, verified=result.verified)


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input, duplicate or ineligible user"},
        500: {"model": ErrorResponse, "description": "Verification email could not be sent"},
    },
    summary="Register a new user",
    description="Submit rut, email, password and profile fields. "
    "A 6-digit verification code is sent to the provided email.",
)
async def register(
    request_data: RegisterRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> RegisterResponse:
    """Register a new user and send verification code."""
    user_id = await service.register(
        email=request_data.email,
        rut=request_data.rut,
        password=request_data.password,
        name=request_data.name,
        profile=request_data.profile,
    )
    return RegisterResponse(id=user_id)


@router.post(
    "/verify",
    response_model=VerifyResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid code or already verified"},
        403: {"model": ErrorResponse, "description": "Invalid or expired token"},
        404: {"model": ErrorResponse, "description": "User or code not found"},
    },
    summary="Verify email with the emailed code",
)
async def verify(
    request_data: VerifyRequest,
    user_id: str = Depends(get_current_user_id),
    service: VerificationService = Depends(get_verification_service),
) -> VerifyResponse:
    """
    Verify the authenticated user's email.

    - **code**: 6-digit verification code from email

    The user is identified by the bearer token sent in the Authorization header.
    """
    await service.verify(user_id, request_data.code)
    return VerifyResponse(response=messages.VERIFY_SUCCESS)
