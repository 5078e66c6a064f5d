"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class LoginRequest(BaseModel):
    """Request model for password login."""

    email: EmailStr
    password: str = Field(..., min_length=1, description="User password")


class LoginResponse(BaseModel):
    """Response model for successful login."""

    token: str
    verified: bool


class RegisterRequest(BaseModel):
    """
    Request model for user registration.

    Fields beyond the declared ones are kept and stored as profile data.
    """

    model_config = ConfigDict(extra="allow")

    rut: str = Field(..., min_length=1, description="National id (RUT)")
    email: EmailStr
    password: str = Field(..., min_length=1, description="User password")
    name: str = Field(..., min_length=1)

    @property
    def profile(self) -> dict[str, Any]:
        """Undeclared fields sent by the client."""
        return dict(self.model_extra or {})


class RegisterResponse(BaseModel):
    """Response model for successful registration."""

    id: str


class VerifyRequest(BaseModel):
    """Request model for email verification."""

    code: str = Field(
        ...,
        min_length=6,
        max_length=6,
        pattern=r"^[0-9]{6}$",
        description="6-digit verification code",
    )


class VerifyResponse(BaseModel):
    """Response model for successful verification."""

    response: str


class DomainErrorBody(BaseModel):
    """Serialized domain error."""

    name: str
    message: str
    status_code: int


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: DomainErrorBody | str
