"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Any, Protocol

from .models import NewUser, User


class UserRepository(Protocol):
    """Port interface for user persistence."""

    async def find_by_email(self, email: str) -> User | None:
        """
        Find a user by email using a case-insensitive exact match.

        Args:
            email: Email address as supplied by the client

        Returns:
            The matching user, or None
        """
        ...

    async def find_by_email_or_rut(self, email: str, rut: str) -> User | None:
        """Find a user whose email OR rut matches, both case-insensitive."""
        ...

    async def find_by_id(self, user_id: str) -> User | None:
        """Find a user by its opaque identifier. Malformed ids return None."""
        ...

    async def create(self, user: NewUser) -> str:
        """
        Persist a new user.

        Args:
            user: User with an already hashed password

        Returns:
            Identifier of the created user

        Raises:
            ConflictError: If the email or rut is already taken at write time
        """
        ...

    async def save(self, user: User) -> None:
        """Persist the verification state (verified, code) of an existing user."""
        ...

    async def delete(self, user_id: str) -> None:
        """Delete a user by identifier."""
        ...


class PasswordHasher(Protocol):
    """Port interface for one-way password hashing."""

    async def hash(self, password: str) -> str:
        """Return a salted hash of the plaintext password."""
        ...

    async def verify(self, password: str, password_hash: str) -> bool:
        """Return True if the plaintext password matches the stored hash."""
        ...


class TokenService(Protocol):
    """Port interface for signed bearer tokens."""

    def sign(self, data: dict[str, Any]) -> str:
        """Return a signed, expiring token embedding `data`."""
        ...

    def verify(self, token: str) -> dict[str, Any]:
        """
        Decode and validate a token.

        Raises the token library's own error type on invalid or expired
        tokens; the API boundary maps that error to 403.
        """
        ...


class CriminalRecordChecker(Protocol):
    """Port interface for the external criminal-record service."""

    async def is_eligible(self, rut: str) -> bool:
        """Return True if the person with this national id may register."""
        ...


class EmailSender(Protocol):
    """Port interface for email delivery."""

    async def send_verification_code(self, email: str, code: str) -> None:
        """
        Send verification code to email address.

        Args:
            email: Recipient email address
            code: 6-digit verification code

        Raises:
            Any delivery failure; callers decide how to compensate.
        """
        ...
