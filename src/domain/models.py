"""
Domain models - User record as seen by the authentication flows.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class NewUser:
    """User about to be persisted. The password is already hashed."""

    name: str
    email: str
    rut: str
    password_hash: str
    code: str
    profile: dict[str, Any] = field(default_factory=dict)


@dataclass
class User:
    """
    Persisted user record.

    Invariant: a verified user has no pending verification code.
    """

    id: str
    name: str
    email: str
    rut: str
    password_hash: str
    verified: bool = False
    code: str | None = None
    blocked: bool = False
    profile: dict[str, Any] = field(default_factory=dict)

    def mark_verified(self) -> None:
        """Flag the user as verified and discard the consumed code."""
        self.verified = True
        self.code = None
