"""
Registration domain service.

Register flow
=============

1. Reject the request if a user with the same email OR rut already exists.
2. Ask the criminal-record service whether the rut may register.
3. Hash the password, generate a verification code, persist the user.
4. Email the code. If delivery fails, delete the user created in step 3
   and re-raise the delivery error, even when the delete itself fails.

Steps 1-3 run without a transaction. Two concurrent registrations for the
same email or rut can both pass step 1; the repository's unique indexes
reject the second write, which surfaces as ConflictError.
"""

import logging
import secrets
from dataclasses import dataclass
from typing import Any

from . import messages
from .exceptions import ConflictError, EligibilityError
from .models import NewUser
from .ports import CriminalRecordChecker, EmailSender, PasswordHasher, UserRepository

logger = logging.getLogger(__name__)


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Orchestrates uniqueness check, eligibility check, persistence and
    verification email delivery.
    """

    repository: UserRepository
    password_hasher: PasswordHasher
    criminal_records: CriminalRecordChecker
    email_sender: EmailSender
    code_length: int = 6

    async def register(
        self,
        email: str,
        rut: str,
        password: str,
        name: str,
        profile: dict[str, Any] | None = None,
    ) -> str:
        """
        Register a new, unverified user.

        Args:
            email: User's email address (will be normalized)
            rut: National id
            password: Plaintext password (hashed before persistence)
            name: Display name
            profile: Extra profile fields stored as-is

        Returns:
            Identifier of the created user

        Raises:
            ConflictError: Email or rut already registered
            EligibilityError: Criminal-record check rejected the rut
        """
        normalized_email = self._normalize_email(email)
        rut = rut.strip()

        existing = await self.repository.find_by_email_or_rut(normalized_email, rut)
        if existing is not None:
            raise ConflictError(*messages.USER_ALREADY_EXISTS)

        if not await self.criminal_records.is_eligible(rut):
            raise EligibilityError(*messages.RUT_NOT_ALLOWED)

        code = self._generate_verification_code()
        password_hash = await self.password_hasher.hash(password)
        user_id = await self.repository.create(
            NewUser(
                name=name,
                email=normalized_email,
                rut=rut,
                password_hash=password_hash,
                code=code,
                profile=dict(profile or {}),
            )
        )

        try:
            await self.email_sender.send_verification_code(normalized_email, code)
        except Exception:
            logger.warning("Verification email failed, removing user %s", user_id)
            try:
                await self.repository.delete(user_id)
            except Exception:
                logger.exception("Could not remove user %s after email failure", user_id)
            raise

        logger.info("Registered user %s", user_id)
        return user_id

    def _normalize_email(self, email: str) -> str:
        """
        Normalize email address for consistent storage and lookup.

        Applies: strip whitespace + lowercase
        """
        return email.strip().lower()

    def _generate_verification_code(self) -> str:
        """
        Generate a cryptographically secure numeric verification code.

        Returns string to preserve leading zeros.
        """
        return "".join(secrets.choice("0123456789") for _ in range(self.code_length))
