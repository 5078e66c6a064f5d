"""
Verification domain service - email code confirmation.
"""

import logging
import secrets
from dataclasses import dataclass

from . import messages
from .exceptions import ConflictError, NotFoundError, ValidationError
from .ports import UserRepository

logger = logging.getLogger(__name__)


@dataclass
class VerificationService:
    """Marks users as verified when they present their emailed code."""

    repository: UserRepository

    async def verify(self, user_id: str, code: str) -> None:
        """
        Verify a user's email with the code sent at registration.

        Checks run in order: user exists, not yet verified, a code is
        stored, the code matches. On success the user is flagged verified
        and the code is cleared.

        Raises:
            NotFoundError: Unknown user, or no stored code (inconsistent state)
            ConflictError: User is already verified
            ValidationError: Code does not match
        """
        user = await self.repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError(*messages.USER_NOT_FOUND)

        if user.verified:
            raise ConflictError(*messages.ALREADY_VERIFIED)

        if not user.code:
            raise NotFoundError(*messages.CODE_NOT_FOUND)

        # Constant-time comparison
        if not secrets.compare_digest(user.code.encode(), code.encode()):
            raise ValidationError(*messages.INVALID_CODE)

        user.mark_verified()
        await self.repository.save(user)
        logger.info("User %s verified", user.id)
