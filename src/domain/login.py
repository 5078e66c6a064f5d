"""
Login domain service - credential check and token issuance.
"""

import logging
from dataclasses import dataclass

from . import messages
from .exceptions import AuthenticationError, AuthorizationError
from .models import User
from .ports import PasswordHasher, TokenService, UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    token: str
    verified: bool


def check_if_user_blocked(user: User) -> None:
    """Raise AuthorizationError (403) for a blocked user."""
    if user.blocked:
        raise AuthorizationError(*messages.USER_BLOCKED)


@dataclass
class LoginService:
    """Authenticates users by email and password."""

    repository: UserRepository
    password_hasher: PasswordHasher
    token_service: TokenService

    async def login(self, email: str, password: str) -> LoginResult:
        """
        Authenticate a user and issue a signed token.

        The blocked check runs before the password comparison, so a blocked
        user never reaches the hasher.

        Raises:
            AuthenticationError: Unknown email or wrong password
            AuthorizationError: User is blocked
        """
        user = await self.repository.find_by_email(email.strip())
        if user is None:
            raise AuthenticationError(*messages.INVALID_CREDENTIALS)

        check_if_user_blocked(user)

        if not await self.password_hasher.verify(password, user.password_hash):
            raise AuthenticationError(*messages.INVALID_CREDENTIALS)

        token = self.token_service.sign({"id": user.id})
        logger.info("User %s logged in", user.id)
        return LoginResult(token=token, verified=user.verified)
