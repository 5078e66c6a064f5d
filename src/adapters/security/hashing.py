"""
bcrypt password hasher - Implements PasswordHasher protocol.

bcrypt is CPU-bound; both operations run in a worker thread so the
event loop keeps serving other requests while a hash is computed.
"""

import asyncio

import bcrypt


class BcryptPasswordHasher:
    """
    Implements PasswordHasher protocol via bcrypt.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, cost: int = 10) -> None:
        """
        Args:
            cost: bcrypt work factor (>= 10)
        """
        self._cost = cost

    async def hash(self, password: str) -> str:
        """Hash password using bcrypt with the configured cost factor."""
        return await asyncio.to_thread(self._hash, password)

    async def verify(self, password: str, password_hash: str) -> bool:
        """
        Compare a plaintext password against a stored bcrypt hash.

        bcrypt.checkpw is constant-time. A malformed stored hash raises
        ValueError, which surfaces as a server error.
        """
        return await asyncio.to_thread(bcrypt.checkpw, password.encode(), password_hash.encode())

    def _hash(self, password: str) -> str:
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self._cost)).decode()
