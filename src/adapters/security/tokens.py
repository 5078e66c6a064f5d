"""
JWT token service - Implements TokenService protocol with python-jose.

Tokens are HS256-signed and carry the caller's claims plus an `exp`
claim. Verification failures raise jose.JWTError (ExpiredSignatureError
is a subclass); the API boundary turns those into 403 responses.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

from jose import jwt


class JoseTokenService:
    """Implements TokenService protocol via python-jose."""

    def __init__(self, secret: str, algorithm: str = "HS256", expire_seconds: int = 86400) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._expire_seconds = expire_seconds

    def sign(self, data: dict[str, Any]) -> str:
        """Encode `data` into a signed token expiring after the configured duration."""
        payload = dict(data)
        payload["exp"] = datetime.now(timezone.utc) + timedelta(seconds=self._expire_seconds)
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> dict[str, Any]:
        """
        Decode a token and validate its signature and expiry.

        Raises:
            jose.JWTError: Malformed, tampered or expired token
        """
        return jwt.decode(token, self._secret, algorithms=[self._algorithm])
