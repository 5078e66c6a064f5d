"""Security adapters - password hashing and bearer tokens."""

from .hashing import BcryptPasswordHasher
from .tokens import JoseTokenService

__all__ = ["BcryptPasswordHasher", "JoseTokenService"]
