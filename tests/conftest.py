"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- User records in a given verification/blocked state
- Mocked domain ports (repository, hasher, tokens, checker, email sender)
"""

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock, Mock

import pytest

from src.domain.models import User


@pytest.fixture
def make_user() -> Callable[..., User]:
    """Factory for User records; keyword arguments override defaults."""

    def _make(**overrides: Any) -> User:
        fields: dict[str, Any] = {
            "id": "7f1b2c3d-0000-4000-8000-000000000001",
            "name": "Andy Sandoval",
            "email": "email@email.com",
            "rut": "20365362-K",
            "password_hash": "$2b$10$storedhash",
            "verified": False,
            "code": "123456",
            "blocked": False,
        }
        fields.update(overrides)
        return User(**fields)

    return _make


@pytest.fixture
def repository() -> AsyncMock:
    """UserRepository mock with an empty store."""
    repo = AsyncMock()
    repo.find_by_email.return_value = None
    repo.find_by_email_or_rut.return_value = None
    repo.find_by_id.return_value = None
    repo.create.return_value = "user-id"
    return repo


@pytest.fixture
def password_hasher() -> AsyncMock:
    """PasswordHasher mock that accepts any password."""
    hasher = AsyncMock()
    hasher.hash.return_value = "$2b$10$hashedpassword"
    hasher.verify.return_value = True
    return hasher


@pytest.fixture
def token_service() -> Mock:
    """TokenService mock issuing a fixed token."""
    tokens = Mock()
    tokens.sign.return_value = "generated_token"
    tokens.verify.return_value = {"id": "user-id"}
    return tokens


@pytest.fixture
def criminal_records() -> AsyncMock:
    """CriminalRecordChecker mock that finds every rut eligible."""
    checker = AsyncMock()
    checker.is_eligible.return_value = True
    return checker


@pytest.fixture
def email_sender() -> AsyncMock:
    """EmailSender mock that always delivers."""
    return AsyncMock()
