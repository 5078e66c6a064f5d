"""
PostgreSQL repository adapter - Implements UserRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 (async) with raw SQL.

Uniqueness:
-----------
Email and rut uniqueness is enforced by unique indexes on lower(email)
and lower(rut). The register flow checks for an existing user first, but
that check is not transactional; a concurrent registration that slips
through hits the index on INSERT and is reported as ConflictError.

Extra profile fields are stored as-is in a JSONB column.
"""

import logging
import uuid
from pathlib import Path
from typing import Any

from psycopg import errors
from psycopg.rows import dict_row
from psycopg.types.json import Jsonb
from psycopg_pool import AsyncConnectionPool

from src.domain import messages
from src.domain.exceptions import ConflictError
from src.domain.models import NewUser, User

logger = logging.getLogger(__name__)

_USER_COLUMNS = "id, name, email, rut, password_hash, verified, code, blocked, profile"


class PostgresUserRepository:
    """
    Implements UserRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries.
    """

    def __init__(self, pool: AsyncConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 AsyncConnectionPool for database connections
        """
        self._pool = pool

    async def find_by_email(self, email: str) -> User | None:
        """Find a user by case-insensitive exact email match."""
        sql = f"SELECT {_USER_COLUMNS} FROM users WHERE lower(email) = lower(%s)"
        return await self._fetch_one(sql, (email,))

    async def find_by_email_or_rut(self, email: str, rut: str) -> User | None:
        """Find a user matching either email or rut, both case-insensitive."""
        sql = f"""
            SELECT {_USER_COLUMNS}
            FROM users
            WHERE lower(email) = lower(%s) OR lower(rut) = lower(%s)
            LIMIT 1
        """
        return await self._fetch_one(sql, (email, rut))

    async def find_by_id(self, user_id: str) -> User | None:
        """Find a user by id. Ids that are not UUIDs cannot exist and return None."""
        try:
            parsed_id = uuid.UUID(user_id)
        except (TypeError, ValueError):
            return None
        sql = f"SELECT {_USER_COLUMNS} FROM users WHERE id = %s"
        return await self._fetch_one(sql, (parsed_id,))

    async def create(self, user: NewUser) -> str:
        """
        Insert a new unverified user.

        Returns:
            The generated user id as a string

        Raises:
            ConflictError: Email or rut already taken (unique index violation)
        """
        sql = """
            INSERT INTO users (name, email, rut, password_hash, code, profile)
            VALUES (%s, %s, %s, %s, %s, %s)
            RETURNING id
        """
        params = (user.name, user.email, user.rut, user.password_hash, user.code, Jsonb(user.profile))

        try:
            async with self._pool.connection() as conn:
                cursor = await conn.execute(sql, params)
                row = await cursor.fetchone()
                await conn.commit()
        except errors.UniqueViolation:
            logger.info("Concurrent registration rejected by unique index")
            raise ConflictError(*messages.USER_ALREADY_EXISTS) from None

        return str(row[0])

    async def save(self, user: User) -> None:
        """Persist verification state of an existing user."""
        sql = "UPDATE users SET verified = %s, code = %s WHERE id = %s"
        async with self._pool.connection() as conn:
            await conn.execute(sql, (user.verified, user.code, uuid.UUID(user.id)))
            await conn.commit()

    async def delete(self, user_id: str) -> None:
        """Delete a user by id."""
        async with self._pool.connection() as conn:
            await conn.execute("DELETE FROM users WHERE id = %s", (uuid.UUID(user_id),))
            await conn.commit()

    async def _fetch_one(self, sql: str, params: tuple[Any, ...]) -> User | None:
        async with self._pool.connection() as conn, conn.cursor(row_factory=dict_row) as cursor:
            await cursor.execute(sql, params)
            row = await cursor.fetchone()

        if row is None:
            return None
        return _row_to_user(row)


def _row_to_user(row: dict[str, Any]) -> User:
    return User(
        id=str(row["id"]),
        name=row["name"],
        email=row["email"],
        rut=row["rut"],
        password_hash=row["password_hash"],
        verified=row["verified"],
        code=row["code"],
        blocked=row["blocked"],
        profile=row["profile"] or {},
    )


async def run_migrations(pool: AsyncConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 AsyncConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            async with pool.connection() as conn:
                await conn.execute(sql_content)
                await conn.commit()

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
