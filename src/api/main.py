"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures exception handlers and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from psycopg_pool import AsyncConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.api.errors import register_exception_handlers
from src.api.routes import router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "auth",
        "description": "Registration, email verification and login",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates database connection pool and outbound HTTP client on startup
    - Runs migrations on startup
    - Closes both on shutdown
    """
    settings = get_settings()

    logger.info("Starting application...")
    logger.info("Connecting to database...")

    # Create connection pool with explicit sizing
    pool = AsyncConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
        open=False,
    )
    await pool.open()

    # Run migrations
    logger.info("Running database migrations...")
    await run_migrations(pool)

    # Store shared resources in app state for dependency injection
    app.state.pool = pool
    app.state.http_client = httpx.AsyncClient()

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    await app.state.http_client.aclose()
    await pool.close()
    logger.info("Database connection pool closed")


app = FastAPI(
    title="authgate",
    description="User authentication API - registration with criminal-record check, "
    "email verification and JWT login",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

register_exception_handlers(app)
app.include_router(router)


@app.get("/health")
async def health_check(request: Request) -> dict[str, str]:
    """
    Health check endpoint with database validation.

    Returns 200 OK if application and database are healthy.
    Raises exception if database connection fails.
    """
    pool = request.app.state.pool
    async with pool.connection() as conn:
        await conn.execute("SELECT 1")

    return {"status": "healthy"}
