"""
Error shaping - maps exceptions to HTTP responses.

Every error response has the body `{"error": ...}`:
- DomainError: its status code, `error` holds the serialized error fields
- jose.JWTError: 403, same shape as a domain error
- request body validation: 400 ValidationError naming the offending field
- framework HTTP errors (missing bearer token, unknown route): their status
- anything else: 500, `error` holds the exception's string form
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from jose import JWTError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.domain import messages
from src.domain.exceptions import DomainError, ValidationError, is_business_error

logger = logging.getLogger(__name__)


def error_response(error: Exception) -> JSONResponse:
    """Build the JSON response for any exception raised while handling a request."""
    if isinstance(error, DomainError):
        _log(error)
        return JSONResponse(status_code=error.status_code, content={"error": error.to_dict()})

    if isinstance(error, JWTError):
        token_error = DomainError(
            type(error).__name__, str(error), status.HTTP_403_FORBIDDEN
        )
        _log(token_error)
        return JSONResponse(
            status_code=token_error.status_code, content={"error": token_error.to_dict()}
        )

    logger.error("Unhandled error", exc_info=error)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": f"{type(error).__name__}: {error}"},
    )


def validation_error_from(exc: RequestValidationError) -> ValidationError:
    """Convert FastAPI's request validation error into a domain ValidationError."""
    field = None
    for detail in exc.errors():
        loc = detail.get("loc", ())
        if len(loc) > 1:
            field = str(loc[-1])
            break
    message = messages.FIELD_MESSAGES.get(field, messages.DEFAULT_FIELD_MESSAGE)
    return ValidationError(messages.VALIDATION_NAME, message)


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return error_response(exc)


async def request_validation_handler(request: Request, exc: Exception) -> JSONResponse:
    return error_response(validation_error_from(exc))


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    name = HTTPStatus(exc.status_code).phrase.replace(" ", "")
    response = error_response(DomainError(name, str(exc.detail), exc.status_code))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def register_exception_handlers(app: FastAPI) -> None:
    """Install the uniform error mapping on an application."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(JWTError, domain_error_handler)
    app.add_exception_handler(Exception, domain_error_handler)


def _log(error: DomainError) -> None:
    if is_business_error(error):
        logger.info("Request rejected: %s - %s", error.name, error.message)
    else:
        logger.error("Request failed: %s - %s", error.name, error.message)
