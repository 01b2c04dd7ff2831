"""Exception handlers mapping domain errors to HTTP responses.

Every error body has the same shape:

    {"error": {"type": "not_found", "message": "User not found: ..."}}
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from accounts.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    DomainError,
    InvalidOperationError,
    NotAuthorizedError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


def error_response(
    status_code: int,
    error_type: str,
    message: str,
    details: Any = None,
) -> JSONResponse:
    body: dict[str, Any] = {"error": {"type": error_type, "message": message}}
    if details:
        body["error"]["details"] = details
    return JSONResponse(status_code=status_code, content=body)


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, "not_found", str(exc))


async def conflict_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Illegal state transitions and broken business rules."""
    logger.info(f"Rejected {request.method} {request.url.path}: {exc}")
    return error_response(status.HTTP_409_CONFLICT, "conflict", str(exc))


async def authentication_handler(
    request: Request, exc: AuthenticationError
) -> JSONResponse:
    return error_response(
        status.HTTP_401_UNAUTHORIZED, "authentication_failed", str(exc)
    )


async def not_authorized_handler(
    request: Request, exc: NotAuthorizedError
) -> JSONResponse:
    logger.warning(f"Forbidden {request.method} {request.url.path}: {exc}")
    return error_response(status.HTTP_403_FORBIDDEN, "forbidden", str(exc))


async def pydantic_validation_handler(
    request: Request, exc: PydanticValidationError
) -> JSONResponse:
    """Value objects built from request data that failed validation."""
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "validation_error",
        "Invalid value",
        details=exc.errors(include_url=False, include_context=False),
    )


async def value_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY, "validation_error", str(exc)
    )


def configure_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the application.

    Handlers are looked up along the exception's MRO, so the pydantic
    handler takes precedence over the generic ``ValueError`` one.
    """
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(InvalidOperationError, conflict_handler)
    app.add_exception_handler(BusinessRuleViolationError, conflict_handler)
    app.add_exception_handler(AuthenticationError, authentication_handler)
    app.add_exception_handler(NotAuthorizedError, not_authorized_handler)
    app.add_exception_handler(PydanticValidationError, pydantic_validation_handler)
    app.add_exception_handler(ValueError, value_error_handler)
