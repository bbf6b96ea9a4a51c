"""Translate domain and service errors into HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette import status

from calearner.domain.common.exceptions import (
    BusinessRuleViolationError,
    DomainError,
    ValidationError,
)
from calearner.exceptions import CalearnerError

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_DETAIL = "An unexpected error occurred. Please try again later."


async def calearner_error_handler(request: Request, exc: CalearnerError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.message, "field": exc.field},
    )


async def business_rule_error_handler(
    request: Request, exc: BusinessRuleViolationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": exc.message, "rule": exc.rule},
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    # Invariant violations and other domain failures are bugs, not user errors
    logger.error(f"Domain error on {request.url.path}: {exc!s}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": UNEXPECTED_ERROR_DETAIL},
    )


def register_exception_handlers(app: FastAPI) -> None:
    # Starlette picks the handler of the closest class in the MRO
    app.add_exception_handler(CalearnerError, calearner_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(ValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(
        BusinessRuleViolationError,
        business_rule_error_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]
