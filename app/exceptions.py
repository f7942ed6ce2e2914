# =============================================================================
# app/exceptions.py - Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# DomainErrors are classified by core.services.error_classifier and sent
# back as plain text; anything unexpected becomes a generic 500 whose
# detail stays in the server log.
# =============================================================================

import logging

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse

from app.config import settings
from core.errors import DomainError
from core.services.error_classifier import classify

logger = logging.getLogger(__name__)


async def domain_error_handler(
    request: Request,
    exc: DomainError
) -> PlainTextResponse:
    """
    Convert a DomainError to its classified plain-text response.
    """
    classification = classify(exc, support_contact=settings.SUPPORT_CONTACT)
    logger.warning(
        f"{request.method} {request.url.path} -> {classification.status_code}: "
        f"{exc.to_dict()}"
    )
    return PlainTextResponse(
        content=classification.message,
        status_code=classification.status_code,
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle request parameter validation errors.

    A missing or non-integer query parameter is a client error (400).
    """
    return JSONResponse(
        status_code=400,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": str(exc)
        }
    )


async def unexpected_exception_handler(
    request: Request,
    exc: Exception
) -> PlainTextResponse:
    """
    Handle exceptions nothing else claimed.

    The traceback is logged for operators; the client only sees the
    generic message.
    """
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    classification = classify(exc, support_contact=settings.SUPPORT_CONTACT)
    return PlainTextResponse(
        content=classification.message,
        status_code=classification.status_code,
    )
