"""
Module 04 - API Error Handling

Maps engine exceptions onto HTTP responses.

Classification:
- invalid input (bad length, bad hex) -> 400
- address not in the set              -> 404
- everything else                     -> 500
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from api.models.responses import ErrorResponse
from core.schemas.errors import ErrorCategory, ErrorCodes, MerkleException


logger = logging.getLogger(__name__)


STATUS_BY_CATEGORY: dict[str, int] = {
    ErrorCategory.INVALID_INPUT: 400,
    ErrorCategory.NOT_FOUND: 404,
    ErrorCategory.INTERNAL: 500,
}


def status_for(exc: MerkleException) -> int:
    """HTTP status for an engine exception."""
    return STATUS_BY_CATEGORY.get(exc.category, 500)


async def merkle_error_handler(request: Request, exc: MerkleException) -> JSONResponse:
    """Handle MerkleException subclasses."""
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            error=exc.message,
            code=exc.code,
            details=exc.details,
        ).model_dump(),
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"{request.method} {request.url.path} raised {type(exc).__name__}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="An unexpected error occurred",
            code=ErrorCodes.INTERNAL,
            details={"type": type(exc).__name__},
        ).model_dump(),
    )
