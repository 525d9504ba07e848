"""
Conversión de excepciones de la capa de servicio a respuestas HTTP.
"""

import logging

from fastapi import HTTPException, status

from core.exceptions import (
    AppException,
    NotFoundException,
    DuplicateException,
    UnauthorizedException,
    ForbiddenException,
    ValidationException,
)

logger = logging.getLogger(__name__)


def handle_service_exception(e: Exception) -> HTTPException:
    """Convert service layer exceptions to HTTP exceptions."""
    if isinstance(e, NotFoundException):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )
    elif isinstance(e, DuplicateException):
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=e.message
        )
    elif isinstance(e, UnauthorizedException):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )
    elif isinstance(e, ForbiddenException):
        return HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=e.message
        )
    elif isinstance(e, ValidationException):
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "message": e.message,
                "violations": e.details.get("violations", []),
            }
        )
    elif isinstance(e, AppException):
        logger.error(f"{e.kind.value} error: {e.message}", exc_info=e)
        return HTTPException(
            status_code=e.status_code,
            detail=e.message
        )
    else:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal Server Error."
        )
