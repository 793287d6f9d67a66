"""Exceptions raised by the File Links API and the handlers that render them."""
import logging
from typing import Any, Optional

import pydantic
from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from file_links_api.schemas import ErrorResponse

logger = logging.getLogger(__name__)


class FilesApiError(Exception):
    """Base class for errors rendered as an `{"error": ...}` envelope."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, data: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.data = data


class MissingFieldsError(FilesApiError):
    """A required body field is missing, empty or of the wrong shape."""
    status_code = status.HTTP_400_BAD_REQUEST


class MalformedBodyError(FilesApiError):
    """The request body is not a JSON object."""


class PartialDeletionError(FilesApiError):
    """The object left the bucket but its metadata record could not be removed."""


def _error_response(status_code: int, message: str, data: Optional[Any] = None) -> JSONResponse:
    body = ErrorResponse(error=message, data=data).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def handle_files_api_errors(request: Request, exc: FilesApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    return _error_response(exc.status_code, exc.message, exc.data)


async def handle_pydantic_validation_errors(request: Request, exc: pydantic.ValidationError) -> JSONResponse:
    """
    Validation errors that escape the routes come from data read back out of
    the stores, not from the caller, so they are server errors.
    """
    logger.error(f"Invalid data while handling {request.method} {request.url.path}: {exc}")
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


async def handle_broad_exceptions(request: Request, call_next):
    """Handle any exception that propagates during the request."""
    try:
        return await call_next(request)
    except Exception as exc:  # pylint: disable=broad-except
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            f"{type(exc).__name__}: {exc}",
        )
