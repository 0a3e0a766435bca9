"""Global error handlers for the application.

Every failure leaves the API as ``{"message": ..., "error": code}``, with a
per-field ``errors`` map for validation failures.
"""
import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from bloodlink.utils.errors import APIError, InternalError, ValidationError

logger = logging.getLogger(__name__)


def _render(exc: APIError) -> JSONResponse:
    content = {"message": exc.detail, "error": exc.code}
    if exc.errors:
        content["errors"] = exc.errors
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


async def http_exception_handler(request: Request, exc):
    if isinstance(exc, APIError):
        return _render(exc)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail}, headers=exc.headers)


async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    return _render(ValidationError.from_error_list(exc.errors()))


async def pydantic_validation_exception_handler(request: Request, exc: PydanticValidationError):
    return _render(ValidationError.from_error_list(exc.errors()))


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _render(InternalError())
