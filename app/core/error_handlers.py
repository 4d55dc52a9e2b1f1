"""
Exception handlers translating every failure into the response envelope
{success: false, message, error?}.
"""

import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.exceptions import AppError

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."
UNIQUE_VIOLATION_PGCODE = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """True for duplicate-key failures; NOT NULL, foreign-key and check failures are not."""
    if getattr(exc.orig, "pgcode", None) is not None:
        return exc.orig.pgcode == UNIQUE_VIOLATION_PGCODE
    return "UNIQUE constraint failed" in str(exc.orig)


def error_response(status_code: int, message: str, error: str | None = None) -> JSONResponse:
    content = {"success": False, "message": message}
    if error is not None:
        content["error"] = error
    return JSONResponse(status_code=status_code, content=content)


def _log(request: Request, status_code: int, message: str) -> None:
    logger.info("%s %s failed with %s: %s", request.method, request.url.path, status_code, message)


def _describe(error: dict) -> str:
    message = error.get("msg", "Invalid value")
    message = message.removeprefix("Value error, ")
    location = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
    return f"{'.'.join(location)}: {message}" if location else message


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    _log(request, exc.http_status_code, exc.message)
    return error_response(exc.http_status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = ", ".join(_describe(e) for e in exc.errors())
    _log(request, 400, details)
    return error_response(400, "Validation Error", details)


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    if is_unique_violation(exc):
        message = "A record with the same unique value already exists"
        _log(request, 409, message)
        return error_response(409, message)
    message = "Invalid or missing field value"
    _log(request, 400, message)
    return error_response(400, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        message = f"Route {request.url.path} not found"
    else:
        message = str(exc.detail)
    _log(request, exc.status_code, message)
    response = error_response(exc.status_code, message)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    _log(request, 429, RATE_LIMIT_MESSAGE)
    return error_response(429, RATE_LIMIT_MESSAGE)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    if settings.APP_ENV == "dev":
        detail = "".join(traceback.format_exception(exc))
        return error_response(500, str(exc) or "Something went wrong", detail)
    return error_response(500, "Internal Server Error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
