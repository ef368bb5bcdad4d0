"""
Error taxonomy and HTTP error rendering.

Every failure that reaches a client is shaped as
``{"error": <message>, "details": <details>}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors rendered as a JSON error payload."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: str = ""):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(AppError):
    """A request is missing required fields or carries invalid values."""

    status_code = status.HTTP_400_BAD_REQUEST


class StoreError(AppError):
    """The material store could not be queried or written."""


class ExternalServiceError(AppError):
    """A language model call failed."""


class ExtractionError(AppError):
    """A document could not be turned into text. Never surfaced to clients."""


def error_payload(message: str, details: str = "") -> dict[str, str]:
    return {"error": message, "details": details}


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_payload(exc.message, exc.details),
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Collapse pydantic's error list into one readable line
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{location}: {err.get('msg', 'invalid value')}")

    logger.info("Rejected request to %s: %s", request.url.path, "; ".join(problems))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_payload("Invalid request", "; ".join(problems)),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_payload("Internal server error", str(exc)),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
