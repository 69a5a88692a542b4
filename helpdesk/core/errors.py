import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details
        super().__init__(message)


class InvalidInputError(AppError):
    """A required field is missing or malformed."""

    def __init__(self, code: str, message: str, details: str | None = None) -> None:
        super().__init__(status.HTTP_400_BAD_REQUEST, code, message, details)


class TicketNotFoundError(AppError):
    def __init__(self, ticket_id: str) -> None:
        super().__init__(
            status.HTTP_404_NOT_FOUND,
            "TICKET_NOT_FOUND",
            "Ticket not found",
            details=f"ticket_id={ticket_id}",
        )
        self.ticket_id = ticket_id


class StoreError(AppError):
    """The ticket store could not be read or written."""

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, "STORE_IO_ERROR", message, details)


def error_response(
    *,
    status_code: int,
    code: str,
    message: str,
    details: str | None = None,
) -> JSONResponse:
    content: dict[str, Any] = {"error": message, "code": code}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


async def app_error_handler(_: Request, exc: AppError) -> JSONResponse:
    return error_response(
        status_code=exc.status_code,
        code=exc.code,
        message=exc.message,
        details=exc.details,
    )


async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    issues = "; ".join(
        f"{'.'.join(str(part) for part in issue['loc'])}: {issue['msg']}" for issue in exc.errors()
    )
    return error_response(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        code="VALIDATION_ERROR",
        message="Request validation failed",
        details=issues or None,
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error in %s %s", request.method, request.url.path)
    return error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        code="INTERNAL_SERVER_ERROR",
        message="Internal server error",
        details=str(exc),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
