"""Map booking rejections to HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from deskbooking.errors import (
    BookingError,
    ConflictError,
    DayNotFoundError,
    ForbiddenError,
    InvalidRangeError,
    NotFoundError,
    UnderMaintenanceError,
)

logger = logging.getLogger(__name__)

STATUS_CODES: dict[type[BookingError], int] = {
    InvalidRangeError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    UnderMaintenanceError: status.HTTP_409_CONFLICT,
    ConflictError: status.HTTP_409_CONFLICT,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    DayNotFoundError: status.HTTP_404_NOT_FOUND,
}


def status_for(exc: BookingError) -> int:
    for exc_type in type(exc).__mro__:
        if exc_type in STATUS_CODES:
            return STATUS_CODES[exc_type]
    return status.HTTP_400_BAD_REQUEST


async def booking_error_handler(request: Request, exc: BookingError) -> JSONResponse:
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=status_for(exc),
        content={"detail": exc.message, "error": exc.code},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookingError, booking_error_handler)  # type: ignore[arg-type]
