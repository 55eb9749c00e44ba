"""Domain errors raised by the booking core.

Every error is a caller-correctable rejection. The API layer maps them to
HTTP responses in :mod:`deskbooking.api.errors`.
"""


class BookingError(Exception):
    """Base class for booking rejections."""

    code = "booking_error"
    default_message = "Booking request rejected."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidRangeError(BookingError):
    code = "invalid_range"
    default_message = "Invalid date range."


class NotFoundError(BookingError):
    code = "not_found"
    default_message = "Not found."


class UnderMaintenanceError(BookingError):
    code = "under_maintenance"
    default_message = "Desk is in maintenance."


class ConflictError(BookingError):
    code = "conflict"
    default_message = "Desk is already reserved for this period."


class ForbiddenError(BookingError):
    code = "forbidden"
    default_message = "You cannot cancel another user's reservation."


class DayNotFoundError(BookingError):
    code = "day_not_found"
    default_message = "Reservation day not found or already cancelled."
