"""Pydantic v2 request/response schemas for reservation endpoints."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class ReservationCreate(BaseModel):
    """Schema for reserving a desk over an inclusive date range.

    Range ordering is checked by the booking core so that it is reported as
    an invalid range rather than a schema error.
    """

    desk_id: int = Field(..., ge=1)
    start_date: date
    end_date: date


class CancelDayRequest(BaseModel):
    """Schema for cancelling a single day of a reservation."""

    date: date


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class ReservationCreated(BaseModel):
    reservation_id: int


class ReservationDayResponse(BaseModel):
    id: int
    date: date
    is_cancelled: bool

    model_config = ConfigDict(from_attributes=True)


class ReservationDetailResponse(BaseModel):
    """A reservation with its per-day breakdown."""

    id: int
    user_id: int
    desk_id: int
    start_date: date
    end_date: date
    is_cancelled: bool
    created_at: datetime
    days: list[ReservationDayResponse]

    model_config = ConfigDict(from_attributes=True)
