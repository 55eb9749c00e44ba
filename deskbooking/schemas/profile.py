"""Pydantic v2 response schemas for the profile endpoint."""

from datetime import date

from pydantic import BaseModel, Field


class ReservationSummary(BaseModel):
    """One reservation as listed on a user's profile."""

    reservation_id: int
    desk_id: int
    desk_number: int
    start_date: date
    end_date: date


class ProfileResponse(BaseModel):
    """A user's reservations split into current, past and cancelled.

    Each list is ordered by start date, newest first.
    """

    first_name: str
    last_name: str
    current_reservations: list[ReservationSummary] = Field(default_factory=list)
    past_reservations: list[ReservationSummary] = Field(default_factory=list)
    cancelled_reservations: list[ReservationSummary] = Field(default_factory=list)
