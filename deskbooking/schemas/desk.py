"""Pydantic v2 response schemas for desk availability."""

from datetime import date
from enum import Enum

from pydantic import BaseModel


class DeskStatus(str, Enum):
    OPEN = "Open"
    RESERVED = "Reserved"
    MAINTENANCE = "Maintenance"


class DeskView(BaseModel):
    """Status of one desk over an availability window.

    ``reserved_by_*`` is only set for reserved desks, ``maintenance_message``
    only for desks in maintenance, and ``my_reservation_*`` only when the
    viewer holds a reservation on the desk inside the window.
    """

    desk_id: int
    number: int
    status: DeskStatus
    reserved_by_first_name: str | None = None
    reserved_by_last_name: str | None = None
    maintenance_message: str | None = None
    my_reservation_id: int | None = None
    my_reservation_start: date | None = None
    my_reservation_end: date | None = None
