"""Desk availability: per-desk status over a date window."""

import logging
from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from deskbooking.errors import InvalidRangeError
from deskbooking.models.desk import Desk
from deskbooking.models.reservation import Reservation, ReservationDay
from deskbooking.models.user import User
from deskbooking.schemas.desk import DeskStatus, DeskView

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BookedDay:
    """A non-cancelled reservation day joined to its reservation and owner."""

    desk_id: int
    date: date
    reservation_id: int
    user_id: int
    start_date: date
    end_date: date
    first_name: str
    last_name: str


def check_window(from_date: date, to_date: date, max_days: int | None = None) -> None:
    """Reject windows that end before they start or span more than ``max_days``."""
    if from_date > to_date:
        raise InvalidRangeError()
    if max_days is not None and (to_date - from_date).days + 1 > max_days:
        raise InvalidRangeError(f"Date range cannot exceed {max_days} days.")


def build_desk_views(desks: Iterable[Desk], booked_days: Sequence[BookedDay], user_id: int) -> list[DeskView]:
    """Compute one view per desk, ordered by desk number.

    Maintenance wins over any booking. A reserved desk shows the owner of the
    earliest booked day in the window (lowest reservation id on equal dates),
    and the viewer's own reservation on that desk when there is one.
    """
    days_by_desk: dict[int, list[BookedDay]] = defaultdict(list)
    for day in booked_days:
        days_by_desk[day.desk_id].append(day)

    views: list[DeskView] = []
    for desk in sorted(desks, key=lambda d: d.number):
        if desk.is_in_maintenance:
            views.append(
                DeskView(
                    desk_id=desk.id,
                    number=desk.number,
                    status=DeskStatus.MAINTENANCE,
                    maintenance_message=desk.maintenance_message,
                )
            )
            continue

        overlapping = days_by_desk.get(desk.id)
        if not overlapping:
            views.append(DeskView(desk_id=desk.id, number=desk.number, status=DeskStatus.OPEN))
            continue

        first = min(overlapping, key=lambda d: (d.date, d.reservation_id))
        view = DeskView(
            desk_id=desk.id,
            number=desk.number,
            status=DeskStatus.RESERVED,
            reserved_by_first_name=first.first_name,
            reserved_by_last_name=first.last_name,
        )

        mine = next((d for d in overlapping if d.user_id == user_id), None)
        if mine is not None:
            view.my_reservation_id = mine.reservation_id
            view.my_reservation_start = mine.start_date
            view.my_reservation_end = mine.end_date

        views.append(view)

    return views


async def get_booked_days(db: AsyncSession, from_date: date, to_date: date) -> list[BookedDay]:
    """Load every non-cancelled day in [from_date, to_date] with its owner."""
    result = await db.execute(
        select(
            ReservationDay.desk_id,
            ReservationDay.date,
            Reservation.id.label("reservation_id"),
            Reservation.user_id,
            Reservation.start_date,
            Reservation.end_date,
            User.first_name,
            User.last_name,
        )
        .join(Reservation, ReservationDay.reservation_id == Reservation.id)
        .join(User, Reservation.user_id == User.id)
        .where(
            ReservationDay.date >= from_date,
            ReservationDay.date <= to_date,
            ReservationDay.is_cancelled.is_(False),
        )
        .order_by(ReservationDay.date, Reservation.id)
    )
    return [BookedDay(**row._mapping) for row in result]


async def compute_availability(
    db: AsyncSession,
    from_date: date,
    to_date: date,
    user_id: int,
) -> list[DeskView]:
    """Return the status of every desk over [from_date, to_date] as seen by ``user_id``."""
    desks_result = await db.execute(select(Desk).order_by(Desk.number))
    desks = list(desks_result.scalars().all())

    # One query for the whole window instead of one per desk.
    booked_days = await get_booked_days(db, from_date, to_date)

    logger.debug(
        "Availability %s..%s: %d desks, %d booked days",
        from_date,
        to_date,
        len(desks),
        len(booked_days),
    )
    return build_desk_views(desks, booked_days, user_id)
