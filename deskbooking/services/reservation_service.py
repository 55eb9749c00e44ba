"""Reservation lifecycle: create, cancel whole, cancel single days.

Every operation takes the acting user's id explicitly and validates before
writing anything, so a rejected call leaves the session untouched.
"""

import logging
from collections.abc import Iterable, Iterator
from datetime import date, timedelta

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from deskbooking.errors import (
    ConflictError,
    DayNotFoundError,
    ForbiddenError,
    InvalidRangeError,
    NotFoundError,
    UnderMaintenanceError,
)
from deskbooking.models.desk import Desk
from deskbooking.models.reservation import Reservation, ReservationDay

logger = logging.getLogger(__name__)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar date from ``start`` to ``end`` inclusive."""
    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)


def is_fully_cancelled(days: Iterable[ReservationDay]) -> bool:
    """A reservation counts as cancelled once all of its days are."""
    return all(day.is_cancelled for day in days)


async def has_conflict(db: AsyncSession, desk_id: int, start_date: date, end_date: date) -> bool:
    """True when any active day on ``desk_id`` falls inside [start_date, end_date]."""
    result = await db.execute(
        select(
            exists().where(
                ReservationDay.desk_id == desk_id,
                ReservationDay.is_cancelled.is_(False),
                ReservationDay.date >= start_date,
                ReservationDay.date <= end_date,
            )
        )
    )
    return bool(result.scalar())


async def reserve(
    db: AsyncSession,
    desk_id: int,
    start_date: date,
    end_date: date,
    user_id: int,
) -> int:
    """Reserve ``desk_id`` for ``user_id`` over an inclusive date range.

    Raises:
        InvalidRangeError: ``start_date`` is after ``end_date``.
        NotFoundError: the desk does not exist.
        UnderMaintenanceError: the desk is in maintenance.
        ConflictError: an active day already books the desk inside the range.
    """
    if start_date > end_date:
        raise InvalidRangeError()

    desk = await db.get(Desk, desk_id)
    if desk is None:
        raise NotFoundError("Desk not found.")

    if desk.is_in_maintenance:
        raise UnderMaintenanceError()

    if await has_conflict(db, desk.id, start_date, end_date):
        raise ConflictError()

    reservation = Reservation(
        user_id=user_id,
        desk_id=desk.id,
        start_date=start_date,
        end_date=end_date,
        is_cancelled=False,
    )
    for day in iter_days(start_date, end_date):
        ReservationDay.for_reservation(reservation, day)

    db.add(reservation)
    try:
        await db.flush()
    except IntegrityError as exc:
        # Lost a race with a concurrent insert on the same desk and date.
        raise ConflictError() from exc

    logger.info(
        "Reservation %s: desk %s for user %s from %s to %s (%d days)",
        reservation.id,
        desk.number,
        user_id,
        start_date,
        end_date,
        len(reservation.days),
    )
    return reservation.id


async def get_owned_reservation(
    db: AsyncSession,
    reservation_id: int,
    user_id: int,
    forbidden_message: str | None = None,
) -> Reservation:
    """Fetch a reservation with its days and verify ``user_id`` owns it.

    Raises:
        NotFoundError: the reservation does not exist.
        ForbiddenError: it belongs to someone else.
    """
    result = await db.execute(
        select(Reservation).options(selectinload(Reservation.days)).where(Reservation.id == reservation_id)
    )
    reservation = result.scalar_one_or_none()

    if reservation is None:
        raise NotFoundError("Reservation not found.")
    if reservation.user_id != user_id:
        raise ForbiddenError(forbidden_message)
    return reservation


async def get_reservation(db: AsyncSession, reservation_id: int, user_id: int) -> Reservation:
    return await get_owned_reservation(
        db,
        reservation_id,
        user_id,
        forbidden_message="You cannot view another user's reservation.",
    )


async def cancel_whole(db: AsyncSession, reservation_id: int, user_id: int) -> None:
    """Cancel a reservation and all of its days. Repeating it is a no-op."""
    reservation = await get_owned_reservation(db, reservation_id, user_id)

    reservation.is_cancelled = True
    for day in reservation.days:
        day.is_cancelled = True
    await db.flush()

    logger.info("Reservation %s cancelled by user %s", reservation.id, user_id)


async def cancel_day(db: AsyncSession, reservation_id: int, day: date, user_id: int) -> None:
    """Cancel one day of a reservation.

    Cancelling the last active day also cancels the reservation itself.

    Raises:
        NotFoundError: the reservation does not exist.
        ForbiddenError: it belongs to someone else.
        DayNotFoundError: ``day`` is outside the reservation or already cancelled.
    """
    reservation = await get_owned_reservation(db, reservation_id, user_id)

    target = next((d for d in reservation.days if d.date == day), None)
    if target is None or target.is_cancelled:
        raise DayNotFoundError()

    target.is_cancelled = True
    reservation.is_cancelled = is_fully_cancelled(reservation.days)
    await db.flush()

    if reservation.is_cancelled:
        logger.info(
            "Reservation %s: last active day %s cancelled, reservation cancelled",
            reservation.id,
            day,
        )
    else:
        logger.info("Reservation %s: day %s cancelled by user %s", reservation.id, day, user_id)
