"""Profile view: a user's reservations bucketed into current, past and cancelled."""

from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from deskbooking.errors import NotFoundError
from deskbooking.models.desk import Desk
from deskbooking.models.reservation import Reservation
from deskbooking.models.user import User
from deskbooking.schemas.profile import ProfileResponse, ReservationSummary


async def get_profile(db: AsyncSession, user_id: int, today: date | None = None) -> ProfileResponse:
    """Build the profile of ``user_id``.

    Cancelled reservations go to ``cancelled_reservations``; the rest are
    current when they end today or later and past otherwise.
    """
    user = await db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found.")

    today = today or date.today()

    result = await db.execute(
        select(Reservation, Desk.number)
        .join(Desk, Reservation.desk_id == Desk.id)
        .where(Reservation.user_id == user_id)
        .order_by(Reservation.start_date.desc(), Reservation.id.desc())
    )

    profile = ProfileResponse(first_name=user.first_name, last_name=user.last_name)
    for reservation, desk_number in result.all():
        item = ReservationSummary(
            reservation_id=reservation.id,
            desk_id=reservation.desk_id,
            desk_number=desk_number,
            start_date=reservation.start_date,
            end_date=reservation.end_date,
        )
        if reservation.is_cancelled:
            profile.cancelled_reservations.append(item)
        elif reservation.end_date >= today:
            profile.current_reservations.append(item)
        else:
            profile.past_reservations.append(item)

    return profile
