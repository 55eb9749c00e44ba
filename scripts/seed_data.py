"""Seed the database with sample desks, users and reservations.

Mirrors the demo office: twelve desks numbered 101-112 with the fourth one
under maintenance, three users, and two upcoming reservations.

Run:
    python -m scripts.seed_data
"""

import asyncio
import sys
from datetime import date, timedelta
from pathlib import Path

# Add the project root to path so imports work when run as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import delete, text
from sqlalchemy.ext.asyncio import AsyncSession

from deskbooking.config import settings
from deskbooking.database import async_session_factory, engine
from deskbooking.models.desk import Desk
from deskbooking.models.reservation import Reservation, ReservationDay
from deskbooking.models.user import User
from deskbooking.services.reservation_service import reserve

# ---------------------------------------------------------------------------
# Seed data definitions
# ---------------------------------------------------------------------------

USERS = [
    {"id": 1, "first_name": "John", "last_name": "Smith"},
    {"id": 2, "first_name": "Jane", "last_name": "Doe"},
    {"id": 3, "first_name": "Michael", "last_name": "Brown"},
]

DESK_COUNT = 12
FIRST_DESK_NUMBER = 101
MAINTENANCE_POSITIONS = {4}
MAINTENANCE_MESSAGE = "Desk under maintenance."


def _build_reservations(desks: list[Desk], today: date) -> list[dict]:
    """Reservations relative to ``today`` so the demo always has upcoming bookings."""
    return [
        {
            "user_id": 2,
            "desk": desks[1],
            "start_date": today + timedelta(days=1),
            "end_date": today + timedelta(days=3),
        },
        {
            "user_id": 1,
            "desk": desks[2],
            "start_date": today,
            "end_date": today + timedelta(days=2),
        },
    ]


async def seed_users(session: AsyncSession) -> None:
    """Insert ``USERS`` with their fixed ids and move the id sequence past them."""
    for user_data in USERS:
        session.add(User(**user_data))
    await session.flush()
    if session.bind.dialect.name == "postgresql":
        # Explicit ids do not advance the serial sequence.
        await session.execute(
            text("SELECT setval(pg_get_serial_sequence('users', 'id'), (SELECT MAX(id) FROM users))")
        )


async def seed() -> None:
    """Populate the database with the demo office.

    Idempotent: wipes reservations, desks and users before re-seeding.
    """
    async with async_session_factory() as session:
        await session.execute(delete(ReservationDay))
        await session.execute(delete(Reservation))
        await session.execute(delete(Desk))
        await session.execute(delete(User))
        await session.flush()

        # ------------------------------------------------------------------
        # 1. Users
        # ------------------------------------------------------------------
        await seed_users(session)
        print(f"✅ Created {len(USERS)} users (default user id={settings.default_user_id})")

        # ------------------------------------------------------------------
        # 2. Desks
        # ------------------------------------------------------------------
        desks: list[Desk] = []
        for position in range(1, DESK_COUNT + 1):
            in_maintenance = position in MAINTENANCE_POSITIONS
            desk = Desk(
                number=FIRST_DESK_NUMBER + position - 1,
                is_in_maintenance=in_maintenance,
                maintenance_message=MAINTENANCE_MESSAGE if in_maintenance else None,
            )
            session.add(desk)
            desks.append(desk)
        await session.flush()
        print(f"✅ Created {len(desks)} desks ({len(MAINTENANCE_POSITIONS)} in maintenance)")

        # ------------------------------------------------------------------
        # 3. Reservations
        # ------------------------------------------------------------------
        today = date.today()
        for rdata in _build_reservations(desks, today):
            reservation_id = await reserve(
                session,
                desk_id=rdata["desk"].id,
                start_date=rdata["start_date"],
                end_date=rdata["end_date"],
                user_id=rdata["user_id"],
            )
            print(
                f"   🪑 Desk {rdata['desk'].number}: user {rdata['user_id']} "
                f"{rdata['start_date']} → {rdata['end_date']} (reservation {reservation_id})"
            )

        await session.commit()

    await engine.dispose()
    print("🎉 Done!")


if __name__ == "__main__":
    asyncio.run(seed())
