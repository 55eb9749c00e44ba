"""SQLAlchemy models for the desk booking service.

All models are imported here so that Alembic's autogenerate can discover
them via Base.metadata. If you add a new model, import it in this file.
"""

from deskbooking.models.desk import Desk
from deskbooking.models.reservation import Reservation, ReservationDay
from deskbooking.models.user import User

__all__ = [
    "Desk",
    "Reservation",
    "ReservationDay",
    "User",
]
