"""Desk model: physical bookable desks."""

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from deskbooking.database import Base, IntegerPrimaryKeyMixin


class Desk(IntegerPrimaryKeyMixin, Base):
    """A desk identified by its display number.

    Maintenance status is managed outside the booking core and only read here.
    """

    __tablename__ = "desks"

    number: Mapped[int] = mapped_column(Integer, unique=True, nullable=False)
    is_in_maintenance: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    maintenance_message: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<Desk(id={self.id}, number={self.number}, maintenance={self.is_in_maintenance})>"
