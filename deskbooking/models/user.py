"""User model: people who hold reservations."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from deskbooking.database import Base, IntegerPrimaryKeyMixin


class User(IntegerPrimaryKeyMixin, Base):
    """A desk user. Reference data: never written by the booking core."""

    __tablename__ = "users"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        return f"<User id={self.id} name={self.first_name!r} {self.last_name!r}>"
