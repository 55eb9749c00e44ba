"""Reservation models: a desk claimed over a date range, split into days."""

import datetime as dt

from sqlalchemy import (
    Boolean,
    Date,
    ForeignKey,
    ForeignKeyConstraint,
    Index,
    UniqueConstraint,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from deskbooking.database import Base, CreatedAtMixin, IntegerPrimaryKeyMixin


class Reservation(IntegerPrimaryKeyMixin, CreatedAtMixin, Base):
    """A user's claim on a desk for an inclusive date range.

    ``is_cancelled`` mirrors whether every one of ``days`` is cancelled.
    """

    __tablename__ = "reservations"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    desk_id: Mapped[int] = mapped_column(
        ForeignKey("desks.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    start_date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    end_date: Mapped[dt.date] = mapped_column(Date, nullable=False)  # inclusive
    is_cancelled: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Relationships
    user: Mapped["User"] = relationship(lazy="selectin")  # type: ignore[name-defined]  # noqa: F821
    desk: Mapped["Desk"] = relationship(lazy="selectin")  # type: ignore[name-defined]  # noqa: F821
    days: Mapped[list["ReservationDay"]] = relationship(
        back_populates="reservation",
        lazy="selectin",
        order_by="ReservationDay.date",
    )

    # Target of the composite key on reservation_days.
    __table_args__ = (UniqueConstraint("id", "desk_id", name="uq_reservations_id_desk"),)

    def __repr__(self) -> str:
        return (
            f"<Reservation(id={self.id}, desk_id={self.desk_id}, user_id={self.user_id}, "
            f"{self.start_date}..{self.end_date}, cancelled={self.is_cancelled})>"
        )


class ReservationDay(IntegerPrimaryKeyMixin, Base):
    """One calendar day of a reservation; the unit of partial cancellation.

    ``desk_id`` is copied from the parent reservation through the composite
    foreign key on flush. Build days with :meth:`for_reservation` instead of
    setting it by hand.
    """

    __tablename__ = "reservation_days"

    reservation_id: Mapped[int] = mapped_column(nullable=False)
    desk_id: Mapped[int] = mapped_column(ForeignKey("desks.id", ondelete="CASCADE"), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    is_cancelled: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    reservation: Mapped["Reservation"] = relationship(back_populates="days", lazy="selectin")

    __table_args__ = (
        ForeignKeyConstraint(
            ["reservation_id", "desk_id"],
            ["reservations.id", "reservations.desk_id"],
            ondelete="CASCADE",
            name="fk_reservation_days_reservation_desk",
        ),
        UniqueConstraint("reservation_id", "date", name="uq_reservation_days_reservation_date"),
        Index("ix_reservation_days_date", "date"),
        # No two active days on the same desk and date.
        Index(
            "uq_reservation_days_active_desk_date",
            "desk_id",
            "date",
            unique=True,
            postgresql_where=text("NOT is_cancelled"),
            sqlite_where=text("is_cancelled = 0"),
        ),
    )

    @classmethod
    def for_reservation(cls, reservation: Reservation, date: dt.date) -> "ReservationDay":
        """Build a day row whose desk is taken from ``reservation``."""
        return cls(reservation=reservation, desk_id=reservation.desk_id, date=date, is_cancelled=False)

    def __repr__(self) -> str:
        return f"<ReservationDay(reservation_id={self.reservation_id}, date={self.date}, cancelled={self.is_cancelled})>"
