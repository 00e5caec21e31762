"""
Restaurant API — Reservation SQLAlchemy Model
==============================================

What:  ORM model representing the `reservations` table.

date and time are plain text ("2024-06-01", "19:30"), not native temporal
types, and carry no timezone. Listings sort them as strings, which matches
chronological order for the zero-padded formats the front end submits.
"""

from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from restaurant_api.database import Base


class Reservation(Base):
    """A table booking request. Created pending; only status changes."""

    __tablename__ = "reservations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_name: Mapped[str] = mapped_column(Text, nullable=False)
    customer_phone: Mapped[str] = mapped_column(Text, nullable=False)
    number_of_people: Mapped[int] = mapped_column(Integer, nullable=False)
    date: Mapped[str] = mapped_column(Text, nullable=False)
    time: Mapped[str] = mapped_column(Text, nullable=False)

    # Values: pending, confirmed, cancelled
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="pending",
        server_default=text("'pending'"),
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'confirmed', 'cancelled')",
            name="ck_reservations_status",
        ),
        CheckConstraint("number_of_people > 0", name="ck_reservations_party_size"),
        Index("idx_reservations_date_time", "date", "time"),
    )

    def __repr__(self) -> str:
        return (
            f"<Reservation(id={self.id}, date='{self.date}', time='{self.time}', "
            f"status='{self.status}')>"
        )
