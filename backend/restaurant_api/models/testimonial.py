"""
Restaurant API — Testimonial SQLAlchemy Model
==============================================

What:  ORM model representing the `testimonials` table.

`date` is the review date shown to visitors and may be back-dated by the
caller; `created_at` is when the row was inserted. Listings sort by `date`.
"""

from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Index, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from restaurant_api.database import Base


class Testimonial(Base):
    """Customer rating and review. Supports partial update and delete."""

    __tablename__ = "testimonials"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_name: Mapped[str] = mapped_column(Text, nullable=False)
    review: Mapped[str] = mapped_column(Text, nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)

    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_testimonials_rating_range"),
        Index("idx_testimonials_date", "date"),
    )

    def __repr__(self) -> str:
        return f"<Testimonial(id={self.id}, rating={self.rating}, date='{self.date}')>"
