"""
Restaurant API — Testimonial Service
=====================================

What:  Customer reviews: create, list, filter by minimum rating, partial
       update, delete.
Who:   Called by the testimonial procedures in rpc/procedures.py.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import delete, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_api.models.testimonial import Testimonial
from restaurant_api.schemas.testimonial import (
    CreateTestimonialInput,
    TestimonialResponse,
    UpdateTestimonialInput,
)
from restaurant_api.services.conversions import (
    changes_to_columns,
    testimonial_from_row,
    to_utc,
)
from restaurant_api.services.persistence import logs_persistence_errors

logger = logging.getLogger(__name__)


class TestimonialService:
    """Business logic layer for testimonials."""

    @logs_persistence_errors("Testimonial creation")
    async def create_testimonial(
        self, db: AsyncSession, data: CreateTestimonialInput
    ) -> TestimonialResponse:
        """
        Store a review. When no date is given, the creation time is used.
        """
        review_date = to_utc(data.date) if data.date is not None else datetime.now(timezone.utc)
        testimonial = Testimonial(
            customer_name=data.customer_name,
            review=data.review,
            rating=data.rating,
            date=review_date,
        )
        db.add(testimonial)
        await db.flush()
        logger.info("Testimonial created: %s (rating %d)", testimonial.id, testimonial.rating)
        return testimonial_from_row(testimonial)

    @logs_persistence_errors("Fetching testimonials")
    async def list_testimonials(self, db: AsyncSession) -> List[TestimonialResponse]:
        """All testimonials, most recent review date first."""
        result = await db.execute(
            select(Testimonial).order_by(desc(Testimonial.date), desc(Testimonial.id))
        )
        return [testimonial_from_row(row) for row in result.scalars().all()]

    @logs_persistence_errors("Fetching testimonials by rating")
    async def list_testimonials_by_min_rating(
        self, db: AsyncSession, min_rating: int
    ) -> List[TestimonialResponse]:
        """Testimonials rated `min_rating` or higher, most recent first."""
        result = await db.execute(
            select(Testimonial)
            .where(Testimonial.rating >= min_rating)
            .order_by(desc(Testimonial.date), desc(Testimonial.id))
        )
        return [testimonial_from_row(row) for row in result.scalars().all()]

    @logs_persistence_errors("Fetching testimonial by id")
    async def get_testimonial(
        self, db: AsyncSession, testimonial_id: int
    ) -> Optional[TestimonialResponse]:
        testimonial = await db.get(Testimonial, testimonial_id)
        return testimonial_from_row(testimonial) if testimonial is not None else None

    @logs_persistence_errors("Testimonial update")
    async def update_testimonial(
        self, db: AsyncSession, data: UpdateTestimonialInput
    ) -> Optional[TestimonialResponse]:
        """Partial update; same not-found and empty-change rules as menu items."""
        testimonial = await db.get(Testimonial, data.id)
        if testimonial is None:
            return None

        columns = changes_to_columns(data.changes())
        if not columns:
            return testimonial_from_row(testimonial)

        for name, value in columns.items():
            setattr(testimonial, name, value)
        await db.flush()
        logger.info("Testimonial %s updated: %s", testimonial.id, sorted(columns))
        return testimonial_from_row(testimonial)

    @logs_persistence_errors("Testimonial deletion")
    async def delete_testimonial(self, db: AsyncSession, testimonial_id: int) -> bool:
        result = await db.execute(delete(Testimonial).where(Testimonial.id == testimonial_id))
        deleted = result.rowcount > 0
        if deleted:
            logger.info("Testimonial %s deleted", testimonial_id)
        return deleted


# ── Singleton Instance ────────────────────────────────────────────────────
testimonial_service = TestimonialService()
