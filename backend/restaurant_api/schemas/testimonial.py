"""
Restaurant API — Testimonial Schemas
=====================================

What:  Pydantic models for the testimonial procedures.

`date` is an ISO 8601 string ("2024-05-20T12:00:00Z"). Naive values are
taken as UTC.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field
from typing_extensions import Annotated

from restaurant_api.schemas.common import NonEmptyStr, PartialUpdateInput


Rating = Annotated[int, Field(ge=1, le=5)]


class TestimonialResponse(BaseModel):
    id: int
    customer_name: str
    review: str
    rating: int
    date: datetime = Field(description="Review date shown to visitors")
    created_at: datetime


class CreateTestimonialInput(BaseModel):
    customer_name: NonEmptyStr
    review: NonEmptyStr
    rating: Rating
    date: Optional[datetime] = Field(
        default=None,
        description="Review date; defaults to the time of creation",
    )


class UpdateTestimonialInput(PartialUpdateInput):
    NON_NULLABLE = ("customer_name", "review", "rating", "date")

    customer_name: Optional[NonEmptyStr] = None
    review: Optional[NonEmptyStr] = None
    rating: Optional[Rating] = None
    date: Optional[datetime] = None
