"""
Restaurant API — Reservation Schemas
=====================================

What:  Pydantic models for the reservation procedures.

date and time stay plain strings end to end ("2024-06-01", "19:30");
they are never parsed into temporal types.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from restaurant_api.schemas.common import EntityId, NonEmptyStr


class ReservationStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class ReservationResponse(BaseModel):
    id: int
    customer_name: str
    customer_phone: str
    number_of_people: int
    date: str
    time: str
    status: ReservationStatus
    created_at: datetime


class CreateReservationInput(BaseModel):
    customer_name: NonEmptyStr
    customer_phone: NonEmptyStr
    number_of_people: int = Field(gt=0)
    date: NonEmptyStr
    time: NonEmptyStr


class UpdateReservationStatusInput(BaseModel):
    id: EntityId
    status: ReservationStatus
