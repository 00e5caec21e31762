"""
Restaurant API — Order Schemas
===============================

What:  Pydantic models for the ordering procedures.

total_amount is computed by the client and accepted as given; it is not
checked against catalog prices.
"""

from datetime import datetime
from enum import Enum
from typing import List

from pydantic import BaseModel, Field

from restaurant_api.schemas.common import EntityId, Money, NonEmptyStr


class OrderStatus(str, Enum):
    """Order status label. Any value may follow any other."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    READY = "ready"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class OrderItem(BaseModel):
    """One order line: a menu item id and how many of it."""

    menu_item_id: EntityId
    quantity: int = Field(gt=0)


class OrderResponse(BaseModel):
    id: int
    customer_name: str
    customer_phone: str
    items: List[OrderItem]
    total_amount: float
    status: OrderStatus
    created_at: datetime


class CreateOrderInput(BaseModel):
    customer_name: NonEmptyStr
    customer_phone: NonEmptyStr
    items: List[OrderItem] = Field(min_length=1)
    total_amount: Money


class UpdateOrderStatusInput(BaseModel):
    id: EntityId
    status: OrderStatus
