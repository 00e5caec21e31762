"""
Restaurant API — Storage Boundary Conversions
==============================================

What:  The only place where values cross between API types and column types.
How:   One `*_from_row` converter per entity builds the response schema from
       an ORM row; `money_to_column` / `to_utc` prepare values for writes.
Who:   Every service method, on every read and write.

Conversions:
    Money       float  → Decimal quantized to 0.01 (write)
                Decimal/str → float (read)
    Timestamps  naive datetimes are taken as UTC; aware ones are converted
                to UTC. SQLite returns naive values, PostgreSQL aware ones,
                so reads normalize both.
    Enums       str-Enum members are stored by value
    Order items list of OrderItem ↔ list of plain dicts in a JSON column
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterable, List, Union

from restaurant_api.models.menu_item import MenuItem
from restaurant_api.models.order import Order
from restaurant_api.models.reservation import Reservation
from restaurant_api.models.testimonial import Testimonial
from restaurant_api.schemas.menu_item import MenuItemResponse
from restaurant_api.schemas.order import OrderItem, OrderResponse
from restaurant_api.schemas.reservation import ReservationResponse
from restaurant_api.schemas.testimonial import TestimonialResponse


TWO_PLACES = Decimal("0.01")


# ══════════════════════════════════════════════════════════════════════════
# Scalar helpers
# ══════════════════════════════════════════════════════════════════════════

def money_to_column(value: float) -> Decimal:
    """9.5 → Decimal('9.50'). Goes through str() so 19.99 stays 19.99."""
    return Decimal(str(value)).quantize(TWO_PLACES)


def money_from_column(value: Union[Decimal, str, float]) -> float:
    """Decimal('9.50') or '9.50' → 9.5"""
    return float(Decimal(str(value)))


def to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def order_items_to_column(items: Iterable[OrderItem]) -> List[Dict[str, int]]:
    return [
        {"menu_item_id": item.menu_item_id, "quantity": item.quantity}
        for item in items
    ]


# ══════════════════════════════════════════════════════════════════════════
# Row → response converters
# ══════════════════════════════════════════════════════════════════════════

def menu_item_from_row(row: MenuItem) -> MenuItemResponse:
    return MenuItemResponse(
        id=row.id,
        name=row.name,
        description=row.description,
        category=row.category,
        price=money_from_column(row.price),
        image_url=row.image_url,
        created_at=to_utc(row.created_at),
    )


def order_from_row(row: Order) -> OrderResponse:
    return OrderResponse(
        id=row.id,
        customer_name=row.customer_name,
        customer_phone=row.customer_phone,
        items=[OrderItem.model_validate(item) for item in row.items],
        total_amount=money_from_column(row.total_amount),
        status=row.status,
        created_at=to_utc(row.created_at),
    )


def reservation_from_row(row: Reservation) -> ReservationResponse:
    return ReservationResponse(
        id=row.id,
        customer_name=row.customer_name,
        customer_phone=row.customer_phone,
        number_of_people=row.number_of_people,
        date=row.date,
        time=row.time,
        status=row.status,
        created_at=to_utc(row.created_at),
    )


def testimonial_from_row(row: Testimonial) -> TestimonialResponse:
    return TestimonialResponse(
        id=row.id,
        customer_name=row.customer_name,
        review=row.review,
        rating=row.rating,
        date=to_utc(row.date),
        created_at=to_utc(row.created_at),
    )


# ══════════════════════════════════════════════════════════════════════════
# Update payload → column values
# ══════════════════════════════════════════════════════════════════════════

# Per-column write conversion for partial updates; unlisted columns pass through
_COLUMN_WRITERS = {
    "price": money_to_column,
    "date": to_utc,
    "category": enum_value,
    "status": enum_value,
}


def changes_to_columns(changes: Dict[str, Any]) -> Dict[str, Any]:
    """Applies the write conversion for each changed column (None passes through)."""
    columns = {}
    for name, value in changes.items():
        writer = _COLUMN_WRITERS.get(name)
        columns[name] = writer(value) if writer is not None and value is not None else value
    return columns
