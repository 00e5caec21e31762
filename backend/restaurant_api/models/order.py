"""
Restaurant API — Order SQLAlchemy Model
========================================

What:  ORM model representing the `orders` table.
Who:   Used by OrderService; read by Alembic for migrations.

Table Design:
    - items: JSON array of {"menu_item_id": int, "quantity": int}
      (JSONB on PostgreSQL). Menu item ids are soft references; there is
      no foreign key, so deleting a menu item never touches orders.
    - total_amount: NUMERIC(10,2), caller-supplied and stored verbatim
    - status: pending, confirmed, preparing, ready, completed, cancelled.
      Free-form label among those six; no transition rules.

    Index on created_at:
        Both order listings sort newest first (backward index scan).
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy import JSON, CheckConstraint, DateTime, Index, Integer, Numeric, String, Text, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from restaurant_api.database import Base


class Order(Base):
    """
    A customer's submitted order.

    Lifecycle:
        1. Created with status 'pending' after the menu item existence check
        2. Status overwritten by updateOrderStatus (any label to any label)
        3. Never deleted
    """

    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    customer_name: Mapped[str] = mapped_column(Text, nullable=False)

    customer_phone: Mapped[str] = mapped_column(Text, nullable=False)

    items: Mapped[List[Dict[str, Any]]] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"),
        nullable=False,
    )

    total_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

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
            "status IN ('pending', 'confirmed', 'preparing', 'ready', 'completed', 'cancelled')",
            name="ck_orders_status",
        ),
        CheckConstraint("total_amount > 0", name="ck_orders_total_positive"),
        Index("idx_orders_created_at", "created_at"),
        Index("idx_orders_status", "status"),
    )

    def __repr__(self) -> str:
        return (
            f"<Order(id={self.id}, status='{self.status}', "
            f"created_at='{self.created_at}')>"
        )
