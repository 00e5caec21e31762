"""
Restaurant API — MenuItem SQLAlchemy Model
===========================================

What:  ORM model representing the `menu_items` table.
Who:   Used by MenuService for CRUD and by OrderService for the
       line-item existence check; read by Alembic for migrations.

Table Design:
    - Serial integer primary key (ids are shown in order line items)
    - price: NUMERIC(10,2). The driver hands back Decimal/text; conversion
      to a number happens only in services/conversions.py
    - category: short string guarded by a CHECK constraint over the fixed
      set food, drinks, packages
    - created_at: UTC with timezone, set on insert
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, Index, Integer, Numeric, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from restaurant_api.database import Base


class MenuItem(Base):
    """
    A sellable catalog entry.

    Lifecycle:
        1. Created via createMenuItem
        2. Partially updated via updateMenuItem
        3. Deleted via deleteMenuItem (order rows keep the bare id)
    """

    __tablename__ = "menu_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(Text, nullable=False)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)

    # Values: food, drinks, packages
    category: Mapped[str] = mapped_column(String(20), nullable=False)

    # Fixed-precision money; never exposed outside the service layer as Decimal
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        CheckConstraint(
            "category IN ('food', 'drinks', 'packages')",
            name="ck_menu_items_category",
        ),
        CheckConstraint("price > 0", name="ck_menu_items_price_positive"),
        # Category listing: WHERE category = :c ORDER BY name
        Index("idx_menu_items_category_name", "category", "name"),
    )

    def __repr__(self) -> str:
        return f"<MenuItem(id={self.id}, name='{self.name}', category='{self.category}')>"
