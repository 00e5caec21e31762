"""Create restaurant tables

Revision ID: 001
Revises: None
Create Date: 2024-06-01 00:00:00.000000+00:00

What:  Creates menu_items, orders, reservations and testimonials.
How:   Money as NUMERIC(10,2); order lines as JSON (JSONB on PostgreSQL);
       category/status/rating guarded by CHECK constraints instead of
       database enum types.

Rollback: downgrade() drops all four tables (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "menu_items",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "category",
            sa.String(20),
            nullable=False,
            comment="food, drinks or packages",
        ),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "category IN ('food', 'drinks', 'packages')",
            name="ck_menu_items_category",
        ),
        sa.CheckConstraint("price > 0", name="ck_menu_items_price_positive"),
    )
    # Serves both the full listing and the per-category listing
    op.create_index("idx_menu_items_category_name", "menu_items", ["category", "name"])

    op.create_table(
        "orders",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("customer_name", sa.Text(), nullable=False),
        sa.Column("customer_phone", sa.Text(), nullable=False),
        sa.Column(
            "items",
            sa.JSON().with_variant(postgresql.JSONB(), "postgresql"),
            nullable=False,
            comment='[{"menu_item_id": int, "quantity": int}, ...]; ids are not foreign keys',
        ),
        sa.Column("total_amount", sa.Numeric(10, 2), nullable=False),
        sa.Column(
            "status",
            sa.String(20),
            nullable=False,
            server_default=sa.text("'pending'"),
        ),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('pending', 'confirmed', 'preparing', 'ready', 'completed', 'cancelled')",
            name="ck_orders_status",
        ),
        sa.CheckConstraint("total_amount > 0", name="ck_orders_total_positive"),
    )
    op.create_index("idx_orders_created_at", "orders", ["created_at"])
    op.create_index("idx_orders_status", "orders", ["status"])

    op.create_table(
        "reservations",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("customer_name", sa.Text(), nullable=False),
        sa.Column("customer_phone", sa.Text(), nullable=False),
        sa.Column("number_of_people", sa.Integer(), nullable=False),
        sa.Column("date", sa.Text(), nullable=False, comment="Plain text, e.g. 2024-06-01"),
        sa.Column("time", sa.Text(), nullable=False, comment="Plain text, e.g. 19:30"),
        sa.Column(
            "status",
            sa.String(20),
            nullable=False,
            server_default=sa.text("'pending'"),
        ),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('pending', 'confirmed', 'cancelled')",
            name="ck_reservations_status",
        ),
        sa.CheckConstraint("number_of_people > 0", name="ck_reservations_party_size"),
    )
    op.create_index("idx_reservations_date_time", "reservations", ["date", "time"])

    op.create_table(
        "testimonials",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("customer_name", sa.Text(), nullable=False),
        sa.Column("review", sa.Text(), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column(
            "date",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            comment="Review date shown to visitors",
        ),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="ck_testimonials_rating_range"),
    )
    op.create_index("idx_testimonials_date", "testimonials", ["date"])


def downgrade() -> None:
    op.drop_index("idx_testimonials_date", table_name="testimonials")
    op.drop_table("testimonials")
    op.drop_index("idx_reservations_date_time", table_name="reservations")
    op.drop_table("reservations")
    op.drop_index("idx_orders_status", table_name="orders")
    op.drop_index("idx_orders_created_at", table_name="orders")
    op.drop_table("orders")
    op.drop_index("idx_menu_items_category_name", table_name="menu_items")
    op.drop_table("menu_items")
