"""
Restaurant API — Order Service
===============================

What:  Order placement, listing and status updates.
How:   createOrder checks that every referenced menu item exists, inside
       the request transaction, before the order row is written.
Who:   Called by the order procedures in rpc/procedures.py.

Referential check:
    The distinct menu_item_ids of the order are looked up with a shared
    row lock (FOR SHARE on PostgreSQL; SQLite has no row locks and the
    clause is omitted). A concurrent deleteMenuItem on one of those rows
    blocks until this transaction ends, so an order never commits against
    an item deleted in between. Repeating an id within one order is fine.
"""

import logging
from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_api.exceptions import ReferentialIntegrityError
from restaurant_api.models.menu_item import MenuItem
from restaurant_api.models.order import Order
from restaurant_api.schemas.order import (
    CreateOrderInput,
    OrderResponse,
    OrderStatus,
    UpdateOrderStatusInput,
)
from restaurant_api.services.conversions import (
    money_to_column,
    order_from_row,
    order_items_to_column,
)
from restaurant_api.services.persistence import logs_persistence_errors

logger = logging.getLogger(__name__)


class OrderService:
    """Business logic layer for customer orders. Orders are never deleted."""

    @logs_persistence_errors("Order creation")
    async def create_order(self, db: AsyncSession, data: CreateOrderInput) -> OrderResponse:
        """
        Place an order with status 'pending'.

        total_amount is stored as sent; it is not recomputed from prices.

        Raises:
            ReferentialIntegrityError: One or more menu_item_ids do not exist.
                Nothing is written in that case.
        """
        requested_ids = {item.menu_item_id for item in data.items}

        result = await db.execute(
            select(MenuItem.id)
            .where(MenuItem.id.in_(requested_ids))
            .with_for_update(read=True)
        )
        found_ids = set(result.scalars().all())

        missing = requested_ids - found_ids
        if missing:
            logger.warning("Order rejected, unknown menu items: %s", sorted(missing))
            raise ReferentialIntegrityError(missing)

        order = Order(
            customer_name=data.customer_name,
            customer_phone=data.customer_phone,
            items=order_items_to_column(data.items),
            total_amount=money_to_column(data.total_amount),
            status=OrderStatus.PENDING.value,
        )
        db.add(order)
        await db.flush()
        logger.info(
            "Order created: %s (%d lines, total %s)",
            order.id, len(data.items), order.total_amount,
        )
        return order_from_row(order)

    @logs_persistence_errors("Fetching orders")
    async def list_orders(self, db: AsyncSession) -> List[OrderResponse]:
        """All orders, newest first."""
        result = await db.execute(
            select(Order).order_by(desc(Order.created_at), desc(Order.id))
        )
        return [order_from_row(row) for row in result.scalars().all()]

    @logs_persistence_errors("Fetching orders by status")
    async def list_orders_by_status(
        self, db: AsyncSession, status: OrderStatus
    ) -> List[OrderResponse]:
        result = await db.execute(
            select(Order)
            .where(Order.status == status.value)
            .order_by(desc(Order.created_at), desc(Order.id))
        )
        return [order_from_row(row) for row in result.scalars().all()]

    @logs_persistence_errors("Fetching order by id")
    async def get_order(self, db: AsyncSession, order_id: int) -> Optional[OrderResponse]:
        order = await db.get(Order, order_id)
        return order_from_row(order) if order is not None else None

    @logs_persistence_errors("Order status update")
    async def update_order_status(
        self, db: AsyncSession, data: UpdateOrderStatusInput
    ) -> Optional[OrderResponse]:
        """Overwrite the status. Any status may follow any other."""
        order = await db.get(Order, data.id)
        if order is None:
            return None

        previous = order.status
        order.status = data.status.value
        await db.flush()
        logger.info("Order %s status: %s -> %s", order.id, previous, order.status)
        return order_from_row(order)


# ── Singleton Instance ────────────────────────────────────────────────────
order_service = OrderService()
