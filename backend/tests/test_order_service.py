"""
Restaurant API — Order Service Tests
=====================================

What we test:
    ✅ Orders are created pending with the total stored verbatim
    ✅ Unknown menu item ids reject the whole order, nothing persisted
    ✅ Repeated menu item ids within one order are accepted
    ✅ Listings are newest first, with status filtering
    ✅ Status updates touch only the status
"""

import pytest

from restaurant_api.exceptions import ReferentialIntegrityError
from restaurant_api.schemas.menu_item import CreateMenuItemInput
from restaurant_api.schemas.order import (
    CreateOrderInput,
    OrderStatus,
    UpdateOrderStatusInput,
)
from restaurant_api.services.menu_service import menu_service
from restaurant_api.services.order_service import OrderService


async def _menu_item(db, name="Burger", price=12.0):
    return await menu_service.create_menu_item(
        db, CreateMenuItemInput(name=name, category="food", price=price)
    )


def _order_input(items, total=25.0, name="Joana"):
    return CreateOrderInput(
        customer_name=name,
        customer_phone="555-0101",
        items=items,
        total_amount=total,
    )


class TestCreateOrder:

    def setup_method(self):
        self.service = OrderService()

    @pytest.mark.asyncio
    async def test_create_order_is_pending(self, db_session):
        burger = await _menu_item(db_session)

        order = await self.service.create_order(
            db_session, _order_input([{"menu_item_id": burger.id, "quantity": 2}], total=24.0)
        )

        assert order.id is not None
        assert order.status == OrderStatus.PENDING
        assert order.total_amount == 24.0
        assert [(i.menu_item_id, i.quantity) for i in order.items] == [(burger.id, 2)]

    @pytest.mark.asyncio
    async def test_total_is_not_recomputed(self, db_session):
        burger = await _menu_item(db_session, price=12.0)

        order = await self.service.create_order(
            db_session, _order_input([{"menu_item_id": burger.id, "quantity": 1}], total=99.99)
        )

        assert order.total_amount == 99.99

    @pytest.mark.asyncio
    async def test_missing_menu_item_rejects_order(self, db_session):
        burger = await _menu_item(db_session)

        with pytest.raises(ReferentialIntegrityError) as exc_info:
            await self.service.create_order(
                db_session,
                _order_input([
                    {"menu_item_id": burger.id, "quantity": 1},
                    {"menu_item_id": 777, "quantity": 1},
                    {"menu_item_id": 555, "quantity": 3},
                ]),
            )

        assert exc_info.value.missing_ids == [555, 777]
        assert await self.service.list_orders(db_session) == []

    @pytest.mark.asyncio
    async def test_repeated_menu_item_id_is_accepted(self, db_session):
        burger = await _menu_item(db_session)

        order = await self.service.create_order(
            db_session,
            _order_input([
                {"menu_item_id": burger.id, "quantity": 1},
                {"menu_item_id": burger.id, "quantity": 2},
            ]),
        )

        assert len(order.items) == 2


class TestListOrders:

    def setup_method(self):
        self.service = OrderService()

    @pytest.mark.asyncio
    async def test_newest_first(self, db_session):
        burger = await _menu_item(db_session)
        line = [{"menu_item_id": burger.id, "quantity": 1}]
        first = await self.service.create_order(db_session, _order_input(line, name="First"))
        second = await self.service.create_order(db_session, _order_input(line, name="Second"))

        orders = await self.service.list_orders(db_session)

        assert [o.id for o in orders] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_filter_by_status(self, db_session):
        burger = await _menu_item(db_session)
        line = [{"menu_item_id": burger.id, "quantity": 1}]
        a = await self.service.create_order(db_session, _order_input(line))
        b = await self.service.create_order(db_session, _order_input(line))
        await self.service.update_order_status(
            db_session, UpdateOrderStatusInput(id=a.id, status="ready")
        )

        ready = await self.service.list_orders_by_status(db_session, OrderStatus.READY)
        pending = await self.service.list_orders_by_status(db_session, OrderStatus.PENDING)

        assert [o.id for o in ready] == [a.id]
        assert [o.id for o in pending] == [b.id]

    @pytest.mark.asyncio
    async def test_get_missing_order_returns_none(self, db_session):
        assert await self.service.get_order(db_session, 42) is None


class TestUpdateOrderStatus:

    def setup_method(self):
        self.service = OrderService()

    @pytest.mark.asyncio
    async def test_only_status_changes(self, db_session):
        burger = await _menu_item(db_session)
        order = await self.service.create_order(
            db_session, _order_input([{"menu_item_id": burger.id, "quantity": 3}], total=36.0)
        )

        updated = await self.service.update_order_status(
            db_session, UpdateOrderStatusInput(id=order.id, status="confirmed")
        )

        assert updated.status == OrderStatus.CONFIRMED
        assert updated.model_dump(exclude={"status"}) == order.model_dump(exclude={"status"})

    @pytest.mark.asyncio
    async def test_any_status_may_follow_any_other(self, db_session):
        burger = await _menu_item(db_session)
        order = await self.service.create_order(
            db_session, _order_input([{"menu_item_id": burger.id, "quantity": 1}])
        )

        for status in ("completed", "pending", "cancelled", "preparing"):
            updated = await self.service.update_order_status(
                db_session, UpdateOrderStatusInput(id=order.id, status=status)
            )
            assert updated.status.value == status

    @pytest.mark.asyncio
    async def test_missing_order_returns_none(self, db_session):
        result = await self.service.update_order_status(
            db_session, UpdateOrderStatusInput(id=31337, status="ready")
        )
        assert result is None

    @pytest.mark.asyncio
    async def test_deleting_menu_item_keeps_orders(self, db_session):
        burger = await _menu_item(db_session)
        order = await self.service.create_order(
            db_session, _order_input([{"menu_item_id": burger.id, "quantity": 1}])
        )

        await menu_service.delete_menu_item(db_session, burger.id)

        kept = await self.service.get_order(db_session, order.id)
        assert kept.items[0].menu_item_id == burger.id
