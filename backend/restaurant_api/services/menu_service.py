"""
Restaurant API — Menu Service
==============================

What:  Catalog operations: create, list, list by category, get, partial
       update, delete.
How:   Each method performs one persistence call on the caller's session
       and converts rows through services/conversions.py.
Who:   Called by the menu procedures in rpc/procedures.py.

Not-found handling:
    get/update return None and delete returns False for an unknown id.
    None of them raise for a missing row.
"""

import logging
from typing import List, Optional

from sqlalchemy import asc, case, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_api.models.menu_item import MenuItem
from restaurant_api.schemas.menu_item import (
    CATEGORY_ORDER,
    CreateMenuItemInput,
    MenuCategory,
    MenuItemResponse,
    UpdateMenuItemInput,
)
from restaurant_api.services.conversions import (
    changes_to_columns,
    menu_item_from_row,
    money_to_column,
)
from restaurant_api.services.persistence import logs_persistence_errors

logger = logging.getLogger(__name__)


# food, drinks, packages rather than alphabetical
_category_position = case(CATEGORY_ORDER, value=MenuItem.category, else_=len(CATEGORY_ORDER))


class MenuService:
    """
    Business logic layer for the menu catalog.

    Stateless: every method receives the request's AsyncSession. Commit and
    rollback belong to get_db_session(); methods only flush.
    """

    @logs_persistence_errors("Menu item creation")
    async def create_menu_item(
        self, db: AsyncSession, data: CreateMenuItemInput
    ) -> MenuItemResponse:
        """
        Insert a new menu item; created_at is set server-side.

        Returns:
            The stored item with price converted back to a number
        """
        item = MenuItem(
            name=data.name,
            description=data.description,
            category=data.category.value,
            price=money_to_column(data.price),
            image_url=data.image_url,
        )
        db.add(item)
        await db.flush()  # Assigns id without committing transaction
        logger.info("Menu item created: %s (%s)", item.id, item.category)
        return menu_item_from_row(item)

    @logs_persistence_errors("Fetching menu items")
    async def list_menu_items(self, db: AsyncSession) -> List[MenuItemResponse]:
        """All items, by fixed category order then name ascending."""
        result = await db.execute(
            select(MenuItem).order_by(_category_position, asc(MenuItem.name), asc(MenuItem.id))
        )
        return [menu_item_from_row(row) for row in result.scalars().all()]

    @logs_persistence_errors("Fetching menu items by category")
    async def list_menu_items_by_category(
        self, db: AsyncSession, category: MenuCategory
    ) -> List[MenuItemResponse]:
        """Items of one category, name ascending."""
        result = await db.execute(
            select(MenuItem)
            .where(MenuItem.category == category.value)
            .order_by(asc(MenuItem.name), asc(MenuItem.id))
        )
        return [menu_item_from_row(row) for row in result.scalars().all()]

    @logs_persistence_errors("Fetching menu item by id")
    async def get_menu_item(self, db: AsyncSession, item_id: int) -> Optional[MenuItemResponse]:
        item = await db.get(MenuItem, item_id)
        return menu_item_from_row(item) if item is not None else None

    @logs_persistence_errors("Menu item update")
    async def update_menu_item(
        self, db: AsyncSession, data: UpdateMenuItemInput
    ) -> Optional[MenuItemResponse]:
        """
        Partial update of the fields present in `data`.

        Returns:
            None if the id does not exist; the unchanged item when no fields
            were sent; otherwise the updated item.
        """
        item = await db.get(MenuItem, data.id)
        if item is None:
            return None

        columns = changes_to_columns(data.changes())
        if not columns:
            return menu_item_from_row(item)

        for name, value in columns.items():
            setattr(item, name, value)
        await db.flush()
        logger.info("Menu item %s updated: %s", item.id, sorted(columns))
        return menu_item_from_row(item)

    @logs_persistence_errors("Menu item deletion")
    async def delete_menu_item(self, db: AsyncSession, item_id: int) -> bool:
        """Returns True only if a row was actually removed."""
        result = await db.execute(delete(MenuItem).where(MenuItem.id == item_id))
        deleted = result.rowcount > 0
        if deleted:
            logger.info("Menu item %s deleted", item_id)
        return deleted


# ── Singleton Instance ────────────────────────────────────────────────────
menu_service = MenuService()
