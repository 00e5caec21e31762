"""
Restaurant API — Menu Item Schemas
===================================

What:  Pydantic models for the menu catalog procedures.
Who:   createMenuItem / updateMenuItem inputs, every menu read output.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from restaurant_api.schemas.common import Money, NonEmptyStr, PartialUpdateInput


class MenuCategory(str, Enum):
    """Closed set of menu categories, in display order."""

    FOOD = "food"
    DRINKS = "drinks"
    PACKAGES = "packages"


# Position of each category in the full menu listing
CATEGORY_ORDER = {category.value: position for position, category in enumerate(MenuCategory)}


class MenuItemResponse(BaseModel):
    """A stored menu item with its price as a plain number."""

    id: int
    name: str
    description: Optional[str] = None
    category: MenuCategory
    price: float = Field(description="Price in currency units, two decimal places")
    image_url: Optional[str] = None
    created_at: datetime


class CreateMenuItemInput(BaseModel):
    name: NonEmptyStr
    description: Optional[str] = None
    category: MenuCategory
    price: Money
    image_url: Optional[str] = None


class UpdateMenuItemInput(PartialUpdateInput):
    """
    Partial update: only fields present in the request body are written.

    `description` and `image_url` may be sent as null to clear them.
    """

    NON_NULLABLE = ("name", "category", "price")

    name: Optional[NonEmptyStr] = None
    description: Optional[str] = None
    category: Optional[MenuCategory] = None
    price: Optional[Money] = None
    image_url: Optional[str] = None
