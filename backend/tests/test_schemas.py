"""
Restaurant API — Input Schema Tests
====================================

What we test:
    ✅ Money: positive, finite, at most two decimals, fits NUMERIC(10,2)
    ✅ Enum fields reject unknown labels
    ✅ Partial updates: absent vs null, non-nullable columns
    ✅ Rating range and non-empty strings
"""

import pytest
from pydantic import ValidationError

from restaurant_api.schemas import testimonial as testimonial_schemas
from restaurant_api.schemas.menu_item import CreateMenuItemInput, UpdateMenuItemInput
from restaurant_api.schemas.order import CreateOrderInput
from restaurant_api.schemas.reservation import CreateReservationInput, UpdateReservationStatusInput


def _menu(**overrides):
    data = {"name": "Soup", "category": "food", "price": 9.5}
    data.update(overrides)
    return CreateMenuItemInput(**data)


class TestMoneyValidation:

    @pytest.mark.parametrize("price", [0.01, 9.5, 10, 99999999.99])
    def test_accepts_representable_amounts(self, price):
        assert _menu(price=price).price == price

    @pytest.mark.parametrize("price", [0, -1, 1.234, float("inf"), float("nan"), 100000000])
    def test_rejects_invalid_amounts(self, price):
        with pytest.raises(ValidationError):
            _menu(price=price)


class TestMenuItemInput:

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            _menu(category="desserts")

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            _menu(name="")

    def test_update_tracks_only_sent_fields(self):
        update = UpdateMenuItemInput.model_validate({"id": 1, "name": "Stew", "image_url": None})
        assert update.changes() == {"name": "Stew", "image_url": None}

    def test_update_without_fields_has_no_changes(self):
        assert UpdateMenuItemInput(id=1).changes() == {}

    @pytest.mark.parametrize("field", ["name", "category", "price"])
    def test_update_rejects_null_for_required_column(self, field):
        with pytest.raises(ValidationError):
            UpdateMenuItemInput.model_validate({"id": 1, field: None})

    def test_update_requires_id(self):
        with pytest.raises(ValidationError):
            UpdateMenuItemInput.model_validate({"name": "Stew"})

    @pytest.mark.parametrize("item_id", [0, -1, 2**31])
    def test_update_id_outside_column_range_rejected(self, item_id):
        with pytest.raises(ValidationError):
            UpdateMenuItemInput.model_validate({"id": item_id, "name": "Stew"})


class TestOrderInput:

    def _order(self, **overrides):
        data = {
            "customer_name": "Joana",
            "customer_phone": "555-0101",
            "items": [{"menu_item_id": 1, "quantity": 1}],
            "total_amount": 10.0,
        }
        data.update(overrides)
        return CreateOrderInput(**data)

    def test_valid_order(self):
        assert self._order().items[0].menu_item_id == 1

    def test_empty_items_rejected(self):
        with pytest.raises(ValidationError):
            self._order(items=[])

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError):
            self._order(items=[{"menu_item_id": 1, "quantity": 0}])

    def test_menu_item_id_outside_column_range_rejected(self):
        with pytest.raises(ValidationError):
            self._order(items=[{"menu_item_id": 2**31, "quantity": 1}])

    def test_total_must_be_positive(self):
        with pytest.raises(ValidationError):
            self._order(total_amount=0)


class TestReservationInput:

    def test_party_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            CreateReservationInput(
                customer_name="A", customer_phone="1", number_of_people=0,
                date="2024-06-01", time="19:00",
            )

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            UpdateReservationStatusInput(id=1, status="seated")


class TestTestimonialInput:

    @pytest.mark.parametrize("rating", [0, 6, 4.5])
    def test_rating_outside_range_rejected(self, rating):
        with pytest.raises(ValidationError):
            testimonial_schemas.CreateTestimonialInput(
                customer_name="A", review="B", rating=rating
            )

    def test_date_is_optional(self):
        data = testimonial_schemas.CreateTestimonialInput(customer_name="A", review="B", rating=5)
        assert data.date is None

    def test_update_rejects_null_date(self):
        with pytest.raises(ValidationError):
            testimonial_schemas.UpdateTestimonialInput.model_validate({"id": 1, "date": None})
