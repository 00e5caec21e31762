"""
Restaurant API — Reservation Service Tests
===========================================
"""

import pytest

from restaurant_api.schemas.reservation import (
    CreateReservationInput,
    ReservationStatus,
    UpdateReservationStatusInput,
)
from restaurant_api.services.reservation_service import ReservationService


def _input(date, time, name="Guest", people=2):
    return CreateReservationInput(
        customer_name=name,
        customer_phone="555-0199",
        number_of_people=people,
        date=date,
        time=time,
    )


class TestCreateReservation:

    def setup_method(self):
        self.service = ReservationService()

    @pytest.mark.asyncio
    async def test_created_pending_with_text_date_and_time(self, db_session, reservation_data):
        reservation = await self.service.create_reservation(
            db_session, CreateReservationInput(**reservation_data)
        )

        assert reservation.status == ReservationStatus.PENDING
        assert reservation.date == "2024-06-01"
        assert reservation.time == "19:30"
        assert reservation.number_of_people == 4

    @pytest.mark.asyncio
    async def test_overlapping_reservations_are_allowed(self, db_session, reservation_data):
        first = await self.service.create_reservation(
            db_session, CreateReservationInput(**reservation_data)
        )
        second = await self.service.create_reservation(
            db_session, CreateReservationInput(**reservation_data)
        )

        assert first.id != second.id


class TestListReservations:

    def setup_method(self):
        self.service = ReservationService()

    @pytest.mark.asyncio
    async def test_sorted_by_date_then_time(self, db_session):
        await self.service.create_reservation(db_session, _input("2024-06-02", "12:00", "C"))
        await self.service.create_reservation(db_session, _input("2024-06-01", "20:00", "B"))
        await self.service.create_reservation(db_session, _input("2024-06-01", "18:30", "A"))

        reservations = await self.service.list_reservations(db_session)

        assert [r.customer_name for r in reservations] == ["A", "B", "C"]

    @pytest.mark.asyncio
    async def test_by_date_is_exact_match_sorted_by_time(self, db_session):
        await self.service.create_reservation(db_session, _input("2024-06-01", "21:00", "Late"))
        await self.service.create_reservation(db_session, _input("2024-06-01", "12:15", "Early"))
        await self.service.create_reservation(db_session, _input("2024-06-02", "13:00", "Other"))

        reservations = await self.service.list_reservations_by_date(db_session, "2024-06-01")

        assert [r.customer_name for r in reservations] == ["Early", "Late"]
        assert await self.service.list_reservations_by_date(db_session, "2024-6-1") == []

    @pytest.mark.asyncio
    async def test_by_status(self, db_session):
        a = await self.service.create_reservation(db_session, _input("2024-06-01", "19:00"))
        await self.service.create_reservation(db_session, _input("2024-06-01", "20:00"))
        await self.service.update_reservation_status(
            db_session, UpdateReservationStatusInput(id=a.id, status="cancelled")
        )

        cancelled = await self.service.list_reservations_by_status(
            db_session, ReservationStatus.CANCELLED
        )

        assert [r.id for r in cancelled] == [a.id]


class TestUpdateReservationStatus:

    def setup_method(self):
        self.service = ReservationService()

    @pytest.mark.asyncio
    async def test_only_status_changes(self, db_session, reservation_data):
        created = await self.service.create_reservation(
            db_session, CreateReservationInput(**reservation_data)
        )

        updated = await self.service.update_reservation_status(
            db_session, UpdateReservationStatusInput(id=created.id, status="confirmed")
        )

        assert updated.status == ReservationStatus.CONFIRMED
        assert updated.model_dump(exclude={"status"}) == created.model_dump(exclude={"status"})

    @pytest.mark.asyncio
    async def test_missing_returns_none(self, db_session):
        assert await self.service.get_reservation(db_session, 8) is None
        result = await self.service.update_reservation_status(
            db_session, UpdateReservationStatusInput(id=8, status="confirmed")
        )
        assert result is None
