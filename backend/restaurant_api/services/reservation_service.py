"""
Restaurant API — Reservation Service
=====================================

What:  Table reservations: create, list, filter by status or date, status
       updates.

date and time are compared and sorted as text. ISO formats ("2024-06-01",
"19:30") therefore sort chronologically; anything else sorts lexically.
There is no capacity or double-booking check.
"""

import logging
from typing import List, Optional

from sqlalchemy import asc, select
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_api.models.reservation import Reservation
from restaurant_api.schemas.reservation import (
    CreateReservationInput,
    ReservationResponse,
    ReservationStatus,
    UpdateReservationStatusInput,
)
from restaurant_api.services.conversions import reservation_from_row
from restaurant_api.services.persistence import logs_persistence_errors

logger = logging.getLogger(__name__)


class ReservationService:

    @logs_persistence_errors("Reservation creation")
    async def create_reservation(
        self, db: AsyncSession, data: CreateReservationInput
    ) -> ReservationResponse:
        """Store a reservation request with status 'pending'."""
        reservation = Reservation(
            customer_name=data.customer_name,
            customer_phone=data.customer_phone,
            number_of_people=data.number_of_people,
            date=data.date,
            time=data.time,
            status=ReservationStatus.PENDING.value,
        )
        db.add(reservation)
        await db.flush()
        logger.info(
            "Reservation created: %s for %d on %s %s",
            reservation.id, reservation.number_of_people, reservation.date, reservation.time,
        )
        return reservation_from_row(reservation)

    @logs_persistence_errors("Fetching reservations")
    async def list_reservations(self, db: AsyncSession) -> List[ReservationResponse]:
        """All reservations, earliest date then earliest time first."""
        result = await db.execute(
            select(Reservation).order_by(
                asc(Reservation.date), asc(Reservation.time), asc(Reservation.id)
            )
        )
        return [reservation_from_row(row) for row in result.scalars().all()]

    @logs_persistence_errors("Fetching reservations by status")
    async def list_reservations_by_status(
        self, db: AsyncSession, status: ReservationStatus
    ) -> List[ReservationResponse]:
        result = await db.execute(
            select(Reservation)
            .where(Reservation.status == status.value)
            .order_by(asc(Reservation.date), asc(Reservation.time), asc(Reservation.id))
        )
        return [reservation_from_row(row) for row in result.scalars().all()]

    @logs_persistence_errors("Fetching reservations by date")
    async def list_reservations_by_date(
        self, db: AsyncSession, date: str
    ) -> List[ReservationResponse]:
        """Reservations whose date text equals `date` exactly, by time."""
        result = await db.execute(
            select(Reservation)
            .where(Reservation.date == date)
            .order_by(asc(Reservation.time), asc(Reservation.id))
        )
        return [reservation_from_row(row) for row in result.scalars().all()]

    @logs_persistence_errors("Fetching reservation by id")
    async def get_reservation(
        self, db: AsyncSession, reservation_id: int
    ) -> Optional[ReservationResponse]:
        reservation = await db.get(Reservation, reservation_id)
        return reservation_from_row(reservation) if reservation is not None else None

    @logs_persistence_errors("Reservation status update")
    async def update_reservation_status(
        self, db: AsyncSession, data: UpdateReservationStatusInput
    ) -> Optional[ReservationResponse]:
        reservation = await db.get(Reservation, data.id)
        if reservation is None:
            return None

        previous = reservation.status
        reservation.status = data.status.value
        await db.flush()
        logger.info(
            "Reservation %s status: %s -> %s", reservation.id, previous, reservation.status
        )
        return reservation_from_row(reservation)


# ── Singleton Instance ────────────────────────────────────────────────────
reservation_service = ReservationService()
