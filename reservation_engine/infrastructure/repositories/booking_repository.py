# reservation_engine/infrastructure/repositories/booking_repository.py

from datetime import datetime
from decimal import Decimal
from typing import Dict

from reservation_engine.domain.models import Booking
from reservation_engine.domain.state_machine import BookingStatus


class BookingRepository:
    """In-memory booking store keyed by booking id, in insertion order."""

    def __init__(self):
        self._bookings: Dict[str, Booking] = {}

    def get_by_id(
        self,
        booking_id: str,
    ) -> Booking | None:

        return self._bookings.get(booking_id)

    def list_by_user(self, user_id: str) -> list[Booking]:
        return [b for b in self._bookings.values() if b.user_id == user_id]

    def list_by_item(self, item_id: str) -> list[Booking]:
        return [b for b in self._bookings.values() if b.item_id == item_id]

    def create_booking(
        self,
        user_id: str,
        item_id: str,
        start_date: datetime,
        end_date: datetime,
        total_price: Decimal,
        created_at: datetime,
    ) -> Booking:

        booking = Booking(
            user_id=user_id,
            item_id=item_id,
            start_date=start_date,
            end_date=end_date,
            total_price=total_price,
            status=BookingStatus.PENDING,
            created_at=created_at,
            updated_at=created_at,
        )

        self._bookings[booking.id] = booking
        return booking

    def update_status(
        self,
        booking: Booking,
        new_status: BookingStatus,
        updated_at: datetime,
        payment_id: str | None = None,
    ) -> None:

        if payment_id is not None:
            booking.payment_id = payment_id
        booking.status = new_status
        booking.updated_at = updated_at
