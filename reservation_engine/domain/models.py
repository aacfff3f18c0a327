# reservation_engine/domain/models.py

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

from pydantic import BaseModel, Field, model_validator

from reservation_engine.domain.state_machine import BookingStateMachine, BookingStatus


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Booking(BaseModel):
    """
    Booking record reflecting domain state.
    Domain controls transitions.
    The booking registry owns the stored instance.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    user_id: str
    item_id: str
    start_date: datetime
    end_date: datetime
    total_price: Decimal = Field(gt=0)
    status: BookingStatus = BookingStatus.PENDING
    payment_id: str | None = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def _check_date_range(self) -> "Booking":
        if self.start_date >= self.end_date:
            raise ValueError("start_date must be before end_date")
        return self

    @property
    def is_active(self) -> bool:
        return not BookingStateMachine.is_terminal(self.status)
