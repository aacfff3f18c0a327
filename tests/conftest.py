from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from reservation_engine.application.booking_service import BookingService
from reservation_engine.application.ports import Notifier, PaymentGateway
from reservation_engine.infrastructure.repositories.inventory_ledger import InventoryLedger


ROOM_IDS = ("hotel_room_101", "hotel_room_102", "hotel_room_103")


def utc(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


class FakeClock:

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock(utc(2022, 12, 1))


@pytest.fixture
def ledger():
    return InventoryLedger(ROOM_IDS)


@pytest.fixture
def payment_gateway():
    gateway = MagicMock(spec=PaymentGateway)
    gateway.capture.return_value = "payment_123"
    gateway.refund.return_value = True
    return gateway


@pytest.fixture
def notifier():
    mock = MagicMock(spec=Notifier)
    mock.notify.return_value = True
    return mock


@pytest.fixture
def service(ledger, payment_gateway, notifier, clock):
    booking_service = BookingService(
        inventory=ledger,
        payment_gateway=payment_gateway,
        notifier=notifier,
        clock=clock,
        collaborator_timeout=2.0,
    )
    yield booking_service
    booking_service.close()
