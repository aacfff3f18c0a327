# reservation_engine/application/ports.py

from abc import ABC, abstractmethod
from decimal import Decimal
from enum import Enum


class NotificationKind(str, Enum):
    CREATED = "created"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class PaymentGateway(ABC):
    """Captures and refunds booking payments."""

    @abstractmethod
    def capture(self, user_id: str, amount: Decimal, method: str) -> str:
        """
        Charges the user and returns the payment identifier.
        Raises PaymentError if the charge is rejected.
        """
        raise NotImplementedError

    @abstractmethod
    def refund(self, payment_id: str) -> bool:
        raise NotImplementedError


class Notifier(ABC):

    @abstractmethod
    def notify(self, kind: NotificationKind, user_id: str, booking_id: str) -> bool:
        raise NotImplementedError
