# reservation_engine/infrastructure/payments/simulated_gateway.py

import logging
import random
import time
from decimal import Decimal
from typing import Iterable

from reservation_engine.application.ports import PaymentGateway
from reservation_engine.domain.exceptions import (
    InvalidPaymentAmountError,
    InvalidPaymentIdError,
    InvalidPaymentMethodError,
)
from reservation_engine.infrastructure import settings


logger = logging.getLogger(__name__)

PAYMENT_ID_PREFIX = "payment_"


class SimulatedPaymentGateway(PaymentGateway):
    """
    Stand-in for a card processor. Validates the request the way a real
    processor would and hands back a synthetic payment id.
    """

    def __init__(
        self,
        accepted_methods: Iterable[str] = settings.PAYMENT_ACCEPTED_METHODS,
        latency_seconds: float = settings.PAYMENT_SIMULATED_LATENCY_SECONDS,
    ):
        self.accepted_methods = frozenset(m.lower() for m in accepted_methods)
        self.latency_seconds = latency_seconds

    def capture(self, user_id: str, amount: Decimal, method: str) -> str:
        if amount <= 0:
            raise InvalidPaymentAmountError()

        if not self.validate_payment_method(method):
            raise InvalidPaymentMethodError(method)

        self._simulate_latency()

        payment_id = (
            f"{PAYMENT_ID_PREFIX}{int(time.time() * 1000)}_{random.randint(0, 999)}"
        )
        logger.info("Captured %s from user %s via %s (%s).", amount, user_id, method, payment_id)
        return payment_id

    def refund(self, payment_id: str) -> bool:
        if not payment_id.startswith(PAYMENT_ID_PREFIX):
            raise InvalidPaymentIdError(payment_id)

        self._simulate_latency()

        logger.info("Refunded payment %s.", payment_id)
        return True

    def validate_payment_method(self, method: str) -> bool:
        return method.lower() in self.accepted_methods

    def _simulate_latency(self) -> None:
        if self.latency_seconds > 0:
            time.sleep(self.latency_seconds)
