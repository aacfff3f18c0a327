import logging
import threading
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable

from reservation_engine.application.ports import NotificationKind, Notifier, PaymentGateway
from reservation_engine.domain.exceptions import (
    BookingNotFoundError,
    CollaboratorTimeoutError,
    InvalidDateRangeError,
    InvalidPriceError,
    InventoryUnavailableError,
    ItemUnavailableError,
    RefundFailedError,
    TooEarlyError,
)
from reservation_engine.domain.models import Booking, utc_now
from reservation_engine.domain.state_machine import BookingStateMachine, BookingStatus
from reservation_engine.infrastructure import settings
from reservation_engine.infrastructure.repositories.booking_repository import BookingRepository
from reservation_engine.infrastructure.repositories.inventory_ledger import InventoryLedger


logger = logging.getLogger(__name__)


class BookingService:
    """
    Application service coordinating the booking lifecycle.

    Every mutating operation runs under a single registry lock. Payment and
    notification calls are awaited with a per-call timeout; notification
    failures are logged and never fail the operation.
    """

    def __init__(
        self,
        inventory: InventoryLedger,
        payment_gateway: PaymentGateway,
        notifier: Notifier,
        booking_repository: BookingRepository | None = None,
        clock: Callable[[], datetime] = utc_now,
        collaborator_timeout: float = settings.COLLABORATOR_TIMEOUT_SECONDS,
        max_workers: int = settings.COLLABORATOR_MAX_WORKERS,
    ):
        self.inventory = inventory
        self.payment_gateway = payment_gateway
        self.notifier = notifier
        self.booking_repository = booking_repository or BookingRepository()
        self.collaborator_timeout = collaborator_timeout

        self._clock = clock
        self._lock = threading.RLock()
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="booking-collaborator",
        )

    def __enter__(self) -> "BookingService":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)

    # -----------------------------
    # Lifecycle operations
    # -----------------------------
    def create_booking(
        self,
        user_id: str,
        item_id: str,
        start_date: datetime,
        end_date: datetime,
        total_price: Decimal | int | float,
    ) -> Booking:
        if start_date >= end_date:
            raise InvalidDateRangeError()

        price = _to_price(total_price)

        with self._lock:
            # Advisory only: the slot is claimed at confirmation time.
            if not self.inventory.check_availability(item_id, start_date, end_date):
                raise ItemUnavailableError()

            booking = self.booking_repository.create_booking(
                user_id=user_id,
                item_id=item_id,
                start_date=start_date,
                end_date=end_date,
                total_price=price,
                created_at=self._clock(),
            )
            logger.info(
                "Booking %s created for user %s on %s (%s -> %s).",
                booking.id,
                user_id,
                item_id,
                start_date,
                end_date,
            )

            self._notify(NotificationKind.CREATED, booking)
            return booking.model_copy()

    def confirm_booking(
        self,
        booking_id: str,
        payment_method: str,
    ) -> Booking:
        with self._lock:
            booking = self._get_or_raise(booking_id)
            BookingStateMachine.validate_transition(booking.status, BookingStatus.CONFIRMED)

            payment_id = self._call_external(
                "payment capture",
                self.payment_gateway.capture,
                booking.user_id,
                booking.total_price,
                payment_method,
            )

            try:
                self.inventory.reserve(booking.item_id, booking.start_date, booking.end_date)
            except InventoryUnavailableError:
                self._refund_uncommitted_capture(booking, payment_id)
                raise

            self._transition(booking, BookingStatus.CONFIRMED, payment_id=payment_id)

            self._notify(NotificationKind.CONFIRMED, booking)
            return booking.model_copy()

    def cancel_booking(self, booking_id: str) -> Booking:
        with self._lock:
            booking = self._get_or_raise(booking_id)
            BookingStateMachine.validate_transition(booking.status, BookingStatus.CANCELLED)

            if booking.status == BookingStatus.CONFIRMED:
                refunded = self._call_external(
                    "payment refund",
                    self.payment_gateway.refund,
                    booking.payment_id,
                )
                if not refunded:
                    raise RefundFailedError(booking.payment_id)
                self.inventory.release(booking.item_id, booking.start_date, booking.end_date)

            self._transition(booking, BookingStatus.CANCELLED)

            self._notify(NotificationKind.CANCELLED, booking)
            return booking.model_copy()

    def complete_booking(self, booking_id: str) -> Booking:
        with self._lock:
            booking = self._get_or_raise(booking_id)
            BookingStateMachine.validate_transition(booking.status, BookingStatus.COMPLETED)

            if self._clock() < booking.end_date:
                raise TooEarlyError()

            self._transition(booking, BookingStatus.COMPLETED)

            self._notify(NotificationKind.COMPLETED, booking)
            return booking.model_copy()

    # -----------------------------
    # Queries
    # -----------------------------
    # Reads share the registry lock so they never observe a booking mid-transition.
    def get_booking(self, booking_id: str) -> Booking | None:
        with self._lock:
            booking = self.booking_repository.get_by_id(booking_id)
            return booking.model_copy() if booking else None

    def get_bookings_by_user(self, user_id: str) -> list[Booking]:
        with self._lock:
            return [b.model_copy() for b in self.booking_repository.list_by_user(user_id)]

    def get_bookings_by_item(self, item_id: str) -> list[Booking]:
        with self._lock:
            return [b.model_copy() for b in self.booking_repository.list_by_item(item_id)]

    def get_active_bookings_by_item(self, item_id: str) -> list[Booking]:
        with self._lock:
            return [
                b.model_copy()
                for b in self.booking_repository.list_by_item(item_id)
                if b.is_active
            ]

    # -----------------------------
    # Internals
    # -----------------------------
    def _get_or_raise(self, booking_id: str) -> Booking:
        booking = self.booking_repository.get_by_id(booking_id)
        if not booking:
            raise BookingNotFoundError(booking_id)
        return booking

    def _transition(
        self,
        booking: Booking,
        to_status: BookingStatus,
        payment_id: str | None = None,
    ) -> None:
        from_status = booking.status
        BookingStateMachine.validate_transition(from_status, to_status)
        self.booking_repository.update_status(
            booking,
            to_status,
            self._clock(),
            payment_id=payment_id,
        )
        logger.info(
            "Booking %s moved %s -> %s.",
            booking.id,
            from_status.value,
            to_status.value,
        )

    def _call_external(self, operation: str, func: Callable[..., Any], *args: Any) -> Any:
        future = self._executor.submit(func, *args)
        try:
            return future.result(timeout=self.collaborator_timeout)
        except FutureTimeoutError as exc:
            future.cancel()
            logger.warning(
                "%s timed out after %.1f seconds.",
                operation,
                self.collaborator_timeout,
            )
            raise CollaboratorTimeoutError(operation, self.collaborator_timeout) from exc

    def _refund_uncommitted_capture(self, booking: Booking, payment_id: str) -> None:
        logger.warning(
            "Reservation failed for booking %s after capture; refunding payment %s.",
            booking.id,
            payment_id,
        )
        try:
            refunded = self._call_external("payment refund", self.payment_gateway.refund, payment_id)
        except Exception:
            logger.exception(
                "Compensating refund failed for booking %s (payment %s).",
                booking.id,
                payment_id,
            )
            return

        if not refunded:
            logger.error(
                "Compensating refund was not accepted for booking %s (payment %s).",
                booking.id,
                payment_id,
            )

    def _notify(self, kind: NotificationKind, booking: Booking) -> None:
        try:
            delivered = self._call_external(
                f"{kind.value} notification",
                self.notifier.notify,
                kind,
                booking.user_id,
                booking.id,
            )
        except Exception:
            logger.warning(
                "Failed to send %s notification for booking %s.",
                kind.value,
                booking.id,
                exc_info=True,
            )
            return

        if not delivered:
            logger.warning(
                "Notifier did not deliver %s notification for booking %s.",
                kind.value,
                booking.id,
            )


def _to_price(total_price: Decimal | int | float) -> Decimal:
    try:
        price = Decimal(str(total_price))
    except InvalidOperation as exc:
        raise InvalidPriceError() from exc

    if not price.is_finite() or price <= 0:
        raise InvalidPriceError()
    return price
