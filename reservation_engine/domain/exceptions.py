# reservation_engine/domain/exceptions.py


class ReservationEngineError(Exception):
    """
    Base exception for all domain-level errors
    inside the Reservation Engine.
    """


class InvalidDateRangeError(ReservationEngineError):
    """Raised when a booking's start date is not strictly before its end date."""

    def __init__(self, message: str = "Start date must be before end date"):
        super().__init__(message)


class InvalidPriceError(ReservationEngineError):
    """Raised when a booking's total price is not positive."""

    def __init__(self, message: str = "Total price must be greater than zero"):
        super().__init__(message)


class ItemUnavailableError(ReservationEngineError):
    """Raised when an item is not available for the requested dates."""

    def __init__(
        self,
        message: str = "Item is not available for the selected dates",
    ):
        super().__init__(message)


class BookingNotFoundError(ReservationEngineError):

    def __init__(self, booking_id: str):
        self.booking_id = booking_id
        super().__init__(f"Booking not found: {booking_id}")


class InvalidStateTransitionError(ReservationEngineError):
    """
    Raised when an illegal booking state transition is attempted.
    """

    def __init__(self, from_state: str, to_state: str, action: str | None = None):
        self.from_state = from_state
        self.to_state = to_state
        self.action = action

        if action:
            message = (
                f"Booking cannot be {action}: "
                f"{from_state} -> {to_state}"
            )
        else:
            message = (
                f"Illegal state transition attempted: "
                f"{from_state} -> {to_state}"
            )
        super().__init__(message)


class TooEarlyError(ReservationEngineError):

    def __init__(self, message: str = "end date has not passed yet"):
        super().__init__(message)


class InventoryUnavailableError(ReservationEngineError):
    """Raised by the ledger when an interval cannot be reserved."""

    def __init__(
        self,
        message: str = "Item is not available for the selected dates",
    ):
        super().__init__(message)


class ReservationNotFoundError(ReservationEngineError):
    """Raised by the ledger when no exact reservation matches a release."""

    def __init__(self, message: str = "Reservation not found"):
        super().__init__(message)


class ItemNotFoundError(ReservationEngineError):

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"Inventory item not found: {item_id}")


class ExternalServiceError(ReservationEngineError):
    """Raised when an external collaborator fails."""


class CollaboratorTimeoutError(ExternalServiceError):

    def __init__(self, operation: str, timeout: float):
        self.operation = operation
        self.timeout = timeout
        super().__init__(f"{operation} did not complete within {timeout:.1f}s")


class PaymentError(ExternalServiceError):
    """Raised when the payment gateway rejects a capture or refund."""


class InvalidPaymentAmountError(PaymentError):

    def __init__(self, message: str = "Payment amount must be greater than zero"):
        super().__init__(message)


class InvalidPaymentMethodError(PaymentError):

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"Invalid payment method: {method}")


class InvalidPaymentIdError(PaymentError):

    def __init__(self, payment_id: str):
        self.payment_id = payment_id
        super().__init__(f"Invalid payment ID: {payment_id}")


class RefundFailedError(PaymentError):

    def __init__(self, payment_id: str):
        self.payment_id = payment_id
        super().__init__(f"Refund was not accepted for payment {payment_id}")
