# reservation_engine/domain/state_machine.py

from enum import Enum
from typing import Dict, FrozenSet

from reservation_engine.domain.exceptions import InvalidStateTransitionError


class BookingStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


# Verb used in "Booking cannot be <verb>" messages, keyed by target state.
_TRANSITION_ACTIONS: Dict[BookingStatus, str] = {
    BookingStatus.CONFIRMED: "confirmed",
    BookingStatus.CANCELLED: "cancelled",
    BookingStatus.COMPLETED: "completed",
}


class BookingStateMachine:
    """
    Lifecycle rules for a stay booking.

    A booking starts PENDING, is CONFIRMED once paid and reserved, and ends
    either CANCELLED (from PENDING or CONFIRMED) or COMPLETED (from
    CONFIRMED, after check-out). Both end states accept nothing further.
    """

    _NEXT_STATES: Dict[BookingStatus, FrozenSet[BookingStatus]] = {
        BookingStatus.PENDING: frozenset(
            {BookingStatus.CONFIRMED, BookingStatus.CANCELLED}
        ),
        BookingStatus.CONFIRMED: frozenset(
            {BookingStatus.COMPLETED, BookingStatus.CANCELLED}
        ),
        BookingStatus.CANCELLED: frozenset(),
        BookingStatus.COMPLETED: frozenset(),
    }

    @classmethod
    def can_transition(
        cls,
        current: BookingStatus,
        target: BookingStatus,
    ) -> bool:
        cls._require_status(current)
        cls._require_status(target)
        return target in cls._NEXT_STATES[current]

    @classmethod
    def validate_transition(
        cls,
        current: BookingStatus,
        target: BookingStatus,
    ) -> None:
        """Raises InvalidStateTransitionError naming the refused action."""
        if cls.can_transition(current, target):
            return

        raise InvalidStateTransitionError(
            from_state=current.value,
            to_state=target.value,
            action=_TRANSITION_ACTIONS.get(target),
        )

    @classmethod
    def is_terminal(cls, status: BookingStatus) -> bool:
        cls._require_status(status)
        return not cls._NEXT_STATES[status]

    @staticmethod
    def _require_status(status: BookingStatus) -> None:
        if not isinstance(status, BookingStatus):
            raise TypeError(f"Expected BookingStatus, got {type(status)}")
