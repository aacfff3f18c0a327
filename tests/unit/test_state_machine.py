# tests/unit/test_state_machine.py

import pytest

from reservation_engine.domain.state_machine import BookingStateMachine, BookingStatus
from reservation_engine.domain.exceptions import InvalidStateTransitionError


# ---------------------
# VALID TRANSITIONS
# ---------------------

def test_valid_happy_path():
    assert BookingStateMachine.can_transition(
        BookingStatus.PENDING,
        BookingStatus.CONFIRMED,
    )

    assert BookingStateMachine.can_transition(
        BookingStatus.CONFIRMED,
        BookingStatus.COMPLETED,
    )


def test_cancellation_from_pending_and_confirmed():
    assert BookingStateMachine.can_transition(
        BookingStatus.PENDING,
        BookingStatus.CANCELLED,
    )

    assert BookingStateMachine.can_transition(
        BookingStatus.CONFIRMED,
        BookingStatus.CANCELLED,
    )


def test_pending_cannot_stay_pending():
    assert not BookingStateMachine.can_transition(
        BookingStatus.PENDING,
        BookingStatus.PENDING,
    )


# ---------------------
# INVALID TRANSITIONS
# ---------------------

def test_cannot_complete_without_confirmation():
    with pytest.raises(InvalidStateTransitionError) as exc_info:
        BookingStateMachine.validate_transition(
            BookingStatus.PENDING,
            BookingStatus.COMPLETED,
        )

    assert "cannot be completed" in str(exc_info.value)
    assert exc_info.value.from_state == "PENDING"
    assert exc_info.value.to_state == "COMPLETED"


def test_cannot_confirm_twice():
    with pytest.raises(InvalidStateTransitionError, match="cannot be confirmed"):
        BookingStateMachine.validate_transition(
            BookingStatus.CONFIRMED,
            BookingStatus.CONFIRMED,
        )


@pytest.mark.parametrize("terminal", [BookingStatus.CANCELLED, BookingStatus.COMPLETED])
def test_terminal_states(terminal):
    assert BookingStateMachine.is_terminal(terminal)

    for target in BookingStatus:
        with pytest.raises(InvalidStateTransitionError):
            BookingStateMachine.validate_transition(terminal, target)


def test_non_terminal_states():
    assert not BookingStateMachine.is_terminal(BookingStatus.PENDING)
    assert not BookingStateMachine.is_terminal(BookingStatus.CONFIRMED)


def test_invalid_type_guard():
    with pytest.raises(TypeError):
        BookingStateMachine.validate_transition(
            "PENDING",  # invalid type
            BookingStatus.CONFIRMED,
        )
