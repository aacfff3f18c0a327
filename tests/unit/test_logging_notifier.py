import logging

import pytest

from reservation_engine.application.ports import NotificationKind
from reservation_engine.infrastructure.notifications.logging_notifier import LoggingNotifier


@pytest.mark.parametrize("kind", list(NotificationKind))
def test_notify_logs_and_reports_delivery(caplog, kind):
    notifier = LoggingNotifier()

    with caplog.at_level(logging.INFO):
        assert notifier.notify(kind, "user123", "booking-1") is True

    assert f"Booking booking-1 {kind.value} for user user123" in caplog.text


def test_notify_accepts_plain_kind_values(caplog):
    with caplog.at_level(logging.INFO):
        LoggingNotifier().notify("cancelled", "user123", "booking-1")

    assert "Booking booking-1 cancelled" in caplog.text
