# reservation_engine/infrastructure/notifications/logging_notifier.py

import logging

from reservation_engine.application.ports import NotificationKind, Notifier


logger = logging.getLogger(__name__)


class LoggingNotifier(Notifier):
    """Delivers lifecycle notifications to the application log."""

    def notify(self, kind: NotificationKind, user_id: str, booking_id: str) -> bool:
        logger.info(
            "Notification: Booking %s %s for user %s",
            booking_id,
            NotificationKind(kind).value,
            user_id,
        )
        return True
