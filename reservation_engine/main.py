import logging

from reservation_engine.application.booking_service import BookingService
from reservation_engine.infrastructure import settings
from reservation_engine.infrastructure.notifications.logging_notifier import LoggingNotifier
from reservation_engine.infrastructure.payments.simulated_gateway import SimulatedPaymentGateway
from reservation_engine.infrastructure.repositories.inventory_ledger import InventoryLedger

logger = logging.getLogger(__name__)


def configure_logging(level: str = settings.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def build_booking_service() -> BookingService:
    """Wires the booking service with the default in-process collaborators."""
    inventory = InventoryLedger(settings.INVENTORY_SEED_ITEMS)
    logger.info(
        "Inventory ledger seeded with %s items: %s",
        len(settings.INVENTORY_SEED_ITEMS),
        ", ".join(settings.INVENTORY_SEED_ITEMS),
    )

    return BookingService(
        inventory=inventory,
        payment_gateway=SimulatedPaymentGateway(),
        notifier=LoggingNotifier(),
    )
