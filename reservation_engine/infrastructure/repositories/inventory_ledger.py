# reservation_engine/infrastructure/repositories/inventory_ledger.py

import logging
import threading
from datetime import datetime
from typing import Dict, Iterable, List

from reservation_engine.domain.exceptions import (
    InventoryUnavailableError,
    ItemNotFoundError,
    ReservationNotFoundError,
)
from reservation_engine.domain.intervals import ReservedInterval


logger = logging.getLogger(__name__)


class _InventoryItem:

    __slots__ = ("item_id", "active", "reservations")

    def __init__(self, item_id: str, active: bool = True):
        self.item_id = item_id
        self.active = active
        self.reservations: List[ReservedInterval] = []


class InventoryLedger:
    """
    Tracks bookable items and the intervals reserved against each one.

    No two intervals stored for the same item ever overlap: reserve()
    re-checks availability under the ledger lock before appending.
    """

    def __init__(self, item_ids: Iterable[str] = ()):
        self._items: Dict[str, _InventoryItem] = {}
        self._lock = threading.Lock()

        for item_id in item_ids:
            self.register_item(item_id)

    # -----------------------------
    # Item management
    # -----------------------------
    def register_item(self, item_id: str, active: bool = True) -> None:
        with self._lock:
            item = self._items.get(item_id)
            if item:
                item.active = active
                return
            self._items[item_id] = _InventoryItem(item_id, active)

    def set_item_active(self, item_id: str, active: bool) -> None:
        with self._lock:
            item = self._items.get(item_id)
            if not item:
                raise ItemNotFoundError(item_id)
            item.active = active
        logger.info("Item %s marked %s.", item_id, "active" if active else "inactive")

    def is_registered(self, item_id: str) -> bool:
        return item_id in self._items

    def list_items(self) -> list[str]:
        return list(self._items)

    def get_reservations(self, item_id: str) -> tuple[ReservedInterval, ...]:
        item = self._items.get(item_id)
        if not item:
            return ()
        return tuple(item.reservations)

    # -----------------------------
    # Availability
    # -----------------------------
    def check_availability(
        self,
        item_id: str,
        start: datetime,
        end: datetime,
    ) -> bool:
        with self._lock:
            return self._is_available(item_id, start, end)

    def reserve(
        self,
        item_id: str,
        start: datetime,
        end: datetime,
    ) -> None:
        with self._lock:
            if not self._is_available(item_id, start, end):
                raise InventoryUnavailableError()

            self._items[item_id].reservations.append(
                ReservedInterval(start=start, end=end)
            )

        logger.info("Reserved %s for %s -> %s.", item_id, start, end)

    def release(
        self,
        item_id: str,
        start: datetime,
        end: datetime,
    ) -> None:
        with self._lock:
            item = self._items.get(item_id)
            if not item:
                raise ReservationNotFoundError()

            for index, interval in enumerate(item.reservations):
                if interval.matches(start, end):
                    del item.reservations[index]
                    break
            else:
                raise ReservationNotFoundError()

        logger.info("Released %s for %s -> %s.", item_id, start, end)

    def _is_available(self, item_id: str, start: datetime, end: datetime) -> bool:
        item = self._items.get(item_id)

        if not item or not item.active:
            return False

        return not any(
            interval.overlaps(start, end) for interval in item.reservations
        )
