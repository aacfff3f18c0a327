# reservation_engine/infrastructure/settings.py

import os

from dotenv import load_dotenv

load_dotenv()


def _split_csv(raw: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


# -----------------------------
# Logging
# -----------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


# -----------------------------
# External collaborators
# -----------------------------
COLLABORATOR_TIMEOUT_SECONDS = float(os.getenv("COLLABORATOR_TIMEOUT_SECONDS", "5.0"))
COLLABORATOR_MAX_WORKERS = int(os.getenv("COLLABORATOR_MAX_WORKERS", "4"))

PAYMENT_SIMULATED_LATENCY_SECONDS = float(
    os.getenv("PAYMENT_SIMULATED_LATENCY_SECONDS", "0")
)
PAYMENT_ACCEPTED_METHODS = _split_csv(
    os.getenv(
        "PAYMENT_ACCEPTED_METHODS",
        "credit_card,debit_card,paypal,apple_pay,google_pay",
    )
)


# -----------------------------
# Inventory
# -----------------------------
INVENTORY_SEED_ITEMS = _split_csv(
    os.getenv(
        "INVENTORY_SEED_ITEMS",
        "hotel_room_101,hotel_room_102,hotel_room_103",
    )
)
