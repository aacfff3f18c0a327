from datetime import datetime, timedelta, timezone

from reservation_engine.main import build_booking_service, configure_logging


def _dt(days_from_now: int) -> datetime:
    now_utc = datetime.now(timezone.utc)
    target = now_utc + timedelta(days=days_from_now)
    return target.replace(hour=14, minute=0, second=0, microsecond=0)


def run_demo(service) -> None:
    stay = service.create_booking(
        user_id="guest-1",
        item_id="hotel_room_101",
        start_date=_dt(days_from_now=3),
        end_date=_dt(days_from_now=6),
        total_price=540,
    )
    stay = service.confirm_booking(stay.id, "credit_card")
    print(f"{stay.id}: {stay.status.value} (payment {stay.payment_id})")

    # Pending bookings release nothing when cancelled.
    hold = service.create_booking(
        user_id="guest-2",
        item_id="hotel_room_102",
        start_date=_dt(days_from_now=4),
        end_date=_dt(days_from_now=5),
        total_price=180,
    )
    hold = service.cancel_booking(hold.id)
    print(f"{hold.id}: {hold.status.value}")

    stay = service.cancel_booking(stay.id)
    print(f"{stay.id}: {stay.status.value}")

    active = service.get_active_bookings_by_item("hotel_room_101")
    print(f"Active bookings on hotel_room_101: {len(active)}")


def main() -> None:
    configure_logging()
    with build_booking_service() as service:
        run_demo(service)


if __name__ == "__main__":
    main()
