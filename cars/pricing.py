# Путь: backend/cars/pricing.py
# Назначение: Расчёт стоимости аренды для бронирования.
# Формула: дни * (ставка в сутки + доплата в сутки), минимум 1 день.
#   • self_without_driver - фиксированная доплата SELF_DRIVER_EXTRA_PER_DAY
#   • out_of_station      - доплата равна суточной ставке (ставка удваивается)

from datetime import date
from decimal import Decimal

from django.conf import settings

from .models import Booking

SELF_DRIVER_EXTRA_PER_DAY = 500


def rental_days(pickup_date: date, dropoff_date: date) -> int:
    days = (dropoff_date - pickup_date).days
    return days if days > 0 else 1


def extra_charge_per_day(option: str, base_rate: Decimal) -> Decimal:
    if option == Booking.Option.SELF_WITHOUT_DRIVER:
        return Decimal(str(getattr(settings, "SELF_DRIVER_EXTRA_PER_DAY", SELF_DRIVER_EXTRA_PER_DAY)))
    if option == Booking.Option.OUT_OF_STATION:
        return base_rate
    return Decimal("0")


def calculate_price(base_rate, option: str, pickup_date: date, dropoff_date: date) -> dict:
    """
    Возвращает разбивку цены для полей Booking:
      {"base_rate_per_day", "extra_charge_per_day", "total_days", "calculated_total"}
    """
    base = Decimal(str(base_rate or 0))
    extra = extra_charge_per_day(option, base)
    days = rental_days(pickup_date, dropoff_date)
    return {
        "base_rate_per_day": base,
        "extra_charge_per_day": extra,
        "total_days": days,
        "calculated_total": days * (base + extra),
    }
