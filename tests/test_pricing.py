"""Расчёт стоимости аренды."""

from datetime import date
from decimal import Decimal

from cars.models import Booking
from cars.pricing import calculate_price, extra_charge_per_day, rental_days


class TestRentalDays:
    def test_same_day_counts_as_one(self):
        assert rental_days(date(2025, 5, 1), date(2025, 5, 1)) == 1

    def test_day_difference(self):
        assert rental_days(date(2025, 5, 1), date(2025, 5, 4)) == 3


class TestCalculatePrice:
    def test_self_drive_adds_fixed_extra(self):
        price = calculate_price(Decimal("4500"), Booking.Option.SELF_WITHOUT_DRIVER, date(2025, 5, 1), date(2025, 5, 4))
        assert price == {
            "base_rate_per_day": Decimal("4500"),
            "extra_charge_per_day": Decimal("500"),
            "total_days": 3,
            "calculated_total": Decimal("15000"),
        }

    def test_out_of_station_doubles_rate(self):
        price = calculate_price(Decimal("4500"), Booking.Option.OUT_OF_STATION, date(2025, 5, 1), date(2025, 5, 4))
        assert price["extra_charge_per_day"] == Decimal("4500")
        assert price["calculated_total"] == Decimal("27000")

    def test_extra_follows_settings(self, settings):
        settings.SELF_DRIVER_EXTRA_PER_DAY = 700
        assert extra_charge_per_day(Booking.Option.SELF_WITHOUT_DRIVER, Decimal("3000")) == Decimal("700")

    def test_unknown_option_has_no_extra(self):
        assert extra_charge_per_day("chauffeur", Decimal("3000")) == Decimal("0")
