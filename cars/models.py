# Путь: backend/cars/models.py
# Назначение: Модели категорий (типов авто), автомобилей и бронирований.
# Обновления:
#   ✅ Category и Car наследуют SeoFieldsModel: slug + SEO-поля заполняются при сохранении.
#   ✅ SEO-адреса: /vehicle-types/<slug> и /cars/<slug>.
#   ✅ Бронирование хранит расчёт цены (ставка, доплата, дни, итог) на момент создания.

from decimal import Decimal

from django.conf import settings
from django.db import models

from seo.models import SeoFieldsModel


def format_amount(value) -> str:
    """4500.00 -> "4500", 4500.50 -> "4500.50"."""
    amount = Decimal(str(value))
    if amount == amount.to_integral_value():
        return str(int(amount))
    return f"{amount:.2f}"


# ==============================
# КАТЕГОРИИ (ТИПЫ АВТО)
# ==============================

class Category(SeoFieldsModel):
    class Status(models.TextChoices):
        ACTIVE = "Active", "Активна"
        INACTIVE = "Inactive", "Неактивна"

    name = models.CharField("Название категории", max_length=255, unique=True)
    description = models.TextField("Описание")
    photo = models.ImageField("Фото", upload_to="categories/", blank=True, null=True)
    status = models.CharField("Статус", max_length=16, choices=Status.choices, default=Status.ACTIVE, db_index=True)
    created_at = models.DateTimeField("Создано", auto_now_add=True)
    updated_at = models.DateTimeField("Обновлено", auto_now=True)

    SEO_ROUTE = "/vehicle-types"
    SLUG_FALLBACK = "category"

    class Meta:
        verbose_name = "Категория"
        verbose_name_plural = "Категории"
        ordering = ["name"]

    def get_seo_title_source(self):
        return f"{self.name} Car Rental" if self.name else ""

    def get_seo_description_source(self):
        if self.description:
            return self.description
        return (
            f"Rent {self.name} cars in Lahore with Convoy Travels. "
            f"Affordable {self.name.lower()} car rental services."
        )

    def __str__(self):
        return self.name


# ==============================
# АВТОМОБИЛИ
# ==============================

class Car(SeoFieldsModel):
    class Status(models.TextChoices):
        AVAILABLE = "available", "Доступна"
        BOOKED = "booked", "Забронирована"
        MAINTENANCE = "maintenance", "На обслуживании"
        INACTIVE = "inactive", "Неактивна"

    class Transmission(models.TextChoices):
        AUTOMATIC = "Automatic", "Автомат"
        MANUAL = "Manual", "Механика"

    class FuelType(models.TextChoices):
        PETROL = "Petrol", "Бензин"
        DIESEL = "Diesel", "Дизель"
        HYBRID = "Hybrid", "Гибрид"
        ELECTRIC = "Electric", "Электро"

    name = models.CharField("Название", max_length=255)
    brand = models.CharField("Марка", max_length=120, db_index=True)
    model = models.CharField("Модель", max_length=120)
    year = models.PositiveIntegerField("Год выпуска")
    car_photo = models.ImageField("Фото", upload_to="cars/", blank=True, null=True)
    category = models.ForeignKey(Category, on_delete=models.PROTECT, related_name="cars", verbose_name="Категория")

    rent_per_day = models.DecimalField("Аренда в сутки", max_digits=10, decimal_places=2)
    rent_per_hour = models.DecimalField("Аренда в час", max_digits=10, decimal_places=2, null=True, blank=True)
    currency = models.CharField("Валюта", max_length=8, default="PKR")
    deposit_amount = models.DecimalField("Залог", max_digits=10, decimal_places=2, default=0)

    is_available = models.BooleanField("Доступна", default=True)
    is_featured = models.BooleanField("В подборке", default=False)
    status = models.CharField("Статус", max_length=16, choices=Status.choices, default=Status.AVAILABLE, db_index=True)

    city = models.CharField("Город", max_length=120, db_index=True)
    address = models.CharField("Адрес", max_length=255, blank=True, default="")

    transmission = models.CharField("Коробка передач", max_length=16, choices=Transmission.choices)
    fuel_type = models.CharField("Топливо", max_length=16, choices=FuelType.choices)
    seats = models.PositiveSmallIntegerField("Мест")
    mileage = models.DecimalField("Расход (км/л)", max_digits=6, decimal_places=2, null=True, blank=True)
    color = models.CharField("Цвет", max_length=60, blank=True, default="")
    registration_number = models.CharField("Госномер", max_length=32, unique=True)

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, verbose_name="Создал"
    )
    created_at = models.DateTimeField("Создано", auto_now_add=True)
    updated_at = models.DateTimeField("Обновлено", auto_now=True)

    SEO_ROUTE = "/cars"
    SLUG_FALLBACK = "car"

    class Meta:
        verbose_name = "Автомобиль"
        verbose_name_plural = "Автомобили"
        ordering = ["-created_at"]

    def get_seo_description_source(self):
        parts = [p for p in (self.name, self.brand, self.model) if p]
        if self.city:
            parts.append(f"in {self.city}")
        if not parts:
            return ""
        if self.rent_per_day:
            tail = f"Starting at Rs {format_amount(self.rent_per_day)} per day."
        else:
            tail = "Affordable car rental service."
        return f"Rent {' '.join(parts)} with Convoy Travels. {tail}"

    def save(self, *args, **kwargs):
        if self.registration_number:
            self.registration_number = self.registration_number.strip().upper()
        if not self.currency:
            self.currency = getattr(settings, "DEFAULT_CURRENCY", "PKR")
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.name} ({self.registration_number})"


# ==============================
# БРОНИРОВАНИЯ
# ==============================

class Booking(models.Model):
    class Status(models.TextChoices):
        PENDING = "pending", "Ожидает"
        CONFIRMED = "confirmed", "Подтверждено"
        APPROVED = "approved", "Одобрено"
        REJECTED = "rejected", "Отклонено"

    class Option(models.TextChoices):
        SELF_WITHOUT_DRIVER = "self_without_driver", "Без водителя"
        OUT_OF_STATION = "out_of_station", "За город"

    car = models.ForeignKey(Car, on_delete=models.CASCADE, related_name="bookings", verbose_name="Автомобиль")
    customer_name = models.CharField("Имя клиента", max_length=120)
    email = models.EmailField("Email")
    phone = models.CharField("Телефон", max_length=30)
    address = models.CharField("Адрес", max_length=200)
    pickup_date = models.DateField("Дата получения")
    dropoff_date = models.DateField("Дата возврата")
    booking_option = models.CharField("Вариант", max_length=32, choices=Option.choices)
    notes = models.CharField("Примечания", max_length=500, blank=True, default="")

    base_rate_per_day = models.DecimalField("Ставка в сутки", max_digits=10, decimal_places=2)
    extra_charge_per_day = models.DecimalField("Доплата в сутки", max_digits=10, decimal_places=2, default=0)
    total_days = models.PositiveIntegerField("Дней")
    calculated_total = models.DecimalField("Итого", max_digits=12, decimal_places=2)

    status = models.CharField("Статус", max_length=16, choices=Status.choices, default=Status.PENDING, db_index=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, verbose_name="Создал"
    )
    created_at = models.DateTimeField("Создано", auto_now_add=True)
    updated_at = models.DateTimeField("Обновлено", auto_now=True)

    class Meta:
        verbose_name = "Бронирование"
        verbose_name_plural = "Бронирования"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["pickup_date", "dropoff_date"], name="booking_dates_idx"),
        ]

    def __str__(self):
        return f"{self.customer_name}: {self.car} {self.pickup_date:%Y-%m-%d}–{self.dropoff_date:%Y-%m-%d}"
