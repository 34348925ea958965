# Путь: backend/cars/apps.py
# Назначение: Конфигурация приложения cars (категории, автомобили, бронирования).

from django.apps import AppConfig


class CarsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "cars"
    verbose_name = "Автопарк"
