# Путь: backend/pages/apps.py
# Назначение: Конфигурация приложения pages (спецсекции главной страницы).

from django.apps import AppConfig


class PagesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "pages"
    verbose_name = "Спецсекции"
