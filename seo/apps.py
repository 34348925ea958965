# Путь: backend/seo/apps.py
# Назначение: Конфигурация приложения seo (slug и SEO-метаданные для всех сущностей сайта).

from django.apps import AppConfig


class SeoConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "seo"
    verbose_name = "SEO"
