# Путь: backend/blog/apps.py
# Назначение: Конфигурация приложения blog (статьи по категориям и главный блог).

from django.apps import AppConfig


class BlogConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "blog"
    verbose_name = "Блог"
