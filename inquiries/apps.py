# Путь: backend/inquiries/apps.py
# Назначение: Конфигурация приложения inquiries (вопросы по авто и обращения с формы контактов).

from django.apps import AppConfig


class InquiriesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "inquiries"
    verbose_name = "Обращения"
