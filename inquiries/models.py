# Путь: backend/inquiries/models.py
# Назначение: Вопросы клиентов (по конкретному авто или общие) и обращения с формы контактов.
# Ответ администратора фиксирует, кто и когда ответил.

from django.conf import settings
from django.db import models

from cars.models import Car


class Question(models.Model):
    class Status(models.TextChoices):
        PENDING = "pending", "Ожидает"
        ANSWERED = "answered", "Отвечен"
        CLOSED = "closed", "Закрыт"

    car = models.ForeignKey(
        Car, on_delete=models.SET_NULL, null=True, blank=True, related_name="questions", verbose_name="Автомобиль"
    )
    customer_name = models.CharField("Имя клиента", max_length=120)
    email = models.EmailField("Email")
    phone = models.CharField("Телефон", max_length=30)
    subject = models.CharField("Тема", max_length=200)
    message = models.TextField("Сообщение", max_length=1000)
    status = models.CharField("Статус", max_length=16, choices=Status.choices, default=Status.PENDING, db_index=True)
    answer = models.TextField("Ответ", max_length=1000, blank=True, default="")
    answered_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, verbose_name="Ответил"
    )
    answered_at = models.DateTimeField("Время ответа", null=True, blank=True)
    created_at = models.DateTimeField("Создано", auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField("Обновлено", auto_now=True)

    class Meta:
        verbose_name = "Вопрос"
        verbose_name_plural = "Вопросы"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.customer_name}: {self.subject[:60]}"


class ContactQuery(models.Model):
    class Status(models.TextChoices):
        NEW = "new", "Новое"
        READ = "read", "Прочитано"
        REPLIED = "replied", "Отвечено"
        ARCHIVED = "archived", "В архиве"

    name = models.CharField("Имя", max_length=120)
    email = models.EmailField("Email", db_index=True)
    phone = models.CharField("Телефон", max_length=30)
    message = models.TextField("Сообщение", max_length=2000)
    status = models.CharField("Статус", max_length=16, choices=Status.choices, default=Status.NEW, db_index=True)
    notes = models.TextField("Заметки", max_length=1000, blank=True, default="")
    replied_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, verbose_name="Ответил"
    )
    replied_at = models.DateTimeField("Время ответа", null=True, blank=True)
    created_at = models.DateTimeField("Создано", auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField("Обновлено", auto_now=True)

    class Meta:
        verbose_name = "Обращение"
        verbose_name_plural = "Обращения"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.name} <{self.email}>"
