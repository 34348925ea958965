# backend/accounts/models.py
# Назначение: Кастомная модель пользователя с ролью (клиент / администратор).
# Путь: backend/accounts/models.py

from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    class Roles(models.TextChoices):
        USER = 'USER', 'Пользователь'
        ADMIN = 'ADMIN', 'Администратор'

    role = models.CharField(max_length=16, choices=Roles.choices, default=Roles.USER)
    phone = models.CharField("Телефон", max_length=30, blank=True, default="")

    def is_admin(self):
        return self.is_superuser or self.role == self.Roles.ADMIN

    def __str__(self):
        return self.username
