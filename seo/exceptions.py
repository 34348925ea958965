# Путь: backend/seo/exceptions.py
# Назначение: Ошибка конфликта slug (дубль по уникальному индексу).
# Отдаётся клиенту как 409, а не 500 - пользователь может просто повторить запрос.

from rest_framework import status
from rest_framework.exceptions import APIException


class SlugConflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "A record with this name already exists, please retry."
    default_code = "slug_conflict"
