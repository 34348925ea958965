"""Общие фикстуры тестов: пользователи, JWT-клиенты, категория и автомобиль."""

import io
from decimal import Decimal

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from accounts.models import User
from cars.models import Car, Category


@pytest.fixture(autouse=True)
def seo_settings(settings, tmp_path):
    settings.SITE_NAME = "Convoy Travels"
    settings.SITE_BASE_URL = "https://convoytravels.pk"
    settings.SEO_TITLE_SUFFIX = "| Convoy Travels"
    settings.SEO_DESCRIPTION_MAX_LENGTH = 160
    settings.SLUG_SAVE_RETRIES = 3
    settings.SELF_DRIVER_EXTRA_PER_DAY = 500
    settings.MEDIA_ROOT = tmp_path / "media"
    return settings


@pytest.fixture
def admin_user(db):
    return User.objects.create_user(
        "admin", email="admin@convoytravels.pk", password="admin123", role=User.Roles.ADMIN
    )


@pytest.fixture
def regular_user(db):
    return User.objects.create_user("user", email="user@example.com", password="user123")


def _jwt_client(user):
    client = APIClient()
    token = RefreshToken.for_user(user).access_token
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return client


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_client(admin_user):
    return _jwt_client(admin_user)


@pytest.fixture
def user_client(regular_user):
    return _jwt_client(regular_user)


@pytest.fixture
def category(db):
    return Category.objects.create(name="Sedan", description="Comfortable sedans for city trips.")


def make_car(category, **overrides):
    data = {
        "name": "Honda Civic",
        "brand": "Honda",
        "model": "Civic",
        "year": 2022,
        "category": category,
        "rent_per_day": Decimal("4500"),
        "city": "Lahore",
        "transmission": Car.Transmission.AUTOMATIC,
        "fuel_type": Car.FuelType.PETROL,
        "seats": 5,
        "registration_number": "LEA-1001",
    }
    data.update(overrides)
    return Car.objects.create(**data)


@pytest.fixture
def car(category):
    return make_car(category)


@pytest.fixture
def image_file():
    buf = io.BytesIO()
    Image.new("RGB", (2, 2), color="white").save(buf, format="PNG")
    return SimpleUploadedFile("section.png", buf.getvalue(), content_type="image/png")
