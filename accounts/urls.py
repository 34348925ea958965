# Путь: backend/accounts/urls.py
# Назначение: URL-ы аутентификации (логин, обновление токена, профиль).
# Подключается в корневом urls.py под префиксом /api/auth/.

from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from .views import LoginView, MeView

urlpatterns = [
    path("login/", LoginView.as_view(), name="login"),
    path("refresh/", TokenRefreshView.as_view(), name="refresh"),
    path("me/", MeView.as_view(), name="me"),
]
