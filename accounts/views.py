# Путь: backend/accounts/views.py
# Назначение: Вьюхи аутентификации администратора (JWT-логин, профиль).

from rest_framework.permissions import IsAuthenticated, AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.views import TokenObtainPairView

from .serializers import MyTokenObtainPairSerializer, UserSerializer


class LoginView(TokenObtainPairView):
    """
    POST /api/auth/login/
    Авторизация пользователя. Возвращает JWT-токены.
    """
    permission_classes = [AllowAny]
    serializer_class = MyTokenObtainPairSerializer


class MeView(APIView):
    """
    GET /api/auth/me/   - информация о текущем пользователе.
    PATCH /api/auth/me/ - обновление имени, email и телефона.
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(UserSerializer(request.user).data)

    def patch(self, request):
        serializer = UserSerializer(request.user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data)
