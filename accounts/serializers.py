# Путь: backend/accounts/serializers.py
# Назначение: Сериализаторы пользователей (JWT-логин, профиль текущего пользователя).
#   - MyTokenObtainPairSerializer - логин по username или email, access/refresh + краткая инфо
#   - UserSerializer - профиль для /api/auth/me/

from django.contrib.auth import get_user_model
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from rest_framework import exceptions, serializers

User = get_user_model()


class MyTokenObtainPairSerializer(TokenObtainPairSerializer):
    """
    Позволяет логиниться как по username, так и по email.
    Возвращает access/refresh + краткую информацию о пользователе.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # логин может прийти через email
        self.fields[self.username_field].required = False

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token["role"] = user.role
        return token

    def validate(self, attrs):
        raw_username = self.context["request"].data.get("username")
        raw_email = self.context["request"].data.get("email")
        password = self.context["request"].data.get("password")

        if not password or not (raw_username or raw_email):
            raise exceptions.ValidationError("Please provide username (or email) and password.")

        user = None
        if raw_username:
            user = User.objects.filter(username__iexact=raw_username).first()
            if not user and "@" in raw_username:
                user = User.objects.filter(email__iexact=raw_username).first()
        elif raw_email:
            user = User.objects.filter(email__iexact=raw_email).first()

        if not user or not user.check_password(password):
            raise exceptions.AuthenticationFailed("Invalid credentials.")

        attrs["username"] = user.get_username()
        data = super().validate(attrs)
        data["user"] = UserSerializer(user).data
        return data


class UserSerializer(serializers.ModelSerializer):
    is_admin = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ["id", "username", "email", "first_name", "last_name", "phone", "role", "is_admin"]
        read_only_fields = ["id", "username", "role", "is_admin"]

    def get_is_admin(self, obj):
        return obj.is_admin()
