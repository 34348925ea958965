# backend/accounts/permissions.py
# Назначение: Права доступа DRF: чтение - всем, запись - только администраторам.
# Путь: backend/accounts/permissions.py

from rest_framework.permissions import SAFE_METHODS, BasePermission


def user_is_admin(user) -> bool:
    if not user or not user.is_authenticated:
        return False
    return bool(getattr(user, "is_admin", None) and user.is_admin())


class IsAdmin(BasePermission):
    """Доступ только для администраторов (role=ADMIN или суперпользователь)."""
    message = "Access denied. Admin privileges required."

    def has_permission(self, request, view):
        return user_is_admin(request.user)


class IsAdminOrReadOnly(IsAdmin):
    """GET/HEAD/OPTIONS - всем, изменения - только администраторам."""

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        return super().has_permission(request, view)
