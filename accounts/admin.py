# Путь: backend/accounts/admin.py
# Назначение: Пользователи в админке: роль, телефон, быстрая выдача/снятие прав администратора.

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DJUserAdmin

from .models import User


@admin.register(User)
class UserAdmin(DJUserAdmin):
    fieldsets = DJUserAdmin.fieldsets + (
        ("Контакты и роль", {"fields": ("phone", "role")}),
    )
    add_fieldsets = DJUserAdmin.add_fieldsets + (
        ("Контакты и роль", {"fields": ("email", "phone", "role")}),
    )

    list_display = ("username", "email", "phone", "role", "admin_access", "is_active")
    list_filter = ("role", "is_superuser", "is_active")
    search_fields = ("username", "email", "phone", "first_name", "last_name")
    ordering = ("-date_joined",)
    actions = ["make_admin", "make_user"]

    @admin.display(boolean=True, description="Доступ к API админа")
    def admin_access(self, obj):
        return obj.is_admin()

    @admin.action(description="Назначить администраторами")
    def make_admin(self, request, queryset):
        updated = queryset.update(role=User.Roles.ADMIN)
        self.message_user(request, f"Назначено администраторов: {updated}")

    @admin.action(description="Снять права администратора")
    def make_user(self, request, queryset):
        # суперпользователь остаётся администратором по флагу is_superuser
        updated = queryset.update(role=User.Roles.USER)
        self.message_user(request, f"Снято прав: {updated}")
