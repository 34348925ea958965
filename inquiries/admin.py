# Путь: backend/inquiries/admin.py
# Назначение: Админка вопросов и обращений.

from django.contrib import admin

from .models import ContactQuery, Question


@admin.register(Question)
class QuestionAdmin(admin.ModelAdmin):
    list_display = ("customer_name", "subject", "car", "status", "created_at")
    list_filter = ("status", "created_at")
    search_fields = ("customer_name", "email", "subject", "message")
    date_hierarchy = "created_at"
    readonly_fields = ("answered_by", "answered_at", "created_at", "updated_at")


@admin.action(description="Отправить в архив")
def move_to_archive(modeladmin, request, queryset):
    queryset.update(status=ContactQuery.Status.ARCHIVED)


@admin.register(ContactQuery)
class ContactQueryAdmin(admin.ModelAdmin):
    list_display = ("name", "email", "phone", "status", "created_at")
    list_filter = ("status", "created_at")
    search_fields = ("name", "email", "phone", "message")
    date_hierarchy = "created_at"
    readonly_fields = ("replied_by", "replied_at", "created_at", "updated_at")
    actions = [move_to_archive]
