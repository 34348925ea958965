# Путь: backend/pages/admin.py
# Назначение: Админка спецсекций главной страницы.
# Обновления:
#   - Превью картинки и краткое содержание в списке.
#   - Быстрые действия: включить / выключить / дублировать секцию.
#   - slug и SEO-поля заполняются моделью (SeoFieldsModel), здесь только показываем.

from django.contrib import admin
from django.utils.html import format_html, strip_tags

from seo.slug_utils import unique_slug
from .models import SpecialSection


@admin.register(SpecialSection)
class SpecialSectionAdmin(admin.ModelAdmin):
    # --- список ---
    list_display = ("title", "slug", "order", "is_active", "image_position", "preview_image", "content_preview")
    list_editable = ("order", "is_active")
    list_filter = ("is_active", "image_position")
    search_fields = ("title", "slug", "content")
    ordering = ("order", "-created_at")

    # --- форма ---
    readonly_fields = ("created_by", "created_at", "updated_at")
    fieldsets = (
        ("Основное", {
            "fields": ("title", "content", "image", "image_position", "background_color", "order", "is_active"),
        }),
        ("SEO", {
            "fields": ("slug", "seo_title", "seo_description", "canonical_url"),
            "description": "Пустые поля заполнятся автоматически при сохранении.",
        }),
        ("Метаданные", {
            "fields": ("created_by", "created_at", "updated_at"),
            "classes": ("collapse",),
        }),
    )

    # --- быстрые действия ---
    actions = ["action_activate", "action_deactivate", "action_duplicate"]

    @admin.action(description="✅ Включить выбранные")
    def action_activate(self, request, queryset):
        updated = queryset.update(is_active=True)
        self.message_user(request, f"Включено: {updated}")

    @admin.action(description="🚫 Выключить выбранные")
    def action_deactivate(self, request, queryset):
        updated = queryset.update(is_active=False)
        self.message_user(request, f"Выключено: {updated}")

    @admin.action(description="🧬 Дублировать секцию(и)")
    def action_duplicate(self, request, queryset):
        created = 0
        for obj in queryset:
            SpecialSection.objects.create(
                title=f"{obj.title} (копия)",
                slug=unique_slug(SpecialSection, f"{obj.slug}-copy", fallback="section"),
                content=obj.content,
                image=obj.image,
                image_position=obj.image_position,
                background_color=obj.background_color,
                order=obj.order,
                is_active=False,
                created_by=request.user,
            )
            created += 1
        self.message_user(request, f"Создано копий: {created}")

    def save_model(self, request, obj, form, change):
        if not change and not obj.created_by_id:
            obj.created_by = request.user
        super().save_model(request, obj, form, change)

    # --- служебные методы для колонок ---
    def preview_image(self, obj):
        if obj.image:
            return format_html('<img src="{}" style="max-height: 40px;"/>', obj.image.url)
        return "—"
    preview_image.short_description = "Картинка"

    def content_preview(self, obj):
        text = strip_tags(obj.content or "")
        text = " ".join(text.split())
        return (text[:117] + "…") if len(text) > 120 else text or "—"
    content_preview.short_description = "Краткое содержание"
