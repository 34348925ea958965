# Путь: backend/blog/admin.py
# Назначение: Админка статей блога и главного блога.

from django.contrib import admin

from .models import Blog, MainBlog

SEO_FIELDSET = ("SEO", {"fields": ("slug", "seo_title", "seo_description", "canonical_url")})


@admin.action(description="Опубликовать")
def publish(modeladmin, request, queryset):
    field = "published" if queryset.model is Blog else "is_published"
    queryset.update(**{field: True})


@admin.action(description="Снять с публикации")
def unpublish(modeladmin, request, queryset):
    field = "published" if queryset.model is Blog else "is_published"
    queryset.update(**{field: False})


@admin.register(Blog)
class BlogAdmin(admin.ModelAdmin):
    list_display = ("title", "category", "published", "views", "created_at")
    list_filter = ("published", "category", "created_at")
    search_fields = ("title", "description", "content", "slug")
    date_hierarchy = "created_at"
    readonly_fields = ("views", "created_at", "updated_at")
    fieldsets = (
        (None, {"fields": ("title", "category", "content", "description", "featured_image", "published")}),
        SEO_FIELDSET,
        ("Статистика", {"fields": ("views", "created_at", "updated_at")}),
    )
    actions = [publish, unpublish]


@admin.register(MainBlog)
class MainBlogAdmin(admin.ModelAdmin):
    list_display = ("blog_title", "is_published", "views", "created_at")
    list_filter = ("is_published", "created_at")
    search_fields = ("blog_title", "description", "slug")
    date_hierarchy = "created_at"
    readonly_fields = ("views", "created_at", "updated_at")
    fieldsets = (
        (None, {"fields": ("blog_title", "description", "image", "is_published")}),
        SEO_FIELDSET,
        ("Статистика", {"fields": ("views", "created_at", "updated_at")}),
    )
    actions = [publish, unpublish]
