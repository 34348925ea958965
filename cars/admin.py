# Путь: backend/cars/admin.py
# Назначение: Админка категорий, автомобилей и бронирований (с превью фото и SEO-полями).

from django.contrib import admin
from django.utils.html import format_html

from .models import Booking, Car, Category

SEO_FIELDSET = ("SEO", {"fields": ("slug", "seo_title", "seo_description", "canonical_url")})


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "status", "created_at")
    list_filter = ("status",)
    search_fields = ("name", "slug")
    fieldsets = (
        (None, {"fields": ("name", "description", "photo", "status")}),
        SEO_FIELDSET,
    )


@admin.register(Car)
class CarAdmin(admin.ModelAdmin):
    list_display = ("name", "brand", "model", "registration_number", "category", "status", "is_available", "preview_photo")
    list_filter = ("status", "is_available", "is_featured", "category", "transmission", "fuel_type")
    search_fields = ("name", "brand", "model", "registration_number", "slug")
    readonly_fields = ("created_by", "created_at", "updated_at")
    fieldsets = (
        (None, {"fields": ("name", "brand", "model", "year", "category", "car_photo", "registration_number")}),
        ("Цена", {"fields": ("rent_per_day", "rent_per_hour", "currency", "deposit_amount")}),
        ("Статус", {"fields": ("status", "is_available", "is_featured")}),
        ("Характеристики", {"fields": ("transmission", "fuel_type", "seats", "mileage", "color")}),
        ("Локация", {"fields": ("city", "address")}),
        SEO_FIELDSET,
        ("Служебное", {"fields": ("created_by", "created_at", "updated_at")}),
    )

    def preview_photo(self, obj):
        if obj.car_photo:
            return format_html('<img src="{}" style="max-height: 40px;"/>', obj.car_photo.url)
        return "—"
    preview_photo.short_description = "Фото"

    def save_model(self, request, obj, form, change):
        if not change and not obj.created_by_id:
            obj.created_by = request.user
        super().save_model(request, obj, form, change)


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ("customer_name", "car", "pickup_date", "dropoff_date", "booking_option", "calculated_total", "status")
    list_filter = ("status", "booking_option", "pickup_date")
    search_fields = ("customer_name", "email", "phone")
    date_hierarchy = "pickup_date"
    readonly_fields = ("base_rate_per_day", "extra_charge_per_day", "total_days", "calculated_total", "created_at", "updated_at")

    def has_add_permission(self, request):
        # бронирования создаются только через API (цена считается на сервере)
        return False
