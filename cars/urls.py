# Путь: backend/cars/urls.py
# Назначение: Маршруты категорий, автомобилей и бронирований.
# Префикс /api/ добавляется на уровне проекта (backend/urls.py).

from django.urls import path

from .views import (
    BookingDetailView,
    BookingListCreateView,
    BookingStatusView,
    CarAvailabilityToggleView,
    CarBySlugView,
    CarDetailView,
    CarListCreateView,
    CarStatusView,
    CategoryBySlugView,
    CategoryDetailView,
    CategoryListCreateView,
    CategoryStatusToggleView,
)

urlpatterns = [
    # --- Категории ---
    path("categories/", CategoryListCreateView.as_view(), name="category_list"),
    path("categories/slug/<slug:slug>/", CategoryBySlugView.as_view(), name="category_by_slug"),
    path("categories/<int:pk>/", CategoryDetailView.as_view(), name="category_detail"),
    path("categories/<int:pk>/status/", CategoryStatusToggleView.as_view(), name="category_status"),

    # --- Автомобили ---
    path("cars/", CarListCreateView.as_view(), name="car_list"),
    path("cars/slug/<slug:slug>/", CarBySlugView.as_view(), name="car_by_slug"),
    path("cars/<int:pk>/", CarDetailView.as_view(), name="car_detail"),
    path("cars/<int:pk>/availability/", CarAvailabilityToggleView.as_view(), name="car_availability"),
    path("cars/<int:pk>/status/", CarStatusView.as_view(), name="car_status"),

    # --- Бронирования ---
    path("bookings/", BookingListCreateView.as_view(), name="booking_list"),
    path("bookings/<int:pk>/", BookingDetailView.as_view(), name="booking_detail"),
    path("bookings/<int:pk>/status/", BookingStatusView.as_view(), name="booking_status"),
]
