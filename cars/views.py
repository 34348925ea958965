# Путь: backend/cars/views.py
# Назначение: API автопарка - категории, автомобили, бронирования.
# Доступ:
#   • Чтение категорий и авто - всем; создание/изменение/удаление - администраторам.
#   • Бронирование создаёт любой посетитель; список/статус/удаление - администраторы.
#   • Детальные страницы доступны и по id, и по slug (/slug/<slug>/).

import logging

from django.db.models import ProtectedError
from django.shortcuts import get_object_or_404

from rest_framework import generics, permissions, serializers, status
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsAdmin, IsAdminOrReadOnly
from .models import Booking, Car, Category
from .serializers import (
    BookingSerializer,
    BookingStatusSerializer,
    CarSerializer,
    CategorySerializer,
)

logger = logging.getLogger(__name__)


def _as_bool(value):
    """'true'/'1'/'yes' -> True, иначе False; None -> None (фильтр не задан)."""
    if value is None:
        return None
    return str(value).lower() in ("true", "1", "yes")


# ===========================================================
# КАТЕГОРИИ
# ===========================================================

class CategoryListCreateView(generics.ListCreateAPIView):
    """GET/POST /api/categories/  (?status=Active)"""
    serializer_class = CategorySerializer
    permission_classes = [IsAdminOrReadOnly]

    def get_queryset(self):
        qs = Category.objects.all().order_by("name")
        status_value = self.request.query_params.get("status")
        if status_value:
            qs = qs.filter(status=status_value)
        return qs


class CategoryDetailView(generics.RetrieveUpdateDestroyAPIView):
    """GET/PUT/PATCH/DELETE /api/categories/<id>/"""
    queryset = Category.objects.all()
    serializer_class = CategorySerializer
    permission_classes = [IsAdminOrReadOnly]

    def perform_destroy(self, instance):
        try:
            instance.delete()
        except ProtectedError:
            raise serializers.ValidationError("Category has cars assigned and cannot be deleted.")


class CategoryBySlugView(generics.RetrieveAPIView):
    """GET /api/categories/slug/<slug>/"""
    queryset = Category.objects.all()
    serializer_class = CategorySerializer
    lookup_field = "slug"
    permission_classes = [permissions.AllowAny]


class CategoryStatusToggleView(APIView):
    """PATCH /api/categories/<id>/status/ - Active <-> Inactive"""
    permission_classes = [IsAdmin]

    def patch(self, request, pk):
        category = get_object_or_404(Category, pk=pk)
        if category.status == Category.Status.ACTIVE:
            category.status = Category.Status.INACTIVE
        else:
            category.status = Category.Status.ACTIVE
        category.save(update_fields=["status", "updated_at"])
        return Response(CategorySerializer(category, context={"request": request}).data)


# ===========================================================
# АВТОМОБИЛИ
# ===========================================================

class CarListCreateView(generics.ListCreateAPIView):
    """
    GET/POST /api/cars/
    Фильтры: ?status=&category=&brand=&city=&is_available=&is_featured=
    """
    serializer_class = CarSerializer
    permission_classes = [IsAdminOrReadOnly]

    def get_queryset(self):
        qs = Car.objects.select_related("category", "created_by").order_by("-created_at")
        params = self.request.query_params

        for param, field in (("status", "status"), ("category", "category_id"), ("brand", "brand"), ("city", "city")):
            value = params.get(param)
            if value:
                qs = qs.filter(**{field: value})

        for param in ("is_available", "is_featured"):
            flag = _as_bool(params.get(param))
            if flag is not None:
                qs = qs.filter(**{param: flag})
        return qs

    def perform_create(self, serializer):
        serializer.save(created_by=self.request.user)


class CarDetailView(generics.RetrieveUpdateDestroyAPIView):
    """GET/PUT/PATCH/DELETE /api/cars/<id>/"""
    queryset = Car.objects.select_related("category", "created_by")
    serializer_class = CarSerializer
    permission_classes = [IsAdminOrReadOnly]


class CarBySlugView(generics.RetrieveAPIView):
    """GET /api/cars/slug/<slug>/"""
    queryset = Car.objects.select_related("category", "created_by")
    serializer_class = CarSerializer
    lookup_field = "slug"
    permission_classes = [permissions.AllowAny]


class CarAvailabilityToggleView(APIView):
    """PATCH /api/cars/<id>/availability/"""
    permission_classes = [IsAdmin]

    def patch(self, request, pk):
        car = get_object_or_404(Car, pk=pk)
        car.is_available = not car.is_available
        car.save(update_fields=["is_available", "updated_at"])
        return Response(CarSerializer(car, context={"request": request}).data)


class CarStatusView(APIView):
    """PATCH /api/cars/<id>/status/  {"status": "maintenance"}"""
    permission_classes = [IsAdmin]

    def patch(self, request, pk):
        car = get_object_or_404(Car, pk=pk)
        new_status = request.data.get("status")
        if new_status not in Car.Status.values:
            return Response({"detail": "Invalid car status provided."}, status=status.HTTP_400_BAD_REQUEST)
        car.status = new_status
        car.save(update_fields=["status", "updated_at"])
        return Response(CarSerializer(car, context={"request": request}).data)


# ===========================================================
# БРОНИРОВАНИЯ
# ===========================================================

class BookingListCreateView(generics.ListCreateAPIView):
    """
    POST /api/bookings/ - публично, цена считается на сервере.
    GET  /api/bookings/ - только администратор (?status=pending).
    """
    serializer_class = BookingSerializer

    def get_permissions(self):
        if self.request.method == "POST":
            return [permissions.AllowAny()]
        return [IsAdmin()]

    def get_queryset(self):
        qs = Booking.objects.select_related("car").order_by("-created_at")
        status_value = self.request.query_params.get("status")
        if status_value:
            qs = qs.filter(status=status_value)
        return qs

    def perform_create(self, serializer):
        user = self.request.user
        booking = serializer.save(created_by=user if user.is_authenticated else None)
        logger.info(
            "Booking #%s: car=%s %s..%s option=%s total=%s",
            booking.pk, booking.car_id, booking.pickup_date, booking.dropoff_date,
            booking.booking_option, booking.calculated_total,
        )


class BookingDetailView(generics.RetrieveDestroyAPIView):
    """GET/DELETE /api/bookings/<id>/"""
    queryset = Booking.objects.select_related("car")
    serializer_class = BookingSerializer
    permission_classes = [IsAdmin]


class BookingStatusView(APIView):
    """PATCH /api/bookings/<id>/status/  {"status": "approved"}"""
    permission_classes = [IsAdmin]

    def patch(self, request, pk):
        booking = get_object_or_404(Booking, pk=pk)
        serializer = BookingStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking.status = serializer.validated_data["status"]
        booking.save(update_fields=["status", "updated_at"])
        logger.info("Booking #%s: status -> %s", booking.pk, booking.status)
        return Response(BookingSerializer(booking, context={"request": request}).data)
