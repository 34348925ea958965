# Путь: backend/cars/serializers.py
# Назначение: Сериализаторы категорий, автомобилей и бронирований.
# Особенности:
#   ✅ Category/Car отдают SEO-поля (slug, seo_title, seo_description, canonical_url, seo_path).
#   ✅ Госномер приводится к верхнему регистру и проверяется на дубль до записи в БД.
#   ✅ Бронирование: цена считается на сервере (cars.pricing), клиент её не передаёт.

from rest_framework import serializers

from seo.serializers import SEO_SERIALIZER_FIELDS, SeoModelSerializer
from .models import Booking, Car, Category
from .pricing import calculate_price


class CategorySerializer(SeoModelSerializer):
    class Meta:
        model = Category
        fields = [
            "id", "name", "description", "photo", "status",
            "created_at", "updated_at",
        ] + SEO_SERIALIZER_FIELDS
        read_only_fields = ["id", "created_at", "updated_at"]


class CategoryMiniSerializer(serializers.ModelSerializer):
    """Мини-версия категории для вложения в карточку авто."""
    class Meta:
        model = Category
        fields = ["id", "name", "slug", "description"]


class CarSerializer(SeoModelSerializer):
    registration_number = serializers.CharField(max_length=32)
    category_detail = CategoryMiniSerializer(source="category", read_only=True)
    created_by = serializers.StringRelatedField(read_only=True)

    class Meta:
        model = Car
        fields = [
            "id", "name", "brand", "model", "year", "car_photo",
            "category", "category_detail",
            "rent_per_day", "rent_per_hour", "currency", "deposit_amount",
            "is_available", "is_featured", "status",
            "city", "address",
            "transmission", "fuel_type", "seats", "mileage", "color",
            "registration_number",
            "created_by", "created_at", "updated_at",
        ] + SEO_SERIALIZER_FIELDS
        read_only_fields = ["id", "created_by", "created_at", "updated_at"]

    def validate_registration_number(self, value):
        value = value.strip().upper()
        qs = Car.objects.filter(registration_number=value)
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise serializers.ValidationError("Car with this registration number already exists.")
        return value


class CarMiniSerializer(serializers.ModelSerializer):
    """Кратко об авто для вложения в бронирование."""
    class Meta:
        model = Car
        fields = ["id", "name", "brand", "model", "slug", "rent_per_day", "car_photo", "city"]


class BookingSerializer(serializers.ModelSerializer):
    car_detail = CarMiniSerializer(source="car", read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id", "car", "car_detail",
            "customer_name", "email", "phone", "address",
            "pickup_date", "dropoff_date", "booking_option", "notes",
            "base_rate_per_day", "extra_charge_per_day", "total_days", "calculated_total",
            "status", "created_at", "updated_at",
        ]
        read_only_fields = [
            "id", "base_rate_per_day", "extra_charge_per_day", "total_days", "calculated_total",
            "status", "created_at", "updated_at",
        ]

    def validate_email(self, value):
        return value.strip().lower()

    def validate(self, attrs):
        pickup = attrs.get("pickup_date")
        dropoff = attrs.get("dropoff_date")
        if pickup and dropoff and dropoff < pickup:
            raise serializers.ValidationError(
                {"dropoff_date": "Drop-off date cannot be earlier than pick-up date."}
            )
        car = attrs.get("car")
        if car is not None and not car.is_available:
            raise serializers.ValidationError({"car": "Selected car is not available."})
        return attrs

    def create(self, validated_data):
        car = validated_data["car"]
        validated_data.update(
            calculate_price(
                car.rent_per_day,
                validated_data["booking_option"],
                validated_data["pickup_date"],
                validated_data["dropoff_date"],
            )
        )
        return super().create(validated_data)


class BookingStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Booking.Status.choices)
