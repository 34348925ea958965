# backend/pages/serializers.py
# Назначение: Сериализатор спецсекций (публичный вывод и CRUD администратора).

from rest_framework import serializers

from seo.serializers import SEO_SERIALIZER_FIELDS, SeoModelSerializer
from .models import SpecialSection


class SpecialSectionSerializer(SeoModelSerializer):
    created_by = serializers.StringRelatedField(read_only=True)

    class Meta:
        model = SpecialSection
        fields = [
            "id", "title", "content", "image", "image_position", "background_color",
            "order", "is_active", "created_by", "created_at", "updated_at",
        ] + SEO_SERIALIZER_FIELDS
        read_only_fields = ["id", "created_by", "created_at", "updated_at"]
