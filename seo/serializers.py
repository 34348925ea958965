# Путь: backend/seo/serializers.py
# Назначение: Базовый сериализатор для моделей с SEO-полями.
# Особенности:
#   • slug не обязателен: пустой -> генерируется из названия при сохранении.
#   • Без UniqueValidator на slug: дубль ловит уникальный индекс БД -> SlugConflict (409).
#   • canonical_url принимает и относительный путь (/cars/x) - домен добавит модель.

from rest_framework import serializers

SEO_SERIALIZER_FIELDS = ["slug", "seo_title", "seo_description", "canonical_url", "seo_path"]


class SeoModelSerializer(serializers.ModelSerializer):
    slug = serializers.CharField(max_length=255, required=False, allow_blank=True)
    seo_title = serializers.CharField(max_length=255, required=False, allow_blank=True)
    seo_description = serializers.CharField(max_length=300, required=False, allow_blank=True)
    canonical_url = serializers.CharField(max_length=500, required=False, allow_blank=True)
    seo_path = serializers.SerializerMethodField()

    def get_seo_path(self, obj):
        return obj.get_seo_path()

    def update(self, instance, validated_data):
        # однажды присвоенный slug не сбрасываем пустым значением
        if not validated_data.get("slug"):
            validated_data.pop("slug", None)
        return super().update(instance, validated_data)
