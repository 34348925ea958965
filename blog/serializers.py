# Путь: backend/blog/serializers.py
# Назначение: Сериализаторы статей блога и главного блога (с SEO-полями).

from rest_framework import serializers

from cars.serializers import CategoryMiniSerializer
from seo.serializers import SEO_SERIALIZER_FIELDS, SeoModelSerializer
from .models import Blog, MainBlog


class BlogSerializer(SeoModelSerializer):
    category_detail = CategoryMiniSerializer(source="category", read_only=True)
    created_by = serializers.StringRelatedField(read_only=True)

    class Meta:
        model = Blog
        fields = [
            "id", "title", "category", "category_detail",
            "content", "description", "published", "featured_image", "views",
            "created_by", "created_at", "updated_at",
        ] + SEO_SERIALIZER_FIELDS
        read_only_fields = ["id", "views", "created_by", "created_at", "updated_at"]


class MainBlogSerializer(SeoModelSerializer):
    created_by = serializers.StringRelatedField(read_only=True)

    class Meta:
        model = MainBlog
        fields = [
            "id", "blog_title", "description", "image", "is_published", "views",
            "created_by", "created_at", "updated_at",
        ] + SEO_SERIALIZER_FIELDS
        read_only_fields = ["id", "views", "created_by", "created_at", "updated_at"]

    def validate_blog_title(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Please provide blog title.")
        return value
