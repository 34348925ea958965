# Путь: backend/blog/views.py
# Назначение: API блога и главного блога.
# Правила:
#   • Неопубликованные записи видит только администратор (и в списке, и по id/slug).
#   • Просмотр детальной страницы (по id или slug) увеличивает счётчик views.
#   • Поиск ?search= по заголовку и тексту, ?published=true|false - явный фильтр для администратора.

from django.db.models import Q
from django.http import Http404
from django.shortcuts import get_object_or_404

from rest_framework import generics
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsAdmin, IsAdminOrReadOnly, user_is_admin
from .models import Blog, MainBlog
from .serializers import BlogSerializer, MainBlogSerializer


def _as_bool(value):
    if value is None:
        return None
    return str(value).lower() in ("true", "1", "yes")


class PublishedContentMixin:
    """Общая логика видимости/поиска для Blog и MainBlog."""
    model = None
    published_field = "published"
    search_fields = ()

    def base_queryset(self):
        return self.model.objects.select_related("created_by")

    def filter_visibility(self, qs):
        if not user_is_admin(self.request.user):
            return qs.filter(**{self.published_field: True})
        flag = _as_bool(self.request.query_params.get(self.published_field))
        if flag is not None:
            return qs.filter(**{self.published_field: flag})
        return qs

    def filter_search(self, qs):
        term = (self.request.query_params.get("search") or "").strip()
        if not term:
            return qs
        cond = Q()
        for field in self.search_fields:
            cond |= Q(**{f"{field}__icontains": term})
        return qs.filter(cond)

    def get_visible_object(self, **lookup):
        obj = get_object_or_404(self.base_queryset(), **lookup)
        if not getattr(obj, self.published_field) and not user_is_admin(self.request.user):
            raise Http404
        return obj


class ContentListCreateView(PublishedContentMixin, generics.ListCreateAPIView):
    permission_classes = [IsAdminOrReadOnly]

    def get_queryset(self):
        qs = self.filter_search(self.filter_visibility(self.base_queryset()))
        return qs.order_by("-created_at")

    def perform_create(self, serializer):
        serializer.save(created_by=self.request.user)


class ContentDetailView(PublishedContentMixin, generics.RetrieveUpdateDestroyAPIView):
    permission_classes = [IsAdminOrReadOnly]

    def get_queryset(self):
        return self.base_queryset()

    def retrieve(self, request, *args, **kwargs):
        obj = self.get_visible_object(pk=kwargs["pk"])
        obj.increment_views()
        return Response(self.get_serializer(obj).data)


class ContentBySlugView(PublishedContentMixin, generics.GenericAPIView):
    permission_classes = [IsAdminOrReadOnly]

    def get(self, request, slug):
        obj = self.get_visible_object(slug=slug)
        obj.increment_views()
        return Response(self.get_serializer(obj).data)


class ContentPublishToggleView(PublishedContentMixin, APIView):
    permission_classes = [IsAdmin]
    serializer_class = None

    def patch(self, request, pk):
        obj = get_object_or_404(self.model, pk=pk)
        setattr(obj, self.published_field, not getattr(obj, self.published_field))
        obj.save(update_fields=[self.published_field, "updated_at"])
        return Response(self.serializer_class(obj, context={"request": request}).data)


# ===========================================================
# БЛОГ
# ===========================================================

class BlogOptions:
    model = Blog
    published_field = "published"
    search_fields = ("title", "description", "content")
    serializer_class = BlogSerializer


class BlogListCreateView(BlogOptions, ContentListCreateView):
    """GET/POST /api/blogs/  (?published=&category=&search=)"""

    def get_queryset(self):
        qs = super().get_queryset().select_related("category")
        category = self.request.query_params.get("category")
        if category:
            qs = qs.filter(category_id=category)
        return qs


class BlogDetailView(BlogOptions, ContentDetailView):
    """GET/PUT/PATCH/DELETE /api/blogs/<id>/"""


class BlogBySlugView(BlogOptions, ContentBySlugView):
    """GET /api/blogs/slug/<slug>/"""


class BlogPublishToggleView(BlogOptions, ContentPublishToggleView):
    """PATCH /api/blogs/<id>/publish/"""


# ===========================================================
# ГЛАВНЫЙ БЛОГ
# ===========================================================

class MainBlogOptions:
    model = MainBlog
    published_field = "is_published"
    search_fields = ("blog_title", "description")
    serializer_class = MainBlogSerializer


class MainBlogListCreateView(MainBlogOptions, ContentListCreateView):
    """GET/POST /api/main-blogs/  (?is_published=&search=)"""


class MainBlogDetailView(MainBlogOptions, ContentDetailView):
    """GET/PUT/PATCH/DELETE /api/main-blogs/<id>/"""


class MainBlogBySlugView(MainBlogOptions, ContentBySlugView):
    """GET /api/main-blogs/slug/<slug>/"""


class MainBlogPublishToggleView(MainBlogOptions, ContentPublishToggleView):
    """PATCH /api/main-blogs/<id>/publish/"""
