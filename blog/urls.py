# Путь: backend/blog/urls.py
# Назначение: Маршруты блога и главного блога (префикс /api/ - на уровне проекта).

from django.urls import path

from .views import (
    BlogBySlugView,
    BlogDetailView,
    BlogListCreateView,
    BlogPublishToggleView,
    MainBlogBySlugView,
    MainBlogDetailView,
    MainBlogListCreateView,
    MainBlogPublishToggleView,
)

urlpatterns = [
    path("blogs/", BlogListCreateView.as_view(), name="blog_list"),
    path("blogs/slug/<slug:slug>/", BlogBySlugView.as_view(), name="blog_by_slug"),
    path("blogs/<int:pk>/", BlogDetailView.as_view(), name="blog_detail"),
    path("blogs/<int:pk>/publish/", BlogPublishToggleView.as_view(), name="blog_publish"),

    path("main-blogs/", MainBlogListCreateView.as_view(), name="main_blog_list"),
    path("main-blogs/slug/<slug:slug>/", MainBlogBySlugView.as_view(), name="main_blog_by_slug"),
    path("main-blogs/<int:pk>/", MainBlogDetailView.as_view(), name="main_blog_detail"),
    path("main-blogs/<int:pk>/publish/", MainBlogPublishToggleView.as_view(), name="main_blog_publish"),
]
