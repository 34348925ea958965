# backend/pages/urls.py
# Назначение: Роутинг для API спецсекций (подключается под /api/special-sections/).

from django.urls import path
from .views import SectionBySlugView, SectionDetailView, SectionListCreateView, SectionToggleView

urlpatterns = [
    path("", SectionListCreateView.as_view(), name="section_list"),
    path("slug/<slug:slug>/", SectionBySlugView.as_view(), name="section_by_slug"),
    path("<int:pk>/", SectionDetailView.as_view(), name="section_detail"),
    path("<int:pk>/toggle/", SectionToggleView.as_view(), name="section_toggle"),
]
