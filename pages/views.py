# Путь: backend/pages/views.py
# Назначение: API спецсекций главной страницы.
#   ✅ Сортировка .order_by("order", "-created_at") для стабильной пагинации
#   ✅ ?active=true|false - фильтр по активности
#   ✅ По slug отдаются только активные секции

from django.shortcuts import get_object_or_404
from rest_framework import generics, permissions
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsAdmin, IsAdminOrReadOnly
from .models import SpecialSection
from .serializers import SpecialSectionSerializer


class SectionListCreateView(generics.ListCreateAPIView):
    """GET/POST /api/special-sections/"""
    serializer_class = SpecialSectionSerializer
    permission_classes = [IsAdminOrReadOnly]

    def get_queryset(self):
        qs = SpecialSection.objects.select_related("created_by").order_by("order", "-created_at")
        active = self.request.query_params.get("active")
        if active is not None:
            qs = qs.filter(is_active=active.lower() in ("true", "1", "yes"))
        return qs

    def perform_create(self, serializer):
        serializer.save(created_by=self.request.user)


class SectionDetailView(generics.RetrieveUpdateDestroyAPIView):
    """GET/PUT/PATCH/DELETE /api/special-sections/<id>/"""
    queryset = SpecialSection.objects.select_related("created_by")
    serializer_class = SpecialSectionSerializer
    permission_classes = [IsAdminOrReadOnly]


class SectionBySlugView(generics.RetrieveAPIView):
    """Получение активной секции по slug"""
    queryset = SpecialSection.objects.filter(is_active=True)
    serializer_class = SpecialSectionSerializer
    lookup_field = "slug"
    permission_classes = [permissions.AllowAny]


class SectionToggleView(APIView):
    """PATCH /api/special-sections/<id>/toggle/"""
    permission_classes = [IsAdmin]

    def patch(self, request, pk):
        section = get_object_or_404(SpecialSection, pk=pk)
        section.is_active = not section.is_active
        section.save(update_fields=["is_active", "updated_at"])
        return Response(SpecialSectionSerializer(section, context={"request": request}).data)
