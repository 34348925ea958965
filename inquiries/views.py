# Путь: backend/inquiries/views.py
# Назначение: API вопросов по авто и обращений с формы контактов.
# Доступ: создание - публично; список, просмотр, ответ, удаление - администратор.

from django.shortcuts import get_object_or_404
from django.utils import timezone

from rest_framework import generics, permissions
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsAdmin
from .models import ContactQuery, Question
from .serializers import (
    ContactQuerySerializer,
    ContactQueryUpdateSerializer,
    QuestionSerializer,
    QuestionUpdateSerializer,
)


class PublicCreateAdminListView(generics.ListCreateAPIView):
    """POST - любой посетитель, GET - только администратор (?status=)."""
    model = None

    def get_permissions(self):
        if self.request.method == "POST":
            return [permissions.AllowAny()]
        return [IsAdmin()]

    def get_queryset(self):
        qs = self.model.objects.order_by("-created_at")
        status_value = self.request.query_params.get("status")
        if status_value:
            qs = qs.filter(status=status_value)
        return qs


# ===========================================================
# ВОПРОСЫ
# ===========================================================

class QuestionListCreateView(PublicCreateAdminListView):
    """GET/POST /api/questions/  (?status=&car=)"""
    model = Question
    serializer_class = QuestionSerializer

    def get_queryset(self):
        qs = super().get_queryset().select_related("car", "answered_by")
        car = self.request.query_params.get("car")
        if car:
            qs = qs.filter(car_id=car)
        return qs


class QuestionDetailView(APIView):
    """
    GET    /api/questions/<id>/
    PATCH  /api/questions/<id>/  {"answer": "...", "status": "answered"}
    DELETE /api/questions/<id>/
    """
    permission_classes = [IsAdmin]

    def get(self, request, pk):
        question = get_object_or_404(Question, pk=pk)
        return Response(QuestionSerializer(question).data)

    def patch(self, request, pk):
        question = get_object_or_404(Question, pk=pk)
        serializer = QuestionUpdateSerializer(question, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        extra = {}
        if serializer.validated_data.get("answer"):
            extra = {"answered_by": request.user, "answered_at": timezone.now()}
            if "status" not in serializer.validated_data:
                extra["status"] = Question.Status.ANSWERED
        serializer.save(**extra)
        return Response(QuestionSerializer(question).data)

    def delete(self, request, pk):
        get_object_or_404(Question, pk=pk).delete()
        return Response(status=204)


# ===========================================================
# ОБРАЩЕНИЯ
# ===========================================================

class ContactQueryListCreateView(PublicCreateAdminListView):
    """GET/POST /api/contact-queries/  (?status=)"""
    model = ContactQuery
    serializer_class = ContactQuerySerializer


class ContactQueryDetailView(APIView):
    """GET/PATCH/DELETE /api/contact-queries/<id>/"""
    permission_classes = [IsAdmin]

    def get(self, request, pk):
        query = get_object_or_404(ContactQuery, pk=pk)
        return Response(ContactQuerySerializer(query).data)

    def patch(self, request, pk):
        query = get_object_or_404(ContactQuery, pk=pk)
        serializer = ContactQueryUpdateSerializer(query, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        extra = {}
        if serializer.validated_data.get("status") == ContactQuery.Status.REPLIED:
            extra = {"replied_by": request.user, "replied_at": timezone.now()}
        serializer.save(**extra)
        return Response(ContactQuerySerializer(query).data)

    def delete(self, request, pk):
        get_object_or_404(ContactQuery, pk=pk).delete()
        return Response(status=204)
