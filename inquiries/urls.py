# Путь: backend/inquiries/urls.py
# Назначение: Маршруты вопросов и обращений (префикс /api/ - на уровне проекта).

from django.urls import path

from .views import (
    ContactQueryDetailView,
    ContactQueryListCreateView,
    QuestionDetailView,
    QuestionListCreateView,
)

urlpatterns = [
    path("questions/", QuestionListCreateView.as_view(), name="question_list"),
    path("questions/<int:pk>/", QuestionDetailView.as_view(), name="question_detail"),
    path("contact-queries/", ContactQueryListCreateView.as_view(), name="contact_query_list"),
    path("contact-queries/<int:pk>/", ContactQueryDetailView.as_view(), name="contact_query_detail"),
]
