# Путь: backend/inquiries/serializers.py
# Назначение: Сериализаторы вопросов и обращений.
#   • Публичная форма заполняет только контактные поля и текст.
#   • Статус, ответ и заметки меняет администратор (см. views).

from rest_framework import serializers

from .models import ContactQuery, Question


class QuestionSerializer(serializers.ModelSerializer):
    answered_by = serializers.StringRelatedField(read_only=True)

    class Meta:
        model = Question
        fields = [
            "id", "car", "customer_name", "email", "phone", "subject", "message",
            "status", "answer", "answered_by", "answered_at", "created_at", "updated_at",
        ]
        read_only_fields = ["id", "status", "answer", "answered_by", "answered_at", "created_at", "updated_at"]

    def validate_email(self, value):
        return value.strip().lower()


class QuestionUpdateSerializer(serializers.ModelSerializer):
    class Meta:
        model = Question
        fields = ["status", "answer"]


class ContactQuerySerializer(serializers.ModelSerializer):
    replied_by = serializers.StringRelatedField(read_only=True)

    class Meta:
        model = ContactQuery
        fields = [
            "id", "name", "email", "phone", "message",
            "status", "notes", "replied_by", "replied_at", "created_at", "updated_at",
        ]
        read_only_fields = ["id", "status", "notes", "replied_by", "replied_at", "created_at", "updated_at"]

    def validate_email(self, value):
        return value.strip().lower()


class ContactQueryUpdateSerializer(serializers.ModelSerializer):
    class Meta:
        model = ContactQuery
        fields = ["status", "notes"]
