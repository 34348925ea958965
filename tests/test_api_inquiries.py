"""API вопросов по авто и обращений с формы контактов."""

import pytest

from inquiries.models import ContactQuery, Question

pytestmark = pytest.mark.django_db


class TestQuestions:
    def test_public_create(self, api_client, car):
        resp = api_client.post(
            "/api/questions/",
            {
                "car": car.pk,
                "customer_name": "Sara",
                "email": "SARA@example.com",
                "phone": "0300",
                "subject": "Child seat?",
                "message": "Do you provide a child seat?",
                "status": "answered",
            },
            format="json",
        )
        assert resp.status_code == 201
        assert resp.data["status"] == "pending"
        assert resp.data["email"] == "sara@example.com"

    def test_list_is_admin_only(self, api_client, user_client, admin_client):
        assert api_client.get("/api/questions/").status_code == 401
        assert user_client.get("/api/questions/").status_code == 403
        assert admin_client.get("/api/questions/").status_code == 200

    def test_answer_records_who_and_when(self, admin_client, admin_user):
        question = Question.objects.create(
            customer_name="Sara", email="s@example.com", phone="0300", subject="Seat", message="?"
        )
        resp = admin_client.patch(f"/api/questions/{question.pk}/", {"answer": "Yes, free of charge."}, format="json")
        assert resp.status_code == 200
        question.refresh_from_db()
        assert question.status == Question.Status.ANSWERED
        assert question.answered_by == admin_user
        assert question.answered_at is not None

    def test_delete(self, admin_client):
        question = Question.objects.create(customer_name="A", email="a@example.com", phone="1", subject="s", message="m")
        assert admin_client.delete(f"/api/questions/{question.pk}/").status_code == 204
        assert not Question.objects.exists()


class TestContactQueries:
    def test_public_create(self, api_client):
        resp = api_client.post(
            "/api/contact-queries/",
            {"name": "Bilal", "email": "bilal@example.com", "phone": "0321", "message": "Need a van"},
            format="json",
        )
        assert resp.status_code == 201
        assert resp.data["status"] == "new"

    def test_reply_marks_replied(self, admin_client, admin_user):
        query = ContactQuery.objects.create(name="Bilal", email="b@example.com", phone="0321", message="Van")
        resp = admin_client.patch(
            f"/api/contact-queries/{query.pk}/", {"status": "replied", "notes": "Called back"}, format="json"
        )
        assert resp.status_code == 200
        query.refresh_from_db()
        assert query.replied_by == admin_user
        assert query.notes == "Called back"

    def test_filter_by_status(self, admin_client):
        ContactQuery.objects.create(name="A", email="a@example.com", phone="1", message="m")
        ContactQuery.objects.create(name="B", email="b@example.com", phone="2", message="m", status="archived")
        resp = admin_client.get("/api/contact-queries/", {"status": "archived"})
        assert resp.data["count"] == 1
