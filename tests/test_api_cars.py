"""API категорий, автомобилей и бронирований."""

import pytest

from cars.models import Booking, Car

from .conftest import make_car

pytestmark = pytest.mark.django_db

CAR_PAYLOAD = {
    "name": "Toyota Corolla",
    "brand": "Toyota",
    "model": "Corolla",
    "year": 2023,
    "rent_per_day": "5000.00",
    "city": "Lahore",
    "transmission": "Automatic",
    "fuel_type": "Petrol",
    "seats": 5,
    "registration_number": "lea-7777",
}


def car_payload(category, **overrides):
    data = dict(CAR_PAYLOAD, category=category.pk)
    data.update(overrides)
    return data


class TestCategories:
    def test_public_list(self, api_client, category):
        resp = api_client.get("/api/categories/")
        assert resp.status_code == 200
        assert resp.data["results"][0]["slug"] == "sedan"

    def test_create_requires_admin(self, user_client):
        resp = user_client.post("/api/categories/", {"name": "SUV", "description": "Big cars"}, format="json")
        assert resp.status_code == 403

    def test_admin_create_and_lookup_by_slug(self, admin_client, api_client):
        resp = admin_client.post("/api/categories/", {"name": "Luxury SUV", "description": "Premium"}, format="json")
        assert resp.status_code == 201
        assert resp.data["slug"] == "luxury-suv"
        assert resp.data["seo_path"] == "/vehicle-types/luxury-suv"
        assert api_client.get("/api/categories/slug/luxury-suv/").status_code == 200

    def test_status_toggle(self, admin_client, category):
        resp = admin_client.patch(f"/api/categories/{category.pk}/status/")
        assert resp.status_code == 200
        assert resp.data["status"] == "Inactive"

    def test_delete_with_cars_is_rejected(self, admin_client, car, category):
        resp = admin_client.delete(f"/api/categories/{category.pk}/")
        assert resp.status_code == 400


class TestCars:
    def test_anonymous_cannot_create(self, api_client, category):
        resp = api_client.post("/api/cars/", car_payload(category), format="json")
        assert resp.status_code == 401

    def test_create_fills_slug_and_seo(self, admin_client, category, admin_user):
        resp = admin_client.post("/api/cars/", car_payload(category), format="json")
        assert resp.status_code == 201
        assert resp.data["slug"] == "toyota-corolla"
        assert resp.data["seo_title"] == "Toyota Corolla | Convoy Travels"
        assert resp.data["canonical_url"] == "https://convoytravels.pk/cars/toyota-corolla"
        assert resp.data["registration_number"] == "LEA-7777"
        assert Car.objects.get(pk=resp.data["id"]).created_by == admin_user

    def test_same_name_gets_suffix(self, admin_client, category):
        admin_client.post("/api/cars/", car_payload(category), format="json")
        resp = admin_client.post("/api/cars/", car_payload(category, registration_number="LEA-7778"), format="json")
        assert resp.status_code == 201
        assert resp.data["slug"] == "toyota-corolla-1"

    def test_explicit_duplicate_slug_is_409(self, admin_client, car, category):
        resp = admin_client.post("/api/cars/", car_payload(category, slug="honda-civic"), format="json")
        assert resp.status_code == 409
        assert resp.data["detail"].code == "slug_conflict"

    def test_duplicate_registration_is_400(self, admin_client, car, category):
        resp = admin_client.post("/api/cars/", car_payload(category, registration_number="lea-1001"), format="json")
        assert resp.status_code == 400
        assert "registration_number" in resp.data

    def test_empty_slug_on_update_keeps_existing(self, admin_client, car):
        resp = admin_client.patch(f"/api/cars/{car.pk}/", {"slug": "", "name": "Honda Civic RS"}, format="json")
        assert resp.status_code == 200
        assert resp.data["slug"] == "honda-civic"

    def test_lookup_by_slug(self, api_client, car):
        resp = api_client.get("/api/cars/slug/honda-civic/")
        assert resp.status_code == 200
        assert resp.data["id"] == car.pk
        assert resp.data["category_detail"]["slug"] == "sedan"

    def test_filters(self, api_client, car, category):
        make_car(category, name="Suzuki Alto", brand="Suzuki", model="Alto", registration_number="LEA-3003",
                 city="Islamabad", is_available=False)
        resp = api_client.get("/api/cars/", {"city": "Lahore"})
        assert [c["slug"] for c in resp.data["results"]] == ["honda-civic"]
        resp = api_client.get("/api/cars/", {"is_available": "false"})
        assert [c["slug"] for c in resp.data["results"]] == ["suzuki-alto"]

    def test_availability_toggle(self, admin_client, car):
        resp = admin_client.patch(f"/api/cars/{car.pk}/availability/")
        assert resp.status_code == 200
        assert resp.data["is_available"] is False

    def test_status_change(self, admin_client, car):
        resp = admin_client.patch(f"/api/cars/{car.pk}/status/", {"status": "maintenance"}, format="json")
        assert resp.status_code == 200
        assert resp.data["status"] == "maintenance"
        resp = admin_client.patch(f"/api/cars/{car.pk}/status/", {"status": "flying"}, format="json")
        assert resp.status_code == 400


class TestBookings:
    PAYLOAD = {
        "customer_name": "Ali Khan",
        "email": "Ali@Example.com",
        "phone": "+92 300 0000000",
        "address": "Gulberg, Lahore",
        "pickup_date": "2025-06-01",
        "dropoff_date": "2025-06-04",
        "booking_option": "self_without_driver",
    }

    def test_public_create_calculates_price(self, api_client, car):
        resp = api_client.post("/api/bookings/", dict(self.PAYLOAD, car=car.pk), format="json")
        assert resp.status_code == 201
        assert resp.data["total_days"] == 3
        assert resp.data["calculated_total"] == "15000.00"
        assert resp.data["email"] == "ali@example.com"
        assert resp.data["status"] == "pending"

    def test_client_cannot_set_price(self, api_client, car):
        resp = api_client.post("/api/bookings/", dict(self.PAYLOAD, car=car.pk, calculated_total="1.00"), format="json")
        assert resp.status_code == 201
        assert resp.data["calculated_total"] == "15000.00"

    def test_dropoff_before_pickup(self, api_client, car):
        data = dict(self.PAYLOAD, car=car.pk, dropoff_date="2025-05-30")
        resp = api_client.post("/api/bookings/", data, format="json")
        assert resp.status_code == 400
        assert "dropoff_date" in resp.data

    def test_unavailable_car(self, api_client, car):
        car.is_available = False
        car.save()
        resp = api_client.post("/api/bookings/", dict(self.PAYLOAD, car=car.pk), format="json")
        assert resp.status_code == 400

    def test_list_is_admin_only(self, api_client, admin_client, car):
        api_client.post("/api/bookings/", dict(self.PAYLOAD, car=car.pk), format="json")
        assert api_client.get("/api/bookings/").status_code == 401
        resp = admin_client.get("/api/bookings/", {"status": "pending"})
        assert resp.status_code == 200
        assert resp.data["count"] == 1

    def test_status_update(self, api_client, admin_client, car):
        booking_id = api_client.post("/api/bookings/", dict(self.PAYLOAD, car=car.pk), format="json").data["id"]
        resp = admin_client.patch(f"/api/bookings/{booking_id}/status/", {"status": "approved"}, format="json")
        assert resp.status_code == 200
        assert Booking.objects.get(pk=booking_id).status == "approved"
        resp = admin_client.patch(f"/api/bookings/{booking_id}/status/", {"status": "lost"}, format="json")
        assert resp.status_code == 400
