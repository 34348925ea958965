"""Команда backfill_seo_fields: заполнение пустых SEO-полей у старых записей."""

from io import StringIO

import pytest
from django.core.management import CommandError, call_command

from blog.models import MainBlog
from cars.models import Car, Category

from .conftest import make_car

pytestmark = pytest.mark.django_db


def run(*args):
    out = StringIO()
    call_command("backfill_seo_fields", *args, stdout=out)
    return out.getvalue()


def wipe_seo(model, pk, **extra):
    model.objects.filter(pk=pk).update(seo_title="", seo_description="", canonical_url="", **extra)


class TestBackfillSeoFields:
    def test_fills_missing_fields(self, car):
        wipe_seo(Car, car.pk, slug="")
        run()
        car.refresh_from_db()
        assert car.slug == "honda-civic"
        assert car.seo_title == "Honda Civic | Convoy Travels"
        assert car.canonical_url == "https://convoytravels.pk/cars/honda-civic"
        assert car.seo_description.startswith("Rent Honda Civic")

    def test_keeps_existing_values(self, car):
        Car.objects.filter(pk=car.pk).update(seo_title="Hand written", canonical_url="")
        run()
        car.refresh_from_db()
        assert car.seo_title == "Hand written"
        assert car.canonical_url == "https://convoytravels.pk/cars/honda-civic"

    def test_dry_run_changes_nothing(self, car):
        wipe_seo(Car, car.pk, slug="")
        output = run("--dry-run")
        car.refresh_from_db()
        assert car.slug == ""
        assert car.seo_title == ""
        assert "honda-civic" in output
        assert "DRY-RUN" in output

    def test_second_run_is_noop(self, car, category):
        wipe_seo(Car, car.pk)
        wipe_seo(Category, category.pk)
        run()
        output = run()
        assert "cars.Car: нечего заполнять" in output
        assert "cars.Category: нечего заполнять" in output

    def test_slug_avoids_taken_values(self, category):
        older = make_car(category)
        newer = make_car(category, registration_number="LEA-1002")
        wipe_seo(Car, older.pk, slug="")
        run()
        older.refresh_from_db()
        newer.refresh_from_db()
        assert newer.slug == "honda-civic-1"
        assert older.slug == "honda-civic"

    def test_model_filter(self, car):
        post = MainBlog.objects.create(blog_title="Road trip", description="Text")
        wipe_seo(Car, car.pk)
        wipe_seo(MainBlog, post.pk)
        run("--model", "blog.MainBlog")
        car.refresh_from_db()
        post.refresh_from_db()
        assert post.seo_title == "Road trip | Convoy Travels"
        assert car.seo_title == ""

    def test_rejects_unknown_model(self):
        with pytest.raises(CommandError):
            run("--model", "cars.Booking")
        with pytest.raises(CommandError):
            run("--model", "nope.Nothing")
