"""API блогов, главного блога и спецсекций."""

import pytest

from blog.models import Blog, MainBlog
from pages.models import SpecialSection

pytestmark = pytest.mark.django_db


@pytest.fixture
def published_blog(category):
    return Blog.objects.create(title="Top 5 Cars for Family Trips", category=category, content="<p>Our picks.</p>")


@pytest.fixture
def draft_blog(category):
    return Blog.objects.create(title="Draft Post", category=category, content="<p>WIP</p>", published=False)


class TestBlogs:
    def test_anonymous_sees_published_only(self, api_client, published_blog, draft_blog):
        resp = api_client.get("/api/blogs/")
        assert [b["slug"] for b in resp.data["results"]] == ["top-5-cars-for-family-trips"]

    def test_admin_sees_drafts(self, admin_client, published_blog, draft_blog):
        resp = admin_client.get("/api/blogs/")
        assert resp.data["count"] == 2
        resp = admin_client.get("/api/blogs/", {"published": "false"})
        assert [b["slug"] for b in resp.data["results"]] == ["draft-post"]

    def test_anonymous_cannot_ask_for_drafts(self, api_client, draft_blog):
        assert api_client.get("/api/blogs/", {"published": "false"}).data["count"] == 0

    def test_search(self, api_client, published_blog):
        assert api_client.get("/api/blogs/", {"search": "family"}).data["count"] == 1
        assert api_client.get("/api/blogs/", {"search": "bicycle"}).data["count"] == 0

    def test_draft_hidden_by_slug(self, api_client, draft_blog):
        assert api_client.get("/api/blogs/slug/draft-post/").status_code == 404

    def test_views_increment(self, api_client, published_blog):
        api_client.get(f"/api/blogs/{published_blog.pk}/")
        resp = api_client.get(f"/api/blogs/slug/{published_blog.slug}/")
        assert resp.status_code == 200
        assert resp.data["views"] == 2

    def test_admin_create(self, admin_client, category):
        resp = admin_client.post(
            "/api/blogs/",
            {"title": "Renting in Ramadan", "category": category.pk, "content": "<p>Tips for <b>Ramadan</b>.</p>"},
            format="json",
        )
        assert resp.status_code == 201
        assert resp.data["slug"] == "renting-in-ramadan"
        assert resp.data["description"] == "Tips for Ramadan."
        assert resp.data["seo_path"] == "/blog/renting-in-ramadan"

    def test_publish_toggle(self, admin_client, draft_blog):
        resp = admin_client.patch(f"/api/blogs/{draft_blog.pk}/publish/")
        assert resp.status_code == 200
        assert resp.data["published"] is True


class TestMainBlogs:
    def test_unpublished_by_default(self, admin_client, api_client):
        resp = admin_client.post(
            "/api/main-blogs/", {"blog_title": "Travel North", "description": "<p>Hunza.</p>"}, format="json"
        )
        assert resp.status_code == 201
        assert resp.data["is_published"] is False
        assert resp.data["canonical_url"] == "https://convoytravels.pk/main-blog/travel-north"
        assert api_client.get("/api/main-blogs/").data["count"] == 0

    def test_blank_title_rejected(self, admin_client):
        resp = admin_client.post("/api/main-blogs/", {"blog_title": "   ", "description": "x"}, format="json")
        assert resp.status_code == 400

    def test_publish_and_read(self, admin_client, api_client):
        post = MainBlog.objects.create(blog_title="Travel North", description="Hunza")
        admin_client.patch(f"/api/main-blogs/{post.pk}/publish/")
        resp = api_client.get("/api/main-blogs/slug/travel-north/")
        assert resp.status_code == 200
        assert resp.data["views"] == 1


class TestSpecialSections:
    def test_admin_create_with_image(self, admin_client, image_file):
        resp = admin_client.post(
            "/api/special-sections/",
            {"title": "Why Choose Us", "content": "<p>Best fleet</p>", "image": image_file, "order": 1, "is_active": "true"},
            format="multipart",
        )
        assert resp.status_code == 201
        assert resp.data["slug"] == "why-choose-us"
        assert resp.data["canonical_url"] == "https://convoytravels.pk"

    def test_ordering_and_active_filter(self, api_client):
        SpecialSection.objects.create(title="Second", content="b", image="special-sections/b.png", order=2)
        SpecialSection.objects.create(title="First", content="a", image="special-sections/a.png", order=1)
        SpecialSection.objects.create(title="Hidden", content="c", image="special-sections/c.png", is_active=False)
        resp = api_client.get("/api/special-sections/", {"active": "true"})
        assert [s["slug"] for s in resp.data["results"]] == ["first", "second"]

    def test_slug_lookup_only_active(self, api_client, admin_client):
        section = SpecialSection.objects.create(title="Promo", content="x", image="special-sections/p.png")
        assert api_client.get("/api/special-sections/slug/promo/").status_code == 200
        resp = admin_client.patch(f"/api/special-sections/{section.pk}/toggle/")
        assert resp.data["is_active"] is False
        assert api_client.get("/api/special-sections/slug/promo/").status_code == 404
