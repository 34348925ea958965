"""SEO-заголовок, описание и канонический адрес."""

from seo.meta import ELLIPSIS, canonical_url, seo_description, seo_title


class TestSeoTitle:
    def test_name_with_suffix(self):
        assert seo_title("Honda Civic") == "Honda Civic | Convoy Travels"

    def test_custom_suffix(self):
        assert seo_title("  Honda Civic ", suffix="- Rentals") == "Honda Civic - Rentals"

    def test_empty_name_falls_back_to_suffix(self):
        assert seo_title("") == "| Convoy Travels"
        assert seo_title(None, suffix="", site_name="Convoy") == "Convoy"


class TestSeoDescription:
    def test_short_text_is_kept(self):
        assert seo_description("Comfortable sedan.") == "Comfortable sedan."

    def test_html_is_stripped(self):
        assert seo_description("<p>Hello <b>world</b></p>") == "Hello world"

    def test_empty_input_returns_default(self, settings):
        settings.SEO_DEFAULT_DESCRIPTION = "Default text"
        assert seo_description("") == "Default text"
        assert seo_description(None) == "Default text"
        assert seo_description("<p></p>") == "Default text"

    def test_explicit_default(self):
        assert seo_description("", default="") == ""

    def test_cut_on_word_boundary(self):
        text = "word " * 100
        result = seo_description(text, max_length=20)
        assert result == "word word word word" + ELLIPSIS

    def test_long_word_is_cut_hard(self):
        result = seo_description("a" * 200)
        assert result == "a" * 160 + ELLIPSIS
        assert len(result) == 161

    def test_length_bound(self):
        text = "Rent a comfortable car in Lahore with or without driver. " * 10
        result = seo_description(text, max_length=160)
        assert len(result) <= 161
        assert result.endswith(ELLIPSIS)
        assert not result[:-1].endswith(" ")


class TestCanonicalUrl:
    def test_route_and_slug(self):
        assert canonical_url("https://example.com", "/cars", "honda-civic") == "https://example.com/cars/honda-civic"

    def test_slashes_are_normalized(self):
        assert canonical_url("https://example.com/", "cars/", "/honda-civic") == "https://example.com/cars/honda-civic"

    def test_no_route_is_site_root(self):
        assert canonical_url("https://example.com/") == "https://example.com"

    def test_default_base_from_settings(self):
        assert canonical_url(route_prefix="/blog", slug="spring-trip") == "https://convoytravels.pk/blog/spring-trip"

    def test_absolute_override_is_kept(self):
        url = "https://other.example.com/page"
        assert canonical_url("https://example.com", "/cars", "x", override=url) == url

    def test_relative_override_gets_domain(self):
        assert canonical_url("https://example.com", override="/promo/civic") == "https://example.com/promo/civic"
        assert canonical_url("https://example.com", override="promo") == "https://example.com/promo"
