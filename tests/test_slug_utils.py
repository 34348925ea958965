"""Нормализация slug и подбор уникального значения."""

import re

import pytest

from seo.slug_utils import make_unique, slugify_text

SLUG_RE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


class TestSlugifyText:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Honda Civic", "honda-civic"),
            ("Honda Civic 2024", "honda-civic-2024"),
            ("  SUV & 4x4 ", "suv-4x4"),
            ("Toyota_Corolla--X", "toyota-corolla-x"),
            ("Škoda Octavia", "skoda-octavia"),
            ("Привет мир", "privet-mir"),
            ("---Edge---", "edge"),
        ],
    )
    def test_examples(self, text, expected):
        assert slugify_text(text) == expected

    @pytest.mark.parametrize("text", ["", None, "!!!", "   ", 42])
    def test_empty_or_invalid_input(self, text):
        assert slugify_text(text) == ""

    @pytest.mark.parametrize("text", ["Honda Civic", "a__b  c--d", "Café au lait", "X_Trail 4WD!"])
    def test_result_is_canonical_and_idempotent(self, text):
        slug = slugify_text(text)
        assert SLUG_RE.match(slug)
        assert slugify_text(slug) == slug


class TestMakeUnique:
    def test_free_base_is_returned(self):
        assert make_unique("honda-civic", lambda s: False) == "honda-civic"

    def test_numeric_suffix_starts_at_one(self):
        taken = {"honda-civic"}
        assert make_unique("honda-civic", taken.__contains__) == "honda-civic-1"

    def test_skips_taken_suffixes(self):
        taken = {"honda-civic", "honda-civic-1", "honda-civic-2"}
        assert make_unique("honda-civic", taken.__contains__) == "honda-civic-3"

    def test_empty_base_uses_fallback(self):
        assert make_unique("", lambda s: False, fallback="car") == "car"

    def test_fallback_is_made_unique_too(self):
        taken = {"section"}
        assert make_unique("", taken.__contains__, fallback="section") == "section-1"
