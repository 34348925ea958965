# Путь: backend/seo/meta.py
# Назначение: SEO-метаданные для сущностей сайта: seo_title, seo_description, canonical_url.
# Правила:
#   • Функции никогда не падают - на пустой ввод отдают значения по умолчанию.
#   • Описание очищается от HTML и режется по границе слова (≤ max_length + «…»).
#   • canonical_url всегда абсолютный: SITE_BASE_URL + /маршрут + /slug.

import re

from django.conf import settings

SITE_NAME = "Convoy Travels"
SITE_BASE_URL = "https://convoytravels.pk"
SEO_TITLE_SUFFIX = "| Convoy Travels"
SEO_DEFAULT_DESCRIPTION = (
    "Rent a car in Lahore with Convoy Travels. "
    "Affordable car rental services with or without driver."
)
SEO_DESCRIPTION_MAX_LENGTH = 160
ELLIPSIS = "…"

_TAG_RE = re.compile(r"<[^>]*>")
_ABSOLUTE_URL_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")


def _setting(name, default):
    return getattr(settings, name, default)


def strip_tags(text: str) -> str:
    return _TAG_RE.sub("", text or "").strip()


def seo_title(name, suffix=None, site_name=None) -> str:
    """
    'Honda Civic' -> 'Honda Civic | Convoy Travels'
    Без имени возвращаем сам суффикс, а если нет и его - название сайта.
    """
    if suffix is None:
        suffix = _setting("SEO_TITLE_SUFFIX", SEO_TITLE_SUFFIX)
    if not name or not isinstance(name, str) or not name.strip():
        return suffix or site_name or _setting("SITE_NAME", SITE_NAME)
    name = name.strip()
    return f"{name} {suffix}" if suffix else name


def seo_description(content, max_length=None, default=None) -> str:
    """
    HTML -> чистый текст, обрезка по границе слова.
    Если после обрезки нет пробела - режем «как есть» и добавляем многоточие.
    """
    if max_length is None:
        max_length = _setting("SEO_DESCRIPTION_MAX_LENGTH", SEO_DESCRIPTION_MAX_LENGTH)
    if default is None:
        default = _setting("SEO_DEFAULT_DESCRIPTION", SEO_DEFAULT_DESCRIPTION)

    if not content or not isinstance(content, str):
        return default

    text = strip_tags(content)
    if not text:
        return default
    if len(text) <= max_length:
        return text

    truncated = text[:max_length]
    last_space = truncated.rfind(" ")
    if last_space > 0:
        truncated = truncated[:last_space].rstrip()
    return truncated + ELLIPSIS


def _leading_slash(path: str) -> str:
    return "/" + path.lstrip("/")


def canonical_url(base_domain=None, route_prefix=None, slug=None, override=None) -> str:
    """
    canonical_url("https://example.com", "/cars", "honda-civic")
        -> "https://example.com/cars/honda-civic"
    Абсолютный override возвращается без изменений, относительный - с доменом.
    Без маршрута - просто домен (главная страница).
    """
    if base_domain is None:
        base_domain = _setting("SITE_BASE_URL", SITE_BASE_URL)
    base = (base_domain or "").rstrip("/")

    if override and isinstance(override, str) and override.strip():
        override = override.strip()
        if _ABSOLUTE_URL_RE.match(override):
            return override
        return f"{base}{_leading_slash(override)}"

    if not route_prefix:
        return base

    route = route_prefix.strip("/")
    route = f"/{route}" if route else ""
    if slug:
        return f"{base}{route}{_leading_slash(slug)}"
    return f"{base}{route}" or base
