# Путь: backend/seo/slug_utils.py
# Назначение: Транслитерация в латиницу и безопасная генерация уникальных slug
#             для машин, категорий, блогов и спецсекций.
# Особенности:
#   ✅ slug содержит только [a-z0-9-], без дефисов по краям и без двойных дефисов.
#   ✅ Подчёркивания схлопываются в дефис вместе с пробелами.
#   ✅ Уникальность: base, base-1, base-2, ... (каждая коллекция отдельно).

import re

from django.utils.text import slugify
from unidecode import unidecode

_SEPARATORS_RE = re.compile(r"[\s_-]+")


def slugify_text(text) -> str:
    """
    Примеры:
      'Honda Civic 2024'  -> 'honda-civic-2024'
      '  SUV & 4x4 '      -> 'suv-4x4'
      'Toyota_Corolla--X' -> 'toyota-corolla-x'
      'Škoda Octavia'     -> 'skoda-octavia'
    Пустой ввод или не-строка -> ''.
    """
    if not text or not isinstance(text, str):
        return ""
    base = slugify(unidecode(text))
    return _SEPARATORS_RE.sub("-", base).strip("-")


def make_unique(base_slug: str, exists, fallback: str = "item") -> str:
    """
    Обеспечивает уникальность: base, base-1, base-2, ...
    exists(slug)->bool: функция «занят ли такой slug» (запись, которую
    обновляем, исключается на стороне exists).
    Пустой base заменяется на fallback (обычно имя сущности).
    """
    base = (base_slug or "").strip("-") or fallback
    candidate = base
    counter = 1
    while exists(candidate):
        candidate = f"{base}-{counter}"
        counter += 1
    return candidate


def unique_slug(model, base_slug: str, exclude_id=None, fallback: str = "item") -> str:
    """Уникальный slug в пределах одной модели (своя запись не считается дублем)."""
    qs = model._default_manager.all()
    if exclude_id is not None:
        qs = qs.exclude(pk=exclude_id)
    return make_unique(base_slug, lambda s: qs.filter(slug=s).exists(), fallback=fallback)
