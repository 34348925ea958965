# Путь: backend/seo/models.py
# Назначение: Абстрактная модель с SEO-полями (slug, seo_title, seo_description, canonical_url).
# Наследуют: Car, Category, Blog, MainBlog, SpecialSection.
# Логика save():
#   1) Явный slug нормализуется и сохраняется как есть (дубль -> SlugConflict).
#   2) Пустой slug строится из названия и делается уникальным (base, base-1, ...).
#   3) SEO-поля заполняются только если пусты (fill-if-absent).
#   4) Уникальный индекс в БД - источник истины: при гонке двух сохранений
#      ловим IntegrityError, пересчитываем slug и повторяем (ограниченно).

import logging

from django.conf import settings
from django.db import IntegrityError, models, transaction

from . import meta
from .exceptions import SlugConflict
from .slug_utils import slugify_text, unique_slug

logger = logging.getLogger(__name__)

SLUG_MAX_LENGTH = 255
# запас под суффикс "-N"
SLUG_BASE_MAX_LENGTH = 200
SEO_FIELDS = ("slug", "seo_title", "seo_description", "canonical_url")


class SeoFieldsModel(models.Model):
    slug = models.SlugField("Слаг", max_length=SLUG_MAX_LENGTH, unique=True, blank=True)
    seo_title = models.CharField("SEO-заголовок", max_length=255, blank=True, default="")
    seo_description = models.CharField("SEO-описание", max_length=300, blank=True, default="")
    canonical_url = models.URLField("Канонический URL", max_length=500, blank=True, default="")

    SLUG_SOURCE_FIELD = "name"
    SLUG_FALLBACK = "item"
    SEO_ROUTE = None

    class Meta:
        abstract = True

    # ---- источники для генерации (переопределяются в моделях) ----

    def get_slug_source(self) -> str:
        return getattr(self, self.SLUG_SOURCE_FIELD, "") or ""

    def get_seo_title_source(self) -> str:
        return self.get_slug_source()

    def get_seo_description_source(self) -> str:
        return ""

    # ---- slug ----

    def build_base_slug(self) -> str:
        return slugify_text(self.get_slug_source())[:SLUG_BASE_MAX_LENGTH].strip("-")

    def resolve_slug(self) -> str:
        return unique_slug(type(self), self.build_base_slug(), exclude_id=self.pk, fallback=self.SLUG_FALLBACK)

    def slug_taken(self) -> bool:
        qs = type(self)._default_manager.filter(slug=self.slug)
        if self.pk is not None:
            qs = qs.exclude(pk=self.pk)
        return qs.exists()

    # ---- SEO ----

    def fill_seo_fields(self) -> list:
        """Заполняет пустые SEO-поля. Возвращает список заполненных полей."""
        filled = []
        if not self.seo_title:
            self.seo_title = meta.seo_title(self.get_seo_title_source())[:255]
            filled.append("seo_title")
        if not self.seo_description:
            self.seo_description = meta.seo_description(self.get_seo_description_source())
            filled.append("seo_description")
        if self.canonical_url:
            self.canonical_url = meta.canonical_url(override=self.canonical_url)
        else:
            self.canonical_url = meta.canonical_url(route_prefix=self.SEO_ROUTE, slug=self.slug)
            filled.append("canonical_url")
        return filled

    def seo_fields_missing(self) -> bool:
        return not all(getattr(self, name) for name in SEO_FIELDS)

    def get_seo_path(self) -> str:
        if not self.SEO_ROUTE:
            return "/"
        return f"/{self.SEO_ROUTE.strip('/')}/{self.slug}"

    def get_absolute_url(self):
        return self.get_seo_path()

    # ---- сохранение ----

    def save(self, *args, **kwargs):
        explicit_slug = slugify_text(self.slug)[:SLUG_MAX_LENGTH].strip("-")
        derived_slug = not explicit_slug
        self.slug = explicit_slug or self.resolve_slug()

        filled = self.fill_seo_fields()
        derived_canonical = "canonical_url" in filled

        update_fields = kwargs.get("update_fields")
        if update_fields is not None:
            kwargs["update_fields"] = set(update_fields) | {"slug", "canonical_url"} | set(filled)

        retries = getattr(settings, "SLUG_SAVE_RETRIES", 3)
        attempt = 0
        while True:
            try:
                with transaction.atomic():
                    return super().save(*args, **kwargs)
            except IntegrityError:
                if not self.slug_taken():
                    raise
                if not derived_slug or attempt >= retries:
                    logger.error(
                        "%s: slug %r is taken, giving up after %s retries",
                        type(self).__name__, self.slug, attempt,
                    )
                    raise SlugConflict()
                attempt += 1
                logger.warning(
                    "%s: slug %r was taken concurrently, re-resolving (attempt %s/%s)",
                    type(self).__name__, self.slug, attempt, retries,
                )
                self.slug = self.resolve_slug()
                if derived_canonical:
                    self.canonical_url = meta.canonical_url(route_prefix=self.SEO_ROUTE, slug=self.slug)
