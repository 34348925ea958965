# Путь: backend/blog/models.py
# Назначение: Статьи блога (привязаны к категории авто) и записи главного блога.
# Обновления:
#   ✅ Обе модели наследуют SeoFieldsModel: slug из заголовка, SEO-поля fill-if-absent.
#   ✅ SEO-адреса: /blog/<slug> и /main-blog/<slug>.
#   ✅ Blog: краткое описание заполняется из HTML-контента, если не задано.

from django.conf import settings
from django.db import models
from django.db.models import F

from cars.models import Category
from seo.meta import seo_description
from seo.models import SeoFieldsModel

BLOG_SUMMARY_LENGTH = 150


class ViewCounterMixin:
    def increment_views(self):
        # атомарно в БД, без гонки между параллельными просмотрами
        type(self).objects.filter(pk=self.pk).update(views=F("views") + 1)
        self.refresh_from_db(fields=["views"])


# ==============================
# БЛОГ (статьи по категориям)
# ==============================

class Blog(ViewCounterMixin, SeoFieldsModel):
    title = models.CharField("Заголовок", max_length=255)
    category = models.ForeignKey(Category, on_delete=models.PROTECT, related_name="blogs", verbose_name="Категория")
    content = models.TextField("Содержимое (HTML)")
    description = models.TextField("Краткое описание", blank=True, default="")
    published = models.BooleanField("Опубликовано", default=True, db_index=True)
    featured_image = models.ImageField("Обложка", upload_to="blogs/", blank=True, null=True)
    views = models.PositiveIntegerField("Просмотры", default=0)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, verbose_name="Автор"
    )
    created_at = models.DateTimeField("Создано", auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField("Обновлено", auto_now=True)

    SLUG_SOURCE_FIELD = "title"
    SLUG_FALLBACK = "blog"
    SEO_ROUTE = "/blog"

    class Meta:
        verbose_name = "Статья блога"
        verbose_name_plural = "Статьи блога"
        ordering = ["-created_at"]

    def get_seo_description_source(self):
        return self.description or self.content

    def save(self, *args, **kwargs):
        if not self.description and self.content:
            self.description = seo_description(self.content, max_length=BLOG_SUMMARY_LENGTH, default="")
            update_fields = kwargs.get("update_fields")
            if update_fields is not None:
                kwargs["update_fields"] = set(update_fields) | {"description"}
        super().save(*args, **kwargs)

    def __str__(self):
        return self.title


# ==============================
# ГЛАВНЫЙ БЛОГ
# ==============================

class MainBlog(ViewCounterMixin, SeoFieldsModel):
    blog_title = models.CharField("Заголовок", max_length=255)
    description = models.TextField("Текст")
    image = models.ImageField("Картинка", upload_to="main-blogs/", blank=True, null=True)
    is_published = models.BooleanField("Опубликовано", default=False, db_index=True)
    views = models.PositiveIntegerField("Просмотры", default=0)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, verbose_name="Автор"
    )
    created_at = models.DateTimeField("Создано", auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField("Обновлено", auto_now=True)

    SLUG_SOURCE_FIELD = "blog_title"
    SLUG_FALLBACK = "main-blog"
    SEO_ROUTE = "/main-blog"

    class Meta:
        verbose_name = "Запись главного блога"
        verbose_name_plural = "Главный блог"
        ordering = ["-created_at"]

    def get_seo_description_source(self):
        return self.description

    def __str__(self):
        return self.blog_title
