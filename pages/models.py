# Путь: backend/pages/models.py
# Назначение: Спецсекции главной страницы (CMS-блоки: заголовок, HTML-текст, картинка слева/справа).
# Особенности:
#   • Порядок вывода - по полю order, затем новые выше.
#   • slug/SEO-поля - через SeoFieldsModel. Своего маршрута у секции нет,
#     поэтому canonical_url по умолчанию - главная страница сайта.

from django.conf import settings
from django.db import models

from seo.models import SeoFieldsModel


class SpecialSection(SeoFieldsModel):
    class ImagePosition(models.TextChoices):
        LEFT = "left", "Слева"
        RIGHT = "right", "Справа"

    title = models.CharField("Заголовок", max_length=255)
    content = models.TextField("Содержимое (HTML)")
    image = models.ImageField("Картинка", upload_to="special-sections/")
    image_position = models.CharField(
        "Положение картинки", max_length=8, choices=ImagePosition.choices, default=ImagePosition.RIGHT
    )
    background_color = models.CharField("Цвет фона", max_length=32, default="white")  # white, #f4f7fc, #e7ecf5
    order = models.IntegerField("Порядок", default=0)
    is_active = models.BooleanField("Активна", default=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, verbose_name="Создал"
    )
    created_at = models.DateTimeField("Создано", auto_now_add=True)
    updated_at = models.DateTimeField("Обновлено", auto_now=True)

    SLUG_SOURCE_FIELD = "title"
    SLUG_FALLBACK = "section"
    SEO_ROUTE = None

    class Meta:
        verbose_name = "Спецсекция"
        verbose_name_plural = "Спецсекции"
        ordering = ["order", "-created_at"]
        indexes = [
            models.Index(fields=["is_active", "order"], name="section_active_order_idx"),
        ]

    def get_seo_description_source(self):
        return self.content

    def __str__(self):
        return self.title
