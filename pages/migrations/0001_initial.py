import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="SpecialSection",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("slug", models.SlugField(blank=True, max_length=255, unique=True, verbose_name="Слаг")),
                ("seo_title", models.CharField(blank=True, default="", max_length=255, verbose_name="SEO-заголовок")),
                ("seo_description", models.CharField(blank=True, default="", max_length=300, verbose_name="SEO-описание")),
                ("canonical_url", models.URLField(blank=True, default="", max_length=500, verbose_name="Канонический URL")),
                ("title", models.CharField(max_length=255, verbose_name="Заголовок")),
                ("content", models.TextField(verbose_name="Содержимое (HTML)")),
                ("image", models.ImageField(upload_to="special-sections/", verbose_name="Картинка")),
                ("image_position", models.CharField(choices=[("left", "Слева"), ("right", "Справа")], default="right", max_length=8, verbose_name="Положение картинки")),
                ("background_color", models.CharField(default="white", max_length=32, verbose_name="Цвет фона")),
                ("order", models.IntegerField(default=0, verbose_name="Порядок")),
                ("is_active", models.BooleanField(default=True, verbose_name="Активна")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Создано")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Обновлено")),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to=settings.AUTH_USER_MODEL, verbose_name="Создал")),
            ],
            options={
                "verbose_name": "Спецсекция",
                "verbose_name_plural": "Спецсекции",
                "ordering": ["order", "-created_at"],
                "indexes": [models.Index(fields=["is_active", "order"], name="section_active_order_idx")],
            },
        ),
    ]
