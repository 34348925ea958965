import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("cars", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Blog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("slug", models.SlugField(blank=True, max_length=255, unique=True, verbose_name="Слаг")),
                ("seo_title", models.CharField(blank=True, default="", max_length=255, verbose_name="SEO-заголовок")),
                ("seo_description", models.CharField(blank=True, default="", max_length=300, verbose_name="SEO-описание")),
                ("canonical_url", models.URLField(blank=True, default="", max_length=500, verbose_name="Канонический URL")),
                ("title", models.CharField(max_length=255, verbose_name="Заголовок")),
                ("content", models.TextField(verbose_name="Содержимое (HTML)")),
                ("description", models.TextField(blank=True, default="", verbose_name="Краткое описание")),
                ("published", models.BooleanField(db_index=True, default=True, verbose_name="Опубликовано")),
                ("featured_image", models.ImageField(blank=True, null=True, upload_to="blogs/", verbose_name="Обложка")),
                ("views", models.PositiveIntegerField(default=0, verbose_name="Просмотры")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, verbose_name="Создано")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Обновлено")),
                ("category", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="blogs", to="cars.category", verbose_name="Категория")),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to=settings.AUTH_USER_MODEL, verbose_name="Автор")),
            ],
            options={
                "verbose_name": "Статья блога",
                "verbose_name_plural": "Статьи блога",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="MainBlog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("slug", models.SlugField(blank=True, max_length=255, unique=True, verbose_name="Слаг")),
                ("seo_title", models.CharField(blank=True, default="", max_length=255, verbose_name="SEO-заголовок")),
                ("seo_description", models.CharField(blank=True, default="", max_length=300, verbose_name="SEO-описание")),
                ("canonical_url", models.URLField(blank=True, default="", max_length=500, verbose_name="Канонический URL")),
                ("blog_title", models.CharField(max_length=255, verbose_name="Заголовок")),
                ("description", models.TextField(verbose_name="Текст")),
                ("image", models.ImageField(blank=True, null=True, upload_to="main-blogs/", verbose_name="Картинка")),
                ("is_published", models.BooleanField(db_index=True, default=False, verbose_name="Опубликовано")),
                ("views", models.PositiveIntegerField(default=0, verbose_name="Просмотры")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, verbose_name="Создано")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Обновлено")),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to=settings.AUTH_USER_MODEL, verbose_name="Автор")),
            ],
            options={
                "verbose_name": "Запись главного блога",
                "verbose_name_plural": "Главный блог",
                "ordering": ["-created_at"],
            },
        ),
    ]
