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
            name="ContactQuery",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=120, verbose_name="Имя")),
                ("email", models.EmailField(db_index=True, max_length=254, verbose_name="Email")),
                ("phone", models.CharField(max_length=30, verbose_name="Телефон")),
                ("message", models.TextField(max_length=2000, verbose_name="Сообщение")),
                ("status", models.CharField(choices=[("new", "Новое"), ("read", "Прочитано"), ("replied", "Отвечено"), ("archived", "В архиве")], db_index=True, default="new", max_length=16, verbose_name="Статус")),
                ("notes", models.TextField(blank=True, default="", max_length=1000, verbose_name="Заметки")),
                ("replied_at", models.DateTimeField(blank=True, null=True, verbose_name="Время ответа")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, verbose_name="Создано")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Обновлено")),
                ("replied_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to=settings.AUTH_USER_MODEL, verbose_name="Ответил")),
            ],
            options={
                "verbose_name": "Обращение",
                "verbose_name_plural": "Обращения",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Question",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("customer_name", models.CharField(max_length=120, verbose_name="Имя клиента")),
                ("email", models.EmailField(max_length=254, verbose_name="Email")),
                ("phone", models.CharField(max_length=30, verbose_name="Телефон")),
                ("subject", models.CharField(max_length=200, verbose_name="Тема")),
                ("message", models.TextField(max_length=1000, verbose_name="Сообщение")),
                ("status", models.CharField(choices=[("pending", "Ожидает"), ("answered", "Отвечен"), ("closed", "Закрыт")], db_index=True, default="pending", max_length=16, verbose_name="Статус")),
                ("answer", models.TextField(blank=True, default="", max_length=1000, verbose_name="Ответ")),
                ("answered_at", models.DateTimeField(blank=True, null=True, verbose_name="Время ответа")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, verbose_name="Создано")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Обновлено")),
                ("answered_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to=settings.AUTH_USER_MODEL, verbose_name="Ответил")),
                ("car", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="questions", to="cars.car", verbose_name="Автомобиль")),
            ],
            options={
                "verbose_name": "Вопрос",
                "verbose_name_plural": "Вопросы",
                "ordering": ["-created_at"],
            },
        ),
    ]
