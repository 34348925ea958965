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
            name="Category",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("slug", models.SlugField(blank=True, max_length=255, unique=True, verbose_name="Слаг")),
                ("seo_title", models.CharField(blank=True, default="", max_length=255, verbose_name="SEO-заголовок")),
                ("seo_description", models.CharField(blank=True, default="", max_length=300, verbose_name="SEO-описание")),
                ("canonical_url", models.URLField(blank=True, default="", max_length=500, verbose_name="Канонический URL")),
                ("name", models.CharField(max_length=255, unique=True, verbose_name="Название категории")),
                ("description", models.TextField(verbose_name="Описание")),
                ("photo", models.ImageField(blank=True, null=True, upload_to="categories/", verbose_name="Фото")),
                ("status", models.CharField(choices=[("Active", "Активна"), ("Inactive", "Неактивна")], db_index=True, default="Active", max_length=16, verbose_name="Статус")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Создано")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Обновлено")),
            ],
            options={
                "verbose_name": "Категория",
                "verbose_name_plural": "Категории",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Car",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("slug", models.SlugField(blank=True, max_length=255, unique=True, verbose_name="Слаг")),
                ("seo_title", models.CharField(blank=True, default="", max_length=255, verbose_name="SEO-заголовок")),
                ("seo_description", models.CharField(blank=True, default="", max_length=300, verbose_name="SEO-описание")),
                ("canonical_url", models.URLField(blank=True, default="", max_length=500, verbose_name="Канонический URL")),
                ("name", models.CharField(max_length=255, verbose_name="Название")),
                ("brand", models.CharField(db_index=True, max_length=120, verbose_name="Марка")),
                ("model", models.CharField(max_length=120, verbose_name="Модель")),
                ("year", models.PositiveIntegerField(verbose_name="Год выпуска")),
                ("car_photo", models.ImageField(blank=True, null=True, upload_to="cars/", verbose_name="Фото")),
                ("rent_per_day", models.DecimalField(decimal_places=2, max_digits=10, verbose_name="Аренда в сутки")),
                ("rent_per_hour", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True, verbose_name="Аренда в час")),
                ("currency", models.CharField(default="PKR", max_length=8, verbose_name="Валюта")),
                ("deposit_amount", models.DecimalField(decimal_places=2, default=0, max_digits=10, verbose_name="Залог")),
                ("is_available", models.BooleanField(default=True, verbose_name="Доступна")),
                ("is_featured", models.BooleanField(default=False, verbose_name="В подборке")),
                ("status", models.CharField(choices=[("available", "Доступна"), ("booked", "Забронирована"), ("maintenance", "На обслуживании"), ("inactive", "Неактивна")], db_index=True, default="available", max_length=16, verbose_name="Статус")),
                ("city", models.CharField(db_index=True, max_length=120, verbose_name="Город")),
                ("address", models.CharField(blank=True, default="", max_length=255, verbose_name="Адрес")),
                ("transmission", models.CharField(choices=[("Automatic", "Автомат"), ("Manual", "Механика")], max_length=16, verbose_name="Коробка передач")),
                ("fuel_type", models.CharField(choices=[("Petrol", "Бензин"), ("Diesel", "Дизель"), ("Hybrid", "Гибрид"), ("Electric", "Электро")], max_length=16, verbose_name="Топливо")),
                ("seats", models.PositiveSmallIntegerField(verbose_name="Мест")),
                ("mileage", models.DecimalField(blank=True, decimal_places=2, max_digits=6, null=True, verbose_name="Расход (км/л)")),
                ("color", models.CharField(blank=True, default="", max_length=60, verbose_name="Цвет")),
                ("registration_number", models.CharField(max_length=32, unique=True, verbose_name="Госномер")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Создано")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Обновлено")),
                ("category", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="cars", to="cars.category", verbose_name="Категория")),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to=settings.AUTH_USER_MODEL, verbose_name="Создал")),
            ],
            options={
                "verbose_name": "Автомобиль",
                "verbose_name_plural": "Автомобили",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Booking",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("customer_name", models.CharField(max_length=120, verbose_name="Имя клиента")),
                ("email", models.EmailField(max_length=254, verbose_name="Email")),
                ("phone", models.CharField(max_length=30, verbose_name="Телефон")),
                ("address", models.CharField(max_length=200, verbose_name="Адрес")),
                ("pickup_date", models.DateField(verbose_name="Дата получения")),
                ("dropoff_date", models.DateField(verbose_name="Дата возврата")),
                ("booking_option", models.CharField(choices=[("self_without_driver", "Без водителя"), ("out_of_station", "За город")], max_length=32, verbose_name="Вариант")),
                ("notes", models.CharField(blank=True, default="", max_length=500, verbose_name="Примечания")),
                ("base_rate_per_day", models.DecimalField(decimal_places=2, max_digits=10, verbose_name="Ставка в сутки")),
                ("extra_charge_per_day", models.DecimalField(decimal_places=2, default=0, max_digits=10, verbose_name="Доплата в сутки")),
                ("total_days", models.PositiveIntegerField(verbose_name="Дней")),
                ("calculated_total", models.DecimalField(decimal_places=2, max_digits=12, verbose_name="Итого")),
                ("status", models.CharField(choices=[("pending", "Ожидает"), ("confirmed", "Подтверждено"), ("approved", "Одобрено"), ("rejected", "Отклонено")], db_index=True, default="pending", max_length=16, verbose_name="Статус")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Создано")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Обновлено")),
                ("car", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="bookings", to="cars.car", verbose_name="Автомобиль")),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to=settings.AUTH_USER_MODEL, verbose_name="Создал")),
            ],
            options={
                "verbose_name": "Бронирование",
                "verbose_name_plural": "Бронирования",
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["pickup_date", "dropoff_date"], name="booking_dates_idx")],
            },
        ),
    ]
