# Путь: backend/seo/management/commands/backfill_seo_fields.py
# Назначение: Заполнить пустые slug / SEO-поля у уже существующих записей.
# Запуск:
#   python manage.py backfill_seo_fields --dry-run
#   python manage.py backfill_seo_fields
#   python manage.py backfill_seo_fields --model cars.Car --model blog.Blog
#
# Записи обходятся от старых к новым, поэтому старшая запись получает «чистый» slug,
# а младшие - base-1, base-2 ... Заполненные поля не трогаем: повторный запуск ничего не меняет.

from django.apps import apps
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from seo.models import SEO_FIELDS, SeoFieldsModel
from seo.slug_utils import make_unique


def seo_models():
    return [m for m in apps.get_models() if issubclass(m, SeoFieldsModel)]


class Command(BaseCommand):
    help = "Заполнить отсутствующие slug и SEO-поля (seo_title, seo_description, canonical_url)."

    def add_arguments(self, parser):
        parser.add_argument("--dry-run", action="store_true", help="Только показать, что будет изменено.")
        parser.add_argument(
            "--model", action="append", dest="models", metavar="APP.MODEL",
            help="Ограничить обход моделью (можно несколько раз).",
        )

    def resolve_models(self, labels):
        if not labels:
            return seo_models()
        result = []
        for label in labels:
            try:
                model = apps.get_model(label)
            except (LookupError, ValueError):
                raise CommandError(f"Неизвестная модель: {label}")
            if not issubclass(model, SeoFieldsModel):
                raise CommandError(f"У модели {label} нет SEO-полей")
            result.append(model)
        return result

    def handle(self, *args, **opts):
        dry = opts["dry_run"]
        total = 0

        for model in self.resolve_models(opts["models"]):
            label = model._meta.label
            rows = [obj for obj in model._default_manager.order_by("created_at", "pk") if obj.seo_fields_missing()]
            if not rows:
                self.stdout.write(f"{label}: нечего заполнять")
                continue

            if dry:
                planned = set()
                taken = set(model._default_manager.exclude(slug="").values_list("slug", flat=True))
                for obj in rows:
                    slug = obj.slug or make_unique(
                        obj.build_base_slug(),
                        lambda s: s in taken or s in planned,
                        fallback=obj.SLUG_FALLBACK,
                    )
                    planned.add(slug)
                    self.stdout.write(f"{obj.pk:>5} | {obj.get_slug_source()!r} => {slug}")
                self.stdout.write(self.style.NOTICE(f"{label}: будет заполнено записей: {len(rows)}"))
                total += len(rows)
                continue

            with transaction.atomic():
                for obj in rows:
                    # updated_at не трогаем: меняются только SEO-поля
                    obj.save(update_fields=list(SEO_FIELDS))
            self.stdout.write(self.style.SUCCESS(f"{label}: заполнено записей: {len(rows)}"))
            total += len(rows)

        if dry:
            self.stdout.write(self.style.SUCCESS(f"DRY-RUN завершён. БД не изменялась. Всего: {total}"))
        else:
            self.stdout.write(self.style.SUCCESS(f"Готово. Всего обновлено: {total}"))
