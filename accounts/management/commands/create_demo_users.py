# Путь: backend/accounts/management/commands/create_demo_users.py
# Назначение: Dev-утилита: администратор и обычный клиент для ручной проверки API.
# Запуск:
#   python manage.py create_demo_users
#   python manage.py create_demo_users --admin-password secret --user-password secret

from django.core.management.base import BaseCommand

from accounts.models import User

DEMO_USERS = (
    ("admin", "admin@convoytravels.pk", User.Roles.ADMIN),
    ("user", "user@convoytravels.pk", User.Roles.USER),
)


class Command(BaseCommand):
    help = "Создаёт демо-пользователей: admin (ADMIN) и user (USER). Существующих не трогает."

    def add_arguments(self, parser):
        parser.add_argument("--admin-password", default="admin123")
        parser.add_argument("--user-password", default="user123")

    def handle(self, *args, **opts):
        passwords = {User.Roles.ADMIN: opts["admin_password"], User.Roles.USER: opts["user_password"]}
        for username, email, role in DEMO_USERS:
            if User.objects.filter(username=username).exists():
                self.stdout.write(self.style.WARNING(f"Уже есть: {username}"))
                continue
            User.objects.create_user(username, email=email, password=passwords[role], role=role)
            self.stdout.write(self.style.SUCCESS(f"Создан: {username} ({role})"))
