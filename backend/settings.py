from pathlib import Path
from datetime import timedelta
from urllib.parse import urlparse
import os
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent
dotenv_path = BASE_DIR / ".env"
if dotenv_path.exists():
    load_dotenv(dotenv_path)

PROJECT_NAME = os.getenv("PROJECT_NAME", "Convoy Travels")
FRONTEND_BASE_URL = os.getenv("FRONTEND_BASE_URL", "http://localhost:3000")
DEV_LAN_IP = os.getenv("DEV_LAN_IP", "").strip()

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me")
DEBUG = os.getenv("DEBUG", "True").lower() in ("true", "1", "yes")

if DEBUG:
    ALLOWED_HOSTS = ["127.0.0.1", "localhost", "0.0.0.0", "testserver"]
    if DEV_LAN_IP:
        ALLOWED_HOSTS.append(DEV_LAN_IP)
    ALLOWED_HOSTS = list(dict.fromkeys(ALLOWED_HOSTS))
else:
    ALLOWED_HOSTS = ["convoytravels.pk", "www.convoytravels.pk", "api.convoytravels.pk"]

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",

    "rest_framework",
    "corsheaders",

    "accounts",
    "seo",
    "cars",
    "blog",
    "pages",
    "inquiries",
]

MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
]

ROOT_URLCONF = "backend.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "backend.wsgi.application"

def _db_from_url(dsn: str):
    u = urlparse(dsn)
    if u.scheme not in ("postgres", "postgresql"):
        raise ValueError("Only postgres:// or postgresql:// are supported")
    return {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": (u.path or "/").lstrip("/"),
        "USER": u.username or "",
        "PASSWORD": u.password or "",
        "HOST": u.hostname or "127.0.0.1",
        "PORT": str(u.port or 5432),
    }

DATABASES = {}
if os.getenv("DATABASE_URL"):
    DATABASES["default"] = _db_from_url(os.getenv("DATABASE_URL"))
elif all(os.getenv(k) for k in ("DB_NAME", "DB_USER", "DB_PASSWORD")):
    DATABASES["default"] = {
        "ENGINE": os.getenv("DB_ENGINE", "django.db.backends.postgresql"),
        "NAME": os.getenv("DB_NAME"),
        "USER": os.getenv("DB_USER"),
        "PASSWORD": os.getenv("DB_PASSWORD"),
        "HOST": os.getenv("DB_HOST", "127.0.0.1"),
        "PORT": str(os.getenv("DB_PORT", "5432")),
    }
elif all(os.getenv(k) for k in ("POSTGRES_DB", "POSTGRES_USER", "POSTGRES_PASSWORD")):
    DATABASES["default"] = {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": os.getenv("POSTGRES_DB"),
        "USER": os.getenv("POSTGRES_USER"),
        "PASSWORD": os.getenv("POSTGRES_PASSWORD"),
        "HOST": os.getenv("POSTGRES_HOST", "127.0.0.1"),
        "PORT": str(os.getenv("POSTGRES_PORT", "5432")),
    }
else:
    DATABASES["default"] = {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }

AUTH_USER_MODEL = "accounts.User"
AUTH_PASSWORD_VALIDATORS = []

LANGUAGE_CODE = "en-us"
TIME_ZONE = "Asia/Karachi"
USE_I18N = True
USE_TZ = True

STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

MEDIA_URL = "/media/"
MEDIA_ROOT = BASE_DIR / "media"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

CORS_ALLOW_CREDENTIALS = True
if DEBUG:
    parsed = urlparse(FRONTEND_BASE_URL)
    origin_from_front = f"{parsed.scheme}://{parsed.hostname}:{parsed.port or (80 if parsed.scheme=='http' else 443)}"
    CORS_ALLOW_ALL_ORIGINS = False
    CORS_ALLOWED_ORIGINS = [
        origin_from_front,
        "http://localhost:3000", "http://127.0.0.1:3000",
        "http://localhost:5173", "http://127.0.0.1:5173",
    ]
    if DEV_LAN_IP:
        CORS_ALLOWED_ORIGINS += [f"http://{DEV_LAN_IP}:{p}" for p in (3000, 5173)]
    CORS_ALLOWED_ORIGIN_REGEXES = [
        r"^http://localhost:\d+$",
        r"^http://127\.0\.0\.1:\d+$",
    ] + ([rf"^http://{DEV_LAN_IP}:\d+$"] if DEV_LAN_IP else [])
    CSRF_TRUSTED_ORIGINS = list(dict.fromkeys(CORS_ALLOWED_ORIGINS + ["http://localhost", "http://127.0.0.1", origin_from_front]))
else:
    CORS_ALLOW_ALL_ORIGINS = False
    CORS_ALLOWED_ORIGINS = ["https://convoytravels.pk", "https://www.convoytravels.pk"]
    CSRF_TRUSTED_ORIGINS = CORS_ALLOWED_ORIGINS[:]

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": ("rest_framework_simplejwt.authentication.JWTAuthentication",),
    "DEFAULT_PERMISSION_CLASSES": ("rest_framework.permissions.AllowAny",),
    "DEFAULT_PAGINATION_CLASS": "rest_framework.pagination.PageNumberPagination",
    "PAGE_SIZE": 30,
}

SIMPLE_JWT = {
    "ACCESS_TOKEN_LIFETIME": timedelta(hours=8),
    "REFRESH_TOKEN_LIFETIME": timedelta(days=7),
    "AUTH_HEADER_TYPES": ("Bearer",),
}

if DEBUG:
    SECURE_SSL_REDIRECT = False
    CSRF_COOKIE_SECURE = False
    SESSION_COOKIE_SECURE = False
else:
    SECURE_SSL_REDIRECT = True
    CSRF_COOKIE_SECURE = True
    SESSION_COOKIE_SECURE = True

if os.getenv("USE_X_FORWARDED_PROTO", "False").lower() in ("true", "1", "yes"):
    SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")

# --- SEO ---
SITE_NAME = os.getenv("SITE_NAME", "Convoy Travels")
SITE_BASE_URL = os.getenv("SITE_BASE_URL", "https://convoytravels.pk").rstrip("/")
SEO_TITLE_SUFFIX = os.getenv("SEO_TITLE_SUFFIX", f"| {SITE_NAME}")
SEO_DEFAULT_DESCRIPTION = os.getenv(
    "SEO_DEFAULT_DESCRIPTION",
    "Rent a car in Lahore with Convoy Travels. Affordable car rental services with or without driver.",
)
SEO_DESCRIPTION_MAX_LENGTH = int(os.getenv("SEO_DESCRIPTION_MAX_LENGTH", 160))
SLUG_SAVE_RETRIES = int(os.getenv("SLUG_SAVE_RETRIES", 3))

# --- Бронирования ---
SELF_DRIVER_EXTRA_PER_DAY = int(os.getenv("SELF_DRIVER_EXTRA_PER_DAY", 500))
DEFAULT_CURRENCY = os.getenv("DEFAULT_CURRENCY", "PKR")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {"format": "[{asctime}] {levelname} {name}: {message}", "style": "{"},
        "simple": {"format": "{levelname} {message}", "style": "{"},
    },
    "handlers": {"console": {"class": "logging.StreamHandler", "formatter": "verbose"}},
    "loggers": {
        "seo": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "cars": {"handlers": ["console"], "level": "INFO", "propagate": False},
    },
}
