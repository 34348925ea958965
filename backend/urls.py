# Путь: backend/urls.py
# Назначение: Корневой роутинг Django-проекта (админка, API, медиа в DEV).
#
#   • /api/auth/              - JWT логин / refresh / профиль
#   • /api/cars/, /api/categories/, /api/bookings/
#   • /api/blogs/, /api/main-blogs/
#   • /api/special-sections/
#   • /api/questions/, /api/contact-queries/

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),

    # --- Auth API ---
    path("api/auth/", include(("accounts.urls", "accounts"), namespace="accounts")),

    # --- Автопарк и бронирования ---
    path("api/", include(("cars.urls", "cars"), namespace="cars")),

    # --- Блоги ---
    path("api/", include(("blog.urls", "blog"), namespace="blog")),

    # --- Спецсекции главной ---
    path("api/special-sections/", include(("pages.urls", "pages"), namespace="pages")),

    # --- Вопросы и обращения ---
    path("api/", include(("inquiries.urls", "inquiries"), namespace="inquiries")),
]

# Раздача медиа в DEV
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
