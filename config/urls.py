# backend/config/urls.py
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.http import HttpResponse
from django.urls import include, path

urlpatterns = [
    path("", lambda r: HttpResponse("API is running")),
    path("admin/", admin.site.urls),

    path("api/", include("navigation.urls", namespace="navigation")),
    path("api/", include("content.urls", namespace="content")),
    path("api/", include("catalog.urls", namespace="catalog")),
    path("api/", include("webforms.urls", namespace="webforms")),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
