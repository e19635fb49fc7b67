# backend/navigation/urls.py
from django.urls import path

from .views import NavigationView

app_name = "navigation"

urlpatterns = [
    path("navigation", NavigationView.as_view(), name="menu_list"),
]
