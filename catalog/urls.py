from django.urls import path

from .views import (
    ProductDetailView,
    ProductListView,
    ProductSeriesDetailView,
    ProductSeriesListView,
)

app_name = "catalog"

urlpatterns = [
    path("product-series", ProductSeriesListView.as_view(), name="product_series_list"),
    path("product-series/<slug:slug>", ProductSeriesDetailView.as_view(), name="product_series_detail"),
    path("products", ProductListView.as_view(), name="product_list"),
    path("products/<slug:slug>", ProductDetailView.as_view(), name="product_detail"),
]
