from django.urls import path

from apps.catalog.views import ProductGridView

urlpatterns = [
    path("products/", ProductGridView.as_view(), name="product-grid"),
]
