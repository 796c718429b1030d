from django.urls import include, path

urlpatterns = [
    path("catalog/", include(("apps.catalog.urls", "catalog"), namespace="catalog")),
]
