from decimal import Decimal

import pytest
from django.urls import reverse

from apps.catalog.models import Product


@pytest.fixture
def product_grid_url():
    return reverse("catalog:product-grid")


@pytest.fixture
def retired_product(db, other_category):
    return Product.objects.create(
        name="Retired Lamp",
        code="OLD-001",
        price=Decimal("15.00"),
        category=other_category,
        is_active=False,
    )


@pytest.fixture
def ajax_get(client, product_grid_url):
    def _get(params=None):
        data = {"ajax": "1", **(params or {})}
        return client.get(
            product_grid_url,
            data,
            HTTP_X_REQUESTED_WITH="XMLHttpRequest",
        )

    return _get
