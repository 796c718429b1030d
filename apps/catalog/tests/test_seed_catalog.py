from io import StringIO

import pytest
from django.core.management import call_command

from apps.catalog.models import Category, Product


@pytest.mark.django_db
def test_seed_catalog_creates_products():
    out = StringIO()

    call_command("seed_catalog", count=12, stdout=out)

    assert Category.objects.count() == 5
    assert Product.objects.count() == 12
    assert Product.objects.filter(is_active=False).count() == 1
    assert "12 new products" in out.getvalue()


@pytest.mark.django_db
def test_seed_catalog_is_repeatable():
    call_command("seed_catalog", count=5, stdout=StringIO())
    out = StringIO()

    call_command("seed_catalog", count=5, stdout=out)

    assert Product.objects.count() == 5
    assert "0 new products" in out.getvalue()
