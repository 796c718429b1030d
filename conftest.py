"""
Shared pytest fixtures for all tests in the application.

These fixtures provide common test data, request contexts and renderers
that are reused across multiple test modules to eliminate duplication.
"""

from decimal import Decimal

import pytest

from apps.catalog.models import Category, Product
from apps.grid.context import RequestContext
from apps.grid.renderers import ListRenderer


@pytest.fixture
def grid_context(rf):
    """
    Builds a RequestContext for a GET request.

    Args:
        rf: pytest-django RequestFactory fixture

    Returns:
        Callable taking a path, query parameters and an ``ajax`` flag
        that returns a RequestContext
    """

    def _build(path="/items", data=None, ajax=False) -> RequestContext:
        extra = {"HTTP_X_REQUESTED_WITH": "XMLHttpRequest"} if ajax else {}
        request = rf.get(path, data or {}, **extra)
        return RequestContext.from_request(request)

    return _build


@pytest.fixture
def renderer():
    """
    Provides a ListRenderer using the default grid template.

    Returns:
        ListRenderer instance
    """
    return ListRenderer()


@pytest.fixture
def category(db):
    """
    Creates a test category.

    Args:
        db: pytest-django database fixture

    Returns:
        Category instance
    """
    return Category.objects.create(name="Hardware")


@pytest.fixture
def other_category(db):
    """
    Creates a second test category for multi-category scenarios.

    Args:
        db: pytest-django database fixture

    Returns:
        Category instance
    """
    return Category.objects.create(name="Books")


@pytest.fixture
def make_products(db, category):
    """
    Creates numbered products in the test category.

    Args:
        db: pytest-django database fixture
        category: The category fixture

    Returns:
        Callable taking a count that returns the created products ordered by id
    """

    def _make(count, **fields):
        Product.objects.bulk_create(
            [
                Product(
                    name=f"Product {index:03d}",
                    code=f"SKU-{index:03d}",
                    price=Decimal(index),
                    category=fields.get("category", category),
                    is_active=fields.get("is_active", True),
                )
                for index in range(1, count + 1)
            ]
        )
        return list(Product.objects.order_by("id"))

    return _make


@pytest.fixture
def products(make_products):
    """
    Creates 97 products, enough for four pages of 25 with a short last page.

    Args:
        make_products: The product factory fixture

    Returns:
        List of Product instances ordered by id
    """
    return make_products(97)
