"""
Django management command to seed sample catalog data into the database.

Run with: python manage.py seed_catalog --count 97
"""

from decimal import Decimal

from django.core.management.base import BaseCommand

from apps.catalog.models import Category, Product

CATEGORIES = ["Books", "Garden", "Hardware", "Kitchen", "Toys"]


class Command(BaseCommand):
    help = "Seed the database with sample categories and products"

    def add_arguments(self, parser):
        parser.add_argument(
            "--count",
            type=int,
            default=100,
            help="Number of products to create (default: 100)",
        )

    def handle(self, *args, **options):
        self.stdout.write("Starting catalog seeding...")

        categories = seed_categories()
        created = seed_products(options["count"], categories)

        self.stdout.write(
            self.style.SUCCESS(f"Catalog seeded successfully! ({created} new products)")
        )


def seed_categories():
    """Create the sample categories."""
    categories = []
    for name in CATEGORIES:
        category, _ = Category.objects.get_or_create(name=name)
        categories.append(category)
    return categories


def seed_products(count, categories):
    """Create ``count`` sample products spread across ``categories``."""
    created = 0
    for index in range(1, count + 1):
        _, was_created = Product.objects.get_or_create(
            code=f"SKU-{index:05d}",
            defaults={
                "name": f"Product {index:05d}",
                "price": Decimal(index) + Decimal("0.99"),
                "category": categories[index % len(categories)] if categories else None,
                "is_active": index % 10 != 0,
            },
        )
        if was_created:
            created += 1
    return created
