from django.db import models

from apps.core.models import TimeStampedModel


class Category(TimeStampedModel):
    """
    Product grouping, e.g. Hardware, Books.
    """

    name = models.CharField(max_length=255, unique=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self) -> str:
        return self.name


class Product(TimeStampedModel):
    """
    Item listed in the catalog.
    """

    name = models.CharField(max_length=255)
    code = models.CharField(
        max_length=50,
        unique=True,
        help_text="Unique stock keeping code for this product.",
    )
    price = models.DecimalField(max_digits=10, decimal_places=2)
    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="products",
    )
    is_active = models.BooleanField(
        default=True,
        help_text="Set to False to hide this product from listings.",
    )

    class Meta:
        ordering = ["name", "-created_at"]
        indexes = [
            models.Index(fields=["name"], name="catalog_product_name_idx"),
            models.Index(fields=["code"], name="catalog_product_code_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.code} - {self.name}"
