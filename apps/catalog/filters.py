import django_filters
from rest_framework.exceptions import ValidationError

from apps.catalog.models import Product


class ProductFilter(django_filters.FilterSet):
    """
    Filter for the product grid.

    Optional query parameters:
    - category: ID of a category
    - is_active: true / false
    - min_price, max_price: inclusive price range
    """

    category = django_filters.NumberFilter(field_name="category_id")
    is_active = django_filters.BooleanFilter(field_name="is_active")
    min_price = django_filters.NumberFilter(field_name="price", lookup_expr="gte")
    max_price = django_filters.NumberFilter(field_name="price", lookup_expr="lte")

    def filter_queryset(self, queryset):
        """
        Override to validate min_price <= max_price when both are present.
        """
        min_price = self.form.cleaned_data.get("min_price")
        max_price = self.form.cleaned_data.get("max_price")

        if min_price is not None and max_price is not None and min_price > max_price:
            raise ValidationError(
                {"non_field_errors": ["min_price must be less than or equal to max_price."]}
            )

        return super().filter_queryset(queryset)

    class Meta:
        model = Product
        fields = ["category", "is_active", "min_price", "max_price"]
