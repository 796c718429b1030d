from apps.catalog.filters import ProductFilter
from apps.catalog.models import Product
from apps.catalog.serializers import ProductSerializer
from apps.grid.grid import Grid


class ProductGrid(Grid):
    """
    Product listing.

    - search by name/code (?search=)
    - filters from ProductFilter (?category=, ?is_active=, ?min_price=, ?max_price=)
    - ordering by name, price or created_at (?ordering=-price)
    """

    queryset = Product.objects.select_related("category")
    filterset_class = ProductFilter
    search_fields = ["name", "code"]
    ordering_fields = ["name", "price", "created_at"]
    ordering = ["name", "id"]
    serializer_class = ProductSerializer

    def __init__(self, context, **kwargs):
        super().__init__(context, **kwargs)
        self.set_fragment("products")

    def get_display_columns(self):
        if self.get_columns() != "*":
            return super().get_display_columns()
        return ["code", "name", "category", "price"]

    def to_array(self):
        return {
            **self.pagination_payload(),
            "data": self.serialize_items(),
        }
