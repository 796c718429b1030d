from apps.catalog.grids import ProductGrid
from apps.grid.views import GridView


class ProductGridView(GridView):
    """
    GET /catalog/products/

    HTML product grid; with ``X-Requested-With: XMLHttpRequest`` and
    ``?ajax=1`` the grid array is returned as JSON instead.
    """

    grid_class = ProductGrid
    template_name = "catalog/product_list.html"
