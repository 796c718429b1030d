from django.core.exceptions import ImproperlyConfigured
from django.template.loader import render_to_string

from apps.grid.conf import grid_settings


class BaseGridRenderer:
    """
    Turns the items of a prepared grid into a display representation.

    The grid binds itself and its current page of items before rendering.
    """

    def __init__(self):
        self.grid = None
        self.items = []

    def bind(self, grid, items):
        self.grid = grid
        self.items = items
        return self

    def render(self) -> str:
        raise NotImplementedError(".render() must be overridden.")


class ListRenderer(BaseGridRenderer):
    """
    Renders the items as an HTML table through the template engine.
    """

    template_name = None

    def __init__(self, template_name=None):
        super().__init__()
        if template_name is not None:
            self.template_name = template_name

    def get_template_name(self) -> str:
        return self.template_name or grid_settings.TEMPLATE

    def get_context(self) -> dict:
        return {
            "grid": self.grid,
            "items": self.items,
            "columns": self.grid.get_display_columns(),
            "rows": self.grid.get_rows(),
        }

    def render(self) -> str:
        if self.grid is None:
            raise ImproperlyConfigured(
                f"{self.__class__.__name__} must be bound to a grid before rendering."
            )
        return render_to_string(
            self.get_template_name(),
            self.get_context(),
            request=self.grid.context.http_request,
        )
