import pytest
from django.core.exceptions import ImproperlyConfigured

from apps.grid.context import RequestContext
from apps.grid.renderers import ListRenderer
from apps.grid.tests.test_grid import ProductRowsGrid, RecordingQuery
from apps.grid.views import GridView


class LetterGrid(ProductRowsGrid):
    def to_array(self):
        return {**self.pagination_payload(), "data": self.get_items()}


class LetterGridView(GridView):
    grid_class = LetterGrid

    def get_grid_kwargs(self):
        return {"queryset": RecordingQuery(["a", "b", "c"])}


def test_view_without_grid_class_is_misconfigured(rf):
    view = GridView.as_view()

    with pytest.raises(ImproperlyConfigured):
        view(rf.get("/items"))


def test_view_returns_ajax_array(rf):
    request = rf.get("/items", {"ajax": "1"}, HTTP_X_REQUESTED_WITH="XMLHttpRequest")

    response = LetterGridView.as_view()(request)

    assert response.status_code == 200
    assert response["Content-Type"] == "application/json"
    assert response.content == (
        b'{"total": 3, "per_page": 25, "current_page": 1, "last_page": 1, '
        b'"from": 1, "to": 3, "data": ["a", "b", "c"]}'
    )


def test_view_uses_configured_renderer(rf):
    grid = LetterGridView().get_grid(RequestContext(rf.get("/items")))

    assert isinstance(grid.get_renderer(), ListRenderer)


def test_view_keeps_grid_renderer_class(rf):
    class OwnRenderer(ListRenderer):
        pass

    class OwnRendererGrid(LetterGrid):
        renderer_class = OwnRenderer

    class OwnRendererView(LetterGridView):
        grid_class = OwnRendererGrid

    grid = OwnRendererView().get_grid(RequestContext(rf.get("/items")))

    assert grid.renderer is None
    assert isinstance(grid.get_renderer(), OwnRenderer)
