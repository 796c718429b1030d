import pytest
from django.template import Context, Template

from apps.grid.tests.test_grid import ProductRowsGrid, RecordingQuery, StaticRenderer


@pytest.fixture
def prepared_grid(grid_context):
    grid = ProductRowsGrid(
        grid_context("/items", {"search": "lamp"}),
        queryset=RecordingQuery(list(range(60))),
        renderer=StaticRenderer(),
    )
    grid.set_fragment("grid")
    return grid.prepare_grid()


def render(source, grid):
    return Template("{% load grid_tags %}" + source).render(Context({"grid": grid}))


def test_page_url_tag(prepared_grid):
    assert render("{% page_url grid 3 %}", prepared_grid) == "/items?search=lamp&amp;page=3#grid"


def test_grid_url_tag(prepared_grid):
    html = render('{% grid_url grid sort="price" %}', prepared_grid)

    assert html == "/items?search=lamp&amp;sort=price#grid"


def test_per_page_url_tag(prepared_grid):
    assert render("{% per_page_url grid 10 %}", prepared_grid) == "/items?search=lamp&amp;per_page=10#grid"


def test_render_grid_tag(prepared_grid):
    assert render("{% render_grid grid %}", prepared_grid) == "25 items"
