from django import template

register = template.Library()


@register.simple_tag
def page_url(grid, page):
    return grid.state.url(page)


@register.simple_tag
def per_page_url(grid, per_page):
    return grid.per_page_url(per_page)


@register.simple_tag
def grid_url(grid, **parameters):
    return grid.create_url(parameters)


@register.simple_tag
def grid_pagination(grid, template_name=None):
    return grid.pagination(template_name)


@register.simple_tag
def render_grid(grid):
    return grid.render_grid()
