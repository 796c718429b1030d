"""
Grid configuration.

Reads the ``GRID`` dict from Django settings and falls back to the defaults
below for anything not set there. Values are cached on first access and
dropped whenever ``settings.GRID`` changes.
"""

from django.conf import settings
from django.core.signals import setting_changed
from django.utils.module_loading import import_string

DEFAULTS = {
    # None means the current page is read from the request
    "PAGE": None,
    "PER_PAGE": 25,
    "PER_PAGE_SELECTION": [5, 10, 25, 50, 100],
    "PAGE_PARAM": "page",
    "PER_PAGE_PARAM": "per_page",
    "AJAX_PARAM": "ajax",
    "RENDERER_CLASS": "apps.grid.renderers.ListRenderer",
    "TEMPLATE": "grid/list.html",
    "PAGINATION_TEMPLATE": "grid/pagination.html",
}

IMPORT_STRINGS = ("RENDERER_CLASS",)


class GridSettings:
    """
    Attribute access to grid settings, e.g. ``grid_settings.PER_PAGE``.
    """

    def __init__(self, defaults=None):
        self.defaults = defaults or DEFAULTS
        self._cached_attrs = set()

    @property
    def user_settings(self) -> dict:
        if not hasattr(self, "_user_settings"):
            self._user_settings = getattr(settings, "GRID", {})
        return self._user_settings

    def __getattr__(self, attr):
        if attr not in self.defaults:
            raise AttributeError(f"Invalid grid setting: '{attr}'")

        value = self.user_settings.get(attr, self.defaults[attr])
        if attr in IMPORT_STRINGS and isinstance(value, str):
            value = import_string(value)

        self._cached_attrs.add(attr)
        setattr(self, attr, value)
        return value

    def reload(self):
        for attr in self._cached_attrs:
            delattr(self, attr)
        self._cached_attrs.clear()
        if hasattr(self, "_user_settings"):
            delattr(self, "_user_settings")


grid_settings = GridSettings(DEFAULTS)


def reload_grid_settings(*args, **kwargs):
    if kwargs["setting"] == "GRID":
        grid_settings.reload()


setting_changed.connect(reload_grid_settings)
