import pytest

from apps.grid.conf import grid_settings
from apps.grid.renderers import ListRenderer


def test_defaults_fill_missing_keys(settings):
    settings.GRID = {"PER_PAGE": 10}

    assert grid_settings.PER_PAGE == 10
    assert grid_settings.PER_PAGE_SELECTION == [5, 10, 25, 50, 100]
    assert grid_settings.PAGE_PARAM == "page"
    assert grid_settings.AJAX_PARAM == "ajax"


def test_settings_reload_when_changed(settings):
    settings.GRID = {"PER_PAGE": 10}
    assert grid_settings.PER_PAGE == 10

    settings.GRID = {"PER_PAGE": 40}
    assert grid_settings.PER_PAGE == 40


def test_renderer_class_is_imported(settings):
    settings.GRID = {}

    assert grid_settings.RENDERER_CLASS is ListRenderer


def test_unknown_setting_raises():
    with pytest.raises(AttributeError):
        grid_settings.NOT_A_SETTING
