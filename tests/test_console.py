import logging

import pytest

from igor.console import apply_color_overrides, console
from igor.themes import DEFAULT_STYLES, get_igor_theme


@pytest.fixture
def restore_theme():
    depth = len(console._theme_stack._entries)
    yield
    while len(console._theme_stack._entries) > depth:
        console.pop_theme()


def test_default_theme_has_every_style():
    theme = get_igor_theme()
    for name in DEFAULT_STYLES:
        assert name in theme.styles


def test_override_merges_with_defaults(restore_theme):
    effective = apply_color_overrides({"title": "blue"})
    assert effective["title"] == "blue"
    assert effective["error"] == DEFAULT_STYLES["error"]
    assert console.get_style("title").color.name == "blue"


def test_invalid_entries_are_skipped(restore_theme, caplog):
    with caplog.at_level(logging.WARNING, logger="igor"):
        effective = apply_color_overrides({"banner": "red", "warn": "not-a-color"})
    assert effective == DEFAULT_STYLES
    assert "config.colors.banner" in caplog.text
    assert "not-a-color" in caplog.text


def test_no_overrides():
    assert apply_color_overrides(None) == DEFAULT_STYLES
