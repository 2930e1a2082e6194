"""Tests for generated widget stylesheets"""

import pytest

pytest.importorskip("PySide6.QtWidgets")

from hipmigration.gui.style_manager import (  # noqa: E402
    BUTTON_COLORS, HELP_BUTTON_STYLE, button_style
)


@pytest.mark.parametrize("kind", sorted(BUTTON_COLORS))
def test_button_style_uses_palette(kind):
    """Each button kind gets its own normal, hover and pressed colours"""
    style = button_style(kind)
    for color in BUTTON_COLORS[kind]:
        assert color in style
    assert "border-radius: 5px" in style


def test_help_button_is_round():
    assert "border-radius: 10px" in HELP_BUTTON_STYLE
    assert "font-size: 18px" in HELP_BUTTON_STYLE


def test_unknown_kind():
    with pytest.raises(KeyError):
        button_style('danger')
