from algorithms.step import HIGHLIGHT_ROLES
from ui.palette import (
    ARRAY_COLORS,
    DEFAULT_BAR_COLOR,
    DEFAULT_CELL_STYLE,
    color_for,
    palette_dict,
    style_for,
)


def test_every_role_has_a_colour():
    assert set(ARRAY_COLORS) == set(HIGHLIGHT_ROLES)


def test_known_roles():
    assert color_for("comparing") == "#60a5fa"
    assert color_for("sorted") == "#34d399"
    assert style_for("found").text == "#4ade80"
    assert style_for("wall").bg == "rgba(255,255,255,0.06)"


def test_unknown_or_missing_role_is_neutral():
    assert color_for(None) == DEFAULT_BAR_COLOR
    assert color_for("nope") == DEFAULT_BAR_COLOR
    assert style_for(None) == DEFAULT_CELL_STYLE
    assert style_for("swapped") == DEFAULT_CELL_STYLE


def test_palette_dict_is_plain_data():
    data = palette_dict()
    assert data["default"] == "#555"
    assert data["matrix"]["path"] == {"bg": "rgba(34,211,238,0.12)", "text": "#22d3ee", "border": "rgba(34,211,238,0.25)"}
    assert data["roles"] == sorted(HIGHLIGHT_ROLES)
