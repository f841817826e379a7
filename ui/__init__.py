"""
ui/
---
Presentation helpers shared by every front end.

    from ui import color_for, style_for, palette_dict
"""

from ui.palette import (
    ARRAY_COLORS,
    MATRIX_STYLES,
    DEFAULT_BAR_COLOR,
    DEFAULT_CELL_STYLE,
    CellStyle,
    color_for,
    style_for,
    palette_dict,
)

__all__ = [
    "ARRAY_COLORS",
    "MATRIX_STYLES",
    "DEFAULT_BAR_COLOR",
    "DEFAULT_CELL_STYLE",
    "CellStyle",
    "color_for",
    "style_for",
    "palette_dict",
]
