"""
palette.py — Highlight Palette
===============================
Maps highlight roles to colours for whatever draws the Steps.

  ARRAY_COLORS   role → bar / node / edge fill (hex)
  MATRIX_STYLES  role → CellStyle(bg, text, border) for table cells

Lookups never fail: an unknown role, or no role at all, falls back to
the neutral DEFAULT_BAR_COLOR / DEFAULT_CELL_STYLE.
"""

from typing import Dict, NamedTuple, Optional

from algorithms.step import HIGHLIGHT_ROLES


DEFAULT_BAR_COLOR = "#555"


class CellStyle(NamedTuple):
    bg:     str
    text:   str
    border: str

    def to_dict(self) -> Dict[str, str]:
        return self._asdict()


DEFAULT_CELL_STYLE = CellStyle("rgba(255,255,255,0.03)", "#a3a3a3", "rgba(255,255,255,0.06)")


ARRAY_COLORS: Dict[str, str] = {
    "comparing": "#60a5fa",
    "swapped":   "#f87171",
    "selected":  "#fbbf24",
    "sorted":    "#34d399",
    "pivot":     "#c084fc",
    "found":     "#4ade80",
    "current":   "#fb923c",
    "searching": "#38bdf8",
    "left":      "#60a5fa",
    "right":     "#f472b6",
    "merged":    "#818cf8",
    "minimum":   "#fbbf24",
    "placed":    "#4ade80",
    "conflict":  "#f87171",
    "checking":  "#fbbf24",
    "wall":      "#475569",
    "path":      "#22d3ee",
    "start":     "#60a5fa",
    "end":       "#f87171",
    "given":     "#94a3b8",
    "active":    "#fb923c",
    "visited":   "#a78bfa",
}


def _rgba(rgb: str, alpha: float) -> str:
    return f"rgba({rgb},{alpha})"


# (rgb triple, text colour, bg alpha, border alpha)
_CELL_TONES = {
    "placed":    ("34,197,94",    "#4ade80", 0.12, 0.25),
    "conflict":  ("239,68,68",    "#f87171", 0.12, 0.25),
    "checking":  ("234,179,8",    "#fbbf24", 0.10, 0.25),
    "found":     ("34,197,94",    "#4ade80", 0.18, 0.35),
    "current":   ("255,255,255",  "#fff",    0.08, 0.2),
    "comparing": ("96,165,250",   "#60a5fa", 0.12, 0.25),
    "selected":  ("251,191,36",   "#fbbf24", 0.10, 0.25),
    "sorted":    ("52,211,153",   "#34d399", 0.10, 0.25),
    "searching": ("56,189,248",   "#38bdf8", 0.10, 0.25),
    "wall":      ("255,255,255",  "#888",    0.06, 0.1),
    "path":      ("34,211,238",   "#22d3ee", 0.12, 0.25),
    "start":     ("96,165,250",   "#60a5fa", 0.12, 0.25),
    "end":       ("248,113,113",  "#f87171", 0.12, 0.25),
    "given":     ("148,163,184",  "#cbd5e1", 0.08, 0.15),
    "active":    ("255,255,255",  "#fff",    0.08, 0.2),
    "visited":   ("167,139,250",  "#a78bfa", 0.10, 0.25),
    "left":      ("96,165,250",   "#60a5fa", 0.10, 0.2),
    "right":     ("244,114,182",  "#f472b6", 0.10, 0.2),
    "merged":    ("129,140,248",  "#818cf8", 0.10, 0.25),
    "pivot":     ("192,132,252",  "#c084fc", 0.10, 0.25),
}

MATRIX_STYLES: Dict[str, CellStyle] = {
    role: CellStyle(_rgba(rgb, bg_a), text, _rgba(rgb, border_a))
    for role, (rgb, text, bg_a, border_a) in _CELL_TONES.items()
}


def color_for(role: Optional[str]) -> str:
    """Fill colour for a role; neutral grey when absent or unknown."""
    if role is None:
        return DEFAULT_BAR_COLOR
    return ARRAY_COLORS.get(role, DEFAULT_BAR_COLOR)


def style_for(role: Optional[str]) -> CellStyle:
    """Cell style for a role; neutral style when absent or unknown."""
    if role is None:
        return DEFAULT_CELL_STYLE
    return MATRIX_STYLES.get(role, DEFAULT_CELL_STYLE)


def palette_dict() -> Dict[str, object]:
    """JSON-ready palette for the presentation layer."""
    return {
        "default":       DEFAULT_BAR_COLOR,
        "default_cell":  DEFAULT_CELL_STYLE.to_dict(),
        "array":         dict(ARRAY_COLORS),
        "matrix":        {role: style.to_dict() for role, style in MATRIX_STYLES.items()},
        "roles":         sorted(HIGHLIGHT_ROLES),
    }
