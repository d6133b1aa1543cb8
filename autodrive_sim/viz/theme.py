"""Visualization theme presets for trajectory renderers.

Themes are frozen dataclasses grouping every styling constant, so renderers
take a ``Theme`` instead of reading module-level colors.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    car_colors: tuple[str, ...] = (
        "#2196F3",
        "#FF5722",
        "#4CAF50",
        "#FFC107",
        "#9C27B0",
        "#00BCD4",
    )
    visit_cmap: str = "Greys"
    grid_line_color: str = "#CCCCCC"
    collision_color: str = "#D50000"
    background_color: str = "#FFFFFF"

    def car_color(self, index: int) -> str:
        """Palette entry for the ``index``-th car, cycling when cars outnumber colors."""
        return self.car_colors[index % len(self.car_colors)]


# ---------------------------------------------------------------------------
# Built-in presets
# ---------------------------------------------------------------------------

DEFAULT_THEME = Theme()

PAPER_THEME = Theme(
    car_colors=("#1f77b4", "#d62728", "#2ca02c", "#ff7f0e", "#9467bd", "#17becf"),
    visit_cmap="Blues",
    grid_line_color="#E0E0E0",
    collision_color="#000000",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "paper": PAPER_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
