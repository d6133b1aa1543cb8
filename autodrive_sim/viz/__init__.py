"""Visualization layer: themes and trajectory rendering."""

from autodrive_sim.viz.render import render_trajectories
from autodrive_sim.viz.theme import (
    DEFAULT_THEME,
    PAPER_THEME,
    REGISTERED_THEMES,
    Theme,
    get_theme,
)

__all__ = [
    "DEFAULT_THEME",
    "PAPER_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "get_theme",
    "render_trajectories",
]
