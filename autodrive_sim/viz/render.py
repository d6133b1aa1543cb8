"""Static trajectory plots of a finished run."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from autodrive_sim.domain.collision import Collision  # noqa: E402
from autodrive_sim.simulation.engine import StepSnapshot  # noqa: E402
from autodrive_sim.viz.theme import DEFAULT_THEME, Theme  # noqa: E402

logger = logging.getLogger(__name__)


def _build_occupancy_grid(trace: Sequence[StepSnapshot], width: int, height: int) -> np.ndarray:
    """Count car-steps per cell; indexed ``[y, x]`` for ``imshow``."""
    grid = np.zeros((height, width), dtype=np.int64)
    for snapshot in trace:
        for _, (x, y), _ in snapshot.cars:
            grid[y, x] += 1
    return grid


def _car_paths(trace: Sequence[StepSnapshot]) -> dict[str, list[tuple[int, int]]]:
    """Per-car list of positions, dropping consecutive repeats."""
    paths: dict[str, list[tuple[int, int]]] = {}
    for snapshot in trace:
        for name, position, _ in snapshot.cars:
            path = paths.setdefault(name, [])
            if not path or path[-1] != position:
                path.append(position)
    return paths


def render_trajectories(
    trace: Sequence[StepSnapshot],
    width: int,
    height: int,
    output: Path,
    collisions: Sequence[Collision] = (),
    theme: Theme = DEFAULT_THEME,
    title: str | None = None,
) -> Path:
    """Draw every car's path on the field and save the figure to ``output``."""
    if not trace:
        raise ValueError("trace must contain at least one snapshot")

    occupancy = _build_occupancy_grid(trace, width, height)
    paths = _car_paths(trace)
    final = trace[-1]

    fig, ax = plt.subplots(figsize=(max(4.0, width * 0.5), max(4.0, height * 0.5)))
    fig.patch.set_facecolor(theme.background_color)
    ax.imshow(
        occupancy,
        origin="lower",
        cmap=theme.visit_cmap,
        alpha=0.35,
        extent=(-0.5, width - 0.5, -0.5, height - 0.5),
    )
    ax.set_xticks(np.arange(-0.5, width, 1.0), minor=True)
    ax.set_yticks(np.arange(-0.5, height, 1.0), minor=True)
    ax.grid(which="minor", color=theme.grid_line_color, linewidth=0.5)
    ax.set_xlim(-0.5, width - 0.5)
    ax.set_ylim(-0.5, height - 0.5)

    for index, (name, _, orientation) in enumerate(final.cars):
        color = theme.car_color(index)
        xs, ys = zip(*paths[name], strict=True)
        ax.plot(xs, ys, "-o", color=color, markersize=3, linewidth=1.5, label=name)
        dx, dy = orientation.delta
        ax.annotate(
            "",
            xy=(xs[-1] + 0.35 * dx, ys[-1] + 0.35 * dy),
            xytext=(xs[-1], ys[-1]),
            arrowprops={"arrowstyle": "->", "color": color, "linewidth": 1.5},
        )

    for collision in collisions:
        x, y = collision.position
        ax.scatter([x], [y], marker="X", s=160, color=theme.collision_color, zorder=5)
        ax.annotate(
            f"step {collision.step}",
            (x, y),
            textcoords="offset points",
            xytext=(6, 6),
            color=theme.collision_color,
            fontsize=8,
        )

    ax.set_title(title or f"{width}x{height} field, {final.step} steps")
    ax.legend(loc="upper right", fontsize=8)

    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output, dpi=120, bbox_inches="tight")
    plt.close(fig)
    logger.info("wrote trajectory plot to %s", output)
    return output
