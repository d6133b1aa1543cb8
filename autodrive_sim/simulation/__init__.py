"""Simulation engines and report formatting."""

from autodrive_sim.simulation.engine import (
    MultipleCarsResult,
    SingleCarResult,
    StepSnapshot,
    resolve_mode,
    run_multiple_cars,
    run_simulation,
    run_single_car,
)
from autodrive_sim.simulation.report import (
    format_collision_explanation,
    format_collision_report,
    format_final_pose,
    format_result,
)

__all__ = [
    "MultipleCarsResult",
    "SingleCarResult",
    "StepSnapshot",
    "format_collision_explanation",
    "format_collision_report",
    "format_final_pose",
    "format_result",
    "resolve_mode",
    "run_multiple_cars",
    "run_simulation",
    "run_single_car",
]
