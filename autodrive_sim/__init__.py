"""Discrete grid simulation of command-driven cars with collision detection."""

from autodrive_sim.config.types import SimulationInput, SimulationMode, VehicleSpec
from autodrive_sim.domain import Collision, Command, Field, Orientation, Vehicle, detect_collisions
from autodrive_sim.simulation import (
    MultipleCarsResult,
    SingleCarResult,
    format_result,
    run_multiple_cars,
    run_simulation,
    run_single_car,
)

__all__ = [
    "Collision",
    "Command",
    "Field",
    "MultipleCarsResult",
    "Orientation",
    "SimulationInput",
    "SimulationMode",
    "SingleCarResult",
    "Vehicle",
    "VehicleSpec",
    "detect_collisions",
    "format_result",
    "run_multiple_cars",
    "run_simulation",
    "run_single_car",
]
