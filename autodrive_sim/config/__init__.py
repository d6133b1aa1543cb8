"""Configuration layer: constants and typed config dataclasses."""

from autodrive_sim.config.constants import (
    COMMAND_ALPHABET,
    DEFAULT_CAR_NAME,
    FIELD_HEIGHT,
    FIELD_WIDTH,
    NO_COLLISION_MESSAGE,
    ORIENTATIONS,
)
from autodrive_sim.config.types import (
    RunConfig,
    SimulationInput,
    SimulationMode,
    VehicleSpec,
)

__all__ = [
    "COMMAND_ALPHABET",
    "DEFAULT_CAR_NAME",
    "FIELD_HEIGHT",
    "FIELD_WIDTH",
    "NO_COLLISION_MESSAGE",
    "ORIENTATIONS",
    "RunConfig",
    "SimulationInput",
    "SimulationMode",
    "VehicleSpec",
]
