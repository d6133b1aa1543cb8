"""Typed input and runtime configuration dataclasses.

``SimulationInput`` is the validated snapshot every engine consumes. It is
built by the console session, the scenario loader, or directly in tests.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType

from autodrive_sim.domain.commands import Command
from autodrive_sim.domain.orientation import Orientation

__all__ = [
    "RunConfig",
    "SimulationInput",
    "SimulationMode",
    "VehicleSpec",
]


class SimulationMode(Enum):
    """Which engine a run uses."""

    SINGLE = "single"
    MULTIPLE = "multiple"


@dataclass(frozen=True)
class VehicleSpec:
    """Initial pose and identity of one car."""

    name: str
    x: int
    y: int
    orientation: Orientation

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True)
class SimulationInput:
    """Immutable snapshot of one simulation run's input."""

    width: int
    height: int
    vehicles: tuple[VehicleSpec, ...]
    commands: Mapping[str, tuple[Command, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("field dimensions must be >= 1")
        if not self.vehicles:
            raise ValueError("at least one vehicle is required")
        names = [vehicle.name for vehicle in self.vehicles]
        if len(set(names)) != len(names):
            raise ValueError("vehicle names must be unique")
        missing = [name for name in names if name not in self.commands]
        if missing:
            raise ValueError(f"no command list for vehicle(s): {', '.join(missing)}")
        unknown = sorted(set(self.commands) - set(names))
        if unknown:
            raise ValueError(f"commands given for unknown vehicle(s): {', '.join(unknown)}")
        for vehicle in self.vehicles:
            if not (0 <= vehicle.x < self.width and 0 <= vehicle.y < self.height):
                raise ValueError(
                    f"vehicle {vehicle.name!r} starts outside the "
                    f"{self.width}x{self.height} field"
                )
        # Read-only mapping of tuples, in vehicle order
        frozen = {name: tuple(self.commands[name]) for name in names}
        object.__setattr__(self, "commands", MappingProxyType(frozen))

    @property
    def max_commands(self) -> int:
        """Length of the longest command list."""
        return max((len(cmds) for cmds in self.commands.values()), default=0)

    def commands_for(self, name: str) -> tuple[Command, ...]:
        return self.commands[name]


@dataclass(frozen=True)
class RunConfig:
    """Runtime knobs resolved by the CLI."""

    mode: SimulationMode | None = None
    render_path: Path | None = None
    theme: str = "default"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.log_level.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
