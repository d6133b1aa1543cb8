"""JSON scenario files.

A scenario document looks like::

    {
      "width": 10,
      "height": 10,
      "cars": [
        {"name": "A", "x": 1, "y": 2, "orientation": "N", "commands": "FFRFFFFRRL"}
      ]
    }
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

from autodrive_sim.config.constants import DEFAULT_CAR_NAME
from autodrive_sim.config.types import SimulationInput, VehicleSpec
from autodrive_sim.domain.commands import Command, commands_to_string
from autodrive_sim.domain.orientation import Orientation
from autodrive_sim.io.parsing import parse_commands


def _require_int(raw: object, key: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ValueError(f"{key} must be an integer value")
    return raw


def _require_str(raw: object, key: str) -> str:
    if not isinstance(raw, str):
        raise ValueError(f"{key} must be a string value")
    return raw


def scenario_from_dict(data: Mapping[str, object]) -> SimulationInput:
    """Build a validated SimulationInput from decoded scenario JSON."""
    width = _require_int(data.get("width"), "width")
    height = _require_int(data.get("height"), "height")
    cars = data.get("cars")
    if not isinstance(cars, list) or not cars:
        raise ValueError("cars must be a non-empty list")

    vehicles: list[VehicleSpec] = []
    commands: dict[str, tuple[Command, ...]] = {}
    for index, car in enumerate(cars):
        if not isinstance(car, Mapping):
            raise ValueError(f"cars[{index}] must be an object")
        name = _require_str(car.get("name", DEFAULT_CAR_NAME), f"cars[{index}].name")
        if name in commands:
            raise ValueError(f"duplicate car name {name!r}")
        orientation = Orientation.parse(
            _require_str(car.get("orientation"), f"cars[{index}].orientation")
        )
        vehicles.append(
            VehicleSpec(
                name=name,
                x=_require_int(car.get("x"), f"cars[{index}].x"),
                y=_require_int(car.get("y"), f"cars[{index}].y"),
                orientation=orientation,
            )
        )
        commands[name] = parse_commands(
            _require_str(car.get("commands", ""), f"cars[{index}].commands")
        )

    return SimulationInput(width=width, height=height, vehicles=tuple(vehicles), commands=commands)


def scenario_to_dict(sim_input: SimulationInput) -> dict[str, object]:
    """Inverse of ``scenario_from_dict``."""
    return {
        "width": sim_input.width,
        "height": sim_input.height,
        "cars": [
            {
                "name": v.name,
                "x": v.x,
                "y": v.y,
                "orientation": v.orientation.value,
                "commands": commands_to_string(sim_input.commands_for(v.name)),
            }
            for v in sim_input.vehicles
        ],
    }


def load_scenario(path: Path) -> SimulationInput:
    """Read and validate a scenario file."""
    try:
        data = json.loads(Path(path).read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"scenario file is not valid JSON: {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("scenario document must be a JSON object")
    return scenario_from_dict(data)
