"""Collision detection by grouping cars on shared cells."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from autodrive_sim.domain.commands import Position
from autodrive_sim.domain.vehicle import Vehicle


@dataclass(frozen=True)
class Collision:
    """Two or more cars sharing one cell at the end of a step."""

    cars_involved: tuple[str, ...]
    position: Position
    step: int


def detect_collisions(vehicles: Iterable[Vehicle], step: int) -> list[Collision]:
    """Return one Collision per cell occupied by more than one car.

    Car names inside a collision keep the iteration order of ``vehicles``;
    collisions follow the order in which each shared cell was first seen.
    """
    groups: dict[Position, list[str]] = {}
    for vehicle in vehicles:
        groups.setdefault(vehicle.position, []).append(vehicle.name)
    return [
        Collision(cars_involved=tuple(names), position=position, step=step)
        for position, names in groups.items()
        if len(names) > 1
    ]
