"""Mutable car state with commit-or-drop command application.

Bounds invariant: a car's committed position is always inside its field. A
candidate pose that leaves the field is discarded whole (position and
orientation), never partially applied and never deferred.
"""

from __future__ import annotations

from dataclasses import dataclass

from autodrive_sim.domain.commands import Command, Pose, Position
from autodrive_sim.domain.field import Field
from autodrive_sim.domain.orientation import Orientation


@dataclass
class Vehicle:
    """A single car on the field."""

    name: str
    position: Position
    orientation: Orientation

    @property
    def pose(self) -> Pose:
        return (self.position, self.orientation)

    def apply_command(self, command: Command, field: Field) -> bool:
        """Apply ``command`` if the result stays on ``field``.

        Returns True when the new pose was committed, False when it was dropped.
        """
        position, orientation = command.apply(self.position, self.orientation)
        if not field.inside_bounds(position):
            return False
        self.position = position
        self.orientation = orientation
        return True

    def __str__(self) -> str:
        return f"{self.position[0]} {self.position[1]} {self.orientation}"
