"""The closed command set: move forward, turn left, turn right.

Every command is a pure transition over ``(position, orientation)``. Nothing
here knows about the field; bounds are enforced by ``Vehicle.apply_command``.
"""

from __future__ import annotations

from enum import Enum

from autodrive_sim.domain.orientation import Orientation

Position = tuple[int, int]
Pose = tuple[Position, Orientation]


class Command(Enum):
    """One step of a car's program, keyed by its input character."""

    FORWARD = "F"
    LEFT = "L"
    RIGHT = "R"

    @classmethod
    def from_char(cls, char: str) -> Command:
        """Decode one command character (case-insensitive)."""
        return cls(char.upper())

    def next_position(self, position: Position, orientation: Orientation) -> Position:
        if self is Command.FORWARD:
            dx, dy = orientation.delta
            return (position[0] + dx, position[1] + dy)
        return position

    def next_orientation(self, orientation: Orientation) -> Orientation:
        if self is Command.LEFT:
            return orientation.turn_left()
        if self is Command.RIGHT:
            return orientation.turn_right()
        return orientation

    def apply(self, position: Position, orientation: Orientation) -> Pose:
        """Return the candidate pose after this command; inputs are untouched."""
        return self.next_position(position, orientation), self.next_orientation(orientation)


def commands_to_string(commands: tuple[Command, ...] | list[Command]) -> str:
    """Inverse of command parsing, e.g. ``(FORWARD, LEFT)`` -> ``"FL"``."""
    return "".join(command.value for command in commands)
