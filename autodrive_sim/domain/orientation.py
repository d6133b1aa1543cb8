"""Compass orientation with clockwise turn tables."""

from __future__ import annotations

from enum import Enum


class Orientation(Enum):
    """Heading of a car; cyclic clockwise N -> E -> S -> W -> N."""

    N = "N"
    E = "E"
    S = "S"
    W = "W"

    @classmethod
    def parse(cls, raw: str) -> Orientation:
        """Case-insensitive lookup by letter."""
        try:
            return cls(raw.strip().upper())
        except ValueError as exc:
            valid = ", ".join(o.value for o in cls)
            raise ValueError(f"orientation must be one of {valid}") from exc

    def turn_left(self) -> Orientation:
        return _LEFT[self]

    def turn_right(self) -> Orientation:
        return _RIGHT[self]

    @property
    def delta(self) -> tuple[int, int]:
        """Unit step taken when moving forward."""
        return _FORWARD_DELTA[self]

    def __str__(self) -> str:
        return self.value


_RIGHT: dict[Orientation, Orientation] = {
    Orientation.N: Orientation.E,
    Orientation.E: Orientation.S,
    Orientation.S: Orientation.W,
    Orientation.W: Orientation.N,
}

_LEFT: dict[Orientation, Orientation] = {after: before for before, after in _RIGHT.items()}

_FORWARD_DELTA: dict[Orientation, tuple[int, int]] = {
    Orientation.N: (0, 1),
    Orientation.E: (1, 0),
    Orientation.S: (0, -1),
    Orientation.W: (-1, 0),
}
