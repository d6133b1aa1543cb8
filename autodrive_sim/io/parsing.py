"""Parsers for the line-oriented console input format.

Each parser either returns a fully validated value or raises ``ValueError``
carrying the user-facing message from ``config.constants``.
"""

from __future__ import annotations

from autodrive_sim.config.constants import (
    DEFAULT_CAR_NAME,
    INVALID_CAR_DETAILS_FORMAT,
    INVALID_COMMAND_FORMAT,
    INVALID_FIELD_SIZE_FORMAT,
)
from autodrive_sim.config.types import VehicleSpec
from autodrive_sim.domain.commands import Command
from autodrive_sim.domain.orientation import Orientation


def _parse_int(token: str, message: str) -> int:
    try:
        return int(token)
    except ValueError as exc:
        raise ValueError(message) from exc


def parse_field_size(line: str) -> tuple[int, int]:
    """Parse ``"W H"`` into positive integer dimensions."""
    parts = line.split()
    if len(parts) != 2:
        raise ValueError(INVALID_FIELD_SIZE_FORMAT)
    width = _parse_int(parts[0], INVALID_FIELD_SIZE_FORMAT)
    height = _parse_int(parts[1], INVALID_FIELD_SIZE_FORMAT)
    if width < 1 or height < 1:
        raise ValueError(INVALID_FIELD_SIZE_FORMAT)
    return width, height


def parse_car_details(line: str, name: str = "") -> VehicleSpec:
    """Parse ``"X Y O"``; the orientation letter is case-insensitive."""
    parts = line.split()
    if len(parts) != 3:
        raise ValueError(INVALID_CAR_DETAILS_FORMAT)
    x = _parse_int(parts[0], INVALID_CAR_DETAILS_FORMAT)
    y = _parse_int(parts[1], INVALID_CAR_DETAILS_FORMAT)
    try:
        orientation = Orientation.parse(parts[2])
    except ValueError as exc:
        raise ValueError(INVALID_CAR_DETAILS_FORMAT) from exc
    return VehicleSpec(name=name or DEFAULT_CAR_NAME, x=x, y=y, orientation=orientation)


def parse_commands(line: str) -> tuple[Command, ...]:
    """Parse a command string such as ``"ffRL"``. Whitespace is ignored."""
    commands: list[Command] = []
    for char in line.strip():
        if char.isspace():
            continue
        try:
            commands.append(Command.from_char(char))
        except ValueError as exc:
            raise ValueError(INVALID_COMMAND_FORMAT.format(char=char)) from exc
    return tuple(commands)
