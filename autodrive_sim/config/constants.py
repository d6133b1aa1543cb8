"""Centralized constants for the car simulation.

User-facing messages live here so the console session, the report
formatter and the tests share one source of truth.
"""

from __future__ import annotations

FIELD_WIDTH = 10
"""Default field width in cells."""

FIELD_HEIGHT = 10
"""Default field height in cells."""

DEFAULT_CAR_NAME = "UnnamedCar"
"""Name given to a car when none is supplied."""

COMMAND_ALPHABET: tuple[str, ...] = ("F", "L", "R")
"""Command characters: Forward, turn Left, turn Right."""

ORIENTATIONS: tuple[str, ...] = ("N", "E", "S", "W")
"""Orientation letters in clockwise order."""

NO_COLLISION_MESSAGE = "No collision"

COLLISION_EXPLANATION = "Cars {cars} collided at position ({x}, {y}) at step {step}."
"""Human-readable sentence printed after each collision block."""

# ---------------------------------------------------------------------------
# Console prompts
# ---------------------------------------------------------------------------

FIELD_SIZE_PROMPT = (
    "Please enter the width and height of the simulation field, "
    "separated by a space (e.g., '10 20'):"
)
CAR_POSITION_PROMPT = (
    "Please enter the starting position (X Y) and orientation (N, E, S, W) "
    "of the car: (e.g., '1 2 N')"
)
CAR_POSITION_PROMPT_WITH_NAME = (
    "Please enter the position (X Y) and facing direction (N, E, S, W) "
    "for the car named {name}:"
)
COMMANDS_PROMPT = (
    "Please enter the sequence of commands for the car: (e.g., 'LFFR') "
    "where 'L' = turn left, 'R' = turn right, 'F' = move forward"
)
COMMANDS_PROMPT_WITH_NAME = (
    "Please enter the sequence of commands for {name} car: (e.g., 'LFFR') "
    "where 'L' = turn left, 'R' = turn right, 'F' = move forward"
)
ENTER_CAR_NAME_PROMPT = "Enter car name:"
ADD_ANOTHER_CAR_PROMPT = "Add another car? (y/n):"
SIMULATION_TYPE_PROMPT = (
    "\nChoose simulation type:\n"
    "1. Single Car Simulation\n"
    "2. Multiple Cars Simulation\n"
    "Type 'q' to exit.\n"
    "Enter your choice (1 or 2): "
)
WELCOME_MESSAGE = "Welcome to the Car Simulation Program!"

# ---------------------------------------------------------------------------
# Input errors
# ---------------------------------------------------------------------------

INVALID_FIELD_SIZE_FORMAT = (
    "Invalid format. Please enter width and height as two positive integers "
    "separated by a space (e.g., '10 20')."
)
INVALID_CAR_DETAILS_FORMAT = (
    "Invalid format. Please enter position and orientation as 'X Y Orientation' "
    "(e.g., '1 2 N')."
)
INVALID_COMMAND_FORMAT = "Invalid command '{char}'. Only 'L', 'R', and 'F' are allowed."
DUPLICATE_CAR_NAME = "A car named {name!r} already exists."
CAR_OUTSIDE_FIELD = "Car position ({x}, {y}) is outside the {width}x{height} field."
GENERAL_INPUT_FORMAT_ERROR = "Error: {message} Please try again."
