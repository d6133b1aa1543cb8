"""Domain layer: field, orientation, commands, cars and collisions."""

from autodrive_sim.domain.collision import Collision, detect_collisions
from autodrive_sim.domain.commands import Command, Pose, Position, commands_to_string
from autodrive_sim.domain.field import Field
from autodrive_sim.domain.orientation import Orientation
from autodrive_sim.domain.vehicle import Vehicle

__all__ = [
    "Collision",
    "Command",
    "Field",
    "Orientation",
    "Pose",
    "Position",
    "Vehicle",
    "commands_to_string",
    "detect_collisions",
]
