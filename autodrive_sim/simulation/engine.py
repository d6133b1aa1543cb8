"""Step-synchronized simulation engines.

Multi-car state machine::

    Running(step) -> Running(step + 1) | Collided(step) | Exhausted

Every car with a command at index ``step`` applies it before collision
detection runs for that step, so detection always sees a fully updated
snapshot. The first step that produces any collision ends the run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from autodrive_sim.config.types import SimulationInput, SimulationMode, VehicleSpec
from autodrive_sim.domain.collision import Collision, detect_collisions
from autodrive_sim.domain.commands import Position
from autodrive_sim.domain.field import Field
from autodrive_sim.domain.orientation import Orientation
from autodrive_sim.domain.vehicle import Vehicle

logger = logging.getLogger(__name__)

CarState = tuple[str, Position, Orientation]


@dataclass(frozen=True)
class StepSnapshot:
    """Every car's pose after ``step`` commands (step 0 is the initial pose)."""

    step: int
    cars: tuple[CarState, ...]

    def positions(self) -> dict[str, Position]:
        return {name: position for name, position, _ in self.cars}


@dataclass(frozen=True)
class SingleCarResult:
    """Final pose of a single-car run."""

    name: str
    position: Position
    orientation: Orientation
    dropped_commands: int
    trace: tuple[StepSnapshot, ...] = ()


@dataclass(frozen=True)
class MultipleCarsResult:
    """Terminal state of a multi-car run."""

    collisions: tuple[Collision, ...]
    steps_run: int
    trace: tuple[StepSnapshot, ...] = ()

    @property
    def collided(self) -> bool:
        return bool(self.collisions)

    @property
    def collision_step(self) -> int | None:
        return self.collisions[0].step if self.collisions else None


def _build_vehicles(specs: tuple[VehicleSpec, ...]) -> list[Vehicle]:
    return [Vehicle(name=s.name, position=s.position, orientation=s.orientation) for s in specs]


def _snapshot(step: int, vehicles: list[Vehicle]) -> StepSnapshot:
    return StepSnapshot(
        step=step,
        cars=tuple((v.name, v.position, v.orientation) for v in vehicles),
    )


def run_single_car(sim_input: SimulationInput) -> SingleCarResult:
    """Drive the first car through its whole command list.

    Commands that would leave the field are skipped; the remaining commands
    are still attempted from the last committed pose.
    """
    field = Field(sim_input.width, sim_input.height)
    spec = sim_input.vehicles[0]
    if len(sim_input.vehicles) > 1:
        logger.warning(
            "single-car run received %d cars; only %r is simulated",
            len(sim_input.vehicles),
            spec.name,
        )
    vehicle = _build_vehicles((spec,))[0]
    trace = [_snapshot(0, [vehicle])]
    dropped = 0
    for index, command in enumerate(sim_input.commands_for(spec.name)):
        if not vehicle.apply_command(command, field):
            dropped += 1
            logger.debug(
                "step %d: dropped %s for %s at %s", index + 1, command.value, spec.name, vehicle
            )
        trace.append(_snapshot(index + 1, [vehicle]))

    logger.info("single-car run finished at %s (%d dropped)", vehicle, dropped)
    return SingleCarResult(
        name=vehicle.name,
        position=vehicle.position,
        orientation=vehicle.orientation,
        dropped_commands=dropped,
        trace=tuple(trace),
    )


def _execute_step(
    vehicles: list[Vehicle], sim_input: SimulationInput, field: Field, step: int
) -> None:
    """Apply command ``step`` of every car that still has one, in input order."""
    for vehicle in vehicles:
        commands = sim_input.commands_for(vehicle.name)
        if step >= len(commands):
            continue
        command = commands[step]
        if not vehicle.apply_command(command, field):
            logger.debug(
                "step %d: dropped %s for %s at %s", step + 1, command.value, vehicle.name, vehicle
            )


def run_multiple_cars(sim_input: SimulationInput) -> MultipleCarsResult:
    """Run all cars in lock-step until the first collision or until commands run out.

    Collisions carry 1-based step numbers (commands executed so far). Every
    collision group found at the terminal step is returned.
    """
    field = Field(sim_input.width, sim_input.height)
    vehicles = _build_vehicles(sim_input.vehicles)
    trace = [_snapshot(0, vehicles)]

    for step in range(sim_input.max_commands):
        _execute_step(vehicles, sim_input, field, step)
        trace.append(_snapshot(step + 1, vehicles))
        collisions = detect_collisions(vehicles, step + 1)
        if collisions:
            logger.info(
                "collision at step %d: %s",
                step + 1,
                "; ".join(f"{' '.join(c.cars_involved)} @ {c.position}" for c in collisions),
            )
            return MultipleCarsResult(
                collisions=tuple(collisions), steps_run=step + 1, trace=tuple(trace)
            )

    logger.info("no collision after %d steps", sim_input.max_commands)
    return MultipleCarsResult(collisions=(), steps_run=sim_input.max_commands, trace=tuple(trace))


def resolve_mode(sim_input: SimulationInput, mode: SimulationMode | None) -> SimulationMode:
    """Default to the single-car engine only when exactly one car is given."""
    if mode is not None:
        return mode
    return SimulationMode.SINGLE if len(sim_input.vehicles) == 1 else SimulationMode.MULTIPLE


def run_simulation(
    sim_input: SimulationInput, mode: SimulationMode | None = None
) -> SingleCarResult | MultipleCarsResult:
    """Run ``sim_input`` with the engine selected by ``mode``."""
    if resolve_mode(sim_input, mode) is SimulationMode.SINGLE:
        return run_single_car(sim_input)
    return run_multiple_cars(sim_input)
