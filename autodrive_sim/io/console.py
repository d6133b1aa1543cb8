"""Interactive console session over explicit text streams.

The session never touches ``sys.stdin``/``sys.stdout`` directly; callers pass
the streams in, which keeps every prompt/answer exchange testable with
``io.StringIO``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TextIO, TypeVar

from autodrive_sim.config.constants import (
    ADD_ANOTHER_CAR_PROMPT,
    CAR_OUTSIDE_FIELD,
    CAR_POSITION_PROMPT,
    CAR_POSITION_PROMPT_WITH_NAME,
    COMMANDS_PROMPT,
    COMMANDS_PROMPT_WITH_NAME,
    DEFAULT_CAR_NAME,
    DUPLICATE_CAR_NAME,
    ENTER_CAR_NAME_PROMPT,
    FIELD_SIZE_PROMPT,
    GENERAL_INPUT_FORMAT_ERROR,
    SIMULATION_TYPE_PROMPT,
    WELCOME_MESSAGE,
)
from autodrive_sim.config.types import SimulationInput, SimulationMode, VehicleSpec
from autodrive_sim.domain.commands import Command
from autodrive_sim.io.parsing import parse_car_details, parse_commands, parse_field_size
from autodrive_sim.simulation.engine import (
    MultipleCarsResult,
    SingleCarResult,
    run_simulation,
)
from autodrive_sim.simulation.report import format_collision_explanation, format_result

logger = logging.getLogger(__name__)

T = TypeVar("T")

CHOICE_MODES: dict[str, SimulationMode] = {
    "1": SimulationMode.SINGLE,
    "2": SimulationMode.MULTIPLE,
}
"""Menu answers accepted by ``run_choice_loop``."""


class ConsoleSession:
    """Prompt-driven input collection and result output."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout

    # ------------------------------------------------------------------
    # Stream primitives
    # ------------------------------------------------------------------

    def display(self, message: str) -> None:
        self.stdout.write(message + "\n")
        self.stdout.flush()

    def read_line(self) -> str:
        """Read one line without its newline; raises EOFError at end of input."""
        line = self.stdin.readline()
        if line == "":
            raise EOFError("input stream closed")
        return line.rstrip("\r\n")

    def _request(self, prompt: str, parse: Callable[[str], T]) -> T:
        """Prompt until ``parse`` accepts the answer."""
        while True:
            self.display(prompt)
            line = self.read_line()
            try:
                return parse(line)
            except ValueError as exc:
                logger.warning("rejected input %r: %s", line, exc)
                self.display(GENERAL_INPUT_FORMAT_ERROR.format(message=exc))

    # ------------------------------------------------------------------
    # Individual requests
    # ------------------------------------------------------------------

    def request_field_size(self) -> tuple[int, int]:
        return self._request(FIELD_SIZE_PROMPT, parse_field_size)

    def request_car_input(self, width: int, height: int, name: str = "") -> VehicleSpec:
        prompt = CAR_POSITION_PROMPT_WITH_NAME.format(name=name) if name else CAR_POSITION_PROMPT

        def parse(line: str) -> VehicleSpec:
            spec = parse_car_details(line, name)
            if not (0 <= spec.x < width and 0 <= spec.y < height):
                raise ValueError(
                    CAR_OUTSIDE_FIELD.format(x=spec.x, y=spec.y, width=width, height=height)
                )
            return spec

        return self._request(prompt, parse)

    def request_commands(self, name: str = "") -> tuple[Command, ...]:
        prompt = COMMANDS_PROMPT_WITH_NAME.format(name=name) if name else COMMANDS_PROMPT
        return self._request(prompt, parse_commands)

    def request_car_name(self, taken: set[str]) -> str:
        def parse(line: str) -> str:
            name = line.strip() or DEFAULT_CAR_NAME
            if name in taken:
                raise ValueError(DUPLICATE_CAR_NAME.format(name=name))
            return name

        return self._request(ENTER_CAR_NAME_PROMPT, parse)

    def prompt_add_another_car(self) -> bool:
        self.display(ADD_ANOTHER_CAR_PROMPT)
        return self.read_line().strip().lower() == "y"

    # ------------------------------------------------------------------
    # Whole inputs
    # ------------------------------------------------------------------

    def read_single_car_input(self) -> SimulationInput:
        width, height = self.request_field_size()
        spec = self.request_car_input(width, height)
        commands = self.request_commands()
        return SimulationInput(
            width=width, height=height, vehicles=(spec,), commands={spec.name: commands}
        )

    def read_multiple_cars_input(self) -> SimulationInput:
        width, height = self.request_field_size()
        vehicles: list[VehicleSpec] = []
        commands: dict[str, tuple[Command, ...]] = {}
        while True:
            name = self.request_car_name(set(commands))
            vehicles.append(self.request_car_input(width, height, name))
            commands[name] = self.request_commands(name)
            if not self.prompt_add_another_car():
                break
        return SimulationInput(
            width=width, height=height, vehicles=tuple(vehicles), commands=commands
        )

    def read_input(self, mode: SimulationMode) -> SimulationInput:
        if mode is SimulationMode.SINGLE:
            return self.read_single_car_input()
        return self.read_multiple_cars_input()

    # ------------------------------------------------------------------
    # Running
    # ------------------------------------------------------------------

    def write_result(self, result: SingleCarResult | MultipleCarsResult) -> None:
        self.display(format_result(result))
        if isinstance(result, MultipleCarsResult):
            for collision in result.collisions:
                self.display(format_collision_explanation(collision))

    def run(self, mode: SimulationMode) -> SingleCarResult | MultipleCarsResult:
        """Collect one input, simulate it and print the report."""
        sim_input = self.read_input(mode)
        result = run_simulation(sim_input, mode)
        self.write_result(result)
        return result

    def run_choice_loop(self) -> None:
        """Offer the simulation menu until the user types ``q`` or input ends."""
        self.display(WELCOME_MESSAGE)
        while True:
            self.display(SIMULATION_TYPE_PROMPT)
            try:
                choice = self.read_line().strip().lower()
                if choice == "q":
                    return
                mode = CHOICE_MODES.get(choice)
                if mode is None:
                    continue
                self.run(mode)
            except EOFError:
                logger.info("input closed; leaving choice loop")
                return
