"""Tests for the single- and multi-car simulation engines."""

from __future__ import annotations

import logging

import pytest

from autodrive_sim.config.types import SimulationInput, SimulationMode, VehicleSpec
from autodrive_sim.domain.collision import Collision
from autodrive_sim.domain.orientation import Orientation
from autodrive_sim.io.parsing import parse_commands
from autodrive_sim.simulation.engine import (
    MultipleCarsResult,
    SingleCarResult,
    resolve_mode,
    run_multiple_cars,
    run_simulation,
    run_single_car,
)


def _input(
    cars: list[tuple[str, int, int, str, str]], width: int = 10, height: int = 10
) -> SimulationInput:
    return SimulationInput(
        width=width,
        height=height,
        vehicles=tuple(VehicleSpec(n, x, y, Orientation(o)) for n, x, y, o, _ in cars),
        commands={n: parse_commands(cmds) for n, _, _, _, cmds in cars},
    )


SCENARIO_D = [("A", 1, 2, "N", "FFRFFFFRRL"), ("B", 7, 8, "W", "FFLFFFFFFF")]
SCENARIO_E = SCENARIO_D + [("C", 5, 3, "N", "LRLRLRFLRL")]


class TestSingleCar:
    def test_scenario_a(self) -> None:
        result = run_single_car(_input([("A", 1, 2, "N", "FFRFFFRRLF")]))
        assert result.position == (4, 3)
        assert result.orientation is Orientation.S
        assert result.dropped_commands == 0

    def test_scenario_b_skips_out_of_bounds_and_continues(self) -> None:
        result = run_single_car(_input([("A", 0, 0, "S", "FFFFFFLF")]))
        assert result.position == (1, 0)
        assert result.orientation is Orientation.E
        assert result.dropped_commands == 6

    def test_empty_command_list(self) -> None:
        result = run_single_car(_input([("A", 3, 3, "W", "")]))
        assert (result.position, result.orientation) == ((3, 3), Orientation.W)
        assert len(result.trace) == 1

    def test_trace_has_one_snapshot_per_command(self) -> None:
        result = run_single_car(_input([("A", 1, 1, "N", "FRF")]))
        assert [s.step for s in result.trace] == [0, 1, 2, 3]
        assert [s.positions()["A"] for s in result.trace] == [(1, 1), (1, 2), (1, 2), (2, 2)]

    def test_extra_cars_are_ignored_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        sim_input = _input([("A", 0, 0, "N", "F"), ("B", 0, 1, "S", "")])
        with caplog.at_level(logging.WARNING, logger="autodrive_sim.simulation.engine"):
            result = run_single_car(sim_input)
        assert result.name == "A"
        assert result.position == (0, 1)
        assert "only 'A' is simulated" in caplog.text


class TestMultipleCars:
    def test_scenario_c_no_collision(self) -> None:
        result = run_multiple_cars(_input([("A", 0, 0, "N", "RLRLRL"), ("B", 3, 3, "E", "RLRLRL")]))
        assert not result.collided
        assert result.collision_step is None
        assert result.steps_run == 6

    def test_scenario_d_two_car_collision(self) -> None:
        result = run_multiple_cars(_input(SCENARIO_D))
        assert result.collisions == (Collision(("A", "B"), (5, 4), 7),)
        assert result.steps_run == 7

    def test_scenario_e_three_car_collision(self) -> None:
        result = run_multiple_cars(_input(SCENARIO_E))
        assert result.collisions == (Collision(("A", "B", "C"), (5, 4), 7),)

    def test_reported_cars_occupy_reported_cell(self) -> None:
        result = run_multiple_cars(_input(SCENARIO_E))
        final = result.trace[-1]
        assert final.step == 7
        for collision in result.collisions:
            occupants = {n for n, pos in final.positions().items() if pos == collision.position}
            assert occupants == set(collision.cars_involved)

    def test_first_collision_step_wins(self) -> None:
        sim_input = _input(
            [
                ("A", 0, 0, "E", "FF"),
                ("B", 4, 0, "W", "FF"),
                ("C", 0, 5, "E", "FFF"),
                ("D", 6, 5, "W", "FFF"),
            ]
        )
        result = run_multiple_cars(sim_input)
        assert result.collisions == (Collision(("A", "B"), (2, 0), 2),)
        assert result.steps_run == 2
        # No step after the collision is evaluated
        assert result.trace[-1].positions()["C"] == (2, 5)

    def test_simultaneous_groups_all_reported(self) -> None:
        sim_input = _input(
            [
                ("A", 0, 0, "E", "F"),
                ("B", 2, 0, "W", "F"),
                ("C", 0, 5, "E", "F"),
                ("D", 2, 5, "W", "F"),
            ]
        )
        result = run_multiple_cars(sim_input)
        assert set(result.collisions) == {
            Collision(("A", "B"), (1, 0), 1),
            Collision(("C", "D"), (1, 5), 1),
        }

    def test_exhausted_car_still_collides(self) -> None:
        result = run_multiple_cars(_input([("A", 0, 0, "N", ""), ("B", 0, 2, "S", "FF")]))
        assert result.collisions == (Collision(("A", "B"), (0, 0), 2),)

    def test_dropped_move_keeps_car_in_place(self) -> None:
        result = run_multiple_cars(_input([("A", 0, 0, "S", "FF"), ("B", 0, 2, "S", "FF")]))
        assert result.collisions == (Collision(("A", "B"), (0, 0), 2),)

    def test_swapping_cells_is_not_a_collision(self) -> None:
        result = run_multiple_cars(_input([("A", 0, 0, "E", "F"), ("B", 1, 0, "W", "F")]))
        assert not result.collided

    def test_shared_start_cell_needs_a_step(self) -> None:
        """Detection runs only after a step; empty programs never collide."""
        result = run_multiple_cars(_input([("A", 1, 1, "N", ""), ("B", 1, 1, "E", "")]))
        assert not result.collided
        assert result.steps_run == 0

    def test_trace_never_leaves_field(self) -> None:
        result = run_multiple_cars(
            _input([("A", 0, 0, "W", "FFLFFF"), ("B", 2, 2, "N", "FFFFFF")], width=3, height=3)
        )
        for snapshot in result.trace:
            for _, (x, y), _ in snapshot.cars:
                assert 0 <= x < 3 and 0 <= y < 3


class TestModeDispatch:
    def test_single_car_defaults_to_single(self) -> None:
        sim_input = _input([("A", 1, 2, "N", "F")])
        assert resolve_mode(sim_input, None) is SimulationMode.SINGLE
        assert isinstance(run_simulation(sim_input), SingleCarResult)

    def test_several_cars_default_to_multiple(self) -> None:
        sim_input = _input(SCENARIO_D)
        assert resolve_mode(sim_input, None) is SimulationMode.MULTIPLE
        assert isinstance(run_simulation(sim_input), MultipleCarsResult)

    def test_explicit_mode_wins(self) -> None:
        sim_input = _input([("A", 1, 2, "N", "F")])
        assert isinstance(run_simulation(sim_input, SimulationMode.MULTIPLE), MultipleCarsResult)
