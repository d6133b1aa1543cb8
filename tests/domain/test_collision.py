"""Tests for autodrive_sim.domain.collision."""

from __future__ import annotations

from autodrive_sim.domain.collision import Collision, detect_collisions
from autodrive_sim.domain.orientation import Orientation
from autodrive_sim.domain.vehicle import Vehicle


def _car(name: str, x: int, y: int) -> Vehicle:
    return Vehicle(name, (x, y), Orientation.N)


class TestDetectCollisions:
    def test_no_shared_cells(self) -> None:
        assert detect_collisions([_car("A", 0, 0), _car("B", 1, 0)], step=3) == []

    def test_single_car(self) -> None:
        assert detect_collisions([_car("A", 0, 0)], step=1) == []

    def test_pair(self) -> None:
        collisions = detect_collisions([_car("A", 2, 2), _car("B", 2, 2)], step=4)
        assert collisions == [Collision(cars_involved=("A", "B"), position=(2, 2), step=4)]

    def test_three_way_group_is_one_collision(self) -> None:
        cars = [_car("A", 1, 1), _car("B", 1, 1), _car("C", 1, 1), _car("D", 0, 0)]
        collisions = detect_collisions(cars, step=2)
        assert len(collisions) == 1
        assert collisions[0].cars_involved == ("A", "B", "C")

    def test_distinct_groups_share_step(self) -> None:
        cars = [_car("A", 1, 1), _car("B", 3, 3), _car("C", 1, 1), _car("D", 3, 3)]
        collisions = detect_collisions(cars, step=5)
        assert {c.position for c in collisions} == {(1, 1), (3, 3)}
        assert {c.step for c in collisions} == {5}
        by_position = {c.position: set(c.cars_involved) for c in collisions}
        assert by_position == {(1, 1): {"A", "C"}, (3, 3): {"B", "D"}}

    def test_orientation_does_not_matter(self) -> None:
        cars = [Vehicle("A", (0, 0), Orientation.N), Vehicle("B", (0, 0), Orientation.S)]
        assert len(detect_collisions(cars, step=1)) == 1
