"""Canonical text output for finished runs."""

from __future__ import annotations

from collections.abc import Iterable

from autodrive_sim.config.constants import COLLISION_EXPLANATION, NO_COLLISION_MESSAGE
from autodrive_sim.domain.collision import Collision
from autodrive_sim.simulation.engine import MultipleCarsResult, SingleCarResult


def format_final_pose(result: SingleCarResult) -> str:
    """``"<x> <y> <orientation>"``."""
    x, y = result.position
    return f"{x} {y} {result.orientation}"


def unique_collisions(collisions: Iterable[Collision]) -> list[Collision]:
    """Drop repeated entries and order by step, then position."""
    seen: set[Collision] = set()
    ordered: list[Collision] = []
    for collision in collisions:
        if collision in seen:
            continue
        seen.add(collision)
        ordered.append(collision)
    return sorted(ordered, key=lambda c: (c.step, c.position))


def format_collision_block(collision: Collision) -> str:
    x, y = collision.position
    return f"{' '.join(collision.cars_involved)}\n{x} {y}\n{collision.step}"


def format_collision_explanation(collision: Collision) -> str:
    x, y = collision.position
    return COLLISION_EXPLANATION.format(
        cars=" ".join(collision.cars_involved), x=x, y=y, step=collision.step
    )


def format_collision_report(collisions: Iterable[Collision]) -> str:
    """One block per collision separated by blank lines, or ``"No collision"``."""
    blocks = [format_collision_block(c) for c in unique_collisions(collisions)]
    if not blocks:
        return NO_COLLISION_MESSAGE
    return "\n\n".join(blocks)


def format_result(result: SingleCarResult | MultipleCarsResult) -> str:
    """Dispatch to the formatter matching the result type."""
    if isinstance(result, SingleCarResult):
        return format_final_pose(result)
    return format_collision_report(result.collisions)
