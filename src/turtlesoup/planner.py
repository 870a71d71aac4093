"""Waypoint path planning as turn/forward instructions."""

from typing import Iterable

from .geometry import Point, bearing, distance, turn_delta
from .turtle import Turtle


def find_path(turtle: Turtle, points: Iterable[Point]) -> list[str]:
    """Instructions that take the turtle through `points` in order.

    Only reads the turtle's pose; nothing is executed on it.
    """
    instructions = []
    current = turtle.get_position()
    heading = turtle.get_heading()

    for target in points:
        target_angle = bearing(current, target)

        instructions.append(f"turn {turn_delta(target_angle, heading):.2f}")
        instructions.append(f"forward {distance(current, target):.2f}")

        current = target
        heading = target_angle

    return instructions
