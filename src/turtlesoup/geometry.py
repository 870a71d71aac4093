"""Plane geometry helpers for turtle paths."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0


def chord_length(radius: float, angle: float) -> float:
    """Length of the chord subtending `angle` degrees on a circle of `radius`."""
    return round(2 * radius * math.sin(math.radians(angle) / 2), 10)


def distance(p1: Point, p2: Point) -> float:
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return math.sqrt(dx * dx + dy * dy)


def bearing(origin: Point, target: Point) -> float:
    """Absolute angle in degrees from `origin` to `target`."""
    # + 0.0 turns -0.0 into 0.0 so due west is 180, never -180
    dy = target.y - origin.y + 0.0
    return math.degrees(math.atan2(dy, target.x - origin.x))


def turn_delta(target_bearing: float, heading: float) -> float:
    """Left turn in [0, 360) that brings `heading` onto `target_bearing`.

    Never the signed shortest turn: a target just to the right costs
    almost a full revolution.
    """
    return (target_bearing - heading + 360) % 360
