"""Shared test fixtures."""

import pytest

from turtlesoup.geometry import Point
from turtlesoup.turtle import Segment, SimpleTurtle


class RecordingTurtle:
    """Turtle double that only logs the calls made on it."""

    def __init__(self, position: Point = Point(), heading: float = 0.0):
        self.position = position
        self.heading = heading
        self.calls: list[tuple[str, float]] = []

    def forward(self, distance: float):
        self.calls.append(("forward", distance))

    def turn(self, angle: float):
        self.calls.append(("turn", angle))

    def get_position(self) -> Point:
        return self.position

    def get_heading(self) -> float:
        return self.heading

    def get_path(self) -> tuple[Segment, ...]:
        return ()


@pytest.fixture
def turtle() -> SimpleTurtle:
    return SimpleTurtle()


@pytest.fixture
def recorder() -> RecordingTurtle:
    return RecordingTurtle()


def assert_contiguous(path):
    for prev, nxt in zip(path, path[1:]):
        assert prev.end == nxt.start
