"""Turtle graphics state machine."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, Sequence

from .geometry import Point


class Color(str, Enum):
    BLACK = "black"
    GRAY = "gray"
    RED = "red"
    PINK = "pink"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    CYAN = "cyan"
    BLUE = "blue"
    MAGENTA = "magenta"


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point
    color: str = Color.BLACK.value


class Turtle(Protocol):
    """Operations drawing routines and the planner rely on."""

    def forward(self, distance: float) -> None: ...

    def turn(self, angle: float) -> None: ...

    def get_position(self) -> Point: ...

    def get_heading(self) -> float: ...

    def get_path(self) -> Sequence[Segment]: ...


@dataclass
class SimpleTurtle:
    """Turtle that records every stroke. The pen is always down."""

    position: Point = field(default_factory=Point)
    heading: float = 0.0
    pen_color: str = Color.BLACK.value
    _path: list[Segment] = field(default_factory=list, repr=False)

    def __post_init__(self):
        self.color(self.pen_color)

    def forward(self, distance: float):
        rad = math.radians(self.heading)
        end = Point(
            self.position.x + distance * math.cos(rad),
            self.position.y + distance * math.sin(rad),
        )
        self._path.append(Segment(self.position, end, self.pen_color))
        self.position = end

    def turn(self, angle: float):
        # no wraparound; heading accumulates
        self.heading += angle

    def color(self, color: str | Color):
        """Set the stroke color for subsequent segments."""
        self.pen_color = color.value if isinstance(color, Color) else color

    def get_position(self) -> Point:
        return self.position

    def get_heading(self) -> float:
        return self.heading

    def get_path(self) -> tuple[Segment, ...]:
        return tuple(self._path)
