"""Shapes drawn through the turtle contract."""

from .geometry import chord_length
from .turtle import Turtle

STAR_POINTS = 5
STAR_SIDE = 200
STAR_TURN = 144


def draw_square(turtle: Turtle, side_length: float):
    for _ in range(4):
        turtle.forward(side_length)
        turtle.turn(90)


def draw_approximate_circle(turtle: Turtle, radius: float, num_sides: int):
    """Approximate a circle by a regular polygon of `num_sides` chords."""
    segment_angle = 360 / num_sides
    segment_length = chord_length(radius, segment_angle)

    for _ in range(num_sides):
        turtle.forward(segment_length)
        turtle.turn(segment_angle)


def draw_personal_art(turtle: Turtle):
    """Five-pointed star."""
    for _ in range(STAR_POINTS):
        turtle.forward(STAR_SIDE)
        turtle.turn(STAR_TURN)


SHAPES = {
    "square": {"name": "Square", "defaults": {"size": 100.0}},
    "circle": {"name": "Approximate Circle", "defaults": {"size": 100.0, "sides": 360}},
    "star": {"name": "Five-Pointed Star", "defaults": {}},
}


def draw_shape(turtle: Turtle, shape: str, size: float | None = None, sides: int | None = None):
    """Draw one of SHAPES by name, filling in its defaults."""
    if shape not in SHAPES:
        raise ValueError(f"Unknown shape: {shape}")
    defaults = SHAPES[shape]["defaults"]

    if shape == "square":
        draw_square(turtle, size if size is not None else defaults["size"])
    elif shape == "circle":
        draw_approximate_circle(
            turtle,
            size if size is not None else defaults["size"],
            sides if sides is not None else defaults["sides"],
        )
    else:
        draw_personal_art(turtle)
