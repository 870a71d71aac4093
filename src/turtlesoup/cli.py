"""CLI for turtlesoup."""

import logging
from pathlib import Path

import click

from .config import DEFAULT_CONFIG_PATH, Config
from .drawing import SHAPES, draw_approximate_circle, draw_personal_art, draw_shape, draw_square
from .geometry import Point, chord_length, distance
from .output import publish
from .planner import find_path
from .render import HtmlRenderer
from .turtle import SimpleTurtle
from .viewer import ClickViewer, NullViewer

DEMO_WAYPOINTS = [Point(20, 20), Point(80, 20), Point(80, 80)]


class PointType(click.ParamType):
    """Parses `X,Y` into a Point."""

    name = "point"

    def convert(self, value, param, ctx):
        if isinstance(value, Point):
            return value
        try:
            x, y = (float(v) for v in value.split(","))
        except ValueError:
            self.fail(f"{value!r} is not of the form X,Y", param, ctx)
        return Point(x, y)


POINT = PointType()


def output_options(f):
    """Options shared by every command that renders a file."""
    f = click.option("--config", "-c", "config_path", type=Path, help="JSON config file")(f)
    f = click.option("--open/--no-open", "auto_open", default=None, help="Open the result in a viewer")(f)
    f = click.option("--output", "-o", type=Path, help="Output HTML file")(f)
    return f


def _config(config_path: Path | None, output: Path | None, auto_open: bool | None) -> Config:
    config = Config.load(config_path) if config_path else Config()
    if output is not None:
        config.output.path = str(output)
    if auto_open is not None:
        config.output.auto_open = auto_open
    return config


def _publish(turtle: SimpleTurtle, config: Config):
    viewer = ClickViewer() if config.output.auto_open else NullViewer()
    saved = publish(turtle.get_path(), config.output, HtmlRenderer(config.canvas), viewer)
    if saved is None:
        click.echo(click.style("Failed to save output", fg="red"))
    else:
        click.echo(f"Saved: {saved}")


@click.group()
@click.option("--log-level", default="INFO", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False))
def main(log_level: str):
    """turtlesoup - Turtle graphics for geometry practice."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command()
@output_options
def demo(output: Path | None, auto_open: bool | None, config_path: Path | None):
    """Square, circle, path plan and star on one canvas."""
    config = _config(config_path, output, auto_open)
    turtle = SimpleTurtle()

    draw_square(turtle, 100)
    click.echo(f"Chord length for radius 5, angle 60 degrees: {chord_length(5, 60)}")

    draw_approximate_circle(turtle, 100, 360)
    click.echo(f"Distance between points (1,2) and (4,6): {distance(Point(1, 2), Point(4, 6))}")

    instructions = find_path(turtle, DEMO_WAYPOINTS)
    click.echo(f"Path instructions: {instructions}")

    draw_personal_art(turtle)
    _publish(turtle, config)


@main.command()
@click.argument("shape", type=click.Choice(list(SHAPES)))
@click.option("--size", "-s", type=float, help="Side length or radius")
@click.option("--sides", "-n", type=click.IntRange(min=1), help="Polygon sides for circle")
@click.option("--color", default="black")
@output_options
def draw(
    shape: str,
    size: float | None,
    sides: int | None,
    color: str,
    output: Path | None,
    auto_open: bool | None,
    config_path: Path | None,
):
    """Draw a single shape."""
    config = _config(config_path, output, auto_open)
    turtle = SimpleTurtle()
    turtle.color(color)

    draw_shape(turtle, shape, size=size, sides=sides)
    click.echo(f"{SHAPES[shape]['name']}: {len(turtle.get_path())} segments")
    _publish(turtle, config)


@main.command()
@click.argument("points", nargs=-1, required=True, type=POINT)
@click.option("--start", type=POINT, default="0,0", help="Starting position X,Y")
@click.option("--heading", type=float, default=0.0, help="Starting heading in degrees")
def path(points: tuple[Point, ...], start: Point, heading: float):
    """Print turn/forward instructions visiting POINTS in order."""
    turtle = SimpleTurtle(position=start, heading=heading)
    for instruction in find_path(turtle, points):
        click.echo(instruction)


@main.command()
@click.argument("radius", type=float)
@click.argument("angle", type=float)
def chord(radius: float, angle: float):
    """Chord length for RADIUS and central ANGLE in degrees."""
    click.echo(chord_length(radius, angle))


@main.command(name="distance")
@click.argument("p1", type=POINT)
@click.argument("p2", type=POINT)
def distance_cmd(p1: Point, p2: Point):
    """Euclidean distance between two X,Y points."""
    click.echo(distance(p1, p2))


@main.command(name="init-config")
@click.option("--output", "-o", type=Path, default=Path(DEFAULT_CONFIG_PATH))
def init_config(output: Path):
    """Write the default configuration."""
    Config().save(output)
    click.echo(f"Saved: {output}")


if __name__ == "__main__":
    main()
