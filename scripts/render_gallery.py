"""Render every built-in shape to its own HTML file."""

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from turtlesoup.config import Config
from turtlesoup.drawing import SHAPES, draw_shape
from turtlesoup.output import publish
from turtlesoup.render import HtmlRenderer
from turtlesoup.turtle import Color, SimpleTurtle


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("-o", "--output", type=Path, default=Path("gallery"))
    parser.add_argument("-c", "--config", type=Path, help="JSON config file")
    parser.add_argument("--color", default=Color.BLUE.value)
    args = parser.parse_args()

    config = Config.load(args.config) if args.config else Config()
    renderer = HtmlRenderer(config.canvas)
    args.output.mkdir(parents=True, exist_ok=True)

    manifest = {"files": [], "failed": []}
    for shape, info in SHAPES.items():
        turtle = SimpleTurtle()
        turtle.color(args.color)
        draw_shape(turtle, shape)

        options = config.output.model_copy(
            update={"path": str(args.output / f"{shape}.html"), "auto_open": False}
        )
        saved = publish(turtle.get_path(), options, renderer)
        if saved is None:
            manifest["failed"].append(shape)
            continue
        manifest["files"].append({
            "shape": shape,
            "name": info["name"],
            "file": str(saved),
            "segments": len(turtle.get_path()),
        })

    with open(args.output / "manifest.json", "w") as f:
        json.dump(manifest, f, indent=2)

    print(f"Done: {len(manifest['files'])} rendered, {len(manifest['failed'])} failed")
    print(f"Manifest: {args.output / 'manifest.json'}")


if __name__ == "__main__":
    main()
