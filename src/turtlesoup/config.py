"""Configuration management."""

import json
from pathlib import Path

from pydantic import BaseModel

DEFAULT_CONFIG_PATH = "configs/turtlesoup.json"


class CanvasConfig(BaseModel):
    width: int = 500
    height: int = 500
    background: str = "#f0f0f0"
    stroke_width: float = 2
    scale: float = 1.0
    title: str = "Turtle Graphics"


class OutputOptions(BaseModel):
    path: str = "output.html"
    auto_open: bool = True


class Config(BaseModel):
    canvas: CanvasConfig = CanvasConfig()
    output: OutputOptions = OutputOptions()

    @classmethod
    def load(cls, path: str | Path = DEFAULT_CONFIG_PATH) -> "Config":
        with open(path) as f:
            return cls(**json.load(f))

    def save(self, path: str | Path = DEFAULT_CONFIG_PATH):
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=4)
