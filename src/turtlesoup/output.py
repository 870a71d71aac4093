"""Saving rendered documents and handing them to a viewer."""

import logging
from pathlib import Path
from typing import Iterable

from .config import OutputOptions
from .render import HtmlRenderer
from .turtle import Segment
from .viewer import ClickViewer, Viewer

logger = logging.getLogger(__name__)


def save_document(content: str, path: str | Path) -> Path | None:
    """Write `content` to `path`, replacing any existing file.

    Returns the written path, or None when the write failed.
    """
    path = Path(path)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        logger.error("Could not save %s: %s", path, e)
        return None

    logger.info("File saved: %s", path)
    return path


def publish(
    segments: Iterable[Segment],
    options: OutputOptions | None = None,
    renderer: HtmlRenderer | None = None,
    viewer: Viewer | None = None,
) -> Path | None:
    """Render, save once, and optionally open the result."""
    options = options or OutputOptions()
    renderer = renderer or HtmlRenderer()

    saved = save_document(renderer.render(segments), options.path)
    if saved is not None and options.auto_open:
        (viewer or ClickViewer()).launch(saved)
    return saved
