"""Opening rendered files in an external viewer."""

import logging
from pathlib import Path
from typing import Protocol

import click

logger = logging.getLogger(__name__)


class Viewer(Protocol):
    def launch(self, path: str | Path) -> bool: ...


class ClickViewer:
    """Opens files with the platform's default application via click."""

    def __init__(self, wait: bool = False):
        self.wait = wait

    def launch(self, path: str | Path) -> bool:
        try:
            status = click.launch(str(path), wait=self.wait)
        except OSError as e:
            logger.warning("Failed to open %s automatically: %s", path, e)
            return False

        if status != 0:
            logger.warning("Failed to open %s automatically (exit status %s)", path, status)
            return False
        logger.debug("Opened %s", path)
        return True


class NullViewer:
    """Viewer that opens nothing."""

    def launch(self, path: str | Path) -> bool:
        return True
