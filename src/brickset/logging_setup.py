"""Logging configuration for the command line."""

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: Optional[str] = None, console: Optional[Console] = None) -> None:
    """Route log records through a single rich handler.

    Uses LOG_LEVEL env if level is None (default WARNING). Unknown level
    names fall back to INFO.
    """
    level_name = (level or os.getenv("LOG_LEVEL") or "WARNING").upper()
    level_value = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=level_value,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console or Console(stderr=True), show_path=False)],
        force=True,
    )
