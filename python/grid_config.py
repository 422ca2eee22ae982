"""
Start-up configuration for the editor, built once from the command line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

MIN_CELL_WIDTH = 3
DEFAULT_CELL_WIDTH = 9


@dataclass(frozen=True)
class EditorConfig:
    """Settings threaded from main() into the editor."""

    file_path: str | None = None
    header: bool = False  # Show the first row's texts as column titles
    cell_width: int = DEFAULT_CELL_WIDTH
    log_file: str | None = None
    debug: bool = False


def configure_logging(config: EditorConfig) -> None:
    """
    Send log records to the configured file.

    Without a log file, records are dropped so nothing is printed over the
    live screen.
    """
    if config.log_file is None:
        logging.getLogger().addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=config.log_file,
        level=logging.DEBUG if config.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
