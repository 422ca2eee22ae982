"""
Shared type definitions for the gridcell editor.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

FIELD_DELIMITER = ";"
FORMULA_MARKER = "="
ELLIPSIS = ".."


class SearchDirection(Enum):
    """Direction of a content search."""

    FORWARD = "forward"  # Increasing col, then increasing row
    BACKWARD = "backward"  # Decreasing col, then decreasing row


@dataclass(frozen=True)
class Position:
    """A grid coordinate: x is the column, y is the row."""

    x: int = 0
    y: int = 0


# =============================================================================
# Errors
# =============================================================================


class GridError(Exception):
    """Base class for errors raised by the grid model."""


class DocumentIOError(GridError, OSError):
    """Reading or writing the backing file failed."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class MissingFilePathError(GridError, ValueError):
    """save() was called on a document that has no file path yet."""
