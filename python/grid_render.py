"""
Text rendering of the visible part of a document.

Produces plain lines with ANSI highlighting (via simple_chalk) for the
current cell, current column header and current row number. The editor
turns the result into rich Text.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from grid_document import Document
from grid_types import Position

ROW_LABEL_WIDTH = 6
Colorize = Callable[[str], str]


@dataclass(frozen=True)
class Viewport:
    """The window of cells currently on screen."""

    offset: Position  # Top-left cell shown
    cols: int
    rows: int


def column_label(index: int) -> str:
    """Spreadsheet style column name: 0 -> A, 25 -> Z, 26 -> AA."""
    label = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        label = string.ascii_uppercase[remainder] + label
    return label


def visible_columns(width: int, cell_width: int) -> int:
    """How many cells fit across a terminal of the given width."""
    return max((width - ROW_LABEL_WIDTH) // cell_width, 1)


def scroll_to(viewport: Viewport, pos: Position) -> Viewport:
    """Smallest offset change that brings pos into view."""
    x, y = viewport.offset.x, viewport.offset.y
    if pos.y < y:
        y = pos.y
    elif pos.y >= y + viewport.rows:
        y = pos.y - viewport.rows + 1
    if pos.x < x:
        x = pos.x
    elif pos.x >= x + viewport.cols:
        x = pos.x - viewport.cols + 1
    return Viewport(Position(x, y), viewport.cols, viewport.rows)


def fit(text: str, width: int) -> str:
    """Left align text in a fixed width column."""
    return text[:width].ljust(width)


def render_header(
    document: Document,
    viewport: Viewport,
    cursor: Position,
    cell_width: int,
    use_first_row: bool = False,
    highlight: Colorize | None = None,
) -> str:
    """
    The column header line.

    With use_first_row the first row's cell texts (centered) are the titles,
    otherwise spreadsheet letters are used.
    """
    if highlight is None:
        highlight = chalk.bgWhite.black

    parts = [" " * ROW_LABEL_WIDTH]
    for x in range(viewport.offset.x, viewport.offset.x + viewport.cols):
        if use_first_row:
            cell = document.get_cell(Position(x, 0))
            title = cell.render(cell_width) if cell is not None else ""
        else:
            title = column_label(x)
        content = title.center(cell_width)
        parts.append(highlight(content) if x == cursor.x else content)
    return "".join(parts)


def render_row(
    document: Document,
    y: int,
    viewport: Viewport,
    cursor: Position,
    cell_width: int,
    highlight: Colorize | None = None,
) -> str:
    """One grid line: the row number followed by each visible cell."""
    if highlight is None:
        highlight = chalk.bgWhite.black

    label = f"  {y}".ljust(ROW_LABEL_WIDTH)
    parts = [highlight(label) if y == cursor.y else label]
    for x in range(viewport.offset.x, viewport.offset.x + viewport.cols):
        pos = Position(x, y)
        cell = document.get_cell(pos)
        content = fit(cell.render(cell_width) if cell is not None else "", cell_width)
        parts.append(highlight(content) if pos == cursor else content)
    return "".join(parts)


def render_grid(
    document: Document,
    viewport: Viewport,
    cursor: Position,
    cell_width: int = 9,
    use_first_row: bool = False,
    highlight: Colorize | None = None,
) -> str:
    """
    Render the header and every row in the viewport.

    Args:
        document: The document to draw
        viewport: Which cells are on screen
        cursor: The current cell, drawn highlighted
        cell_width: Characters per cell (default 9)
        use_first_row: Use the first row's texts as column titles
        highlight: Colorizer for highlighted parts (default white background)

    Returns:
        Newline separated lines, possibly containing ANSI escapes
    """
    lines = [render_header(document, viewport, cursor, cell_width, use_first_row, highlight)]
    for y in range(viewport.offset.y, viewport.offset.y + viewport.rows):
        lines.append(render_row(document, y, viewport, cursor, cell_width, highlight))
    return "\n".join(lines)
