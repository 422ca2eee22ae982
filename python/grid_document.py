"""
The grid document: every row of the sheet plus its backing file.

File format: UTF-8 text, one row per line, fields separated by ';' with no
escaping. Loading keeps every field as literal Text; only interactive
insertion coerces.
"""

from __future__ import annotations

import logging

from grid_cell import Cell, is_empty
from grid_row import Row
from grid_types import (
    FIELD_DELIMITER,
    DocumentIOError,
    MissingFilePathError,
    Position,
    SearchDirection,
)

logger = logging.getLogger(__name__)


def split_lines(content: str) -> list[str]:
    """
    Split file content into lines on '\\n', dropping a trailing '\\r' per line.

    A final newline does not produce an extra empty line.
    """
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_rows(content: str) -> list[Row]:
    """Parse file content into rows of literal Text cells."""
    rows: list[Row] = []
    for y, line in enumerate(split_lines(content)):
        cells = [
            Cell.from_token(token, Position(x, y))
            for x, token in enumerate(line.split(FIELD_DELIMITER))
        ]
        rows.append(Row(cells, index=y))
    return rows


class Document:
    """
    The whole grid.

    A cell exists at (x, y) iff y < length and x < rows[y].length. Writes
    outside that range grow the grid; reads and deletes outside it return
    None or do nothing.
    """

    def __init__(self, rows: list[Row] | None = None, file_path: str | None = None) -> None:
        self.rows: list[Row] = rows if rows is not None else []
        self.file_path = file_path

    @property
    def length(self) -> int:
        return len(self.rows)

    def __repr__(self) -> str:
        return f"Document(file_path={self.file_path!r}, rows={len(self.rows)}, cols={self.column_count()})"

    # -------------------------------------------------------------------------
    # File I/O
    # -------------------------------------------------------------------------

    @classmethod
    def open(cls, path: str) -> Document:
        """
        Load a document from a ';'-delimited file.

        Raises:
            DocumentIOError: If the file cannot be read
        """
        try:
            with open(path, encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentIOError(f"Cannot read '{path}': {e}", path) from e

        document = cls(parse_rows(content), file_path=path)
        logger.info("Opened %s: %d rows, %d columns", path, document.length, document.column_count())
        return document

    def save(self) -> None:
        """
        Write every row to file_path, replacing its previous content.

        Raises:
            MissingFilePathError: If no file path has been set
            DocumentIOError: If the file cannot be written
        """
        if self.file_path is None:
            raise MissingFilePathError("Document has no file path; choose one before saving")

        try:
            with open(self.file_path, "w", encoding="utf-8", newline="\n") as f:
                for row in self.rows:
                    f.write(row.stringify(FIELD_DELIMITER))
                    f.write("\n")
        except OSError as e:
            raise DocumentIOError(f"Cannot write '{self.file_path}': {e}", self.file_path) from e

        logger.info("Saved %d rows to %s", len(self.rows), self.file_path)

    def save_as(self, path: str) -> None:
        self.file_path = path
        self.save()

    # -------------------------------------------------------------------------
    # Cell access
    # -------------------------------------------------------------------------

    def cell_exists(self, pos: Position) -> bool:
        return 0 <= pos.y < len(self.rows) and 0 <= pos.x < self.rows[pos.y].length

    def get_cell(self, pos: Position) -> Cell | None:
        if not self.cell_exists(pos):
            return None
        return self.rows[pos.y].cells[pos.x]

    def _grow_to(self, y: int) -> None:
        if y >= len(self.rows):
            self.fill(y - len(self.rows) + 1)

    def insert(self, pos: Position, text: str) -> None:
        """Type text into the cell at pos, growing the grid to reach it."""
        self._grow_to(pos.y)
        self.rows[pos.y].insert(text, pos.x)

    def insert_cell(self, pos: Position, cell: Cell) -> None:
        """Overwrite the cell at pos with a copy of cell, growing the grid."""
        self._grow_to(pos.y)
        self.rows[pos.y].insert_cell(pos.x, cell)

    def delete(self, pos: Position) -> None:
        if pos.y >= len(self.rows):
            return
        self.rows[pos.y].delete(pos.x)

    def reset(self, pos: Position) -> None:
        """Clear the cell at pos back to Empty. Missing cells are left alone."""
        cell = self.get_cell(pos)
        if cell is not None:
            cell.reset()

    # -------------------------------------------------------------------------
    # Structure
    # -------------------------------------------------------------------------

    def add_row(self) -> None:
        self.rows.append(Row(index=len(self.rows)))

    def fill(self, n: int) -> None:
        """Append n empty rows."""
        if n > 0:
            logger.debug("Growing document from %d to %d rows", len(self.rows), len(self.rows) + n)
        for _ in range(n):
            self.add_row()

    def column_count(self) -> int:
        """Width of the widest row; rows may be jagged."""
        return max((row.length for row in self.rows), default=0)

    def add_column(self) -> None:
        """
        Square up every row to the widest row, then append one more column.

        Afterwards every row has exactly column_count() cells.
        """
        width = self.column_count()
        for row in self.rows:
            row.fill(width + 1 - row.length)
        logger.info("Added column %d", width)

    def delete_column(self, at: int) -> None:
        """Remove column `at` from every row long enough to have it."""
        for row in self.rows:
            if at < row.length:
                row.remove(at)
        logger.info("Deleted column %d", at)

    def is_column_empty(self, at: int) -> bool:
        """True iff every existing cell in column `at` is Empty."""
        for y in range(len(self.rows)):
            cell = self.get_cell(Position(at, y))
            if cell is not None and not is_empty(cell.value):
                return False
        return True

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def find(self, query: str, start: Position, direction: SearchDirection) -> Position | None:
        """
        Position of the first cell containing query, scanning from start.

        Forward search continues on the following rows from column 0;
        backward search continues on the preceding rows from their last
        column. Rows are not wrapped around.
        """
        if start.y >= len(self.rows):
            return None

        logger.debug("Searching %r from %s (%s)", query, start, direction.value)

        if direction == SearchDirection.FORWARD:
            row_indices = range(start.y, len(self.rows))
        else:
            row_indices = range(start.y, -1, -1)

        x = start.x
        for y in row_indices:
            if y != start.y:
                x = 0 if direction == SearchDirection.FORWARD else self.rows[y].length
            found = self.rows[y].find(query, x, direction)
            if found is not None:
                return Position(found, y)
        return None
