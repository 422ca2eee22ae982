"""
A single grid row: a dense, growable list of cells.
"""

from __future__ import annotations

from grid_cell import Cell
from grid_types import Position, SearchDirection

RENDER_SEPARATOR = " | "


class Row:
    """
    Ordered cells of one grid row.

    Writing past the end pads the row with Empty cells up to and including
    the written index. Reads past the end return None.
    """

    def __init__(self, cells: list[Cell] | None = None, index: int = 0) -> None:
        self.cells: list[Cell] = cells if cells is not None else []
        self.index = index  # Row number, stamped on cells created here

    @property
    def length(self) -> int:
        return len(self.cells)

    def __repr__(self) -> str:
        return f"Row({self.index}, {self.stringify(', ')!r})"

    def get(self, at: int) -> Cell | None:
        if 0 <= at < len(self.cells):
            return self.cells[at]
        return None

    def fill(self, n: int) -> None:
        """Append n Empty cells."""
        start = len(self.cells)
        self.cells.extend(Cell(position=Position(start + i, self.index)) for i in range(n))

    def _grow_to(self, at: int) -> None:
        if at >= len(self.cells):
            self.fill(at - len(self.cells) + 1)

    def insert(self, text: str, at: int) -> None:
        self._grow_to(at)
        self.cells[at].insert(text)

    def insert_cell(self, at: int, cell: Cell) -> None:
        """Overwrite the cell at `at` with a copy of `cell` (paste)."""
        self._grow_to(at)
        self.cells[at] = cell.copy(Position(at, self.index))

    def remove(self, at: int) -> None:
        """Drop the cell at `at`, shifting later cells one column left."""
        del self.cells[at]
        for x in range(at, len(self.cells)):
            self.cells[x].position = Position(x, self.index)

    def delete(self, at: int) -> None:
        """
        Delete a character from the cell at `at`.

        Always trims the last character of the cell's text, whatever the
        caller's cursor. Out-of-range indices are ignored.
        """
        if at >= len(self.cells):
            return
        self.cells[at].delete()

    def find(self, query: str, start: int, direction: SearchDirection) -> int | None:
        """
        Index of the first cell whose full text contains query.

        Forward scans [start, length) upwards; backward scans [0, start)
        downwards, so the nearest hit in the search direction wins.
        """
        if start > len(self.cells) or not query:
            return None

        if direction == SearchDirection.FORWARD:
            indices = range(start, len(self.cells))
        else:
            indices = range(start - 1, -1, -1)

        for index in indices:
            if query in self.cells[index].render(0):
                return index
        return None

    def stringify(self, separator: str) -> str:
        """Full text of every cell joined by separator (the file format)."""
        return separator.join(cell.render(0) for cell in self.cells)

    def render(self, max_width: int) -> str:
        """Display form of the row, each cell cut to max_width."""
        return RENDER_SEPARATOR.join(cell.render(max_width) for cell in self.cells)
