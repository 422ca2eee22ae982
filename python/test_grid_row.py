"""Tests for grid_row."""

from grid_cell import Cell, Empty, Float, Text
from grid_row import Row
from grid_types import Position, SearchDirection


def make_row(*texts: str, index: int = 0) -> Row:
    return Row([Cell.from_token(t, Position(x, index)) for x, t in enumerate(texts)], index=index)


class TestRowGrowth:
    """Tests for padding and length bookkeeping."""

    def test_new_row_is_empty(self) -> None:
        """A default row has no cells."""
        assert Row().length == 0

    def test_fill_appends_empty_cells(self) -> None:
        """fill(n) adds n Empty cells and updates length."""
        row = make_row("a")
        row.fill(3)
        assert row.length == 4
        assert all(cell.value == Empty() for cell in row.cells[1:])

    def test_fill_stamps_positions(self) -> None:
        """Padded cells know their column and row."""
        row = Row(index=7)
        row.fill(2)
        assert [cell.position for cell in row.cells] == [Position(0, 7), Position(1, 7)]

    def test_insert_beyond_end_pads(self) -> None:
        """Inserting past the end pads up to and including the index."""
        row = Row()
        row.insert("x", 4)
        assert row.length == 5
        assert row.cells[4].value == Text("x")
        assert all(cell.value == Empty() for cell in row.cells[:4])

    def test_insert_inside_keeps_length(self) -> None:
        """Inserting into an existing cell does not grow the row."""
        row = make_row("a", "b")
        row.insert("c", 0)
        assert row.length == 2
        assert row.cells[0].value == Text("ac")

    def test_get_out_of_range(self) -> None:
        """get() never grows the row."""
        row = make_row("a")
        assert row.get(3) is None
        assert row.length == 1


class TestRowEditing:
    """Tests for paste, delete and remove."""

    def test_insert_cell_overwrites_with_copy(self) -> None:
        """Pasting replaces the cell rather than merging into it."""
        row = make_row("old")
        source = Cell(Float(1.5))
        row.insert_cell(0, source)
        assert row.cells[0].value == Float(1.5)
        assert row.cells[0] is not source

    def test_insert_cell_beyond_end(self) -> None:
        """Pasting past the end pads first."""
        row = Row(index=2)
        row.insert_cell(2, Cell(Text("p")))
        assert row.length == 3
        assert row.cells[2].position == Position(2, 2)

    def test_delete_trims_last_character(self) -> None:
        """Delete removes the last character of the addressed cell."""
        row = make_row("abc", "xyz")
        row.delete(1)
        assert row.stringify(";") == "abc;xy"

    def test_delete_out_of_bounds_is_noop(self) -> None:
        """Deleting past the end changes nothing."""
        row = make_row("abc")
        row.delete(5)
        assert row.length == 1
        assert row.stringify(";") == "abc"

    def test_remove_shifts_positions(self) -> None:
        """Removing a cell renumbers the cells after it."""
        row = make_row("a", "b", "c")
        row.remove(0)
        assert row.stringify(";") == "b;c"
        assert [cell.position.x for cell in row.cells] == [0, 1]


class TestRowFind:
    """Tests for in-row substring search."""

    def test_forward_finds_first_match(self) -> None:
        """Forward search returns the nearest match at or after start."""
        row = make_row("apple", "banana", "cherry", "banana")
        assert row.find("ana", 0, SearchDirection.FORWARD) == 1
        assert row.find("ana", 2, SearchDirection.FORWARD) == 3

    def test_forward_includes_start(self) -> None:
        """The start cell itself is searched going forward."""
        row = make_row("x", "y")
        assert row.find("y", 1, SearchDirection.FORWARD) == 1

    def test_backward_excludes_start(self) -> None:
        """Backward search scans [0, start) from the nearest cell down."""
        row = make_row("hit", "miss", "hit", "here")
        assert row.find("hit", 3, SearchDirection.BACKWARD) == 2
        assert row.find("hit", 2, SearchDirection.BACKWARD) == 0
        assert row.find("hit", 0, SearchDirection.BACKWARD) is None

    def test_start_beyond_length(self) -> None:
        """A start past the end yields no match."""
        row = make_row("a")
        assert row.find("a", 2, SearchDirection.BACKWARD) is None

    def test_start_at_length(self) -> None:
        """A start equal to length is valid; backward covers the whole row."""
        row = make_row("a", "b")
        assert row.find("a", 2, SearchDirection.BACKWARD) == 0
        assert row.find("a", 2, SearchDirection.FORWARD) is None

    def test_empty_query(self) -> None:
        """An empty query never matches."""
        assert make_row("a").find("", 0, SearchDirection.FORWARD) is None

    def test_matches_untruncated_text(self) -> None:
        """Search sees the full text, not the on-screen cut."""
        row = make_row("a very long cell value")
        assert row.find("value", 0, SearchDirection.FORWARD) == 0

    def test_matches_typed_display(self) -> None:
        """Typed cells are searched by their display string."""
        row = Row([Cell(Float(3.25))])
        assert row.find("3.2", 0, SearchDirection.FORWARD) == 0


class TestRowText:
    """Tests for stringify and render."""

    def test_stringify_joins_full_text(self) -> None:
        """Empty cells become empty fields."""
        row = make_row("a", "", "c")
        row.fill(1)
        assert row.stringify(";") == "a;;c;"

    def test_render_truncates_cells(self) -> None:
        """render() cuts each cell to the requested width."""
        assert make_row("abcdef").render(5) == "abc.."
        assert make_row("abcdef", "g").render(5) == "abc.. | g"
