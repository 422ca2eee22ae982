"""End to end tests through the public gridcell module."""

import gridcell
from gridcell import Document, Float, Position, SearchDirection, Text


class TestPublicApi:
    """Tests for the names scripts import from gridcell."""

    def test_all_names_resolve(self) -> None:
        """Every name in __all__ is importable."""
        for name in gridcell.__all__:
            assert hasattr(gridcell, name), name

    def test_script_workflow(self, tmp_path) -> None:
        """Open, edit, search and save a sheet the way a script would."""
        path = tmp_path / "budget.csv"
        path.write_text("item;cost\nrent;=900\n", encoding="utf-8")

        doc = Document.open(str(path))
        # Loaded formulas stay literal
        assert doc.get_cell(Position(1, 1)).value == Text("=900")

        doc.insert(Position(0, 2), "food")
        doc.insert(Position(1, 2), "=12.5")
        assert doc.get_cell(Position(1, 2)).value == Float(12.5)
        assert doc.find("food", Position(0, 0), SearchDirection.FORWARD) == Position(0, 2)

        doc.save()
        assert path.read_text(encoding="utf-8") == "item;cost\nrent;=900\nfood;12.5\n"
