"""
gridcell: a terminal editor for ';'-delimited grids of typed cells.

Typical use from a script:

    from gridcell import Document, Position

    doc = Document.open("budget.csv")
    doc.insert(Position(2, 5), "=12.5")
    doc.save()
"""

from grid_cell import (
    Boolean,
    Cell,
    CellValue,
    Empty,
    Float,
    Integer,
    Text,
    coerce,
    delete_last,
    display,
    insert_text,
    is_boolean,
    is_empty,
    is_float,
    is_integer,
    is_text,
    value_length,
)
from grid_config import EditorConfig
from grid_document import Document
from grid_editor import Editor, main
from grid_prompt import Prompt, PromptState
from grid_row import Row
from grid_types import (
    ELLIPSIS,
    FIELD_DELIMITER,
    FORMULA_MARKER,
    DocumentIOError,
    GridError,
    MissingFilePathError,
    Position,
    SearchDirection,
)

__all__ = [
    "Boolean",
    "Cell",
    "CellValue",
    "DocumentIOError",
    "Document",
    "ELLIPSIS",
    "Editor",
    "EditorConfig",
    "Empty",
    "FIELD_DELIMITER",
    "FORMULA_MARKER",
    "Float",
    "GridError",
    "Integer",
    "MissingFilePathError",
    "Position",
    "Prompt",
    "PromptState",
    "Row",
    "SearchDirection",
    "Text",
    "coerce",
    "delete_last",
    "display",
    "insert_text",
    "is_boolean",
    "is_empty",
    "is_float",
    "is_integer",
    "is_text",
    "main",
    "value_length",
]
