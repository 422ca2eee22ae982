"""
Typed cell values and the cells that hold them.

A cell value is one of a closed set of frozen variants. Values never change
in place: the transition functions below return the next value and the
owning Cell swaps it in.

Transitions:
    Empty --insert--> Text --insert (marker + float literal)--> Float

Coercion is one way. Once a value is no longer Text, inserts are ignored.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from decimal import Decimal

from grid_types import ELLIPSIS, FORMULA_MARKER, Position

logger = logging.getLogger(__name__)


# =============================================================================
# Value Variants
# =============================================================================


@dataclass(frozen=True)
class Empty:
    """A cell with no content."""

    pass


@dataclass(frozen=True)
class Text:
    """A cell holding literal text."""

    text: str


@dataclass(frozen=True)
class Integer:
    """A cell holding an integer."""

    number: int


@dataclass(frozen=True)
class Float:
    """A cell holding a floating point number."""

    number: float


@dataclass(frozen=True)
class Boolean:
    """A cell holding true or false."""

    flag: bool


CellValue = Empty | Text | Integer | Float | Boolean


# Mirrors the float grammar accepted after the formula marker: no spaces,
# no digit separators.
_FLOAT_LITERAL = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)",
    re.IGNORECASE,
)


def format_float(number: float) -> str:
    """
    Canonical decimal form: integral values drop the fraction and nothing
    is written in exponent notation.
    """
    if not math.isfinite(number):
        return repr(number)
    if number.is_integer():
        return str(int(number))
    # Shortest round-trip digits, laid out positionally
    return format(Decimal(repr(number)), "f")


def display(value: CellValue) -> str:
    """The full display string of a value."""
    match value:
        case Empty():
            return ""
        case Text(text=text):
            return text
        case Integer(number=number):
            return str(number)
        case Float(number=number):
            return format_float(number)
        case Boolean(flag=flag):
            return "true" if flag else "false"


def value_length(value: CellValue) -> int:
    """Number of characters the value displays as."""
    match value:
        case Empty():
            return 0
        case Boolean(flag=flag):
            return 4 if flag else 5
        case _:
            return len(display(value))


def parse_float(literal: str) -> float | None:
    """Parse a float literal, or return None if it is not one."""
    if not _FLOAT_LITERAL.fullmatch(literal):
        return None
    return float(literal)


def coerce(value: CellValue) -> CellValue:
    """
    Promote marker-prefixed numeric text to Float.

    Only Text starting with the formula marker is considered. Anything that
    fails to parse is returned unchanged.
    """
    if not isinstance(value, Text) or not value.text.startswith(FORMULA_MARKER):
        return value
    number = parse_float(value.text[len(FORMULA_MARKER):])
    if number is None:
        return value
    logger.debug("Coerced %r to Float(%r)", value.text, number)
    return Float(number)


def insert_text(value: CellValue, text: str) -> CellValue:
    """
    Append text to a value.

    Empty becomes Text, Text grows, every other variant ignores the insert.
    The coercion check runs after each append.
    """
    match value:
        case Empty():
            return coerce(Text(text))
        case Text(text=current):
            return coerce(Text(current + text))
        case _:
            return value


def delete_last(value: CellValue) -> CellValue:
    """Drop the last character of a Text value; other variants are unchanged."""
    match value:
        case Text(text=current):
            return Text(current[:-1])
        case _:
            return value


def is_empty(value: CellValue) -> bool:
    return isinstance(value, Empty)


def is_text(value: CellValue) -> bool:
    return isinstance(value, Text)


def is_integer(value: CellValue) -> bool:
    return isinstance(value, Integer)


def is_float(value: CellValue) -> bool:
    return isinstance(value, Float)


def is_boolean(value: CellValue) -> bool:
    return isinstance(value, Boolean)


# =============================================================================
# Cell
# =============================================================================


@dataclass
class Cell:
    """A value plus the coordinate it was placed at (informational only)."""

    value: CellValue = field(default_factory=Empty)
    position: Position = field(default_factory=Position)

    @classmethod
    def from_token(cls, token: str, position: Position | None = None) -> Cell:
        """Build a literal Text cell from a raw file token. Never coerces."""
        return cls(Text(token), position or Position())

    def insert(self, text: str) -> None:
        self.value = insert_text(self.value, text)

    def delete(self) -> None:
        self.value = delete_last(self.value)

    def reset(self) -> None:
        self.value = Empty()

    def copy(self, position: Position | None = None) -> Cell:
        """Clone the cell, optionally re-homing it at a new position."""
        return Cell(self.value, position if position is not None else self.position)

    @property
    def length(self) -> int:
        return value_length(self.value)

    def render(self, max_width: int) -> str:
        """
        Display string, cut down to max_width for the screen.

        A max_width of 0 renders everything. Longer strings keep
        max_width - 2 characters followed by "..".
        """
        text = display(self.value)
        if max_width == 0 or len(text) <= max_width:
            return text
        return text[: max(max_width - len(ELLIPSIS), 0)] + ELLIPSIS
