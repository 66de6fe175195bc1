"""Enumerations describing spreadsheet cell values and their appearance."""

from __future__ import annotations

from enum import Enum, IntEnum


class CellValueError(IntEnum):
    """Error values a cell can hold."""

    DIV0 = 0
    NA = 1
    NAME = 2
    NULL = 3
    NUM = 4
    REF = 5
    VALUE = 6

    def __str__(self) -> str:
        return _ERROR_TEXT[self]


_ERROR_TEXT = {
    CellValueError.DIV0: "#DIV/0!",
    CellValueError.NA: "#N/A",
    CellValueError.NAME: "#NAME?",
    CellValueError.NULL: "#NULL!",
    CellValueError.NUM: "#NUM!",
    CellValueError.REF: "#REF!",
    CellValueError.VALUE: "#VALUE!",
}


class CellValueType(IntEnum):
    """Kind of value stored in a cell."""

    NONE = 0
    BOOLEAN = 1
    NUMBER = 2
    STRING = 3
    RICH_TEXT = 4
    ERROR = 5


class PatternType(IntEnum):
    """Fill pattern of a cell."""

    SOLID = 0
    GRAY125 = 1
    NONE = 2


class BorderStyle(IntEnum):
    """Line style of a cell border."""

    NONE = 0
    THIN = 1
    MEDIUM = 2
    THICK = 3


class HorizontalAlignment(IntEnum):
    """Horizontal placement of cell text."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2
    GENERAL = 3


class VerticalAlignment(IntEnum):
    """Vertical placement of cell text."""

    TOP = 0
    CENTER = 1
    BOTTOM = 2


class Script(IntEnum):
    """Baseline position of text."""

    NORMAL = 0
    SUPERSCRIPT = 1
    SUBSCRIPT = 2


class CalcMode(Enum):
    """When formulas are recalculated."""

    AUTOMATIC = "automatic"
    MANUAL = "manual"