"""Exceptions raised by the spreadsheet model."""

from __future__ import annotations

from taskbench.enums import CellValueError


class BooxError(RuntimeError):
    """Base class of all spreadsheet errors."""

    message = "spreadsheet error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.message if message is None else message)


class UnsupportedFileFormat(BooxError):
    message = "unsupported file format"


class UnsupportedClipboardFormat(BooxError):
    message = "unsupported clipboard format"


class FileIsBroken(BooxError):
    message = "file is broken"


class RangeIsEmpty(BooxError):
    message = "range is empty"


class TooManyAreasInRange(BooxError):
    message = "too many areas in range"


class TooManyCellsInRange(BooxError):
    message = "too many cells in range"


class DoesNotContainRange(BooxError):
    message = "does not contains a range"


class BadValueCast(BooxError):
    """A value could not be converted; may carry the cell error that caused it."""

    message = "bad value cast"

    def __init__(self, message: str | None = None, error: CellValueError | None = None) -> None:
        super().__init__(message)
        self.error = error


class ParserFailed(BooxError):
    message = "formula parser failed"


class InvalidFunctionName(BooxError):
    message = "formula parser failed"


class InvalidWorksheetName(BooxError):
    message = "invalid worksheet name"


class DivisionByZero(BooxError):
    message = "division by zero"


class NoValue(BooxError):
    """A format field was read while it holds no value."""

    message = "no value"