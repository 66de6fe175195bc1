import pytest

from taskbench.enums import CellValueError
from taskbench.errors import (
    BadValueCast,
    BooxError,
    DivisionByZero,
    DoesNotContainRange,
    FileIsBroken,
    InvalidFunctionName,
    InvalidWorksheetName,
    NoValue,
    ParserFailed,
    RangeIsEmpty,
    TooManyAreasInRange,
    TooManyCellsInRange,
    UnsupportedClipboardFormat,
    UnsupportedFileFormat,
)


@pytest.mark.parametrize(
    "cls, text",
    [
        (UnsupportedFileFormat, "unsupported file format"),
        (UnsupportedClipboardFormat, "unsupported clipboard format"),
        (FileIsBroken, "file is broken"),
        (RangeIsEmpty, "range is empty"),
        (TooManyAreasInRange, "too many areas in range"),
        (TooManyCellsInRange, "too many cells in range"),
        (DoesNotContainRange, "does not contains a range"),
        (BadValueCast, "bad value cast"),
        (ParserFailed, "formula parser failed"),
        (InvalidFunctionName, "formula parser failed"),
        (InvalidWorksheetName, "invalid worksheet name"),
        (DivisionByZero, "division by zero"),
        (NoValue, "no value"),
    ],
)
def test_default_messages(cls, text):
    error = cls()
    assert str(error) == text
    assert isinstance(error, BooxError)
    assert isinstance(error, RuntimeError)


def test_custom_message():
    assert str(RangeIsEmpty("custom")) == "custom"


def test_caught_as_base():
    error = ParserFailed("bad formula")
    with pytest.raises(BooxError) as info:
        raise error
    assert info.value is error
    assert str(info.value) == "bad formula"


def test_bad_value_cast_carries_error():
    error = BadValueCast(error=CellValueError.REF)
    assert error.error is CellValueError.REF
    assert str(error) == "bad value cast"


def test_bad_value_cast_without_error():
    assert BadValueCast().error is None