"""Cell formats: sets of optional fields with defaults, and changes to them."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field as dataclass_field
from typing import Any, Iterable, Mapping

from taskbench.enums import (
    BorderStyle,
    HorizontalAlignment,
    PatternType,
    Script,
    VerticalAlignment,
)
from taskbench.errors import NoValue

# Colours are 32-bit ARGB integers.
DEFAULT_LINE_COLOR = 0xFFD3D3D3
TRANSPARENT = 0x00000000
BLACK = 0xFF000000
FONT_WEIGHT_NORMAL = 400

_MISSING: Any = object()


@dataclass(frozen=True)
class Border:
    """Style and colour of one side of a cell."""

    style: BorderStyle = BorderStyle.NONE
    line_color: int = DEFAULT_LINE_COLOR


@dataclass(frozen=True)
class Field:
    """A named format field, optionally with a default value."""

    name: str
    default: Any = dataclass_field(default=_MISSING, repr=False)

    def has_default(self) -> bool:
        return self.default is not _MISSING


FONT_NAME = Field("font_name", "Roboto")
FONT_SIZE = Field("font_size", 9.0)
FONT_WEIGHT = Field("font_weight", FONT_WEIGHT_NORMAL)
FONT_ITALIC = Field("font_italic", False)
FONT_UNDERLINE = Field("font_underline", False)
FONT_STRIKE_OUT = Field("font_strike_out", False)
FONT_SCRIPT = Field("font_script", Script.NORMAL)
FONT_BACKGROUND = Field("font_background", TRANSPARENT)
FONT_FOREGROUND = Field("font_foreground", BLACK)
FILL_PATTERN_TYPE = Field("fill_pattern_type", PatternType.NONE)
FILL_BACKGROUND = Field("fill_background", TRANSPARENT)
FILL_FOREGROUND = Field("fill_foreground", BLACK)
TOP_BORDER = Field("top_border")
BOTTOM_BORDER = Field("bottom_border")
LEFT_BORDER = Field("left_border")
RIGHT_BORDER = Field("right_border")
TEXT_HORIZONTAL_ALIGNMENT = Field("text_horizontal_alignment", HorizontalAlignment.GENERAL)
TEXT_VERTICAL_ALIGNMENT = Field("text_vertical_alignment", VerticalAlignment.BOTTOM)
TEXT_ROTATION = Field("text_rotation", 0.0)
TEXT_WRAP = Field("text_wrap", False)
TEXT_INDENT = Field("text_indent", 0)
# No value means the automatic format; "@" means text.
NUMBER_FORMAT = Field("number_format", "")

FONT_FIELDS = (
    FONT_NAME,
    FONT_SIZE,
    FONT_WEIGHT,
    FONT_ITALIC,
    FONT_UNDERLINE,
    FONT_STRIKE_OUT,
    FONT_SCRIPT,
    FONT_BACKGROUND,
    FONT_FOREGROUND,
)
FILL_FIELDS = (FILL_PATTERN_TYPE, FILL_BACKGROUND, FILL_FOREGROUND)
BORDER_FIELDS = (TOP_BORDER, BOTTOM_BORDER, LEFT_BORDER, RIGHT_BORDER)
CELL_FIELDS = (
    NUMBER_FORMAT,
    TEXT_HORIZONTAL_ALIGNMENT,
    TEXT_VERTICAL_ALIGNMENT,
    TEXT_ROTATION,
    TEXT_INDENT,
    TEXT_WRAP,
    *FONT_FIELDS,
    *FILL_FIELDS,
    *BORDER_FIELDS,
)


def _unique_fields(fields: Iterable[Field]) -> tuple[Field, ...]:
    result = tuple(fields)
    if len(set(result)) != len(result):
        raise ValueError("format fields must be unique")
    return result


class FormatChanges:
    """Fields flagged for change, each with a new value or ``None`` to clear it."""

    def __init__(self, fields: Iterable[Field]) -> None:
        self._fields = _unique_fields(fields)
        self._values: dict[Field, Any] = dict.fromkeys(self._fields)
        self._flags: set[Field] = set()

    @property
    def fields(self) -> tuple[Field, ...]:
        return self._fields

    def _check(self, field: Field) -> None:
        if field not in self._values:
            raise KeyError(f"field {field.name} is not part of these changes")

    def set(self, field: Field, value: Any) -> FormatChanges:
        """Flag ``field`` for change to ``value``; return self."""
        self._check(field)
        self._values[field] = value
        self._flags.add(field)
        return self

    def empty(self) -> bool:
        return not self._flags

    def is_set(self, field: Field) -> bool:
        self._check(field)
        return field in self._flags

    def value(self, field: Field) -> Any:
        self._check(field)
        return self._values[field]

    def unite(self, changes: FormatChanges) -> FormatChanges:
        """Combine with ``changes``; on conflict this object's change wins."""
        result = FormatChanges(self._fields)
        for field in self._fields:
            if field in self._flags:
                result.set(field, self._values[field])
            elif field in changes._values and field in changes._flags:
                result.set(field, changes._values[field])
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FormatChanges):
            return NotImplemented
        return (
            self._fields == other._fields
            and self._flags == other._flags
            and all(self._values[f] == other._values[f] for f in self._flags)
        )

    def __repr__(self) -> str:
        items = ", ".join(f"{f.name}={self._values[f]!r}" for f in self._fields if f in self._flags)
        return f"FormatChanges({items})"


class Format:
    """A set of optional field values."""

    def __init__(self, fields: Iterable[Field], values: Mapping[Field, Any] | None = None) -> None:
        self._fields = _unique_fields(fields)
        self._values: dict[Field, Any] = dict.fromkeys(self._fields)
        for field, value in (values or {}).items():
            self.set(field, value)

    @property
    def fields(self) -> tuple[Field, ...]:
        return self._fields

    def _check(self, field: Field) -> None:
        if field not in self._values:
            raise KeyError(f"field {field.name} is not part of this format")

    def can_hold(self, field: Field) -> bool:
        return field in self._values

    def holds(self, field: Field) -> bool:
        self._check(field)
        return self._values[field] is not None

    def holds_or_default(self, field: Field) -> bool:
        return self.holds(field) or field.has_default()

    def get(self, field: Field) -> Any:
        """Value of ``field``; raise NoValue if it is unset."""
        self._check(field)
        value = self._values[field]
        if value is None:
            raise NoValue()
        return value

    def get_or_default(self, field: Field) -> Any:
        """Value of ``field``, else its default; raise NoValue if it has neither."""
        self._check(field)
        value = self._values[field]
        if value is not None:
            return value
        if field.has_default():
            return field.default
        raise NoValue()

    def get_optional(self, field: Field) -> Any:
        self._check(field)
        return self._values[field]

    def set(self, field: Field, value: Any) -> Format:
        """Set ``field`` to ``value`` (``None`` clears it); return self."""
        self._check(field)
        self._values[field] = value
        return self

    def empty(self) -> bool:
        return all(value is None for value in self._values.values())

    def is_default(self) -> bool:
        """True when every field is unset or holds its default."""
        return all(
            value is None or (field.has_default() and value == field.default)
            for field, value in self._values.items()
        )

    def intersect(self, fmt: Format) -> Format:
        """Format holding only the fields set to equal values in both."""
        result = Format(self._fields)
        for field, value in self._values.items():
            if value is None or not fmt.can_hold(field):
                continue
            other = fmt._values[field]
            if other is not None and value == other:
                result._values[field] = value
        return result

    def unite(self, fmt: Format) -> Format:
        """Combine with ``fmt``; on conflict this format's value wins."""
        result = Format(self._fields)
        for field, value in self._values.items():
            if value is None and fmt.can_hold(field):
                value = fmt._values[field]
            result._values[field] = value
        return result

    def apply(self, changes: FormatChanges) -> Format:
        """Copy of this format with ``changes`` applied."""
        if changes.fields != self._fields:
            raise ValueError("changes do not match the format's fields")
        result = Format(self._fields)
        for field, value in self._values.items():
            result._values[field] = changes._values[field] if field in changes._flags else value
        return result

    def as_changes(self) -> FormatChanges:
        """Changes that set every field this format holds."""
        result = FormatChanges(self._fields)
        for field, value in self._values.items():
            if value is not None:
                result.set(field, value)
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Format):
            return NotImplemented
        return self._fields == other._fields and self._values == other._values

    def __hash__(self) -> int:
        return hash((self._fields, tuple(self._values.values())))

    def __repr__(self) -> str:
        items = ", ".join(f"{f.name}={v!r}" for f, v in self._values.items() if v is not None)
        return f"Format({items})"


def cell_format() -> Format:
    return Format(CELL_FIELDS)


def font_format() -> Format:
    return Format(FONT_FIELDS)


def fill_format() -> Format:
    return Format(FILL_FIELDS)


def border_format() -> Format:
    return Format(BORDER_FIELDS)