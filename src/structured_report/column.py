"""Report column definition and per-cell formatting.

A Column holds a typed definition (title, type, printf-style format and
an optional spreadsheet width) together with the raw values appended to
it, one per report row. It knows how to format a single value for each
output target.
"""

from __future__ import annotations

from collections.abc import Mapping, Sized
from dataclasses import dataclass, field
from typing import Any

from .exceptions import FormattingError, InvalidColumnType
from .formatters import DEFAULT_FORMATS, FORMATTERS, SPREADSHEET_TYPES, strip_to_number
from .models import ColumnType, OutputTarget

DEFAULT_DISPLAY_KEY = "text"


def _is_blank(value: Any) -> bool:
    """Return True for values rendered as an empty cell (None, False, empty)."""
    if value is None or value is False:
        return True
    return isinstance(value, Sized) and len(value) == 0


@dataclass
class Column:
    """
    A named, typed report column and its accumulated values.

    Attributes:
        id: Column identifier, unique within a report
        title: Display title used in header rows
        type: Value type; a ColumnType or its string value
        format: printf-style pattern, defaults per type
        width: Optional explicit width for spreadsheet output
        data: Raw values, indexed by row number
    """

    id: str
    title: str = ""
    type: ColumnType = ColumnType.STRING
    format: str | None = None
    width: float | None = None
    data: list[Any] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.type, ColumnType):
            try:
                self.type = ColumnType(self.type)
            except ValueError:
                raise InvalidColumnType(self.id, self.type) from None
        if self.format is None:
            self.format = DEFAULT_FORMATS[self.type]

    @classmethod
    def from_options(cls, column_id: str, options: Mapping[str, Any] | None = None) -> Column:
        """Create a column from an options mapping.

        Recognised keys are ``title``, ``type``, ``format`` and ``width``;
        anything else is ignored.

        Raises:
            InvalidColumnType: If ``type`` is not a known column type
        """
        options = options or {}
        return cls(
            id=column_id,
            title=options.get("title") or "",
            type=options.get("type") or ColumnType.STRING,
            format=options.get("format"),
            width=options.get("width"),
        )

    @property
    def is_numeric(self) -> bool:
        """Return True if values are right-aligned numbers."""
        return self.type.is_numeric

    @property
    def spreadsheet_type(self) -> str:
        """Return the spreadsheet cell type ('String' or 'Number')."""
        return SPREADSHEET_TYPES[self.type]

    def append(self, value: Any) -> None:
        """Append a raw value; no coercion is performed."""
        self.data.append(value)

    def format_value(
        self,
        value: Any,
        target: OutputTarget | str = OutputTarget.TEXT,
        display_key: str = DEFAULT_DISPLAY_KEY,
    ) -> str:
        """Format a single value for the given output target.

        Mapping values carry several representations; the one stored under
        ``display_key`` is displayed. Blank values render as ``""``. For
        spreadsheet output, Number cells are stripped down to digits, '.'
        and '-' after formatting.

        Args:
            value: The raw cell value
            target: Output being rendered
            display_key: Key to resolve mapping values with

        Returns:
            The formatted cell text

        Raises:
            FormattingError: If the format cannot be applied to the value
        """
        target = OutputTarget(target)

        if isinstance(value, Mapping):
            display_value = value.get(display_key)
        else:
            display_value = value

        if _is_blank(display_value):
            return ""

        try:
            text = FORMATTERS[self.type](display_value, self.format)
        except (TypeError, ValueError, OverflowError) as exc:
            raise FormattingError(
                self.id,
                value,
                display_value,
                target.value,
                display_key,
                self.format,
                reason=str(exc),
            ) from exc

        if target is OutputTarget.SPREADSHEET and self.spreadsheet_type == "Number":
            text = strip_to_number(text)

        return text
