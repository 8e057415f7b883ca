"""Core enumerations shared by columns, formatters and renderers."""

from __future__ import annotations

from enum import Enum


class ColumnType(Enum):
    """Value types a report column can hold."""

    STRING = "string"
    NUMERIC = "numeric"
    FLOAT = "float"
    CURRENCY = "currency"

    @property
    def is_numeric(self) -> bool:
        """Return True for the numeric family (numeric, float, currency)."""
        return self is not ColumnType.STRING


class OutputTarget(Enum):
    """Output a cell value is being formatted for."""

    TEXT = "text"
    SPREADSHEET = "spreadsheet"
