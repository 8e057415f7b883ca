"""
Exception classes for Structured Report.

This module defines all custom exceptions raised while defining columns,
adding rows and rendering reports, organized in a hierarchy for easy handling.
"""

from typing import Any, Optional


class ReportError(Exception):
    """Base exception for all report errors."""

    pass


class ConfigError(ReportError):
    """Configuration error.

    Raised when a ReportConfig fails validation.

    Attributes:
        errors: The validation messages
    """

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("Invalid report configuration: " + "; ".join(self.errors))


class ColumnError(ReportError):
    """Base class for column definition and lookup errors.

    Attributes:
        column_id: The column the error refers to
    """

    def __init__(self, column_id: str, message: str):
        self.column_id = column_id
        super().__init__(message)


class ColumnAlreadyExists(ColumnError):
    """A column with the same id is already registered."""

    def __init__(self, column_id: str):
        super().__init__(column_id, f"Column '{column_id}' already exists")


class InvalidColumnType(ColumnError):
    """Column type is not one of string, numeric, float or currency.

    Attributes:
        column_id: The column being defined
        column_type: The rejected type value
    """

    def __init__(self, column_id: str, column_type: Any):
        self.column_type = column_type
        super().__init__(
            column_id,
            f"Invalid type {column_type!r} for column '{column_id}' "
            "(expected one of: string, numeric, float, currency)",
        )


class ColumnNotFound(ColumnError):
    """No column is registered under the given id."""

    def __init__(self, column_id: str):
        super().__init__(column_id, f"Column '{column_id}' not found")


class MissingColumnData(ReportError):
    """Row data does not supply exactly one value per defined column.

    Attributes:
        expected: Number of defined columns
        received: Number of values that could be matched to columns
    """

    def __init__(self, expected: int, received: int):
        self.expected = expected
        self.received = received
        super().__init__(
            f"Row supplies {received} of {expected} column values"
        )


class FormattingError(ReportError):
    """A cell value could not be formatted for output.

    Always raised from the underlying exception, which is available as
    ``__cause__``.

    Attributes:
        column_id: The column whose value failed
        value: The raw stored value
        display_value: The value resolved for display
        target: The output target being rendered
        display_key: Key used to resolve mapping values
        format: The format pattern applied
    """

    def __init__(
        self,
        column_id: str,
        value: Any,
        display_value: Any,
        target: str,
        display_key: str,
        format: str,
        reason: Optional[str] = None,
    ):
        self.column_id = column_id
        self.value = value
        self.display_value = display_value
        self.target = target
        self.display_key = display_key
        self.format = format
        message = (
            f"Cannot format value {value!r} in column '{column_id}' "
            f"(display value {display_value!r}, target {target!r}, "
            f"display key {display_key!r}, format {format!r})"
        )
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
