"""
Report - In-memory table of typed columns and their rows.

This module handles:
- Registering columns in a fixed left-to-right order
- Appending keyed or positional rows, validated before any column changes
- Iterating rows as column id -> value mappings
- Rendering CSV, spreadsheet markup and fixed-width text
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, Optional

from .column import Column
from .config import ReportConfig
from .exceptions import ColumnAlreadyExists, ColumnNotFound, ConfigError, MissingColumnData
from .logging_config import get_logger
from .output.delimited import render_delimited
from .output.spreadsheet import render_spreadsheet
from .output.text_table import render_text
from .rows import KeyedRow, PositionalRow, RowInput, to_row_input

logger = get_logger("report")


class Report:
    """
    A table of named, typed columns.

    Usage:
        report = Report({
            "date": {"title": "Date"},
            "cost": {"title": "Cost", "type": "currency"},
        })
        report.add_row(["1/1/2001", "10"])
        report.add_row({"cost": "5", "date": "1/2/2001"})
        print(report.to_text())
    """

    def __init__(
        self,
        columns: Optional[Mapping[str, Optional[Mapping[str, Any]]]] = None,
        config: Optional[ReportConfig] = None,
    ):
        """
        Initialize the report.

        Args:
            columns: Optional column id -> options mapping, registered in order
            config: Report configuration (defaults to ReportConfig())

        Raises:
            ConfigError: If the configuration is invalid
        """
        self.config = config or ReportConfig()
        errors = self.config.validate()
        if errors:
            raise ConfigError(errors)

        self._columns: dict[str, Column] = {}
        self._count = 0
        if columns:
            self.add_columns(columns)

    @property
    def columns(self) -> Mapping[str, Column]:
        """Read-only view of the columns in registration order."""
        return MappingProxyType(self._columns)

    @property
    def count(self) -> int:
        """Number of rows added so far."""
        return self._count

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"Report({len(self._columns)} columns, {self._count} rows)"

    # ------------------------------------------------------------------
    # Columns
    # ------------------------------------------------------------------

    def add_column(
        self,
        column_id: str,
        options: Optional[Mapping[str, Any]] = None,
        **kwargs: Any,
    ) -> Column:
        """
        Register a new column at the right-hand end of the report.

        Keyword arguments override entries in ``options``. A column added
        after rows exist holds None (a blank cell) for every earlier row.

        Args:
            column_id: Unique column id
            options: Mapping with title, type, format and width
            **kwargs: Same keys as options

        Returns:
            The new Column

        Raises:
            ColumnAlreadyExists: If column_id is already registered
            InvalidColumnType: If the type is not recognised
        """
        if column_id in self._columns:
            raise ColumnAlreadyExists(column_id)

        merged = dict(options or {})
        merged.update(kwargs)
        column = Column.from_options(column_id, merged)

        if self._count:
            column.data.extend([None] * self._count)
            logger.debug(
                "Back-filled column %r with %d blank values", column_id, self._count
            )

        self._columns[column_id] = column
        logger.debug("Added column %r (%s)", column_id, column.type.value)
        return column

    def add_columns(self, columns: Mapping[str, Optional[Mapping[str, Any]]]) -> None:
        """Register several columns in the mapping's order."""
        for column_id, options in columns.items():
            self.add_column(column_id, options)

    def column(self, column_id: str) -> Column:
        """
        Look up a column by id.

        Raises:
            ColumnNotFound: If no such column is registered
        """
        try:
            return self._columns[column_id]
        except KeyError:
            raise ColumnNotFound(column_id) from None

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------

    def add_row(self, data: RowInput | Mapping[str, Any] | Any) -> None:
        """
        Append one row.

        The row is fully validated before any column is touched, so a
        failing call leaves the report unchanged.

        Args:
            data: KeyedRow, PositionalRow, a mapping of column id -> value,
                or a sequence of values in column order

        Raises:
            MissingColumnData: If the row does not supply every column
            ColumnNotFound: For unknown keys when config.strict_columns is set
            TypeError: If data is neither a mapping nor a sequence
        """
        row = to_row_input(data)
        if isinstance(row, KeyedRow):
            values = self._resolve_keyed(row)
        else:
            values = self._resolve_positional(row)

        for column, value in zip(self._columns.values(), values):
            column.append(value)
        self._count += 1
        logger.debug("Added row %d", self._count)

    def add_rows(self, rows: Iterable[Any]) -> None:
        """Append each row in turn; stops at the first invalid row."""
        for data in rows:
            self.add_row(data)

    def _resolve_keyed(self, row: KeyedRow) -> list[Any]:
        """Return the row's values in column order."""
        matched: dict[str, Any] = {}
        for key, value in row.values.items():
            if key in self._columns:
                matched[key] = value
            elif self.config.strict_columns:
                raise ColumnNotFound(key)
            else:
                logger.debug("Ignoring value for unknown column %r", key)

        if len(matched) != len(self._columns):
            raise MissingColumnData(len(self._columns), len(matched))

        return [matched[column_id] for column_id in self._columns]

    def _resolve_positional(self, row: PositionalRow) -> list[Any]:
        """Return the first N values, N being the column count."""
        expected = len(self._columns)
        if len(row.values) < expected:
            raise MissingColumnData(expected, len(row.values))
        if len(row.values) > expected:
            logger.debug(
                "Ignoring %d trailing values", len(row.values) - expected
            )
        return list(row.values[:expected])

    def rows(self) -> Iterator[dict[str, Any]]:
        """Yield each row as a column id -> raw value dict."""
        for index in range(self._count):
            yield {
                column_id: column.data[index]
                for column_id, column in self._columns.items()
            }

    def __iter__(self) -> Iterator[dict[str, Any]]:
        return self.rows()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_csv(self) -> str:
        """Render the report as CSV text."""
        return render_delimited(
            self,
            delimiter=self.config.csv_delimiter,
            display_key=self.config.display_key,
        )

    def to_xls(self) -> str:
        """Render the report as an XML spreadsheet document."""
        return render_spreadsheet(
            self,
            worksheet_name=self.config.worksheet_name,
            display_key=self.config.display_key,
        )

    def to_text(self) -> str:
        """Render the report as a fixed-width text table."""
        return render_text(
            self,
            separator=self.config.text_separator,
            display_key=self.config.display_key,
        )
