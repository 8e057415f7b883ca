"""Tests for Report column and row management."""

import pytest

from structured_report import (
    ColumnAlreadyExists,
    ColumnNotFound,
    ColumnType,
    ConfigError,
    InvalidColumnType,
    KeyedRow,
    MissingColumnData,
    PositionalRow,
    Report,
    ReportConfig,
)


class TestReportCreation:
    """Tests for creating reports."""

    def test_empty_report(self) -> None:
        """A new report has no rows and no columns."""
        report = Report()
        assert report.count == 0
        assert len(report) == 0
        assert len(report.columns) == 0

    def test_report_with_columns(self, cost_report) -> None:
        """Initial column definitions are registered."""
        assert cost_report.count == 0
        assert len(cost_report.columns) == 2

    def test_column_order_preserved(self) -> None:
        """Columns keep the order they were defined in."""
        report = Report({"b": {}, "a": {}, "c": None})
        assert list(report.columns) == ["b", "a", "c"]

    def test_invalid_initial_column_type(self) -> None:
        """Bad initial definitions raise InvalidColumnType."""
        with pytest.raises(InvalidColumnType):
            Report({"cost": {"type": "bogus"}})

    def test_invalid_config(self) -> None:
        """An invalid configuration is rejected."""
        with pytest.raises(ConfigError) as exc_info:
            Report(config=ReportConfig(csv_delimiter=";;"))
        assert exc_info.value.errors

    def test_repr(self, populated_report) -> None:
        """repr shows the report's size."""
        assert repr(populated_report) == "Report(2 columns, 3 rows)"


class TestColumns:
    """Tests for adding and looking up columns."""

    def test_add_column(self, cost_report) -> None:
        """New columns are appended at the end."""
        column = cost_report.add_column("quantity", {"title": "Quantity", "type": "numeric"})
        assert len(cost_report.columns) == 3
        assert list(cost_report.columns) == ["date", "cost", "quantity"]
        assert column.type is ColumnType.NUMERIC

    def test_add_column_keyword_options(self, cost_report) -> None:
        """Keyword options override the options mapping."""
        column = cost_report.add_column("qty", {"title": "Q"}, title="Quantity", type="numeric")
        assert column.title == "Quantity"
        assert column.type is ColumnType.NUMERIC

    def test_reference_column_by_id(self, cost_report) -> None:
        """Columns are reachable by id."""
        assert cost_report.columns["cost"].type is ColumnType.CURRENCY
        assert cost_report.columns["cost"].data == []
        assert cost_report.column("date").title == "Date"

    def test_unknown_column_lookup(self, cost_report) -> None:
        """Looking up an unknown id raises ColumnNotFound."""
        with pytest.raises(ColumnNotFound) as exc_info:
            cost_report.column("missing")
        assert exc_info.value.column_id == "missing"

    def test_duplicate_column(self, cost_report) -> None:
        """A duplicate id raises and leaves the existing column alone."""
        with pytest.raises(ColumnAlreadyExists) as exc_info:
            cost_report.add_column("cost", {"title": "Other", "type": "string"})

        assert exc_info.value.column_id == "cost"
        assert cost_report.columns["cost"].title == "Cost"
        assert cost_report.columns["cost"].type is ColumnType.CURRENCY
        assert len(cost_report.columns) == 2

    def test_invalid_column_type(self, cost_report) -> None:
        """A bad type raises and registers nothing."""
        with pytest.raises(InvalidColumnType):
            cost_report.add_column("bad", {"type": "bogus"})
        assert "bad" not in cost_report.columns

    def test_columns_view_is_read_only(self, cost_report) -> None:
        """The columns mapping cannot be modified directly."""
        with pytest.raises(TypeError):
            cost_report.columns["other"] = None

    def test_add_column_after_rows(self, populated_report) -> None:
        """Late columns hold blank values for existing rows."""
        populated_report.add_column("note", {"title": "Note"})
        assert populated_report.columns["note"].data == [None, None, None]

        populated_report.add_row(["1/4/2001", "1", "late"])
        assert populated_report.columns["note"].data[-1] == "late"
        for column in populated_report.columns.values():
            assert len(column.data) == populated_report.count


class TestAddRow:
    """Tests for adding rows."""

    def test_add_row_by_dict(self, cost_report) -> None:
        """Keyed rows fill columns by id."""
        cost_report.add_row({"date": "1/1/2001", "cost": "10"})
        assert cost_report.count == 1
        assert cost_report.columns["date"].data[0] == "1/1/2001"
        assert cost_report.columns["cost"].data[0] == "10"

    def test_dict_key_order_irrelevant(self, cost_report) -> None:
        """Keyed rows are not reliant on key order."""
        cost_report.add_row({"cost": "10", "date": "1/1/2001"})
        assert cost_report.count == 1
        assert cost_report.columns["date"].data[0] == "1/1/2001"
        assert cost_report.columns["cost"].data[0] == "10"

    def test_add_row_by_list(self, cost_report) -> None:
        """Positional rows fill columns in registration order."""
        cost_report.add_row(["1/1/2001", "10"])
        assert cost_report.count == 1
        assert cost_report.columns["date"].data[0] == "1/1/2001"
        assert cost_report.columns["cost"].data[0] == "10"

    def test_explicit_row_shapes(self, cost_report) -> None:
        """Tagged row inputs are accepted."""
        cost_report.add_row(KeyedRow({"cost": "1", "date": "a"}))
        cost_report.add_row(PositionalRow(("b", "2")))
        assert cost_report.columns["date"].data == ["a", "b"]
        assert cost_report.columns["cost"].data == ["1", "2"]

    def test_extra_positional_values_ignored(self, cost_report) -> None:
        """Trailing positional values are dropped."""
        cost_report.add_row(["1/1/2001", "10", "extra"])
        assert cost_report.count == 1
        assert cost_report.columns["cost"].data == ["10"]

    def test_too_few_positional_values(self, cost_report) -> None:
        """Short positional rows raise MissingColumnData."""
        with pytest.raises(MissingColumnData) as exc_info:
            cost_report.add_row(["1/1/2001"])

        assert exc_info.value.expected == 2
        assert exc_info.value.received == 1
        assert cost_report.count == 0

    def test_missing_keyed_value(self, populated_report) -> None:
        """A keyed row missing a column raises and changes nothing."""
        with pytest.raises(MissingColumnData):
            populated_report.add_row({"date": "1/4/2001"})

        assert populated_report.count == 3
        assert len(populated_report.columns["date"].data) == 3
        assert len(populated_report.columns["cost"].data) == 3

    def test_unknown_keys_ignored(self, cost_report) -> None:
        """Keys with no matching column are ignored."""
        cost_report.add_row({"date": "1/1/2001", "cost": "10", "other": "x"})
        assert cost_report.count == 1
        assert list(cost_report) == [{"date": "1/1/2001", "cost": "10"}]

    def test_unknown_key_does_not_count(self, cost_report) -> None:
        """An unknown key cannot stand in for a missing column."""
        with pytest.raises(MissingColumnData) as exc_info:
            cost_report.add_row({"date": "1/1/2001", "other": "x"})
        assert exc_info.value.received == 1
        assert cost_report.columns["date"].data == []

    def test_strict_columns(self, cost_columns) -> None:
        """Strict reports reject unknown keys."""
        report = Report(cost_columns, config=ReportConfig(strict_columns=True))
        with pytest.raises(ColumnNotFound) as exc_info:
            report.add_row({"date": "1/1/2001", "cost": "10", "other": "x"})

        assert exc_info.value.column_id == "other"
        assert report.count == 0
        assert report.columns["date"].data == []

    def test_rejects_non_row_data(self, cost_report) -> None:
        """Scalars and strings are not rows."""
        with pytest.raises(TypeError):
            cost_report.add_row("1/1/2001,10")
        assert cost_report.count == 0

    def test_row_on_report_without_columns(self) -> None:
        """An empty row fits a report with no columns."""
        report = Report()
        report.add_row({})
        assert report.count == 1

    def test_count_matches_data_length(self, cost_report) -> None:
        """After N rows every column holds N values."""
        for index in range(5):
            if index % 2:
                cost_report.add_row({"cost": str(index), "date": f"1/{index}/2001"})
            else:
                cost_report.add_row([f"1/{index}/2001", str(index)])

        assert cost_report.count == 5
        for column in cost_report.columns.values():
            assert len(column.data) == 5

    def test_add_rows(self, cost_report) -> None:
        """Several rows can be added at once."""
        cost_report.add_rows([["a", "1"], {"date": "b", "cost": "2"}])
        assert cost_report.count == 2

    def test_add_rows_stops_at_failure(self, cost_report) -> None:
        """Rows before an invalid row are kept."""
        with pytest.raises(MissingColumnData):
            cost_report.add_rows([["a", "1"], ["b"], ["c", "3"]])
        assert cost_report.count == 1


class TestIteration:
    """Tests for iterating over rows."""

    def test_iterate_rows(self, populated_report) -> None:
        """Rows are yielded as id -> value dicts in order."""
        assert list(populated_report) == [
            {"date": "1/1/2001", "cost": "10"},
            {"date": "1/2/2001", "cost": "5"},
            {"date": "1/3/2001", "cost": "20"},
        ]

    def test_row_keys_follow_column_order(self, populated_report) -> None:
        """Row dicts list columns in registration order."""
        first = next(iter(populated_report))
        assert list(first) == ["date", "cost"]

    def test_iteration_is_restartable(self, populated_report) -> None:
        """Iterating again reflects rows added since."""
        assert len(list(populated_report.rows())) == 3
        populated_report.add_row(["1/4/2001", "1"])
        assert len(list(populated_report.rows())) == 4

    def test_empty_report_yields_nothing(self, cost_report) -> None:
        """No rows, no iterations."""
        assert list(cost_report) == []
