"""
Pytest configuration and fixtures for Structured Report tests.
"""

import pytest

from structured_report import Report


@pytest.fixture
def cost_columns():
    """Column definitions for a date/cost report."""
    return {
        "date": {"title": "Date"},
        "cost": {"title": "Cost", "type": "currency"},
    }


@pytest.fixture
def cost_report(cost_columns):
    """An empty report with date and cost columns."""
    return Report(cost_columns)


@pytest.fixture
def populated_report(cost_report):
    """The date/cost report holding three positional rows."""
    cost_report.add_row(["1/1/2001", "10"])
    cost_report.add_row(["1/2/2001", "5"])
    cost_report.add_row(["1/3/2001", "20"])
    return cost_report
