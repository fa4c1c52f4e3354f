"""Tests for ratingcharts.charts.table."""

from __future__ import annotations

import logging
from datetime import datetime

import pytest
from matplotlib.colors import to_rgba
from matplotlib.figure import Figure
from matplotlib.table import Table

from ratingcharts.charts.table import EVEN_ROW_COLOR, render_table, row_capacity
from ratingcharts.config import TableConfig, TableSize, navy_rgba
from ratingcharts.data.contracts import RatingPoint, TableColumn
from ratingcharts.surface import find_by_gid, hover_of

COLUMNS = [
    TableColumn("timestamp", "Timestamp"),
    TableColumn("value", "Value"),
    TableColumn("deviation", "Deviation"),
]


def _make_rows() -> list[RatingPoint]:
    return [
        RatingPoint(1510.0, datetime(2024, 1, 3), 40.0),
        RatingPoint(1500.0, datetime(2024, 1, 1), 50.0),
        RatingPoint(1520.0, datetime(2024, 1, 2)),
    ]


def _table(fig: Figure) -> Table:
    (table,) = fig.axes[0].tables
    return table


def _cell_text(table: Table, row: int, col: int) -> str:
    return table[row, col].get_text().get_text()


class TestRenderTable:
    def test_returns_figure(self) -> None:
        fig = render_table(_make_rows(), COLUMNS)
        assert isinstance(fig, Figure)

    def test_headers(self) -> None:
        table = _table(render_table(_make_rows(), COLUMNS))
        assert [_cell_text(table, 0, j) for j in range(3)] == ["Timestamp", "Value", "Deviation"]
        assert len(find_by_gid(table.figure, "header")) == 3

    def test_rows_sorted_with_iso_timestamps(self) -> None:
        table = _table(render_table(_make_rows(), COLUMNS))
        assert [_cell_text(table, i, 0) for i in (1, 2, 3)] == [
            "2024-01-01T00:00:00",
            "2024-01-02T00:00:00",
            "2024-01-03T00:00:00",
        ]
        assert [_cell_text(table, i, 1) for i in (1, 2, 3)] == ["1500", "1520", "1510"]

    def test_missing_deviation_is_blank(self) -> None:
        table = _table(render_table(_make_rows(), COLUMNS))
        assert _cell_text(table, 2, 2) == ""

    def test_column_subset_and_order(self) -> None:
        columns = [{"key": "value", "header": "Rating"}, {"key": "timestamp", "header": "When"}]
        table = _table(render_table(_make_rows(), columns))
        assert _cell_text(table, 0, 0) == "Rating"
        assert _cell_text(table, 1, 1) == "2024-01-01T00:00:00"
        assert (1, 2) not in table.get_celld()

    def test_colours(self) -> None:
        table = _table(render_table(_make_rows(), COLUMNS))
        assert table[0, 0].get_facecolor() == pytest.approx(to_rgba(navy_rgba(1.0)))
        assert table[1, 0].get_facecolor() == pytest.approx(EVEN_ROW_COLOR)
        assert table[2, 0].get_facecolor() == pytest.approx(navy_rgba(0.15))
        assert table[3, 0].get_facecolor() == pytest.approx(EVEN_ROW_COLOR)

    def test_custom_row_colour(self) -> None:
        config = TableConfig(row_color=lambda alpha: (1.0, 0.0, 0.0, alpha))
        table = _table(render_table(_make_rows(), COLUMNS, config))
        assert table[0, 1].get_facecolor() == pytest.approx((1.0, 0.0, 0.0, 1.0))

    def test_header_tooltip_gets_lower_case(self, pointer) -> None:
        config = TableConfig(header_tooltip=lambda header: f"about {header}")
        fig = render_table(_make_rows(), COLUMNS, config)
        pointer.over(fig, _table(fig)[0, 1])
        assert hover_of(fig).tooltip.text == "about value"

    def test_body_cells_have_no_tooltip(self, pointer) -> None:
        config = TableConfig(header_tooltip=lambda header: header)
        fig = render_table(_make_rows(), COLUMNS, config)
        pointer.over(fig, _table(fig)[2, 1])
        assert not hover_of(fig).tooltip.visible

    def test_empty_rows_header_only(self) -> None:
        table = _table(render_table([], COLUMNS))
        assert sorted(table.get_celld()) == [(0, 0), (0, 1), (0, 2)]

    def test_no_columns_no_table(self) -> None:
        fig = render_table(_make_rows(), [])
        assert fig.axes[0].tables == []

    def test_rows_without_timestamp_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        rows = [{"value": 1.0, "timestamp": "2024-01-01"}, {"value": 2.0}]
        with caplog.at_level(logging.WARNING, logger="ratingcharts.charts.table"):
            table = _table(render_table(rows, COLUMNS))
        assert (2, 0) not in table.get_celld()
        assert "without timestamp" in caplog.text

    def test_rows_beyond_max_height_left_out(self, caplog: pytest.LogCaptureFixture) -> None:
        config = TableConfig(size=TableSize(max_height=100))
        assert row_capacity(100) == 2
        with caplog.at_level(logging.WARNING, logger="ratingcharts.charts.table"):
            table = _table(render_table(_make_rows(), COLUMNS, config))
        assert (2, 0) in table.get_celld()
        assert (3, 0) not in table.get_celld()
        assert "fits 2 of 3 rows" in caplog.text

    def test_width_bounded(self) -> None:
        fig = render_table(_make_rows(), COLUMNS, TableConfig(size=TableSize(max_width=300)))
        w, _ = fig.get_size_inches() * fig.dpi
        assert round(w) == 300
