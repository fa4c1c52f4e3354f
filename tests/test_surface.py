"""Tests for ratingcharts.surface."""

from __future__ import annotations

import matplotlib.pyplot as plt
import pytest
from matplotlib.figure import Figure

from ratingcharts.charts.histogram import render_histogram
from ratingcharts.config import HistogramConfig, HistogramTooltips
from ratingcharts.surface import (
    draw_bottom_axis,
    find_by_gid,
    hover_of,
    prepare_canvas,
    release,
    tick_label,
)


class TestPrepareCanvas:
    def test_pixel_coordinates(self) -> None:
        canvas = prepare_canvas(None, 300, 200)
        w, h = canvas.figure.get_size_inches() * canvas.figure.dpi
        assert (round(w), round(h)) == (300, 200)
        assert canvas.ax.get_xlim() == (0, 300)
        # y grows downwards
        assert canvas.ax.get_ylim() == (200, 0)

    def test_plain_figure_gets_agg_canvas(self) -> None:
        fig = Figure()
        canvas = prepare_canvas(fig, 100, 100)
        assert canvas.figure is fig
        assert canvas.text_width("wide text") > canvas.text_width("w") > 0

    def test_tooltip_starts_hidden(self) -> None:
        canvas = prepare_canvas(None, 100, 100)
        assert hover_of(canvas.figure).tooltip is canvas.tooltip
        assert not canvas.tooltip.visible

    def test_px_to_pt(self) -> None:
        canvas = prepare_canvas(None, 100, 100)
        assert canvas.px_to_pt(100) == pytest.approx(72)

    def test_release(self) -> None:
        canvas = prepare_canvas(None, 100, 100)
        release(canvas.figure)
        assert hover_of(canvas.figure) is None

    def test_bottom_axis_hit_box(self) -> None:
        canvas = prepare_canvas(None, 200, 100)
        box = draw_bottom_axis(canvas, (20, 180), 80, [20, 100], ["0", "1"])
        assert (box.get_x(), box.get_y(), box.get_width()) == (20, 80, 160)
        assert find_by_gid(canvas.figure, "x-axis") == [box]

    def test_tick_label(self) -> None:
        assert tick_label(2.0) == "2"
        assert tick_label(2.5) == "2.5"


class TestRerender:
    def test_replaces_content_and_wiring(self, pointer) -> None:
        fig = plt.figure()
        first_texts: list[str] = []
        config = HistogramConfig(
            target=fig,
            tooltips=HistogramTooltips(x_axis=lambda lo, hi: first_texts.append("old") or "old"),
        )
        render_histogram([1, 2, 3], 0, 2, config)
        old_hover = hover_of(fig)

        config = HistogramConfig(
            target=fig, tooltips=HistogramTooltips(x_axis=lambda lo, hi: "new"),
        )
        render_histogram([1, 2, 3], 0, 2, config)
        new_hover = hover_of(fig)

        assert new_hover is not old_hover
        assert len(fig.axes) == 1
        assert len(find_by_gid(fig, "highlight")) == 1

        pointer.move(fig, 300, 370)
        assert new_hover.tooltip.text == "new"
        assert first_texts == []
        assert not old_hover.tooltip.visible
