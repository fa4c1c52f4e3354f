"""Tests for ratingcharts.charts.spider_graph."""

from __future__ import annotations

import math

import numpy as np
import pytest
from matplotlib.figure import Figure

from ratingcharts.charts.spider_graph import render_spider_graph
from ratingcharts.config import SpiderGraphConfig
from ratingcharts.surface import find_by_gid, hover_of

DATA = {"Algebra": 10.0, "Geometry": 5.0, "Logic": 8.0}


class TestRenderSpiderGraph:
    def test_returns_square_figure(self) -> None:
        fig = render_spider_graph(DATA, 0)
        assert isinstance(fig, Figure)
        w, h = fig.get_size_inches() * fig.dpi
        assert (round(w), round(h)) == (500, 500)

    def test_six_rings_with_labels(self) -> None:
        fig = render_spider_graph(DATA, 0)
        rings = find_by_gid(fig, "ring")
        assert len(rings) == 6
        # inner size 420 -> outer radius 140
        assert max(r.radius for r in rings) == pytest.approx(140)
        labels = [t.get_text() for t in find_by_gid(fig, "ring-label")]
        assert labels == ["0.000", "2.000", "4.000", "6.000", "8.000", "10.00"]

    def test_axis_per_concept(self) -> None:
        fig = render_spider_graph(DATA, 0)
        assert len(find_by_gid(fig, "axis")) == 3
        labels = [t.get_text() for t in find_by_gid(fig, "axis-label")]
        assert labels == list(DATA)

    def test_first_concept_points_up(self) -> None:
        fig = render_spider_graph(DATA, 0)
        first = find_by_gid(fig, "data-point")[0]
        assert first.center == pytest.approx((250, 110))

    def test_closed_polygon_through_points(self) -> None:
        fig = render_spider_graph(DATA, 0)
        (area,) = find_by_gid(fig, "area")
        xy = np.asarray(area.get_xy())
        np.testing.assert_allclose(xy[0], xy[-1])
        centers = [p.center for p in find_by_gid(fig, "data-point")]
        np.testing.assert_allclose(xy[:-1], centers)

    def test_points_at_scaled_radius(self) -> None:
        fig = render_spider_graph(DATA, 0)
        for point, value in zip(find_by_gid(fig, "data-point"), DATA.values()):
            x, y = point.center
            assert math.hypot(x - 250, y - 250) == pytest.approx(value / 10 * 140)

    def test_tooltip(self, pointer) -> None:
        config = SpiderGraphConfig(tooltip=lambda concept, value: f"{concept}: {value}")
        fig = render_spider_graph(DATA, 0, config)
        second = find_by_gid(fig, "data-point")[1]
        pointer.move(fig, *second.center)
        assert hover_of(fig).tooltip.text == "Geometry: 5.0"

    def test_empty_data(self) -> None:
        fig = render_spider_graph({}, 0)
        assert find_by_gid(fig, "area") == []
        assert find_by_gid(fig, "data-point") == []
        assert len(find_by_gid(fig, "ring")) == 6

    def test_all_equal_values(self) -> None:
        fig = render_spider_graph({"a": 3.0, "b": 3.0, "c": 3.0}, 3.0)
        for point in find_by_gid(fig, "data-point"):
            assert np.isfinite(point.center).all()
