"""Chart renderers. Each draws into a matplotlib Figure and returns it."""

from __future__ import annotations

from ratingcharts.charts.histogram import render_histogram
from ratingcharts.charts.line_graph import render_line_graph
from ratingcharts.charts.rating import render_rating
from ratingcharts.charts.spider_graph import render_spider_graph
from ratingcharts.charts.table import render_table

__all__ = [
    "render_histogram",
    "render_line_graph",
    "render_rating",
    "render_spider_graph",
    "render_table",
]
