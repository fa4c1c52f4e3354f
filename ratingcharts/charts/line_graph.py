"""Rating history as a line with a deviation band."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from functools import partial
from typing import Any

import numpy as np
from matplotlib.figure import Figure
from matplotlib.patches import Circle, Polygon

from ratingcharts.config import LineGraphConfig
from ratingcharts.data.contracts import RatingPoint, iso_timestamp, points_frame
from ratingcharts.scales import LinearScale, TimeScale
from ratingcharts.surface import (
    PixelCanvas,
    draw_bottom_axis,
    draw_left_axis,
    prepare_canvas,
    tick_label,
)
from ratingcharts.ticks import MAX_NUMERIC_TICKS, numeric_ticks, time_ticks

logger = logging.getLogger(__name__)

POINT_RADIUS_PX: float = 3


def _points(
    canvas: PixelCanvas,
    xs: Iterable[float],
    ys: Iterable[float],
    color: str,
    alpha: float,
    gid: str,
) -> list[Circle]:
    circles = []
    for px, py in zip(xs, ys, strict=True):
        circle = Circle(
            (px, py), POINT_RADIUS_PX,
            facecolor=color, edgecolor=color, alpha=alpha, gid=gid, zorder=3,
        )
        canvas.ax.add_patch(circle)
        circles.append(circle)
    return circles


def render_line_graph(
    records: Iterable[RatingPoint | Mapping[str, Any]],
    domain_min: float,
    config: LineGraphConfig | None = None,
) -> Figure:
    """Line graph of rating values over time.

    Records are drawn in ascending timestamp order regardless of input
    order; the caller's sequence is not modified. Missing deviations
    count as 0. The shaded band spans ``value - deviation`` to
    ``value + deviation``.

    Args:
        records: Rating points or mappings with value, timestamp and an
            optional deviation.
        domain_min: Lower bound of the value axis.
        config: Chart options; defaults when None.

    Returns:
        The rendered figure. Without records only the axis frames are
        drawn.
    """
    config = config or LineGraphConfig()
    m = config.margins
    width, height = config.size.width, config.size.height
    tooltips = config.tooltips

    canvas = prepare_canvas(config.target, width, height)
    frame = points_frame(records)

    canvas.text(
        width / 2, m.top / 2, config.titles.title,
        ha="center", va="center", fontweight="bold", gid="title",
    )
    canvas.text(width / 2, height - m.bottom / 5, config.titles.x_axis_title, ha="center")
    canvas.text(m.left / 5, m.top / 1.25, config.titles.y_axis_title, ha="left")

    x_range = (m.left, width - m.right)
    y_range = (height - m.bottom, m.top)

    if frame.empty:
        draw_bottom_axis(canvas, x_range, height - m.bottom, [], [])
        draw_left_axis(canvas, y_range, m.left, [], [])
        logger.debug("Line graph: no records, drew axis frames only")
        return canvas.figure

    start = frame["timestamp"].iloc[0]
    end = frame["timestamp"].iloc[-1]
    values = frame["value"].to_numpy()
    deviations = frame["deviation"].to_numpy()
    upper = values + deviations
    lower = values - deviations

    # x axis
    x = TimeScale((start, end), x_range)
    x_ticks = time_ticks(start, end)
    x_axis = draw_bottom_axis(
        canvas, x_range, height - m.bottom,
        [x(t) for t in x_ticks], [t.strftime("%Y-%m-%d") for t in x_ticks],
    )
    canvas.hover.bind(
        x_axis, partial(tooltips.x_axis, iso_timestamp(start), iso_timestamp(end)),
    )

    # y axis
    max_value = float(np.max(upper))
    y = LinearScale((domain_min, max_value), y_range)
    y_ticks = numeric_ticks((domain_min, max_value), MAX_NUMERIC_TICKS)
    y_axis = draw_left_axis(
        canvas, y_range, m.left, [y(t) for t in y_ticks], [tick_label(t) for t in y_ticks],
    )
    canvas.hover.bind(y_axis, partial(tooltips.y_axis, domain_min, max_value))

    for t in y_ticks:
        canvas.line([m.left, width - m.right], [y(t), y(t)], color="gray", alpha=0.5)

    # data
    xs = np.array([x(t) for t in frame["timestamp"]])
    iso = [iso_timestamp(t) for t in frame["timestamp"]]

    area = Polygon(
        np.column_stack([
            np.concatenate([xs, xs[::-1]]),
            np.concatenate([y(upper), y(lower)[::-1]]),
        ]),
        closed=True, facecolor=config.color, edgecolor=config.color,
        linewidth=canvas.px_to_pt(1.5), alpha=0.2, gid="area",
    )
    canvas.ax.add_patch(area)
    canvas.hover.bind(area, tooltips.area)

    canvas.line(xs, y(values), width_px=1.5, color=config.color, alpha=0.75, gid="value-line")
    canvas.line(xs, y(upper), width_px=1.5, color=config.color, alpha=0.4)
    canvas.line(xs, y(lower), width_px=1.5, color=config.color, alpha=0.4)

    for circle, u, ts in zip(
        _points(canvas, xs, y(upper), config.color, 0.4, "upper-deviation"), upper, iso,
    ):
        canvas.hover.bind(circle, partial(tooltips.upper_deviation, float(u), ts))
    for circle, lo, ts in zip(
        _points(canvas, xs, y(lower), config.color, 0.4, "lower-deviation"), lower, iso,
    ):
        canvas.hover.bind(circle, partial(tooltips.lower_deviation, float(lo), ts))
    for circle, v, d, ts in zip(
        _points(canvas, xs, y(values), config.color, 0.75, "data-point"),
        values, deviations, iso,
    ):
        canvas.hover.bind(circle, partial(tooltips.data, float(v), float(d), ts))

    logger.debug(
        "Line graph: %d records from %s to %s, values in [%s, %s]",
        len(frame), start, end, domain_min, max_value,
    )
    return canvas.figure
