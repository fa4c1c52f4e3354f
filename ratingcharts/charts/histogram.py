"""Rating distribution histogram with a highlighted value."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from functools import partial

import numpy as np
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle

from ratingcharts.binning import bin_samples, max_bin_size
from ratingcharts.config import HistogramConfig
from ratingcharts.formatting import format_number
from ratingcharts.scales import LinearScale
from ratingcharts.surface import (
    FONT_SIZE_PX,
    draw_bottom_axis,
    draw_left_axis,
    prepare_canvas,
    tick_label,
)
from ratingcharts.ticks import numeric_ticks, tick_count

logger = logging.getLogger(__name__)

LINE_SPACING: float = 1.2


def percentage_below(samples: Sequence[float], value: float) -> float:
    """Share of *samples* strictly below *value*, in percent (0 when empty)."""
    values = np.asarray(samples, dtype=float).reshape(-1)
    if values.size == 0:
        return 0.0
    return float(np.count_nonzero(values < value)) / values.size * 100


def render_histogram(
    samples: Sequence[float],
    domain_min: float,
    highlight_value: float,
    config: HistogramConfig | None = None,
) -> Figure:
    """Histogram of *samples* with a dashed line at *highlight_value*.

    The x domain runs from *domain_min* to the largest sample. The count
    axis runs from 0 to the fullest bin. Next to the highlight line, the
    text from ``config.user_info`` receives the value formatted to four
    characters and the rounded percentage of samples below it.

    Args:
        samples: Rating values to bin.
        domain_min: Lower bound of the x axis.
        highlight_value: Value to mark, e.g. the viewing user's rating.
        config: Chart options; defaults when None.

    Returns:
        The rendered figure.
    """
    config = config or HistogramConfig()
    m = config.margins
    width, height = config.size.width, config.size.height
    tooltips = config.tooltips

    canvas = prepare_canvas(config.target, width, height)

    values = np.asarray(samples, dtype=float).reshape(-1)
    finite = values[np.isfinite(values)]
    max_value = float(finite.max()) if finite.size else float(domain_min)
    max_value = max(max_value, float(domain_min))

    # x axis
    canvas.text(width / 2, height - m.bottom / 5, config.titles.x_axis_title, ha="center")
    x = LinearScale((domain_min, max_value), (m.left, width - m.right))
    x_ticks = numeric_ticks((domain_min, max_value), config.bin_count // 4)
    x_axis = draw_bottom_axis(
        canvas, x.range, height - m.bottom,
        [x(t) for t in x_ticks], [tick_label(t) for t in x_ticks],
    )
    canvas.hover.bind(x_axis, partial(tooltips.x_axis, domain_min, max_value))

    bins = bin_samples(values, (domain_min, max_value), config.bin_count)
    max_height = max_bin_size(bins)

    # y axis
    y = LinearScale((0, max_height), (height - m.bottom, m.top))
    canvas.text(m.left / 5, m.top / 1.25, config.titles.y_axis_title, ha="left")
    y_ticks = numeric_ticks((0, max_height), tick_count(max_height), integer=True)
    y_axis = draw_left_axis(
        canvas, y.range, m.left,
        [y(t) for t in y_ticks], [f"{int(t)}" for t in y_ticks],
    )
    canvas.hover.bind(y_axis, partial(tooltips.y_axis, 0, max_height))

    # bars
    for b in bins:
        top = y(len(b))
        canvas.ax.add_patch(Rectangle(
            (x(b.lower_bound) + 1, top),
            max(x(b.upper_bound) - x(b.lower_bound) - 1, 0.0),
            max(height - top - m.bottom, 0.0),
            facecolor=config.color, edgecolor="none", alpha=0.4, gid="bar",
        ))

    # highlight
    value_label = format_number(highlight_value, 4)
    # Ties round up: 12.5 reads as "13".
    percentage_label = str(math.floor(percentage_below(values, highlight_value) + 0.5))
    highlight_x = x(highlight_value)
    text_y = y(max_height) + 10

    lines = config.user_info(value_label, percentage_label).split("\n")
    user_info = canvas.text(
        highlight_x, text_y, "\n".join(lines),
        ha="left" if highlight_x < width / 2 else "right", va="top",
        color=config.color, fontweight="bold", linespacing=LINE_SPACING,
        gid="user-info",
    )
    canvas.hover.bind(
        user_info, partial(tooltips.user_info, value_label, percentage_label),
    )

    text_block_height = len(lines) * LINE_SPACING * FONT_SIZE_PX
    canvas.line(
        [highlight_x, highlight_x], [text_y + text_block_height, height - m.bottom],
        width_px=2, color=config.color, linestyle=(0, (5, 5)), gid="highlight",
    )

    canvas.text(
        width / 2, m.top / 2, config.titles.title,
        ha="center", va="center", fontweight="bold", gid="title",
    )

    logger.debug(
        "Histogram: %d samples over [%s, %s], %d bins, fullest bin %d",
        values.size, domain_min, max_value, len(bins), max_height,
    )
    return canvas.figure
