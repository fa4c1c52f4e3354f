"""Radial (spider) chart of ratings per concept."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import partial

from matplotlib.colors import to_rgb
from matplotlib.figure import Figure
from matplotlib.patches import Circle, Polygon

from ratingcharts.config import SpiderGraphConfig
from ratingcharts.formatting import format_number
from ratingcharts.polar import Point, polygon_points, radial_axes, radial_ticks
from ratingcharts.scales import LinearScale
from ratingcharts.surface import AXIS_FONT_SIZE_PX, prepare_canvas

logger = logging.getLogger(__name__)

POINT_RADIUS_PX: float = 3

# Concept labels are shifted from their anchor by this many pixels.
LABEL_OFFSET: tuple[float, float] = (-29, 8)


def render_spider_graph(
    data: Mapping[str, float],
    domain_min: float,
    config: SpiderGraphConfig | None = None,
) -> Figure:
    """Spider graph with one axis per concept.

    Concepts are laid out clockwise from the top in mapping order. Six
    grey rings mark evenly spaced values from *domain_min* to the largest
    value, and the values are joined into a closed, shaded polygon.

    Args:
        data: Concept name to rating value.
        domain_min: Value at the centre.
        config: Chart options; defaults when None.

    Returns:
        The rendered figure. Without data only the centre ring is drawn.
    """
    config = config or SpiderGraphConfig()
    m = config.margins
    width, height = config.size.width, config.size.height

    canvas = prepare_canvas(config.target, width, height)
    center = Point(width / 2, height / 2)

    concepts = list(data)
    values = [float(data[c]) for c in concepts]
    max_value = max(values) if values else float(domain_min)

    inner_width = width - m.left - m.right
    inner_height = height - m.top - m.bottom
    radius = LinearScale((domain_min, max_value), (0, max(min(inner_width, inner_height), 0) / 3))

    # rings
    for tick in radial_ticks(domain_min, max_value):
        canvas.ax.add_patch(Circle(
            (center.x, center.y), max(radius(tick), 0.0),
            facecolor="none", edgecolor="gray", gid="ring",
        ))
        canvas.text(
            center.x + 2, center.y - radius(tick) - 4, format_number(tick, 4),
            size_px=AXIS_FONT_SIZE_PX, color="gray", va="baseline", gid="ring-label",
        )

    # concept axes
    for axis in radial_axes(concepts, max_value, radius, center):
        canvas.line(
            [center.x, axis.line_end.x], [center.y, axis.line_end.y],
            color="black", gid="axis",
        )
        canvas.text(
            axis.label_anchor.x + LABEL_OFFSET[0], axis.label_anchor.y + LABEL_OFFSET[1],
            axis.name, va="baseline", gid="axis-label",
        )

    # data
    if values:
        vertices = polygon_points(values, radius, center)
        canvas.ax.add_patch(Polygon(
            [(p.x, p.y) for p in vertices], closed=True,
            facecolor=(*to_rgb(config.color), 0.25), edgecolor=(*to_rgb(config.color), 0.6),
            linewidth=canvas.px_to_pt(2), gid="area",
        ))
        for concept, value, p in zip(concepts, values, vertices, strict=True):
            circle = Circle(
                (p.x, p.y), POINT_RADIUS_PX,
                facecolor=config.color, edgecolor=config.color, alpha=0.6,
                gid="data-point", zorder=3,
            )
            canvas.ax.add_patch(circle)
            canvas.hover.bind(circle, partial(config.tooltip, concept, value))

    canvas.text(
        width / 2, m.top, config.title,
        ha="center", va="baseline", fontweight="bold", gid="title",
    )

    logger.debug(
        "Spider graph: %d concepts, values in [%s, %s]",
        len(concepts), domain_min, max_value,
    )
    return canvas.figure
