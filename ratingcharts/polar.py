"""Polar projection for the radial (spider) chart.

Slot 0 points straight up and further slots follow at equal angular
steps. Pixel y grows downwards, so the sine term is subtracted.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from ratingcharts.scales import LinearScale

# Radial rings drawn between the minimum and the data maximum.
RADIAL_LEVELS: int = 6

# Multipliers on the maximum value for axis line ends and label anchors.
AXIS_LINE_FACTOR: float = 1.1
AXIS_LABEL_FACTOR: float = 1.3


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class RadialAxis:
    """Geometry of one concept axis.

    Attributes:
        name: Concept label.
        angle: Axis angle in radians.
        line_end: Outer end of the axis line.
        label_anchor: Position of the concept label.
    """

    name: str
    angle: float
    line_end: Point
    label_anchor: Point


def slot_angle(slot: int, total_slots: int) -> float:
    """Angle in radians of axis *slot* out of *total_slots*."""
    return math.pi / 2 + 2 * math.pi * slot / total_slots


def angle_to_point(
    angle: float,
    value: float,
    radius_scale: LinearScale,
    center: Point,
) -> Point:
    """Cartesian pixel position of *value* along the axis at *angle*."""
    radius = radius_scale(value)
    return Point(
        x=center.x + math.cos(angle) * radius,
        y=center.y - math.sin(angle) * radius,
    )


def project(
    slot: int,
    total_slots: int,
    value: float,
    radius_scale: LinearScale,
    center: Point,
) -> Point:
    """Project *value* on axis *slot* of *total_slots* around *center*."""
    return angle_to_point(slot_angle(slot, total_slots), value, radius_scale, center)


def radial_ticks(
    min_value: float,
    max_value: float,
    levels: int = RADIAL_LEVELS,
) -> list[float]:
    """Evenly spaced ring values from *min_value* to *max_value* inclusive."""
    if levels < 2:
        return [min_value]
    return [
        min_value + (i / (levels - 1)) * (max_value - min_value)
        for i in range(levels)
    ]


def radial_axes(
    concepts: Sequence[str],
    max_value: float,
    radius_scale: LinearScale,
    center: Point,
) -> list[RadialAxis]:
    """Axis line and label geometry for every concept.

    Lines reach 1.1x and labels sit at 1.3x the maximum value so labels
    clear the outermost ring.
    """
    axes: list[RadialAxis] = []
    for i, name in enumerate(concepts):
        angle = slot_angle(i, len(concepts))
        axes.append(RadialAxis(
            name=name,
            angle=angle,
            line_end=angle_to_point(
                angle, max_value * AXIS_LINE_FACTOR, radius_scale, center,
            ),
            label_anchor=angle_to_point(
                angle, max_value * AXIS_LABEL_FACTOR, radius_scale, center,
            ),
        ))
    return axes


def polygon_points(
    values: Sequence[float],
    radius_scale: LinearScale,
    center: Point,
) -> list[Point]:
    """Projected vertices of the data polygon, one per value."""
    return [
        project(i, len(values), value, radius_scale, center)
        for i, value in enumerate(values)
    ]
