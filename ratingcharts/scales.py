"""Domain-to-pixel scales shared by every Cartesian and radial axis."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

import numpy as np
import numpy.typing as npt


def _interpolate(
    value: npt.ArrayLike,
    domain: tuple[float, float],
    range_: tuple[float, float],
) -> Any:
    """Linear map of *value* from *domain* onto *range_*.

    A degenerate domain maps everything onto the start of the range.
    """
    d0, d1 = domain
    r0, r1 = range_
    values = np.asarray(value, dtype=float)

    if d1 == d0:
        result = np.full(values.shape, r0, dtype=float)
    else:
        result = r0 + (values - d0) / (d1 - d0) * (r1 - r0)

    if result.ndim == 0:
        return float(result)
    return result


@dataclass(frozen=True)
class LinearScale:
    """Numeric domain mapped linearly onto a pixel range.

    Attributes:
        domain: Source interval ``(min, max)``.
        range: Target pixel interval; may run backwards (e.g. y axes).
    """

    domain: tuple[float, float]
    range: tuple[float, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "domain", (float(self.domain[0]), float(self.domain[1])))
        object.__setattr__(self, "range", (float(self.range[0]), float(self.range[1])))

    def __call__(self, value: npt.ArrayLike) -> Any:
        """Map a scalar (returns float) or array-like (returns ndarray)."""
        return _interpolate(value, self.domain, self.range)


def to_millis(value: datetime) -> float:
    """Epoch milliseconds of a datetime or pandas Timestamp."""
    return value.timestamp() * 1000


@dataclass(frozen=True)
class TimeScale:
    """Time domain mapped linearly onto a pixel range.

    Distances are measured in epoch milliseconds, so naive and aware
    datetimes both work as long as a single scale does not mix them.
    """

    domain: tuple[datetime, datetime]
    range: tuple[float, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "range", (float(self.range[0]), float(self.range[1])))

    @property
    def millis_domain(self) -> tuple[float, float]:
        return (to_millis(self.domain[0]), to_millis(self.domain[1]))

    def __call__(self, value: datetime) -> float:
        return float(_interpolate(to_millis(value), self.millis_domain, self.range))
