"""Equal-width histogram binning."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bin:
    """One histogram bin.

    Attributes:
        lower_bound: Inclusive lower edge.
        upper_bound: Exclusive upper edge (inclusive for the last bin).
        members: Samples falling inside the bin, in input order.
    """

    lower_bound: float
    upper_bound: float
    members: tuple[float, ...] = ()

    def __len__(self) -> int:
        return len(self.members)

    @property
    def width(self) -> float:
        return self.upper_bound - self.lower_bound


def bin_samples(
    samples: Sequence[float],
    domain: tuple[float, float],
    bin_count: int,
) -> list[Bin]:
    """Partition *samples* into *bin_count* equal-width bins over *domain*.

    Bins are contiguous and ascending; each covers
    ``[lower_bound, upper_bound)`` except the last, which also holds
    samples equal to the domain maximum. Samples outside the domain and
    NaNs are left out.

    Args:
        samples: Values to bin.
        domain: ``(min, max)`` interval to cover.
        bin_count: Number of bins for a non-degenerate domain.

    Returns:
        The bins. A degenerate domain (``min == max``) collapses into a
        single bin holding every in-domain sample.

    Raises:
        ValueError: If *bin_count* is below 1.
    """
    if bin_count < 1:
        raise ValueError(f"bin_count must be at least 1, got {bin_count}.")

    lo, hi = float(domain[0]), float(domain[1])
    values = np.asarray(samples, dtype=float).reshape(-1)
    inside = values[(values >= lo) & (values <= hi)]

    dropped = len(values) - len(inside)
    if dropped:
        logger.warning(
            "%d of %d samples lie outside [%s, %s] and were not binned",
            dropped, len(values), lo, hi,
        )

    if hi <= lo:
        return [Bin(lo, hi, tuple(inside.tolist()))]

    bin_size = (hi - lo) / bin_count
    edges = lo + bin_size * np.arange(bin_count + 1)
    edges[-1] = hi

    indices = np.searchsorted(edges, inside, side="right") - 1
    indices = np.clip(indices, 0, bin_count - 1)

    return [
        Bin(float(edges[i]), float(edges[i + 1]), tuple(inside[indices == i].tolist()))
        for i in range(bin_count)
    ]


def max_bin_size(bins: Sequence[Bin]) -> int:
    """Largest member count across *bins* (0 when there are none)."""
    return max((len(b) for b in bins), default=0)
