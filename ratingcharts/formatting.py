"""Fixed-width number labels and deviation grayscale colours.

Both helpers feed directly into rendered text and fills, so their exact
output is part of the visual contract of every chart.
"""

from __future__ import annotations

import numpy as np

# Grayscale channel bounds for the deviation colour ramp.
MIN_COLOR_VALUE: float = 64
MAX_COLOR_VALUE: float = 192


def get_sign(value: float) -> str:
    """Return ``"-"`` for negative values, otherwise an empty string."""
    if value < 0:
        return "-"
    return ""


def _unsigned_repr(value: float) -> str:
    """Shortest positional representation of ``abs(value)``.

    Integral values print without a fractional part (``1234.0`` gives
    ``"1234"``), everything else uses the shortest round-trip digits.
    """
    return np.format_float_positional(
        abs(float(value)), unique=True, trim="-",
    )


def plain_number(value: float) -> str:
    """Signed shortest positional form, e.g. ``-123.4`` or ``7``."""
    return get_sign(value) + _unsigned_repr(value)


def format_number(value: float | None, length: int) -> str:
    """Format a number into a label of bounded width.

    The body (excluding sign) keeps at most ``length`` digits: decimals
    are padded or truncated to ``length + 1`` characters including the
    point, integers are padded with a zero fraction, and values wider than that
    switch to a short ``<digits>e<exponent>`` form.

    Args:
        value: Number to format. ``None`` yields an empty string.
        length: Target digit count.

    Returns:
        The formatted label, prefixed with ``-`` for negative values.
    """
    if value is None:
        return ""

    sign = get_sign(value)
    unsigned = _unsigned_repr(value)

    if "." in unsigned:
        point = unsigned.index(".")
        if point < length:
            if len(unsigned) < length + 1:
                return sign + unsigned + "0" * (length + 1 - len(unsigned))
            if len(unsigned) > length + 1:
                return sign + unsigned[: length + 1]
            return sign + unsigned
        if point > length:
            exponent = point - length + 2
            return sign + unsigned[: length - 2] + "e" + str(exponent)
        return sign + unsigned[:length]

    if len(unsigned) < length:
        return sign + unsigned + "." + "0" * (length - len(unsigned))
    if len(unsigned) > length:
        exponent = len(unsigned) - length + 2
        return sign + unsigned[: length - 2] + "e" + str(exponent)
    return sign + unsigned


def deviation_color_value(deviation: float, max_deviation: float) -> float:
    """Interpolate a grayscale channel value from a deviation.

    Zero deviation maps to 192 (light), ``max_deviation`` to 64 (dark).
    The result is not clamped, so deviations outside
    ``[0, max_deviation]`` extrapolate beyond the ramp.

    Args:
        deviation: Deviation to colour.
        max_deviation: Deviation mapped to the darkest tone.

    Returns:
        Channel intensity, or 0 when ``max_deviation`` is zero.
    """
    if max_deviation == 0:
        return 0

    proportion = deviation / max_deviation
    return MAX_COLOR_VALUE - (MAX_COLOR_VALUE - MIN_COLOR_VALUE) * proportion


def grayscale_rgb(value: float) -> tuple[float, float, float]:
    """Matplotlib RGB triple for a 0-255 channel value.

    Channels are clipped to [0, 1]; matplotlib refuses anything else.
    """
    channel = float(np.clip(value / 255, 0.0, 1.0))
    return (channel, channel, channel)
