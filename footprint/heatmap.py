"""
Heatmap colorizer: office-employee percentage → RGB fill.

Missing or non-positive percentages get the pale no-data color. Anything
else is clamped into [1, 25] and linearly interpolated from light to dark
yellow, one channel at a time. Values above 25 saturate at the dark end.
"""

import math

from footprint.config import (
    HEATMAP_DARK,
    HEATMAP_LIGHT,
    HEATMAP_MAX_PCT,
    HEATMAP_MIN_PCT,
    NO_DATA_COLOR,
)


def _round_half_up(x: float) -> int:
    # Half-up: 242.5 → 243, where round() would give 242
    return int(math.floor(x + 0.5))


def _lerp(a: float, b: float, t: float) -> int:
    return _round_half_up(a + (b - a) * t)


def _as_percent(pct):
    """Coerce to float; None for anything that isn't a usable positive number."""
    if pct is None or isinstance(pct, bool):
        return None
    try:
        value = float(pct)
    except OverflowError:
        # Too large for a float: saturates at the dark end
        return math.inf if pct > 0 else None
    except (TypeError, ValueError):
        return None
    if math.isnan(value) or value <= 0:
        return None
    return value


def yellow_scale(pct) -> tuple:
    """Map a percentage to an (r, g, b) fill color."""
    value = _as_percent(pct)
    if value is None:
        return NO_DATA_COLOR

    span = HEATMAP_MAX_PCT - HEATMAP_MIN_PCT
    t = min(1.0, max(0.0, (value - HEATMAP_MIN_PCT) / span))
    return tuple(_lerp(lo, hi, t) for lo, hi in zip(HEATMAP_LIGHT, HEATMAP_DARK))


def rgb_string(color) -> str:
    """Format an (r, g, b) triple the way Plotly and CSS accept it."""
    r, g, b = color
    return f"rgb({r}, {g}, {b})"
