"""Axis tick spacing helpers."""

from __future__ import annotations

import math

# (multiplier, ratio threshold), tried in order; the first match wins.
_REFINEMENTS: tuple[tuple[int, float], ...] = ((10, 5.0), (5, 2.0), (2, 1.0))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going towards +inf."""
    return int(math.floor(value + 0.5))


def compute_step(value_range: float, target_count: int) -> float:
    """
    Return a "nice" distance between grid lines.

    The result is always of the form ``{1, 2, 5} * 10**k`` and is chosen so
    that roughly ``target_count`` ticks fit into ``value_range`` without
    dropping to ``target_count // 2`` or fewer.

    Parameters
    ----------
    value_range:
        Length of the axis in data units. Must be finite and > 0.
    target_count:
        Desired number of ticks. Must be > 0.
    """
    if not math.isfinite(value_range) or value_range <= 0:
        raise ValueError(f"value_range must be finite and > 0, got {value_range}")
    if target_count <= 0:
        raise ValueError(f"target_count must be > 0, got {target_count}")

    exponent = round_half_up(math.log10(value_range / target_count))
    magnitude = 10.0**exponent
    ratio = value_range / magnitude
    min_steps = target_count // 2

    for multiplier, threshold in _REFINEMENTS:
        if ratio > threshold and value_range / (magnitude * multiplier) > min_steps:
            return magnitude * multiplier
    return magnitude


__all__ = ["compute_step", "round_half_up"]
