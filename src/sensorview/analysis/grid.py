"""
Grid line positions and labels for the time (X) and value (Y) axes.

Pixel coordinates follow the screen convention: the origin is the top-left
corner, so value ticks are listed from the top of the chart downwards.
"""

from __future__ import annotations

import math

from ..core.models import TickMark
from ..core.sensor_table import SensorTable
from ..core.viewport import ViewportState
from .ticks import compute_step, round_half_up

TIME_TICK_TARGET = 12
VALUE_TICK_TARGET = 8

# Relative slack used when snapping tick values onto multiples of the step.
_SNAP = 1e-9


def time_grid(
    table: SensorTable,
    viewport: ViewportState,
    pixel_min: int,
    pixel_max: int,
    target_count: int = TIME_TICK_TARGET,
) -> list[TickMark]:
    """
    Vertical grid lines for the part of the time axis the viewport shows.

    The step is computed from the visible span, so zooming in yields finer
    ticks. Labels are the tick times truncated to integers.
    """
    times = table.times()
    if times.size < 2:
        return []

    range_abs = float(times.max() - times.min())
    if range_abs <= 0:
        return []

    range_visible = range_abs * viewport.zoom
    px_per_unit = (pixel_max - pixel_min) / range_visible
    step = compute_step(range_visible, target_count)
    start = range_abs * viewport.offset + float(times[0])
    end = start + range_visible

    ticks: list[TickMark] = []
    index = math.ceil(start / step - _SNAP)
    tick = index * step
    while tick < end:
        ticks.append(
            TickMark(
                pixel_position=pixel_min + round_half_up((tick - start) * px_per_unit),
                label=str(int(tick)),
            )
        )
        index += 1
        tick = index * step
    return ticks


def value_grid(
    table: SensorTable,
    column: int,
    pixel_min: int,
    pixel_max: int,
    target_count: int = VALUE_TICK_TARGET,
) -> list[TickMark]:
    """
    Horizontal grid lines for one value column.

    The scale is global for the column (it does not follow the zoom window)
    so it always matches the resampled points. Values with magnitude above 5
    are labelled as integers, smaller ones with two decimals.
    """
    extent = table.value_extent(column)
    if extent is None:
        return []

    low, high = extent
    length = high - low
    if length <= 0:
        return []

    px_per_unit = (pixel_max - pixel_min) / length
    step = compute_step(length, target_count)
    first = high % step
    if step - first < step * _SNAP:
        first = 0.0

    ticks: list[TickMark] = []
    k = 0
    offset = first
    while offset < length:
        value = high - offset
        ticks.append(
            TickMark(
                pixel_position=pixel_min + round_half_up(offset * px_per_unit),
                label=_value_label(value),
            )
        )
        k += 1
        offset = first + k * step
    return ticks


def _value_label(value: float) -> str:
    if abs(value) > 5:
        return str(round_half_up(value))
    return f"{value:.2f}"


__all__ = ["TIME_TICK_TARGET", "VALUE_TICK_TARGET", "time_grid", "value_grid"]
