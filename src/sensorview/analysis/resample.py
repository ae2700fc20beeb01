"""
Nearest-neighbour resampling of one sensor channel into pixel space.

The pipeline is split into small stages that each take arrays and return new
arrays, so every step can be tested on its own:

1. :func:`column_points` – raw ``(time, value)`` pairs for a channel.
2. :func:`rescale` – values into the vertical pixel range (global scale).
3. :func:`crop_window` – keep the visible time window, with the two boundary
   samples replaced by points interpolated exactly on the window edges.
4. :func:`rescale` – times into the horizontal pixel range.
5. :func:`nearest_per_pixel` – at most one point per pixel column.

:func:`resample` chains them and appends the last cropped sample so the right
edge of the window is always drawn.
"""

from __future__ import annotations

import numpy as np

from ..core.models import Point
from ..core.sensor_table import SensorTable
from ..core.viewport import ViewportState

Arrays = tuple[np.ndarray, np.ndarray]


def column_points(table: SensorTable, column: int) -> Arrays:
    """Return writable copies of the time axis and one value channel."""
    return np.array(table.times(), dtype=np.float64), np.array(
        table.column(column), dtype=np.float64
    )


def rescale(
    values: np.ndarray,
    new_min: float,
    new_max: float,
    *,
    cur_min: float | None = None,
    cur_max: float | None = None,
) -> np.ndarray:
    """
    Linearly map ``values`` from ``[cur_min, cur_max]`` onto ``[new_min, new_max]``.

    The current range defaults to the min/max of ``values``. A degenerate
    range (all values equal) maps everything onto the middle of the target.
    """
    values = np.asarray(values, dtype=np.float64)
    if values.size == 0:
        return values.copy()
    lo = float(values.min()) if cur_min is None else float(cur_min)
    hi = float(values.max()) if cur_max is None else float(cur_max)
    if hi == lo:
        return np.full(values.shape, (new_min + new_max) / 2.0)
    return (values - lo) / (hi - lo) * (new_max - new_min) + new_min


def interpolate(x: float, x0: float, y0: float, x1: float, y1: float) -> float:
    """Value at ``x`` on the line through ``(x0, y0)`` and ``(x1, y1)``."""
    if x1 == x0:
        return y0
    slope = (y1 - y0) / (x1 - x0)
    return slope * (x - x0) + y0


def crop_window(xs: np.ndarray, ys: np.ndarray, lower: float, upper: float) -> Arrays:
    """
    Keep the samples inside ``[lower, upper)`` plus one sample on each side.

    The last sample before ``lower`` and the first sample at or after
    ``upper`` are retained and then moved onto the window edges by linear
    interpolation with their inner neighbours. With fewer than two samples
    left nothing is interpolated.
    """
    kept_x: list[float] = []
    kept_y: list[float] = []
    for x, y in zip(xs.tolist(), ys.tolist()):
        if x < lower:
            if kept_x:
                kept_x[0], kept_y[0] = x, y
            else:
                kept_x.append(x)
                kept_y.append(y)
        else:
            kept_x.append(x)
            kept_y.append(y)
            if x >= upper:
                break

    if len(kept_x) > 1:
        first_y = interpolate(lower, kept_x[0], kept_y[0], kept_x[1], kept_y[1])
        last_y = interpolate(upper, kept_x[-2], kept_y[-2], kept_x[-1], kept_y[-1])
        kept_x[0], kept_y[0] = lower, first_y
        kept_x[-1], kept_y[-1] = upper, last_y

    return np.asarray(kept_x, dtype=np.float64), np.asarray(kept_y, dtype=np.float64)


def nearest_per_pixel(
    xs: np.ndarray, ys: np.ndarray, pixel_count: int, height: float
) -> list[Point]:
    """
    Pick the sample closest to each pixel column ``0 .. pixel_count - 1``.

    A sample is a candidate for column ``i`` when ``|x - i| < 0.5``; on ties
    the earlier sample wins. Columns without candidates are skipped. The
    returned ``y`` is flipped (``height - y``) because screen rows grow
    downwards.
    """
    if xs.size == 0 or pixel_count <= 0:
        return []

    nearest = np.rint(xs)
    distance = np.abs(xs - nearest)
    valid = (distance < 0.5) & (nearest >= 0) & (nearest < pixel_count)
    candidates = np.flatnonzero(valid)
    if candidates.size == 0:
        return []

    # primary key: pixel column, then distance, then sample order
    order = np.lexsort((candidates, distance[candidates], nearest[candidates]))
    ranked = candidates[order]
    _, first = np.unique(nearest[ranked], return_index=True)
    chosen = ranked[first]

    return [Point(float(xs[i]), float(height - ys[i])) for i in chosen]


def resample(
    table: SensorTable,
    viewport: ViewportState,
    column: int,
    min_x: int,
    max_x: int,
    min_y: int,
    max_y: int,
) -> list[Point]:
    """
    Pixel-space polyline for ``column`` as seen through ``viewport``.

    Points are ordered by increasing ``x`` and no two share a pixel column.
    Empty tables yield an empty list.
    """
    table.check_column(column)
    xs, ys = column_points(table, column)
    if xs.size == 0:
        return []

    # Y is scaled before cropping so boundary interpolation happens in pixels.
    ys = rescale(ys, min_y, max_y)
    lower, upper = viewport.visible_window(float(xs[0]), float(xs[-1]))
    xs, ys = crop_window(xs, ys, lower, upper)
    xs = rescale(xs, min_x, max_x)
    if xs.size == 1:
        xs = np.full(1, float(min_x))

    height = max_y - min_y
    points = nearest_per_pixel(xs, ys, max_x, height)
    if xs.size > 1:
        points.append(Point(float(xs[-1]), float(height - ys[-1])))
    return points


__all__ = [
    "column_points",
    "crop_window",
    "interpolate",
    "nearest_per_pixel",
    "rescale",
    "resample",
]
