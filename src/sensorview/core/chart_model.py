"""One chart panel's data side: a shared table seen through its own viewport."""

from __future__ import annotations

import logging

from ..analysis import grid
from ..analysis.resample import resample
from ..tools.debug import time_block
from .models import ChartFrame, Point, TickMark
from .sensor_table import SensorTable
from .viewport import MIN_ZOOM_STEP, ViewportState

logger = logging.getLogger(__name__)


class ChartModel:
    """
    Pairs a read-only :class:`SensorTable` with a private :class:`ViewportState`.

    The presentation layer drives the viewport transitions from user gestures
    and calls :meth:`frame` with its current pixel rectangle on every redraw.
    """

    def __init__(
        self,
        table: SensorTable,
        offset: float = 0.0,
        zoom: float = 1.0,
        *,
        step: float = MIN_ZOOM_STEP,
        time_tick_target: int = grid.TIME_TICK_TARGET,
        value_tick_target: int = grid.VALUE_TICK_TARGET,
    ) -> None:
        self.table = table
        self.viewport = ViewportState(offset, zoom, step=step)
        self.time_tick_target = time_tick_target
        self.value_tick_target = value_tick_target

    @property
    def column_count(self) -> int:
        return self.table.column_count

    @property
    def offset(self) -> float:
        return self.viewport.offset

    @property
    def zoom(self) -> float:
        return self.viewport.zoom

    # ------------------------------------------------------------ transitions
    def zoom_in_at_center(self) -> None:
        self.viewport.zoom_in_at_center()

    def zoom_in_at_selection(self, start: float, length: float) -> None:
        self.viewport.zoom_in_at_selection(start, length)

    def zoom_out(self) -> None:
        self.viewport.zoom_out()

    def pan(self, fraction: float) -> None:
        self.viewport.pan(fraction)

    # ---------------------------------------------------------------- queries
    def time_grid(self, pixel_min: int, pixel_max: int) -> list[TickMark]:
        return grid.time_grid(
            self.table, self.viewport, pixel_min, pixel_max, self.time_tick_target
        )

    def value_grid(self, column: int, pixel_min: int, pixel_max: int) -> list[TickMark]:
        return grid.value_grid(
            self.table, column, pixel_min, pixel_max, self.value_tick_target
        )

    def points(self, column: int, min_x: int, max_x: int, min_y: int, max_y: int) -> list[Point]:
        return resample(self.table, self.viewport, column, min_x, max_x, min_y, max_y)

    def frame(self, column: int, min_x: int, max_x: int, min_y: int, max_y: int) -> ChartFrame:
        """Compute points and both tick lists for one redraw."""
        self.table.check_column(column)
        with time_block(f"frame {self.table.name}[{column}]", log=logger):
            return ChartFrame(
                points=self.points(column, min_x, max_x, min_y, max_y),
                vertical_ticks=self.time_grid(min_x, max_x),
                horizontal_ticks=self.value_grid(column, min_y, max_y),
            )

    def __repr__(self) -> str:
        return f"ChartModel({self.table!r}, {self.viewport!r})"
