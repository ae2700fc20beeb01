"""
Headless controller for one chart window.

A window shows the same :class:`SensorTable` twice: an *overview* panel with
the whole recording and a *detail* panel the user zooms and scrolls. This
module keeps the state behind those gestures (selected channel, selection
rectangle, overview visibility) and translates pixel positions coming from
the toolkit into the normalized fractions the viewport works with. It never
draws anything itself.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..config.runtime import ViewerConfig
from ..dataio.log_loader import load_sensor_log
from .chart_model import ChartModel
from .models import ChartFrame
from .sensor_table import SensorTable

logger = logging.getLogger(__name__)

AXIS_LABELS = ("X", "Y", "Z")


@dataclass
class Selection:
    """Horizontal span (in pixels) highlighted on a chart; ``length < 0`` means none."""

    start: int = 0
    length: int = -1

    @property
    def is_empty(self) -> bool:
        return self.start < 0 or self.length < 0

    def reset(self) -> None:
        self.start = 0
        self.length = -1

    def fractions(self, width: float) -> tuple[float, float]:
        """Return ``(start, length)`` as fractions of ``width``, clipped to the panel."""
        if width <= 0:
            raise ValueError(f"width must be > 0, got {width}")
        start = min(max(self.start, 0), width)
        end = min(max(self.start + self.length, start), width)
        return start / width, (end - start) / width


class ChartSession:
    """Overview + detail chart pair over one recording."""

    def __init__(self, table: SensorTable, config: ViewerConfig | None = None) -> None:
        self.config = (config or ViewerConfig()).sanitized()
        cfg = self.config
        self.table = table
        self.overview = ChartModel(
            table,
            cfg.overview_offset,
            cfg.overview_zoom,
            step=cfg.zoom_step,
            time_tick_target=cfg.time_tick_target,
            value_tick_target=cfg.value_tick_target,
        )
        self.detail = ChartModel(
            table,
            cfg.detail_offset,
            cfg.detail_zoom,
            step=cfg.zoom_step,
            time_tick_target=cfg.time_tick_target,
            value_tick_target=cfg.value_tick_target,
        )
        self.selected_column: int | None = None
        self.selection = Selection()
        self.overview_hidden = False

    @classmethod
    def from_file(cls, path: str | Path, config: ViewerConfig | None = None) -> ChartSession:
        cfg = (config or ViewerConfig()).sanitized()
        return cls(load_sensor_log(path, delimiter=cfg.delimiter), cfg)

    @property
    def title(self) -> str:
        return self.table.name

    def column_labels(self) -> list[str]:
        count = self.table.column_count
        return [AXIS_LABELS[i] if i < len(AXIS_LABELS) else str(i + 1) for i in range(count)]

    # ---------------------------------------------------------------- gestures
    def select_column(self, index: int) -> bool:
        """Select the channel to plot; invalid indices leave the selection unchanged."""
        if not 0 <= index < self.table.column_count:
            logger.warning("Ignoring selection of column %d in %s", index, self.title)
            return False
        self.selected_column = index
        self.selection.reset()
        return True

    def zoom_in(self, width: float) -> None:
        """Zoom the detail chart into the selection, or at its centre if none."""
        if self.selection.is_empty:
            self.detail.zoom_in_at_center()
        else:
            start, length = self.selection.fractions(width)
            self.detail.zoom_in_at_selection(start, length)
        self._viewport_changed()

    def zoom_out(self) -> None:
        self.detail.zoom_out()
        self._viewport_changed()

    def scroll(self, value: int, maximum: int) -> None:
        """Pan the detail chart to a scrollbar position."""
        if maximum <= 0:
            logger.debug("Ignoring scroll with maximum=%r", maximum)
            return
        self.detail.pan(value / float(maximum))
        self._viewport_changed()

    def toggle_overview(self) -> None:
        self.overview_hidden = not self.overview_hidden

    # ---------------------------------------------------------------- queries
    def overview_visible(self, window_height: int) -> bool:
        if window_height < self.config.min_overview_height:
            return False
        return not self.overview_hidden

    def scrollbar(self, maximum: int) -> tuple[int, int]:
        """Scrollbar ``(position, extent)`` matching the detail viewport."""
        return int(maximum * self.detail.offset), int(maximum * self.detail.zoom)

    def overview_marker(self, width: int) -> Selection:
        """Span of the overview chart that the detail chart currently shows."""
        return Selection(int(self.detail.offset * width), int(self.detail.zoom * width))

    def render(
        self,
        width: int,
        height: int,
        *,
        overview_size: tuple[int, int] | None = None,
    ) -> dict[str, ChartFrame]:
        """
        Frames for both panels, keyed ``"overview"`` and ``"detail"``.

        Nothing is rendered until a column has been selected.
        """
        column = self.selected_column
        if column is None:
            return {}
        ov_width, ov_height = overview_size or (width, height)
        return {
            "overview": self.overview.frame(column, 0, ov_width, 0, ov_height),
            "detail": self.detail.frame(column, 0, width, 0, height),
        }

    def _viewport_changed(self) -> None:
        self.selection.reset()
        logger.debug("detail viewport now %r", self.detail.viewport)


__all__ = ["AXIS_LABELS", "ChartSession", "Selection"]
