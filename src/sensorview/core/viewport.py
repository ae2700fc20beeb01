"""Normalized time-axis viewport (offset + zoom) and its transitions."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

MIN_ZOOM_STEP = 0.05
BOUNDS_EPSILON = 1e-9


class ViewportState:
    """
    Visible window over the time axis, expressed as fractions of the full range.

    ``offset`` is the fraction skipped from the start and ``zoom`` the fraction
    shown from there. After every transition ``offset >= 0`` and
    ``offset + zoom <= 1`` hold; they are restored by clamping, never by
    rejecting the gesture. Degenerate requests (zoom floor reached, tiny
    selections, pan outside ``[0, 1]``) leave the state unchanged.

    Instances are owned by a single chart panel and mutated from the thread
    that also renders it.
    """

    __slots__ = ("_offset", "_zoom", "_initial", "step")

    def __init__(self, offset: float = 0.0, zoom: float = 1.0, *, step: float = MIN_ZOOM_STEP) -> None:
        if not 0.0 < zoom <= 1.0:
            raise ValueError(f"zoom must be in (0, 1], got {zoom}")
        if not 0.0 <= offset <= 1.0:
            raise ValueError(f"offset must be in [0, 1], got {offset}")
        if not 0.0 < step < 0.5:
            raise ValueError(f"step must be in (0, 0.5), got {step}")
        self._offset = float(offset)
        self._zoom = float(zoom)
        self._initial = (self._offset, self._zoom)
        self.step = float(step)

    @property
    def offset(self) -> float:
        return self._offset

    @property
    def zoom(self) -> float:
        return self._zoom

    @property
    def min_zoom(self) -> float:
        """Smallest zoom reachable through :meth:`zoom_in_at_center`."""
        return 2.0 * self.step

    @property
    def is_full_view(self) -> bool:
        return self._offset == 0.0 and self._zoom == 1.0

    # ------------------------------------------------------------ transitions
    def zoom_in_at_center(self) -> None:
        """Shrink the window by one step, keeping its centre in place."""
        if self._zoom > self.min_zoom + BOUNDS_EPSILON:
            self._zoom -= self.step
            self._offset += self.step / 2.0
        else:
            logger.debug("zoom floor reached (zoom=%.4f)", self._zoom)
        self._enforce_bounds()

    def zoom_in_at_selection(self, start: float, length: float) -> None:
        """
        Zoom into a sub-range of the current window.

        Parameters
        ----------
        start:
            Start of the selection as a fraction of the current window.
        length:
            Length of the selection as a fraction of the current window.
        """
        if not (0.0 <= start <= 1.0 and 0.0 <= length <= 1.0):
            raise ValueError(
                f"selection must lie in [0, 1], got start={start}, length={length}"
            )

        if self._zoom * length > self.step / 100.0:
            self._offset += self._zoom * start
            self._zoom *= length
        else:
            logger.debug("ignoring selection of %.6f of the time range", self._zoom * length)
        self._enforce_bounds()

    def zoom_out(self) -> None:
        """Grow the window by one step, sliding it back inside ``[0, 1]``."""
        if self._zoom < 1.0:
            self._zoom += self.step
            self._offset -= self.step / 2.0

            # Order matters: the last clamp relies on the first two.
            if self._offset + self._zoom > 1.0:
                self._offset -= self._offset + self._zoom - 1.0
            if self._offset < 0.0:
                self._zoom += -self._offset
                self._offset = 0.0
            if self._zoom > 1.0:
                if self._offset - (self._zoom - 1.0) >= 0.0:
                    self._offset -= self._zoom - 1.0
                    self._zoom = 1.0
                else:
                    self._offset = 0.0
                    self._zoom = 1.0
        self._enforce_bounds()

    def pan(self, fraction: float) -> None:
        """Move the window start to ``fraction`` of the time range."""
        if not 0.0 <= fraction <= 1.0:
            logger.debug("ignoring pan to %r", fraction)
            return
        self._offset = min(float(fraction), 1.0 - self._zoom)
        self._enforce_bounds()

    def reset(self) -> None:
        self._offset, self._zoom = self._initial

    # ---------------------------------------------------------------- queries
    def visible_window(self, start: float, end: float) -> tuple[float, float]:
        """Map the window onto the absolute span ``[start, end]``."""
        length = end - start
        lower = length * self._offset + start
        return lower, lower + length * self._zoom

    def _enforce_bounds(self) -> None:
        if self._zoom >= 1.0:
            self._offset, self._zoom = 0.0, 1.0
            return
        if self._offset + self._zoom > 1.0 + BOUNDS_EPSILON:
            logger.debug("sliding %r back inside the time range", self)
        if self._offset + self._zoom > 1.0:
            self._offset = 1.0 - self._zoom
        if self._offset < 0.0:
            self._offset = 0.0

    def __repr__(self) -> str:
        return f"ViewportState(offset={self._offset:.6g}, zoom={self._zoom:.6g})"


__all__ = ["BOUNDS_EPSILON", "MIN_ZOOM_STEP", "ViewportState"]
