"""Shared value types for chart frames, points and tick marks."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class TickMark:
    """One grid line: where to draw it (pixels) and the text next to it."""

    pixel_position: int
    label: str


@dataclass
class ChartFrame:
    """Everything the presentation layer needs to paint one chart panel."""

    points: list[Point] = field(default_factory=list)
    vertical_ticks: list[TickMark] = field(default_factory=list)
    horizontal_ticks: list[TickMark] = field(default_factory=list)
