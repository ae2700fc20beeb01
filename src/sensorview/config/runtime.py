"""Runtime configuration for the chart viewer, loadable from YAML."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping

import yaml

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RenderOptions:
    """Display toggles handed to the renderer; the core never reads them."""

    show_markers: bool = False
    show_grid: bool = True
    show_labels: bool = True
    marker_size: int = 6

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> RenderOptions:
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        return cls(**{key: data[key] for key in data.keys() & known})


@dataclass(slots=True)
class ViewerConfig:
    """
    Tuning knobs for chart panels and the sensor log reader.

    The overview panel starts showing the whole recording and the detail panel
    the first half of it.
    """

    zoom_step: float = 0.05
    time_tick_target: int = 12
    value_tick_target: int = 8

    overview_offset: float = 0.0
    overview_zoom: float = 1.0
    detail_offset: float = 0.0
    detail_zoom: float = 0.5

    # Window height (px) below which the overview panel is hidden
    min_overview_height: int = 320
    delimiter: str = ";"

    render: RenderOptions = field(default_factory=RenderOptions)

    def sanitized(self) -> ViewerConfig:
        """Return a copy with every limit applied."""
        step = min(0.25, max(1e-4, float(self.zoom_step)))
        overview_zoom = min(1.0, max(2 * step, float(self.overview_zoom)))
        detail_zoom = min(1.0, max(2 * step, float(self.detail_zoom)))
        render = self.render
        if isinstance(render, Mapping):
            render = RenderOptions.from_mapping(render)
        return ViewerConfig(
            zoom_step=step,
            time_tick_target=max(1, int(self.time_tick_target)),
            value_tick_target=max(1, int(self.value_tick_target)),
            overview_offset=min(1.0 - overview_zoom, max(0.0, float(self.overview_offset))),
            overview_zoom=overview_zoom,
            detail_offset=min(1.0 - detail_zoom, max(0.0, float(self.detail_offset))),
            detail_zoom=detail_zoom,
            min_overview_height=max(0, int(self.min_overview_height)),
            delimiter=str(self.delimiter) or ";",
            render=RenderOptions(
                show_markers=bool(render.show_markers),
                show_grid=bool(render.show_grid),
                show_labels=bool(render.show_labels),
                marker_size=max(1, int(render.marker_size)),
            ),
        )


# YAML sections whose keys are merged into the top level of ViewerConfig.
_SECTIONS = ("viewer", "chart")


def _normalize_mapping(data: Mapping[str, Any]) -> dict[str, Any]:
    """
    Turn a parsed YAML document into :class:`ViewerConfig` keyword arguments.

    Keys from the ``viewer``/``chart`` sections are lifted to the top level
    (top-level keys win), ``render`` becomes a :class:`RenderOptions` and
    anything :class:`ViewerConfig` does not know is dropped.
    """
    merged: dict[str, Any] = {}
    for section in _SECTIONS:
        block = data.get(section)
        if isinstance(block, Mapping):
            merged.update(block)
    merged.update((key, value) for key, value in data.items() if key not in _SECTIONS)

    known = {f.name for f in fields(ViewerConfig)}
    dropped = sorted(str(key) for key in merged.keys() - known)
    if dropped:
        logger.debug("Ignoring unknown viewer settings: %s", ", ".join(dropped))
    kwargs = {key: merged[key] for key in merged.keys() & known}
    if "render" in kwargs:
        render = kwargs["render"]
        if not isinstance(render, RenderOptions):
            kwargs["render"] = RenderOptions.from_mapping(render)
    return kwargs


def config_from_mapping(data: Mapping[str, Any] | None) -> ViewerConfig:
    """Build a sanitized :class:`ViewerConfig` from ``data``."""
    if not data:
        return ViewerConfig()
    return ViewerConfig(**_normalize_mapping(data)).sanitized()


def load_config(path: str | Path | None) -> ViewerConfig:
    """
    Load viewer settings from a YAML file.

    ``None`` or a missing file give the defaults; an empty file does too.
    """
    if path is None:
        return ViewerConfig()
    cfg_path = Path(path)
    if not cfg_path.exists():
        logger.debug("No viewer config at %s, using defaults", cfg_path)
        return ViewerConfig()
    with cfg_path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
    if not isinstance(raw, Mapping):
        raise ValueError(f"Expected mapping in {cfg_path}, got {type(raw).__name__}")
    return config_from_mapping(raw)


__all__ = ["RenderOptions", "ViewerConfig", "config_from_mapping", "load_config"]
