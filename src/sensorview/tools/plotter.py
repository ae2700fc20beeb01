#!/usr/bin/env python3
"""
Matplotlib front-end for sensor log charts.

Renders the frames computed by :class:`~sensorview.core.session.ChartSession`
as-is: the axes use pixel coordinates with the origin in the top-left corner,
so points and tick positions go straight to Matplotlib without any further
scaling. Zoom and pan gestures can be replayed from the command line before
drawing, e.g.::

    sensorview-plot -f walk.csv --column 1 --select 200:150 --zoom-out 2 -o walk.png

Without ``--file`` the newest ``*.csv`` under ``data/`` or the current
directory is used.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from ..config.runtime import RenderOptions, load_config
from ..core.models import ChartFrame
from ..core.session import ChartSession, Selection
from ..dataio.log_loader import SensorLogFormatError

logger = logging.getLogger(__name__)

DPI = 100
GRID_DASHES = (0, (4, 4))
MARKER_COLOR = "tab:orange"
SELECTION_COLOR = "tab:blue"


# --------------------------------------------------------------------------- # helpers
def find_latest_log(search_roots: Sequence[Path]) -> Optional[Path]:
    candidates: list[Path] = []
    for root in search_roots:
        if root.exists():
            candidates.extend(root.glob("*.csv"))
    if not candidates:
        return None
    return max(candidates, key=lambda p: p.stat().st_mtime)


def _parse_span(text: str) -> Selection:
    try:
        start, length = (int(part) for part in text.split(":", 1))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected START:LENGTH in pixels, got {text!r}") from exc
    return Selection(start, length)


# --------------------------------------------------------------------------- # drawing
def draw_frame(
    ax: Axes,
    frame: ChartFrame,
    width: int,
    height: int,
    options: RenderOptions,
    *,
    highlight: Selection | None = None,
    highlight_color: str = MARKER_COLOR,
) -> None:
    """Paint one chart panel onto ``ax``."""
    ax.clear()
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_xticks([])
    ax.set_yticks([])

    if options.show_grid:
        for tick in frame.vertical_ticks:
            ax.axvline(tick.pixel_position, color="gray", linewidth=1, linestyle=GRID_DASHES)
        for tick in frame.horizontal_ticks:
            ax.axhline(tick.pixel_position, color="gray", linewidth=1, linestyle=GRID_DASHES)

    if options.show_labels:
        for tick in frame.vertical_ticks:
            ax.text(tick.pixel_position, height, tick.label, fontsize=7, va="bottom")
        for tick in frame.horizontal_ticks:
            ax.text(0, tick.pixel_position, tick.label, fontsize=7, va="bottom")

    if len(frame.points) > 1:
        xs = [p.x for p in frame.points]
        ys = [p.y for p in frame.points]
        style = {"color": "black", "linewidth": 1}
        if options.show_markers:
            style.update(marker="o", markersize=options.marker_size, fillstyle="none")
        ax.plot(xs, ys, **style)

    if highlight is not None and not highlight.is_empty:
        ax.axvspan(
            highlight.start,
            highlight.start + highlight.length,
            color=highlight_color,
            alpha=0.3,
        )


def build_figure(
    session: ChartSession,
    width: int,
    height: int,
    options: RenderOptions | None = None,
) -> tuple[Figure, dict[str, Axes]]:
    """Return a figure with the overview (if visible) above the detail chart."""
    options = options or session.config.render
    frames = session.render(width, height)
    show_overview = session.overview_visible(2 * height)
    names = ["overview", "detail"] if show_overview else ["detail"]

    fig, axes_list = plt.subplots(
        len(names), 1, figsize=(width / DPI, len(names) * height / DPI), dpi=DPI, squeeze=False
    )
    axes = {name: axes_list[i][0] for i, name in enumerate(names)}
    title = session.title
    if session.selected_column is not None:
        title += f" [{session.column_labels()[session.selected_column]}]"
    fig.suptitle(title)

    if frames:
        if show_overview:
            draw_frame(
                axes["overview"],
                frames["overview"],
                width,
                height,
                options,
                highlight=session.overview_marker(width),
            )
        draw_frame(
            axes["detail"],
            frames["detail"],
            width,
            height,
            options,
            highlight=session.selection,
            highlight_color=SELECTION_COLOR,
        )
    return fig, axes


# --------------------------------------------------------------------------- # CLI
def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Plot a wearable sensor log with an overview and a zoomable detail chart."
    )
    parser.add_argument("-f", "--file", type=str, help="Sensor log to plot (newest *.csv if omitted).")
    parser.add_argument("-c", "--column", type=int, default=0, help="Value column to plot (default: 0).")
    parser.add_argument("--config", type=str, help="YAML file with viewer settings.")
    parser.add_argument("--width", type=int, default=900, help="Chart width in pixels (default: 900).")
    parser.add_argument("--height", type=int, default=300, help="Chart height in pixels (default: 300).")
    parser.add_argument(
        "--select",
        type=_parse_span,
        action="append",
        default=[],
        metavar="START:LENGTH",
        help="Zoom the detail chart into a pixel span; may be repeated.",
    )
    parser.add_argument("--zoom-in", type=int, default=0, help="Number of centre zoom-in steps.")
    parser.add_argument("--zoom-out", type=int, default=0, help="Number of zoom-out steps.")
    parser.add_argument("--scroll", type=float, help="Pan the detail chart to this fraction of the recording.")
    parser.add_argument("--markers", action="store_true", help="Draw a circle at every plotted point.")
    parser.add_argument("--no-grid", action="store_true", help="Hide the dashed grid.")
    parser.add_argument("-o", "--output", type=str, help="Write a PNG instead of opening a window.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.file:
        log_path = Path(args.file).expanduser().resolve()
        if not log_path.exists():
            parser.error(f"Log file not found: {log_path}")
    else:
        log_path = find_latest_log([Path.cwd() / "data", Path.cwd()])
        if log_path is None:
            parser.error("No *.csv logs found in data/ or the current directory; use --file.")
        logger.info("Using latest log: %s", log_path)

    try:
        config = load_config(args.config)
        session = ChartSession.from_file(log_path, config)
    except (OSError, SensorLogFormatError, ValueError) as exc:
        parser.error(f"Could not open {log_path}: {exc}")

    if not session.select_column(args.column):
        parser.error(f"Column {args.column} not in {session.title} ({session.table.column_count} columns)")

    for span in args.select:
        session.selection = span
        session.zoom_in(args.width)
    for _ in range(args.zoom_in):
        session.zoom_in(args.width)
    for _ in range(args.zoom_out):
        session.zoom_out()
    if args.scroll is not None:
        session.scroll(int(args.scroll * 1000), 1000)

    render = session.config.render
    options = RenderOptions(
        show_markers=render.show_markers or args.markers,
        show_grid=render.show_grid and not args.no_grid,
        show_labels=render.show_labels,
        marker_size=render.marker_size,
    )
    fig, _axes = build_figure(session, args.width, args.height, options)

    if args.output:
        fig.savefig(args.output, dpi=DPI)
        logger.info("Chart written to %s", args.output)
        return 0

    fig.canvas.manager.set_window_title(f"SensorView - {session.title}")
    try:
        plt.show()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
