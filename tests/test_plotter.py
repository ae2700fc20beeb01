from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from sensorview.config.runtime import RenderOptions  # noqa: E402
from sensorview.core.models import ChartFrame, Point, TickMark  # noqa: E402
from sensorview.core.session import ChartSession, Selection  # noqa: E402
from sensorview.core.sensor_table import SensorTable  # noqa: E402
from sensorview.tools import plotter  # noqa: E402


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


def _frame() -> ChartFrame:
    return ChartFrame(
        points=[Point(0.0, 50.0), Point(50.0, 10.0), Point(100.0, 90.0)],
        vertical_ticks=[TickMark(0, "0"), TickMark(50, "5")],
        horizontal_ticks=[TickMark(20, "8"), TickMark(60, "4"), TickMark(90, "1.00")],
    )


def _session() -> ChartSession:
    table = SensorTable.from_rows(
        "walk.csv", 2, ((float(t), (float(t % 7), float(t))) for t in range(60))
    )
    session = ChartSession(table)
    session.select_column(0)
    return session


def test_draw_frame_with_grid_and_labels() -> None:
    fig, ax = plt.subplots()
    plotter.draw_frame(ax, _frame(), 100, 100, RenderOptions(), highlight=Selection(10, 20))

    # five grid lines plus the data line
    assert len(ax.lines) == 6
    assert len(ax.texts) == 5
    assert len(ax.patches) == 1
    assert ax.get_ylim() == (100.0, 0.0)


def test_draw_frame_without_decorations() -> None:
    fig, ax = plt.subplots()
    options = RenderOptions(show_grid=False, show_labels=False, show_markers=True, marker_size=3)
    plotter.draw_frame(ax, _frame(), 100, 100, options, highlight=Selection())

    assert len(ax.lines) == 1
    assert ax.lines[0].get_marker() == "o"
    assert not ax.texts
    assert not ax.patches


def test_draw_frame_skips_line_for_single_point() -> None:
    fig, ax = plt.subplots()
    frame = ChartFrame(points=[Point(0.0, 5.0)])
    plotter.draw_frame(ax, frame, 100, 100, RenderOptions(show_grid=False))
    assert not ax.lines


def test_build_figure_includes_overview_when_tall_enough() -> None:
    session = _session()
    fig, axes = plotter.build_figure(session, 400, 200)
    assert set(axes) == {"overview", "detail"}
    assert fig._suptitle.get_text() == "walk.csv [X]"


def test_build_figure_without_overview() -> None:
    session = _session()
    session.toggle_overview()
    _fig, axes = plotter.build_figure(session, 400, 200)
    assert set(axes) == {"detail"}


def test_parse_span() -> None:
    assert plotter._parse_span("100:50") == Selection(100, 50)
    with pytest.raises(Exception):
        plotter._parse_span("oops")


def test_find_latest_log(tmp_path) -> None:
    assert plotter.find_latest_log([tmp_path / "missing"]) is None
    (tmp_path / "only.csv").write_text("t;v\n0;1\n", encoding="utf-8")
    assert plotter.find_latest_log([tmp_path]) == tmp_path / "only.csv"


def test_main_writes_png(tmp_path) -> None:
    log = tmp_path / "walk.csv"
    rows = "\n".join(f"10;{i % 5};{i};{-i}" for i in range(40))
    log.write_text("t;x;y;z\n" + rows + "\n", encoding="utf-8")
    out = tmp_path / "walk.png"

    code = plotter.main(
        ["-f", str(log), "-c", "2", "--select", "100:200", "--zoom-out", "1", "-o", str(out)]
    )

    assert code == 0
    assert out.exists() and out.stat().st_size > 0


def test_main_rejects_unknown_column(tmp_path) -> None:
    log = tmp_path / "pulse.csv"
    log.write_text("t;bpm\n0;60\n10;61\n", encoding="utf-8")
    with pytest.raises(SystemExit):
        plotter.main(["-f", str(log), "-c", "4", "-o", str(tmp_path / "x.png")])
