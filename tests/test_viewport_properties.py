"""Property-based checks for viewport transitions.

Random gesture sequences must keep the window inside the data, and enough
zoom-out steps must always land exactly on the full view.
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from sensorview.core.viewport import MIN_ZOOM_STEP, ViewportState

UNIT = st.floats(min_value=0.0, max_value=1.0, allow_nan=False)


@st.composite
def selections(draw):
    start = draw(UNIT)
    length = draw(st.floats(min_value=0.0, max_value=1.0 - start, allow_nan=False))
    return ("select", start, length)


GESTURES = st.one_of(
    st.just(("center",)),
    st.just(("out",)),
    selections(),
    st.tuples(st.just("pan"), st.floats(min_value=-0.5, max_value=1.5, allow_nan=False)),
)


def _apply(vp: ViewportState, gesture: tuple) -> None:
    kind = gesture[0]
    if kind == "center":
        vp.zoom_in_at_center()
    elif kind == "out":
        vp.zoom_out()
    elif kind == "select":
        vp.zoom_in_at_selection(gesture[1], gesture[2])
    else:
        vp.pan(gesture[1])


def _assert_in_bounds(vp: ViewportState) -> None:
    assert vp.offset >= 0.0
    assert vp.zoom > 0.0
    assert vp.offset + vp.zoom <= 1.0 + 1e-9


@settings(max_examples=200)
@given(st.lists(GESTURES, max_size=60))
def test_gestures_keep_viewport_in_bounds(gestures: list[tuple]) -> None:
    vp = ViewportState(0.0, 1.0)
    for gesture in gestures:
        _apply(vp, gesture)
        _assert_in_bounds(vp)


@settings(max_examples=200)
@given(st.lists(GESTURES, max_size=60))
def test_repeated_zoom_out_reaches_full_view(gestures: list[tuple]) -> None:
    vp = ViewportState(0.0, 1.0)
    for gesture in gestures:
        _apply(vp, gesture)

    for _ in range(int(1 / MIN_ZOOM_STEP) + 5):
        vp.zoom_out()
        _assert_in_bounds(vp)
    assert (vp.offset, vp.zoom) == (0.0, 1.0)

    vp.zoom_out()
    assert (vp.offset, vp.zoom) == (0.0, 1.0)


@given(st.integers(min_value=0, max_value=40))
def test_center_zoom_never_goes_below_floor(calls: int) -> None:
    vp = ViewportState(0.0, 1.0)
    for _ in range(calls):
        vp.zoom_in_at_center()
        assert vp.zoom >= vp.min_zoom - 1e-9
        _assert_in_bounds(vp)


@given(
    zoom=st.floats(min_value=2 * MIN_ZOOM_STEP, max_value=1.0, exclude_max=True),
    slack=st.floats(min_value=0.0, max_value=1e-6),
)
def test_zoom_out_near_right_edge(zoom: float, slack: float) -> None:
    offset = max(0.0, 1.0 - zoom - slack)
    vp = ViewportState(offset, zoom)
    for _ in range(3):
        vp.zoom_out()
        _assert_in_bounds(vp)
