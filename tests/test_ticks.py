from __future__ import annotations

import math

import pytest

from sensorview.analysis.ticks import compute_step, round_half_up


def _is_nice(step: float) -> bool:
    exponent = math.floor(math.log10(step) + 1e-9)
    mantissa = step / 10.0**exponent
    return any(math.isclose(mantissa, nice, rel_tol=1e-9) for nice in (1.0, 2.0, 5.0, 10.0))


def test_range_already_on_a_nice_magnitude() -> None:
    assert compute_step(120, 12) == 10


@pytest.mark.parametrize(
    ("value_range", "target", "expected"),
    [
        (100, 8, 20),
        (1000, 4, 200),
        (1, 12, 0.1),
        (60, 12, 10),
        (20, 8, 2),
    ],
)
def test_known_steps(value_range: float, target: int, expected: float) -> None:
    assert compute_step(value_range, target) == pytest.approx(expected)


@pytest.mark.parametrize("value_range", [0.003, 0.7, 1.0, 3.3, 17.0, 120.0, 999.0, 12345.6, 1e6])
@pytest.mark.parametrize("target", [4, 8, 12])
def test_steps_are_nice(value_range: float, target: int) -> None:
    assert _is_nice(compute_step(value_range, target))


def test_refinement_keeps_more_than_half_the_ticks() -> None:
    for value_range in (50.0, 75.0, 120.0, 200.0, 480.0):
        step = compute_step(value_range, 12)
        if step > 10.0 ** round_half_up(math.log10(value_range / 12)):
            assert value_range / step > 6


@pytest.mark.parametrize("value_range", [0.0, -5.0, float("nan"), float("inf")])
def test_invalid_range(value_range: float) -> None:
    with pytest.raises(ValueError):
        compute_step(value_range, 12)


def test_invalid_target() -> None:
    with pytest.raises(ValueError):
        compute_step(10.0, 0)


def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(0.49) == 0
    assert round_half_up(-0.51) == -1
