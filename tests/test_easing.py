import pytest

from bbimager import easing
from bbimager.easing import Easing, EasingBuilder

ALL_CURVES = [
    easing.EMPHASIZED,
    easing.EMPHASIZED_DECELERATE,
    easing.EMPHASIZED_ACCELERATE,
    easing.STANDARD,
    easing.STANDARD_DECELERATE,
    easing.STANDARD_ACCELERATE,
]


@pytest.mark.parametrize("curve", ALL_CURVES)
def test_endpoints(curve):
    assert Easing.y_at_x(curve, 0.0) == pytest.approx(0.0)
    assert Easing.y_at_x(curve, 1.0) == pytest.approx(1.0)


@pytest.mark.parametrize("curve", ALL_CURVES)
def test_monotonic_and_in_unit_range(curve):
    samples = [Easing.y_at_x(curve, i / 100) for i in range(101)]
    assert all(0.0 <= y <= 1.0 for y in samples)
    assert all(a <= b + 1e-9 for a, b in zip(samples, samples[1:]))


def test_builder_returns_builder():
    builder = Easing.builder()
    assert isinstance(builder, EasingBuilder)
    assert builder.line_to((0.5, 0.5)) is builder


def test_straight_diagonal_is_identity():
    curve = Easing.builder().build()
    for x in (0.1, 0.3, 0.5, 0.9):
        assert curve.y_at_x(x) == pytest.approx(x)


def test_out_of_range_x_is_clamped():
    curve = easing.STANDARD
    assert curve.y_at_x(-1.0) == pytest.approx(curve.y_at_x(0.0))
    assert curve.y_at_x(2.0) == pytest.approx(curve.y_at_x(1.0))


def test_points_are_clamped_into_unit_square():
    clamped = Easing.builder().line_to((2.0, -1.0)).build()
    explicit = Easing.builder().line_to((1.0, 0.0)).build()
    for x in (0.2, 0.5, 0.75):
        assert clamped.y_at_x(x) == pytest.approx(explicit.y_at_x(x))
    assert clamped.length == pytest.approx(explicit.length)


def test_horizontal_then_vertical_path():
    curve = Easing.builder().line_to((1.0, 0.0)).build()
    assert curve.y_at_x(0.5) == pytest.approx(0.0)
    assert curve.y_at_x(0.75) == pytest.approx(0.5)


def test_quadratic_curve_reaches_end():
    curve = Easing.builder().quadratic_bezier_to((0.0, 1.0), (1.0, 1.0)).build()
    assert curve.y_at_x(1.0) == pytest.approx(1.0)
    assert curve.y_at_x(0.5) > 0.5