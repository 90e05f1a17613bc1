"""Easing curves sampled by arc length along a path from (0, 0) to (1, 1)."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence

Point = tuple[float, float]

_CURVE_STEPS = 256


def _clamp_point(p: Sequence[float]) -> Point:
    x, y = p
    return (min(max(float(x), 0.0), 1.0), min(max(float(y), 0.0), 1.0))


class Easing:
    """An easing curve: maps a fraction of the path length to the y coordinate there."""

    def __init__(self, points: Sequence[Point]) -> None:
        self._points: tuple[Point, ...] = tuple(points)
        lengths = [0.0]
        for (x0, y0), (x1, y1) in zip(self._points, self._points[1:]):
            lengths.append(lengths[-1] + ((x1 - x0) ** 2 + (y1 - y0) ** 2) ** 0.5)
        self._lengths = lengths

    @staticmethod
    def builder() -> EasingBuilder:
        """Start a new path at the origin."""
        return EasingBuilder()

    @property
    def length(self) -> float:
        """Total arc length of the path."""
        return self._lengths[-1]

    def y_at_x(self, x: float) -> float:
        """Return the y coordinate at fraction ``x`` of the path's length."""
        total = self._lengths[-1]
        if total == 0.0:
            return self._points[-1][1]
        distance = min(max(x, 0.0), 1.0) * total
        idx = bisect_left(self._lengths, distance)
        idx = min(max(idx, 1), len(self._lengths) - 1)
        start, end = self._lengths[idx - 1], self._lengths[idx]
        (_, y0), (_, y1) = self._points[idx - 1], self._points[idx]
        span = end - start
        if span == 0.0:
            return y1
        t = (distance - start) / span
        return y0 + (y1 - y0) * t


class EasingBuilder:
    """Builds an easing path; every point is clamped into the unit square."""

    def __init__(self) -> None:
        self._points: list[Point] = [(0.0, 0.0)]

    @property
    def _current(self) -> Point:
        return self._points[-1]

    def line_to(self, to: Sequence[float]) -> EasingBuilder:
        """Add a straight segment."""
        self._points.append(_clamp_point(to))
        return self

    def quadratic_bezier_to(self, ctrl: Sequence[float], to: Sequence[float]) -> EasingBuilder:
        """Add a quadratic Bézier curve."""
        (x0, y0) = self._current
        (cx, cy) = _clamp_point(ctrl)
        (x1, y1) = _clamp_point(to)
        for step in range(1, _CURVE_STEPS + 1):
            t = step / _CURVE_STEPS
            u = 1.0 - t
            self._points.append(
                (
                    u * u * x0 + 2 * u * t * cx + t * t * x1,
                    u * u * y0 + 2 * u * t * cy + t * t * y1,
                )
            )
        return self

    def cubic_bezier_to(
        self, ctrl1: Sequence[float], ctrl2: Sequence[float], to: Sequence[float]
    ) -> EasingBuilder:
        """Add a cubic Bézier curve."""
        (x0, y0) = self._current
        (ax, ay) = _clamp_point(ctrl1)
        (bx, by) = _clamp_point(ctrl2)
        (x1, y1) = _clamp_point(to)
        for step in range(1, _CURVE_STEPS + 1):
            t = step / _CURVE_STEPS
            u = 1.0 - t
            c0, c1, c2, c3 = u * u * u, 3 * u * u * t, 3 * u * t * t, t * t * t
            self._points.append(
                (
                    c0 * x0 + c1 * ax + c2 * bx + c3 * x1,
                    c0 * y0 + c1 * ay + c2 * by + c3 * y1,
                )
            )
        return self

    def build(self) -> Easing:
        """Close the path at (1, 1) and return the easing."""
        return Easing([*self._points, (1.0, 1.0)])


EMPHASIZED = (
    Easing.builder()
    .cubic_bezier_to((0.05, 0.0), (0.133333, 0.06), (0.166666, 0.4))
    .cubic_bezier_to((0.208333, 0.82), (0.25, 1.0), (1.0, 1.0))
    .build()
)

EMPHASIZED_DECELERATE = (
    Easing.builder().cubic_bezier_to((0.05, 0.7), (0.1, 1.0), (1.0, 1.0)).build()
)

EMPHASIZED_ACCELERATE = (
    Easing.builder().cubic_bezier_to((0.3, 0.0), (0.8, 0.15), (1.0, 1.0)).build()
)

STANDARD = Easing.builder().cubic_bezier_to((0.2, 0.0), (0.0, 1.0), (1.0, 1.0)).build()

STANDARD_DECELERATE = (
    Easing.builder().cubic_bezier_to((0.0, 0.0), (0.0, 1.0), (1.0, 1.0)).build()
)

STANDARD_ACCELERATE = (
    Easing.builder().cubic_bezier_to((0.3, 0.0), (1.0, 1.0), (1.0, 1.0)).build()
)