"""Indeterminate circular progress indicator: animation state and arc geometry."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field, replace
from enum import Enum

from bbimager.easing import STANDARD, Easing

U32_MAX = 0xFFFFFFFF
MIN_ANGLE = math.pi / 8.0
WRAP_ANGLE = 2.0 * math.pi - math.pi / 4.0
BASE_ROTATION_SPEED = U32_MAX // 80

_WRAP_ROTATION = int(WRAP_ANGLE / (2.0 * math.pi) * U32_MAX)


def _wrapping_add(a: int, b: int) -> int:
    return (a + b) & U32_MAX


def _saturate_u32(value: float) -> int:
    if value != value:
        return 0
    return int(min(max(value, 0.0), float(U32_MAX)))


class AnimationPhase(Enum):
    """Whether the arc is growing or shrinking."""

    EXPANDING = "expanding"
    CONTRACTING = "contracting"


@dataclass(frozen=True)
class Animation:
    """One phase of the spinner; ``turn`` is a 32-bit fraction of a full turn."""

    phase: AnimationPhase = AnimationPhase.EXPANDING
    start: float = field(default_factory=time.monotonic)
    progress: float = 0.0
    turn: int = 0
    last: float = field(default_factory=time.monotonic)

    def next(self, additional_rotation: int, now: float) -> Animation:
        """Switch to the other phase, starting at ``now``."""
        if self.phase is AnimationPhase.EXPANDING:
            return Animation(
                AnimationPhase.CONTRACTING,
                now,
                0.0,
                _wrapping_add(self.turn, additional_rotation),
                now,
            )
        step = _wrapping_add(BASE_ROTATION_SPEED, _WRAP_ROTATION)
        return Animation(
            AnimationPhase.EXPANDING, now, 0.0, _wrapping_add(self.turn, step), now
        )

    def timed_transition(
        self, cycle_duration: float, rotation_duration: float, now: float
    ) -> Animation:
        """Advance to time ``now``, changing phase once the cycle has run out."""
        elapsed = now - self.start
        additional = _saturate_u32((now - self.last) / rotation_duration * U32_MAX)
        if elapsed > cycle_duration:
            return self.next(additional, now)
        return self.with_elapsed(cycle_duration, additional, elapsed, now)

    def with_elapsed(
        self, cycle_duration: float, additional_rotation: int, elapsed: float, now: float
    ) -> Animation:
        """Stay in this phase with updated progress and rotation."""
        return Animation(
            self.phase,
            self.start,
            elapsed / cycle_duration,
            _wrapping_add(self.turn, additional_rotation),
            now,
        )

    def rotation(self) -> float:
        """Rotation as a fraction of a full turn."""
        return self.turn / U32_MAX


@dataclass(frozen=True)
class Appearance:
    """Colours of the indicator as RGBA tuples."""

    background: tuple[float, float, float, float] | None = None
    track_color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    bar_color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Circular:
    """A spinning arc that grows and shrinks (durations in seconds)."""

    size: float = 40.0
    bar_height: float = 4.0
    easing: Easing = STANDARD
    cycle_duration: float = 0.6
    rotation_duration: float = 2.0
    appearance: Appearance = field(default_factory=Appearance)

    def with_cycle_duration(self, duration: float) -> Circular:
        """Return a copy whose full expand-and-contract cycle lasts ``duration``."""
        return replace(self, cycle_duration=duration / 2)

    def track_radius(self) -> float:
        """Radius of the track circle."""
        return self.size / 2.0 - self.bar_height

    def arc_angles(self, animation: Animation) -> tuple[float, float]:
        """Start and end angles of the bar arc, in radians."""
        start = animation.rotation() * 2.0 * math.pi
        eased = self.easing.y_at_x(animation.progress)
        if animation.phase is AnimationPhase.EXPANDING:
            return (start, start + MIN_ANGLE + WRAP_ANGLE * eased)
        return (start + WRAP_ANGLE * eased, start + MIN_ANGLE + WRAP_ANGLE)