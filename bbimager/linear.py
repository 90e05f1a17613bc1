"""Indeterminate linear progress indicator: geometry and animation state."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Linear:
    """A bar that slides across its bounds once per cycle (durations in seconds)."""

    height: float = 8.0
    cycle_duration: float = 1.0
    bar_width_ratio: float = 0.3
    color: tuple[float, float, float] = (0.0, 0.5, 1.0)

    def with_bar_width_ratio(self, ratio: float) -> Linear:
        """Return a copy with the bar ratio clamped to [0.1, 0.8]."""
        return replace(self, bar_width_ratio=min(max(ratio, 0.1), 0.8))

    def bar_bounds(self, state: LinearState, x: float, width: float) -> tuple[float, float]:
        """Return the bar's left edge and width inside bounds starting at ``x``."""
        progress = state.progress(self.cycle_duration)
        bar_width = width * self.bar_width_ratio
        offset = (width - bar_width) * progress
        return (x + offset, bar_width)


@dataclass
class LinearState:
    """Timestamps of the first and latest redraw."""

    start: float | None = None
    last_redraw: float | None = None

    def record_redraw(self, now: float) -> None:
        """Note a redraw at time ``now``."""
        self.last_redraw = now
        if self.start is None:
            self.start = now

    def progress(self, cycle_duration: float) -> float:
        """Fraction of the current cycle that has passed, in [0, 1)."""
        if self.start is None or self.last_redraw is None:
            return 0.0
        elapsed = self.last_redraw - self.start
        return (elapsed % cycle_duration) / cycle_duration