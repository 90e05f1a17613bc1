import math

import pytest

from bbimager.circular import (
    BASE_ROTATION_SPEED,
    MIN_ANGLE,
    U32_MAX,
    WRAP_ANGLE,
    Animation,
    AnimationPhase,
    Appearance,
    Circular,
)
from bbimager.easing import STANDARD


def steps(anim):
    """Raw rotation counter recovered from the rotation fraction."""
    return round(anim.rotation() * U32_MAX)


def expanding(rotation=0, now=0.0):
    return Animation().with_elapsed(1.0, rotation, 0.0, now)


def contracting(now=0.0):
    return Animation().next(0, now)


def test_default_animation_is_expanding_at_rest():
    anim = Animation()
    assert anim.phase is AnimationPhase.EXPANDING
    assert anim.progress == 0.0
    assert anim.rotation() == 0.0


def test_next_from_expanding_adds_rotation():
    anim = expanding(rotation=100).next(50, 7.0)
    assert anim.phase is AnimationPhase.CONTRACTING
    assert steps(anim) == 150
    assert anim.start == 7.0
    assert anim.last == 7.0
    assert anim.progress == 0.0


def test_next_from_expanding_wraps():
    anim = expanding(rotation=U32_MAX).next(2, 1.0)
    assert steps(anim) == 1


def test_next_from_contracting_adds_base_and_wrap():
    anim = contracting().next(12345, 3.0)
    assert anim.phase is AnimationPhase.EXPANDING
    assert steps(anim) > BASE_ROTATION_SPEED
    assert 0.0 <= anim.rotation() <= 1.0
    again = contracting().next(0, 3.0)
    assert again.rotation() == anim.rotation()


def test_timed_transition_within_cycle_keeps_phase():
    anim = contracting(0.0).timed_transition(1.0, 2.0, 0.25)
    assert anim.phase is AnimationPhase.CONTRACTING
    assert anim.progress == pytest.approx(0.25)
    assert anim.start == 0.0
    assert anim.last == 0.25
    assert anim.rotation() > 0.0


def test_timed_transition_after_cycle_switches_phase():
    anim = contracting(0.0).timed_transition(1.0, 2.0, 1.5)
    assert anim.phase is AnimationPhase.EXPANDING
    assert anim.progress == 0.0
    assert anim.start == 1.5


def test_full_rotation_duration_saturates():
    anim = contracting(0.0).timed_transition(10.0, 2.0, 2.0)
    assert anim.rotation() == 1.0


def test_with_elapsed_progress_and_rotation():
    base = contracting(0.0).with_elapsed(2.0, 10, 0.0, 0.0)
    anim = base.with_elapsed(2.0, 5, 1.0, 4.0)
    assert anim.phase is AnimationPhase.CONTRACTING
    assert anim.progress == pytest.approx(0.5)
    assert steps(anim) == 15
    assert anim.last == 4.0


def test_rotation_fraction_bounds():
    assert Animation().rotation() == 0.0
    assert expanding(rotation=U32_MAX).rotation() == 1.0


def test_circular_defaults():
    spinner = Circular()
    assert spinner.size == 40.0
    assert spinner.bar_height == 4.0
    assert spinner.easing is STANDARD
    assert spinner.rotation_duration == 2.0


def test_with_cycle_duration_halves():
    spinner = Circular().with_cycle_duration(2.0)
    assert spinner.cycle_duration == pytest.approx(1.0)


def test_track_radius_shrinks_with_bar_height():
    thin = Circular(bar_height=2.0)
    thick = Circular(bar_height=5.0)
    assert thin.track_radius() - thick.track_radius() == pytest.approx(3.0)
    assert Circular(size=0.0, bar_height=0.0).track_radius() == 0.0


def test_arc_angles_expanding_at_start():
    start, end = Circular().arc_angles(Animation())
    assert start == 0.0
    assert end - start == pytest.approx(MIN_ANGLE)


def test_arc_angles_contracting_at_start():
    start, end = Circular().arc_angles(contracting())
    assert start == pytest.approx(0.0)
    assert end == pytest.approx(MIN_ANGLE + WRAP_ANGLE)


def test_arc_angles_follow_rotation():
    base = Circular().arc_angles(expanding(rotation=0))
    turned = Circular().arc_angles(expanding(rotation=U32_MAX))
    assert turned[0] - base[0] == pytest.approx(2 * math.pi)
    assert turned[1] - base[1] == pytest.approx(2 * math.pi)


def test_appearance_defaults():
    look = Appearance()
    assert look.background is None
    assert look.track_color[3] == 0.0
    assert look.bar_color[3] == 1.0