#!/usr/bin/env python3
"""Unit tests for the frame-driven rotation clock.

The clock is driven by a fake scheduler so every tick uses a synthetic
timestamp; no Tk main loop is involved.
"""

from __future__ import annotations

import math

import pytest

from spinwheel.core.clock import TWO_PI, AnimationClock, ClockState, advance_angle, wrap_angle


def test_first_tick_only_records_reference(scheduler) -> None:
    clock = AnimationClock(scheduler, spin_rate=1.0)
    clock.start()

    scheduler.fire(5_000.0)

    assert clock.angle == 0.0
    assert len(scheduler.pending) == 1


def test_running_clock_advances_by_rate_and_delta(scheduler) -> None:
    clock = AnimationClock(scheduler, spin_rate=0.5)
    clock.start()

    scheduler.fire(1_000.0)
    scheduler.fire(1_250.0)

    # 0.5 rev/s for 0.25 s = 1/8 turn.
    assert clock.angle == pytest.approx(TWO_PI / 8)


def test_advance_is_frame_rate_independent(scheduler) -> None:
    coarse = AnimationClock(scheduler, spin_rate=0.3)
    coarse.start()
    scheduler.fire(0.0)
    scheduler.fire(1_000.0)

    fine_sched = type(scheduler)()
    fine = AnimationClock(fine_sched, spin_rate=0.3)
    fine.start()
    for i in range(0, 1_001, 10):
        fine_sched.fire(float(i))

    assert fine.angle == pytest.approx(coarse.angle)


def test_angle_wraps_into_full_turn(scheduler) -> None:
    clock = AnimationClock(scheduler, spin_rate=5.0)
    clock.start()
    scheduler.fire(0.0)

    t = 0.0
    for step in (7.0, 333.0, 1_000.0, 12_345.6, 16.7, 99_999.0):
        t += step
        scheduler.fire(t)
        assert 0.0 <= clock.angle < TWO_PI


@pytest.mark.parametrize("angle", [0.0, TWO_PI, -1e-17, -math.pi, 7 * math.pi, 1e9])
def test_wrap_angle_range(angle: float) -> None:
    assert 0.0 <= wrap_angle(angle) < TWO_PI


def test_advance_angle_full_turn_returns_to_start() -> None:
    assert advance_angle(1.0, spin_rate=2.0, delta_s=0.5) == pytest.approx(1.0)


def test_paused_clock_keeps_angle_and_resumes_from_it(scheduler) -> None:
    clock = AnimationClock(scheduler, spin_rate=1.0)
    clock.start()
    scheduler.fire(0.0)
    scheduler.fire(100.0)
    angle = clock.angle
    assert angle > 0.0

    clock.set_paused(True)
    for t in (200.0, 300.0, 5_000.0):
        scheduler.fire(t)
        assert clock.angle == angle

    clock.set_paused(False)
    scheduler.fire(5_100.0)

    # Resumes from the stored angle; paused time is not replayed.
    assert clock.angle == pytest.approx(angle + TWO_PI * 0.1)


def test_ticks_continue_while_paused(scheduler) -> None:
    clock = AnimationClock(scheduler, spin_rate=1.0, paused=True)
    clock.start()

    for t in (0.0, 16.0, 32.0):
        assert scheduler.fire(t) == 1

    assert clock.state is ClockState.PAUSED
    assert len(scheduler.pending) == 1


def test_toggle_pause_flips_state(scheduler) -> None:
    clock = AnimationClock(scheduler)

    assert clock.toggle_pause() is True
    assert clock.state is ClockState.PAUSED
    assert clock.toggle_pause() is False
    assert clock.state is ClockState.RUNNING


def test_spin_rate_change_applies_on_next_tick(scheduler) -> None:
    clock = AnimationClock(scheduler, spin_rate=0.0)
    clock.start()
    scheduler.fire(0.0)
    scheduler.fire(100.0)
    assert clock.angle == 0.0

    clock.set_spin_rate(2.0)
    scheduler.fire(200.0)

    assert clock.angle == pytest.approx(TWO_PI * 2.0 * 0.1)


def test_parameter_changes_never_double_schedule(scheduler) -> None:
    clock = AnimationClock(scheduler, spin_rate=1.0)
    clock.start()
    scheduler.fire(0.0)

    for rate in (0.5, 1.5, 2.5):
        clock.set_spin_rate(rate)
        clock.set_paused(False)
        assert len(scheduler.pending) == 1

    assert scheduler.fire(100.0) == 1
    assert len(scheduler.pending) == 1


def test_stop_cancels_pending_frame(scheduler) -> None:
    clock = AnimationClock(scheduler, spin_rate=1.0)
    clock.start()
    scheduler.fire(0.0)

    clock.stop()

    assert scheduler.pending == {}
    assert scheduler.cancelled
    assert clock.active is False


def test_frame_dispatched_after_stop_does_not_mutate_angle(scheduler) -> None:
    clock = AnimationClock(scheduler, spin_rate=1.0)
    clock.start()
    scheduler.fire(0.0)

    # Grab the pending callback as if the host had already dispatched it.
    (stale,) = scheduler.pending.values()
    clock.stop()
    stale(500.0)

    assert clock.angle == 0.0
    assert scheduler.pending == {}


def test_frame_superseded_by_resubscribe_is_ignored(scheduler) -> None:
    clock = AnimationClock(scheduler, spin_rate=1.0)
    clock.start()
    scheduler.fire(0.0)

    (stale,) = scheduler.pending.values()
    clock.set_spin_rate(2.0)
    stale(500.0)

    assert clock.angle == 0.0
    assert len(scheduler.pending) == 1


def test_restart_after_stop_resets_reference(scheduler) -> None:
    clock = AnimationClock(scheduler, spin_rate=1.0)
    clock.start()
    scheduler.fire(0.0)
    scheduler.fire(100.0)
    angle = clock.angle
    clock.stop()

    clock.start()
    scheduler.fire(60_000.0)

    assert clock.angle == angle


def test_start_is_idempotent(scheduler) -> None:
    clock = AnimationClock(scheduler)
    clock.start()
    clock.start()

    assert len(scheduler.pending) == 1


def test_backwards_timestamp_does_not_rewind(scheduler) -> None:
    clock = AnimationClock(scheduler, spin_rate=1.0)
    clock.start()
    scheduler.fire(1_000.0)
    scheduler.fire(1_100.0)
    angle = clock.angle

    scheduler.fire(900.0)

    assert clock.angle == angle


def test_on_angle_callback_receives_new_angle(scheduler) -> None:
    seen: list[float] = []
    clock = AnimationClock(scheduler, spin_rate=1.0, on_angle=seen.append)
    clock.start()
    scheduler.fire(0.0)
    scheduler.fire(250.0)

    assert seen == [pytest.approx(TWO_PI / 4)]


def test_on_angle_not_called_while_paused(scheduler) -> None:
    seen: list[float] = []
    clock = AnimationClock(scheduler, spin_rate=1.0, paused=True, on_angle=seen.append)
    clock.start()
    scheduler.fire(0.0)
    scheduler.fire(250.0)

    assert seen == []
