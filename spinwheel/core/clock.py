"""Frame-driven rotation clock.

The clock does not own a timer. It asks an injected scheduler for the next
frame callback, so tests can drive it with synthetic timestamps and the GUI
can back it with ``tk.after``.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Any, Callable, Optional, Protocol

logger = logging.getLogger(__name__)

TWO_PI = 2.0 * math.pi

FrameCallback = Callable[[float], None]


class FrameScheduler(Protocol):
    def request_frame(self, callback: FrameCallback) -> Any:
        """Call ``callback(timestamp_ms)`` once on the next frame; return a cancel handle."""

    def cancel_frame(self, handle: Any) -> None: ...


class ClockState(Enum):
    RUNNING = "running"
    PAUSED = "paused"


def wrap_angle(angle: float) -> float:
    """Fold *angle* (radians) into [0, 2*pi)."""

    a = float(angle) % TWO_PI
    # Float rounding can land exactly on 2*pi for tiny negative inputs.
    if a >= TWO_PI:
        return 0.0
    return a


def advance_angle(angle: float, *, spin_rate: float, delta_s: float) -> float:
    return wrap_angle(angle + TWO_PI * float(spin_rate) * float(delta_s))


class AnimationClock:
    """Advance a rotation angle at ``spin_rate`` revolutions per second.

    Two states, RUNNING and PAUSED. Ticks keep arriving while paused so the
    timestamp reference stays fresh and resuming does not jump.
    """

    def __init__(
        self,
        scheduler: FrameScheduler,
        *,
        spin_rate: float = 0.5,
        paused: bool = False,
        angle: float = 0.0,
        on_angle: Optional[Callable[[float], None]] = None,
    ):
        self._scheduler = scheduler
        self.spin_rate = float(spin_rate)
        self.state = ClockState.PAUSED if paused else ClockState.RUNNING
        self._angle = wrap_angle(angle)
        self._on_angle = on_angle

        self._active = False
        self._handle: Any = None
        self._generation = 0
        self._last_ts: Optional[float] = None

    @property
    def angle(self) -> float:
        return self._angle

    @property
    def paused(self) -> bool:
        return self.state is ClockState.PAUSED

    @property
    def active(self) -> bool:
        """True while a tick loop is subscribed."""
        return self._active

    def start(self) -> None:
        """Start ticking. The first tick only records the timestamp reference."""

        if self._active:
            return
        self._last_ts = None
        self._active = True
        self._schedule()
        logger.debug("Clock started (rate=%.2f rev/s, state=%s)", self.spin_rate, self.state.value)

    def stop(self) -> None:
        """Cancel the tick loop. No angle update happens after this returns."""

        if not self._active:
            return
        self._active = False
        self._cancel_pending()
        logger.debug("Clock stopped at angle %.4f", self._angle)

    def set_spin_rate(self, spin_rate: float) -> None:
        self.spin_rate = float(spin_rate)
        self._resubscribe()

    def set_paused(self, paused: bool) -> None:
        self.state = ClockState.PAUSED if paused else ClockState.RUNNING
        self._resubscribe()

    def toggle_pause(self) -> bool:
        self.set_paused(not self.paused)
        return self.paused

    def tick(self, timestamp_ms: float) -> None:
        """Process one frame at *timestamp_ms* and request the next one."""

        if not self._active:
            return

        t = float(timestamp_ms)
        if self._last_ts is None:
            self._last_ts = t
            self._schedule()
            return

        # Non-monotonic timestamps never spin the wheel backwards.
        delta = max(0.0, (t - self._last_ts) / 1000.0)
        self._last_ts = t

        changed = False
        if self.state is ClockState.RUNNING:
            new_angle = advance_angle(self._angle, spin_rate=self.spin_rate, delta_s=delta)
            changed = new_angle != self._angle
            self._angle = new_angle

        self._schedule()

        if changed and self._on_angle is not None:
            self._on_angle(self._angle)

    def _resubscribe(self) -> None:
        # Exactly one loop: drop the pending frame and request a fresh one that
        # sees the new parameters. The timestamp reference is kept so rapid
        # slider drags do not stall the wheel.
        if not self._active:
            return
        self._schedule()
        logger.debug("Clock resubscribed (rate=%.2f rev/s, state=%s)", self.spin_rate, self.state.value)

    def _schedule(self) -> None:
        if self._handle is not None:
            self._scheduler.cancel_frame(self._handle)
            self._handle = None
        self._generation += 1
        generation = self._generation

        def _frame(timestamp_ms: float) -> None:
            # A frame that was already dispatched when we cancelled must not
            # touch the angle.
            if generation != self._generation:
                return
            self._handle = None
            self.tick(timestamp_ms)

        self._handle = self._scheduler.request_frame(_frame)

    def _cancel_pending(self) -> None:
        self._generation += 1
        handle = self._handle
        self._handle = None
        if handle is not None:
            self._scheduler.cancel_frame(handle)
