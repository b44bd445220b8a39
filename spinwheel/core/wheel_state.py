"""In-memory wheel state behind the control surface.

Pure (no Tk) and defensive: setters clamp into the slider ranges instead of
raising. Field ownership:

- ``params`` and ``colors`` are written only by the setters below (controls).
- ``angle`` is written only by ``set_angle`` (the animation clock).

Every change marks the state dirty; the GUI repaints once per frame when
dirty, so several mutations from one input event land in a single render.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, List, Optional, Tuple

from spinwheel.core.clock import wrap_angle
from spinwheel.core.defaults import (
    COLOR_COUNT_RANGE,
    DEFAULTS,
    DIAMETER_RANGE,
    FALLBACK_COLOR,
    SEGMENTS_RANGE,
    SPIN_RATE_RANGE,
    SPIN_RATE_STEP,
)
from spinwheel.core.palette import generate_colors, randomize_colors

logger = logging.getLogger(__name__)

RENDER_FIELDS = frozenset({"angle", "segments", "colors", "diameter"})
CLOCK_FIELDS = frozenset({"spin_rate", "paused"})

Listener = Callable[[str], None]


def _clamp_int(value: Any, *, default: int, bounds: Tuple[int, int]) -> int:
    try:
        v = int(round(float(value)))
    except (TypeError, ValueError, OverflowError):
        v = int(default)
    return max(bounds[0], min(bounds[1], v))


def clamp_segments(value: Any) -> int:
    return _clamp_int(value, default=DEFAULTS["segments"], bounds=SEGMENTS_RANGE)


def clamp_diameter(value: Any) -> int:
    return _clamp_int(value, default=DEFAULTS["diameter"], bounds=DIAMETER_RANGE)


def clamp_color_count(value: Any) -> int:
    return _clamp_int(value, default=DEFAULTS["color_count"], bounds=COLOR_COUNT_RANGE)


def clamp_spin_rate(value: Any) -> float:
    """Clamp to 0..5 rev/s and snap to the slider's 0.1 step."""

    try:
        v = float(value)
    except (TypeError, ValueError):
        v = float(DEFAULTS["spin_rate"])
    if v != v:  # NaN
        v = float(DEFAULTS["spin_rate"])
    v = max(SPIN_RATE_RANGE[0], min(SPIN_RATE_RANGE[1], v))
    return round(round(v / SPIN_RATE_STEP) * SPIN_RATE_STEP, 1)


@dataclass(frozen=True, slots=True)
class WheelParameters:
    segments: int
    spin_rate: float  # rev/s
    diameter: int  # px
    color_count: int
    paused: bool

    @classmethod
    def from_defaults(cls) -> "WheelParameters":
        return cls(
            segments=int(DEFAULTS["segments"]),
            spin_rate=float(DEFAULTS["spin_rate"]),
            diameter=int(DEFAULTS["diameter"]),
            color_count=int(DEFAULTS["color_count"]),
            paused=bool(DEFAULTS["paused"]),
        )


@dataclass(frozen=True, slots=True)
class RenderInputs:
    angle: float
    segments: int
    colors: Tuple[str, ...]
    diameter: int


class WheelState:
    def __init__(self, params: Optional[WheelParameters] = None, *, colors: Optional[List[str]] = None):
        self.params = params if params is not None else WheelParameters.from_defaults()
        self.colors: List[str] = list(colors) if colors is not None else list(generate_colors(self.params.color_count))
        self.angle = 0.0
        self._dirty = True
        self._listeners: List[Listener] = []

    # -- observers -------------------------------------------------------

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def consume_dirty(self) -> bool:
        """Return whether a repaint is due and reset the flag."""

        dirty = self._dirty
        self._dirty = False
        return dirty

    @property
    def dirty(self) -> bool:
        return self._dirty

    def render_inputs(self) -> RenderInputs:
        return RenderInputs(
            angle=self.angle,
            segments=self.params.segments,
            colors=tuple(self.colors),
            diameter=self.params.diameter,
        )

    def pause_label(self) -> str:
        return "▶ Resume" if self.params.paused else "⏸ Pause"

    # -- control surface setters ------------------------------------------

    def set_segments(self, value: Any) -> bool:
        segments = clamp_segments(value)
        if segments == self.params.segments:
            return False
        self.params = replace(self.params, segments=segments)
        self._changed("segments")
        return True

    def set_spin_rate(self, value: Any) -> bool:
        rate = clamp_spin_rate(value)
        if rate == self.params.spin_rate:
            return False
        self.params = replace(self.params, spin_rate=rate)
        self._changed("spin_rate")
        return True

    def set_diameter(self, value: Any) -> bool:
        diameter = clamp_diameter(value)
        if diameter == self.params.diameter:
            return False
        self.params = replace(self.params, diameter=diameter)
        self._changed("diameter")
        return True

    def set_color_count(self, value: Any) -> bool:
        """Set the palette size and regenerate colors, dropping manual edits."""

        count = clamp_color_count(value)
        if count == self.params.color_count:
            return False
        self.params = replace(self.params, color_count=count)
        self.colors = list(generate_colors(count))
        self._changed("color_count")
        self._changed("colors")
        return True

    def set_color(self, index: int, color: Optional[str]) -> bool:
        if not 0 <= index < len(self.colors):
            logger.debug("Ignoring color edit for index %s (have %d colors)", index, len(self.colors))
            return False
        updated = list(self.colors)
        updated[index] = color or FALLBACK_COLOR
        self.colors = updated
        self._changed("colors")
        return True

    def set_paused(self, paused: bool) -> bool:
        paused = bool(paused)
        if paused == self.params.paused:
            return False
        self.params = replace(self.params, paused=paused)
        self._changed("paused")
        return True

    def toggle_pause(self) -> bool:
        self.set_paused(not self.params.paused)
        return self.params.paused

    def randomize(self, *, rng: Any = None) -> List[str]:
        self.colors = randomize_colors(self.params.color_count, self.params.segments, rng=rng)
        self._changed("colors")
        return self.colors

    # -- clock ---------------------------------------------------------------

    def set_angle(self, angle: float) -> None:
        a = wrap_angle(angle)
        if a == self.angle:
            return
        self.angle = a
        self._changed("angle")

    def _changed(self, field: str) -> None:
        if field in RENDER_FIELDS:
            self._dirty = True
        for listener in list(self._listeners):
            listener(field)
