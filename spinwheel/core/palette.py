"""Palette generation and randomized color assignment.

UI-free (no tkinter, no Pillow drawing) so both can be unit tested directly.
"""

from __future__ import annotations

import math
import random
from typing import Any, List, Optional, Protocol, Tuple

from spinwheel.core.colors import hsl_color
from spinwheel.core.defaults import COLOR_COUNT_RANGE, FALLBACK_COLOR, SEGMENTS_RANGE

Palette = Tuple[str, ...]


class _Chooser(Protocol):
    def choice(self, seq): ...


def _valid_count(count: Any) -> float | None:
    # bool is an int subclass; True should not mean "one color".
    if isinstance(count, bool):
        return None
    try:
        n = float(count)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(n) or n < 1:
        return None
    return n


def generate_colors(count: Any) -> Palette:
    """Return *count* evenly spaced hues at full saturation, 50% lightness.

    Anything that is not a finite number >= 1 yields the single fallback
    color instead of raising. Counts above 10 are treated as 10.
    """

    n = _valid_count(count)
    if n is None:
        return (FALLBACK_COLOR,)

    # Capped at the slider maximum.
    n = min(n, float(COLOR_COUNT_RANGE[1]))
    return tuple(hsl_color(i * 360.0 / n) for i in range(math.ceil(n)))


def _draw_count(segments: Any) -> int:
    try:
        total = float(segments)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(total) or total <= 0:
        return 0
    # A fractional count draws one extra entry, e.g. 2.5 -> 3.
    return math.ceil(min(total, float(SEGMENTS_RANGE[1])))


def randomize_colors(count: Any, segments: Any, *, rng: Optional[_Chooser] = None) -> List[str]:
    """Pick one palette color per segment, never repeating the previous pick.

    When the palette has a single color the adjacency filter would leave no
    candidates, so that draw uses the whole palette. Fractional segment
    counts round up; zero, negative or non-numeric counts give no colors.
    """

    chooser = rng if rng is not None else random
    palette = generate_colors(count)
    total = _draw_count(segments)

    result: List[str] = []
    for i in range(total):
        prev = result[i - 1] if i > 0 else None
        choices = [c for c in palette if c != prev] or list(palette)
        result.append(chooser.choice(choices))
    return result
