"""Default wheel parameters and control ranges.

Split out so the GUI sliders and the state model agree on the same bounds.
"""

from __future__ import annotations

from typing import Final

# (min, max) inclusive.
SEGMENTS_RANGE: Final[tuple[int, int]] = (0, 32)
SPIN_RATE_RANGE: Final[tuple[float, float]] = (0.0, 5.0)
DIAMETER_RANGE: Final[tuple[int, int]] = (100, 1200)
COLOR_COUNT_RANGE: Final[tuple[int, int]] = (1, 10)

# Spin rate slider resolution (rev/s).
SPIN_RATE_STEP: Final[float] = 0.1

# ~60 fps; Tk has no display-refresh callback so we approximate one.
FRAME_INTERVAL_MS: Final[int] = 16

FALLBACK_COLOR: Final[str] = "#000000"
BACKGROUND: Final[str] = "#ffffff"

DEFAULTS: dict = {
    "segments": 16,
    "spin_rate": 0.5,  # revolutions per second
    "diameter": 400,  # pixels
    "color_count": 2,
    "paused": False,
}
