from __future__ import annotations

import logging
from typing import Any, Tuple

from PIL import ImageColor

from spinwheel.core.defaults import FALLBACK_COLOR
from spinwheel.core.logging_utils import log_throttled

logger = logging.getLogger(__name__)

# RGB color is (0..255, 0..255, 0..255)
ColorRGB = Tuple[int, int, int]

_BLACK: ColorRGB = (0, 0, 0)


def hsl_color(hue: float, saturation: float = 100.0, lightness: float = 50.0) -> str:
    """Format a CSS hsl() color string that PIL.ImageColor understands."""

    return f"hsl({_fmt(hue)}, {_fmt(saturation)}%, {_fmt(lightness)}%)"


def _fmt(value: float) -> str:
    v = float(value)
    if v.is_integer():
        return str(int(v))
    # Fixed notation: ImageColor's hsl() parser rejects exponents.
    return f"{v:.6f}".rstrip("0").rstrip(".")


def to_rgb(color: Any) -> ColorRGB:
    """Resolve a color string (hex, hsl(), named) to RGB.

    Empty, missing or unparseable colors resolve to opaque black.
    """

    if not color:
        return _BLACK
    try:
        rgb = ImageColor.getrgb(str(color).strip())
    except ValueError:
        log_throttled(
            logger,
            "colors.unparseable",
            interval_s=60,
            level=logging.DEBUG,
            msg=f"Unparseable color {color!r}; using {FALLBACK_COLOR}",
        )
        return _BLACK
    return (int(rgb[0]), int(rgb[1]), int(rgb[2]))


def rgb_to_hex(rgb: ColorRGB) -> str:
    """Convert RGB tuple to hex string."""
    r, g, b = (int(rgb[0]) & 0xFF, int(rgb[1]) & 0xFF, int(rgb[2]) & 0xFF)
    return f"#{r:02x}{g:02x}{b:02x}"


def to_hex(color: Any) -> str:
    """Normalize any supported color to ``#rrggbb`` (Tk only speaks hex/named)."""

    return rgb_to_hex(to_rgb(color))


def contrast_text_hex(color: Any) -> str:
    r, g, b = to_rgb(color)
    brightness = (r * 299 + g * 587 + b * 114) / 1000
    return "#000000" if brightness > 128 else "#ffffff"
