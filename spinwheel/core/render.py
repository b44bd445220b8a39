"""Wheel rasterization.

UI-free: paints into a Pillow image so it can be tested without a display.
The GUI wraps the resulting image in an ``ImageTk.PhotoImage``.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from spinwheel.core.colors import ColorRGB, to_rgb

_CLEAR = (0, 0, 0, 0)


class WheelSurface:
    """A square RGBA raster the renderer draws onto.

    A detached surface (not mounted yet, or already torn down) makes the
    renderer a no-op.
    """

    def __init__(self, side: int = 0, *, attached: bool = True):
        self.attached = bool(attached)
        self.image: Optional[Image.Image] = None
        # Bumped on every paint so viewers know when to refresh.
        self.revision = 0
        if side > 0:
            self.resize(side)

    @classmethod
    def detached(cls) -> "WheelSurface":
        return cls(attached=False)

    @property
    def size(self) -> int:
        return self.image.width if self.image is not None else 0

    def resize(self, side: int) -> None:
        side = int(side)
        if self.image is not None and self.image.size == (side, side):
            return
        # Like an HTML canvas, resizing discards the old pixels.
        self.image = Image.new("RGBA", (side, side), _CLEAR)

    def clear(self) -> None:
        if self.image is not None:
            self.image.paste(_CLEAR, (0, 0, self.image.width, self.image.height))

    def draw(self) -> ImageDraw.ImageDraw:
        if self.image is None:
            raise RuntimeError("surface has no image; call resize() first")
        return ImageDraw.Draw(self.image)


def wedge_spans(angle: float, segments: int) -> List[Tuple[float, float]]:
    """Return (start, end) in degrees for each wedge, rotated by *angle* radians.

    Degrees run clockwise from 3 o'clock, matching ``ImageDraw.pieslice``.
    """

    if segments <= 0:
        return []
    step = 2.0 * math.pi / segments
    return [(math.degrees(angle + i * step), math.degrees(angle + (i + 1) * step)) for i in range(segments)]


def wedge_fill(colors: Sequence[Optional[str]], index: int) -> ColorRGB:
    # Colors and segments are edited independently; wrap around.
    return to_rgb(colors[index % len(colors)])


def render_wheel(
    surface: Optional[WheelSurface],
    *,
    angle: float,
    segments: int,
    colors: Sequence[Optional[str]],
    diameter: int,
) -> None:
    """Paint *segments* equal wedges rotated by *angle* onto *surface*.

    The previous frame is cleared first. Nothing is painted when there are no
    segments, no colors, or no usable surface.
    """

    segments = int(segments)
    diameter = int(diameter)
    if surface is None or not surface.attached:
        return
    if segments <= 0 or not colors or diameter <= 0:
        return

    surface.resize(diameter)
    surface.clear()
    draw = surface.draw()

    box = (0, 0, diameter - 1, diameter - 1)
    if segments == 1:
        # A single wedge is the whole disc; avoid a rounding seam at 360 degrees.
        draw.ellipse(box, fill=(*wedge_fill(colors, 0), 255))
    else:
        for i, (start, end) in enumerate(wedge_spans(angle, segments)):
            draw.pieslice(box, start=start, end=end, fill=(*wedge_fill(colors, i), 255))

    surface.revision += 1


def render_wheel_image(*, angle: float, segments: int, colors: Sequence[Optional[str]], diameter: int) -> Image.Image:
    """Render one frame into a fresh image (blank when nothing is painted)."""

    surface = WheelSurface(max(0, int(diameter)))
    render_wheel(surface, angle=angle, segments=segments, colors=colors, diameter=diameter)
    if surface.image is None:
        return Image.new("RGBA", (0, 0), _CLEAR)
    return surface.image
