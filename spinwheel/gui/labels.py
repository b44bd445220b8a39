"""Slider label text. Kept Tk-free so it can be tested headless."""

from __future__ import annotations


def segments_label(segments: int) -> str:
    return f"Segments: {int(segments)}"


def spin_rate_label(spin_rate: float) -> str:
    return f"Spin Rate: {float(spin_rate):.1f} rev/s"


def diameter_label(diameter: int) -> str:
    return f"Diameter: {int(diameter)}px"


def color_count_label(color_count: int) -> str:
    return f"Number of Colours: {int(color_count)}"
