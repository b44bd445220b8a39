#!/usr/bin/env python3
"""SpinWheel window - animated segmented color wheel with live controls."""

from __future__ import annotations

import logging
import os
from typing import Callable, List, Optional

import tkinter as tk
from tkinter import colorchooser, ttk

from PIL import ImageTk

from spinwheel.core.clock import AnimationClock
from spinwheel.core.colors import contrast_text_hex, to_hex
from spinwheel.core.defaults import (
    BACKGROUND,
    COLOR_COUNT_RANGE,
    DIAMETER_RANGE,
    SEGMENTS_RANGE,
    SPIN_RATE_RANGE,
)
from spinwheel.core.render import WheelSurface, render_wheel
from spinwheel.core.wheel_state import CLOCK_FIELDS, RENDER_FIELDS, WheelState
from spinwheel.gui.labels import color_count_label, diameter_label, segments_label, spin_rate_label
from spinwheel.gui.scheduler import TkFrameScheduler
from spinwheel.gui.theme import apply_clam_theme

logger = logging.getLogger(__name__)

_SWATCH_COLUMNS = 8


class SpinWheelWindow:
    """Main window: wheel canvas on the left, controls on the right."""

    def __init__(self, state: Optional[WheelState] = None):
        self.root = tk.Tk()
        self.root.title("SpinWheel")
        self.root.resizable(True, True)

        apply_clam_theme(self.root)

        self.state = state if state is not None else WheelState()
        self.surface = WheelSurface()
        self._photo: Optional[ImageTk.PhotoImage] = None
        self._photo_revision = -1
        self._image_item: Optional[int] = None
        self._repaint_job: Optional[str] = None
        self._swatches: List[tk.Button] = []

        self.clock = AnimationClock(
            TkFrameScheduler(self.root),
            spin_rate=self.state.params.spin_rate,
            paused=self.state.params.paused,
            angle=self.state.angle,
            on_angle=self.state.set_angle,
        )

        self._create_widgets()

        self.state.add_listener(self._on_state_changed)
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

        self._center_on_screen()
        self._request_repaint()
        self.clock.start()

    # -- layout --------------------------------------------------------------

    def _create_widgets(self) -> None:
        params = self.state.params

        main_frame = ttk.Frame(self.root, padding=16)
        main_frame.pack(fill="both", expand=True)

        self.canvas = tk.Canvas(
            main_frame,
            width=params.diameter,
            height=params.diameter,
            highlightthickness=0,
            bg=BACKGROUND,
        )
        self.canvas.pack(side="left", anchor="n", padx=(0, 32))

        controls = ttk.Frame(main_frame)
        controls.pack(side="left", anchor="n", fill="y")

        self.segments_var, self.segments_label = self._add_slider(
            controls,
            text=segments_label(params.segments),
            bounds=SEGMENTS_RANGE,
            value=params.segments,
            command=self._on_segments,
        )
        self.spin_rate_var, self.spin_rate_label = self._add_slider(
            controls,
            text=spin_rate_label(params.spin_rate),
            bounds=SPIN_RATE_RANGE,
            value=params.spin_rate,
            command=self._on_spin_rate,
        )
        self.diameter_var, self.diameter_label = self._add_slider(
            controls,
            text=diameter_label(params.diameter),
            bounds=DIAMETER_RANGE,
            value=params.diameter,
            command=self._on_diameter,
        )
        self.color_count_var, self.color_count_label = self._add_slider(
            controls,
            text=color_count_label(params.color_count),
            bounds=COLOR_COUNT_RANGE,
            value=params.color_count,
            command=self._on_color_count,
        )

        self.swatch_frame = ttk.Frame(controls)
        self.swatch_frame.pack(fill="x", pady=(8, 8))
        self._rebuild_swatches()

        self.pause_button = ttk.Button(controls, text=self.state.pause_label(), command=self._on_pause)
        self.pause_button.pack(fill="x", pady=(8, 4))

        ttk.Button(controls, text="🎲 Randomize", command=self._on_randomize).pack(fill="x", pady=(4, 0))

    def _add_slider(
        self,
        parent: tk.Misc,
        *,
        text: str,
        bounds: tuple,
        value: float,
        command: Callable[[str], None],
    ) -> tuple[tk.DoubleVar, ttk.Label]:
        frame = ttk.Frame(parent)
        frame.pack(fill="x", pady=(0, 12))

        label = ttk.Label(frame, text=text)
        label.pack(anchor="w")

        var = tk.DoubleVar(value=value)
        ttk.Scale(
            frame,
            from_=bounds[0],
            to=bounds[1],
            orient="horizontal",
            length=260,
            variable=var,
            command=command,
        ).pack(fill="x")
        return var, label

    def _rebuild_swatches(self) -> None:
        for btn in self._swatches:
            btn.destroy()
        self._swatches = []

        for i, color in enumerate(self.state.colors):
            hex_color = to_hex(color)
            btn = tk.Button(
                self.swatch_frame,
                text=str(i + 1),
                width=2,
                bg=hex_color,
                activebackground=hex_color,
                fg=contrast_text_hex(hex_color),
                relief="flat",
                command=lambda idx=i: self._on_pick_color(idx),
            )
            btn.grid(row=i // _SWATCH_COLUMNS, column=i % _SWATCH_COLUMNS, padx=2, pady=2)
            self._swatches.append(btn)

    def _center_on_screen(self) -> None:
        self.root.update_idletasks()
        x = (self.root.winfo_screenwidth() // 2) - (self.root.winfo_width() // 2)
        y = (self.root.winfo_screenheight() // 2) - (self.root.winfo_height() // 2)
        self.root.geometry(f"+{max(0, x)}+{max(0, y)}")

    # -- control callbacks ------------------------------------------------------

    def _on_segments(self, value: str) -> None:
        self.state.set_segments(value)
        self.segments_var.set(self.state.params.segments)
        self.segments_label.config(text=segments_label(self.state.params.segments))

    def _on_spin_rate(self, value: str) -> None:
        self.state.set_spin_rate(value)
        self.spin_rate_var.set(self.state.params.spin_rate)
        self.spin_rate_label.config(text=spin_rate_label(self.state.params.spin_rate))

    def _on_diameter(self, value: str) -> None:
        self.state.set_diameter(value)
        self.diameter_var.set(self.state.params.diameter)
        self.diameter_label.config(text=diameter_label(self.state.params.diameter))

    def _on_color_count(self, value: str) -> None:
        self.state.set_color_count(value)
        self.color_count_var.set(self.state.params.color_count)
        self.color_count_label.config(text=color_count_label(self.state.params.color_count))

    def _on_pick_color(self, index: int) -> None:
        if not 0 <= index < len(self.state.colors):
            return
        _rgb, hex_color = colorchooser.askcolor(
            color=to_hex(self.state.colors[index]),
            parent=self.root,
            title=f"Segment color {index + 1}",
        )
        if hex_color is None:
            # Dialog cancelled.
            return
        self.state.set_color(index, hex_color)

    def _on_pause(self) -> None:
        self.state.toggle_pause()

    def _on_randomize(self) -> None:
        self.state.randomize()

    # -- state reactions ----------------------------------------------------

    def _on_state_changed(self, field: str) -> None:
        if field in CLOCK_FIELDS:
            params = self.state.params
            if field == "spin_rate":
                self.clock.set_spin_rate(params.spin_rate)
            else:
                self.clock.set_paused(params.paused)
                self.pause_button.config(text=self.state.pause_label())

        if field == "colors":
            self._rebuild_swatches()

        if field == "diameter":
            d = self.state.params.diameter
            self.canvas.config(width=d, height=d)

        if field in RENDER_FIELDS:
            self._request_repaint()

    def _request_repaint(self) -> None:
        # Coalesce: all mutations from one input event land in one render.
        if self._repaint_job is not None:
            return
        self._repaint_job = self.root.after_idle(self._repaint)

    def _repaint(self) -> None:
        self._repaint_job = None
        if not self.state.consume_dirty():
            return

        inputs = self.state.render_inputs()
        render_wheel(
            self.surface,
            angle=inputs.angle,
            segments=inputs.segments,
            colors=inputs.colors,
            diameter=inputs.diameter,
        )

        if self.surface.image is None or self.surface.revision == self._photo_revision:
            return
        self._photo = ImageTk.PhotoImage(self.surface.image)
        self._photo_revision = self.surface.revision
        if self._image_item is None:
            self._image_item = self.canvas.create_image(0, 0, image=self._photo, anchor="nw")
        else:
            self.canvas.itemconfigure(self._image_item, image=self._photo)

    # -- lifecycle ------------------------------------------------------------

    def _on_close(self) -> None:
        logger.debug("Closing window")
        self.clock.stop()
        self.state.remove_listener(self._on_state_changed)
        if self._repaint_job is not None:
            try:
                self.root.after_cancel(self._repaint_job)
            except tk.TclError:
                pass
            self._repaint_job = None
        self.surface.attached = False
        self.root.destroy()

    def run(self) -> None:
        self.root.mainloop()


def main() -> None:
    level = logging.DEBUG if os.environ.get("SPINWHEEL_DEBUG") else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    SpinWheelWindow().run()


if __name__ == "__main__":
    main()
