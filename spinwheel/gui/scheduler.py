from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

import tkinter as tk

from spinwheel.core.defaults import FRAME_INTERVAL_MS
from spinwheel.core.logging_utils import log_throttled

logger = logging.getLogger(__name__)


class TkFrameScheduler:
    """Frame scheduler for AnimationClock backed by ``widget.after``.

    Tk has no display-refresh hook, so frames are approximated with a fixed
    interval and stamped with ``time.monotonic()`` in milliseconds.
    """

    def __init__(
        self,
        widget: tk.Misc,
        *,
        interval_ms: int = FRAME_INTERVAL_MS,
        now: Callable[[], float] = time.monotonic,
    ):
        self._widget = widget
        self._interval_ms = int(interval_ms)
        self._now = now

    def request_frame(self, callback: Callable[[float], None]) -> Any:
        def _fire() -> None:
            try:
                callback(self._now() * 1000.0)
            except Exception as exc:
                # Keep the Tk loop alive; a broken frame should not kill the UI.
                log_throttled(
                    logger,
                    "scheduler.frame_failed",
                    interval_s=30,
                    level=logging.ERROR,
                    msg="Frame callback failed",
                    exc=exc,
                )

        return self._widget.after(self._interval_ms, _fire)

    def cancel_frame(self, handle: Any) -> None:
        try:
            self._widget.after_cancel(handle)
        except tk.TclError:
            # Widget already destroyed.
            pass
