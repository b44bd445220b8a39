from __future__ import annotations

import threading
import time


# One entry per fixed key ("scheduler.frame_failed", "colors.unparseable").
_last_log_times: dict[str, float] = {}
_lock = threading.Lock()


def log_throttled(
    logger,
    key: str,
    *,
    interval_s: float,
    level: int,
    msg: str,
    exc: BaseException | None = None,
) -> bool:
    """Log *msg* unless the same *key* was logged less than *interval_s* ago.

    Used on the per-frame paths: a failing frame callback in the Tk scheduler
    and unparseable swatch colors hit on every repaint. Keys must be fixed
    strings, never built from user data, so the table stays bounded.
    Returns True if the message was emitted.
    """

    now = time.monotonic()
    with _lock:
        last = _last_log_times.get(key)
        if last is not None and (now - last) < interval_s:
            return False
        _last_log_times[key] = now

    logger.log(level, msg, exc_info=exc)
    return True


def reset_throttle() -> None:
    """Forget all throttle keys (used by tests)."""

    with _lock:
        _last_log_times.clear()
