from __future__ import annotations

import os

import pytest

from spinwheel.core.logging_utils import reset_throttle


# Tests must not depend on the developer's shell: theme and log level come
# from the environment at runtime.
os.environ.pop("SPINWHEEL_THEME", None)
os.environ.pop("SPINWHEEL_TK_SCALING", None)
os.environ.pop("SPINWHEEL_DEBUG", None)


@pytest.fixture(autouse=True)
def _fresh_log_throttle():
    reset_throttle()
    yield
    reset_throttle()


class FakeScheduler:
    """Collects frame requests instead of waiting for a display refresh."""

    def __init__(self):
        self._next = 0
        self.pending: dict[int, object] = {}
        self.cancelled: list[int] = []
        self.requested = 0

    def request_frame(self, callback):
        self._next += 1
        self.requested += 1
        self.pending[self._next] = callback
        return self._next

    def cancel_frame(self, handle):
        self.cancelled.append(handle)
        self.pending.pop(handle, None)

    def fire(self, timestamp_ms: float) -> int:
        """Run every pending frame at *timestamp_ms*; return how many ran."""
        due = list(self.pending.items())
        self.pending.clear()
        for _handle, cb in due:
            cb(timestamp_ms)
        return len(due)


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()
