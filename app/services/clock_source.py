"""Clock sources supplying "now" as integer seconds."""

import time


class SystemClock:
    """Wall-clock seconds, never stepping backward within the process."""

    def __init__(self):
        self._last = 0

    def now(self) -> int:
        self._last = max(self._last, int(time.time()))
        return self._last


class FixedClock:
    """Manually driven clock for tests and replays."""

    def __init__(self, start: int = 0):
        self._now = start

    def now(self) -> int:
        return self._now

    def advance(self, seconds: int) -> int:
        if seconds < 0:
            raise ValueError(f"seconds must be >= 0, got {seconds}")
        self._now += seconds
        return self._now

    def set(self, now: int) -> None:
        self._now = now
