"""Clock adapter backed by the interpreter's performance counter."""

from __future__ import annotations

import time

from ...application.ports.clock_port import ClockPort


class SystemClock(ClockPort):
    def monotonic_ms(self) -> float:
        return time.perf_counter() * 1000.0
