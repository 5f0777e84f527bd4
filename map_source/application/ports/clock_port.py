from __future__ import annotations

from abc import ABC, abstractmethod


class ClockPort(ABC):
    """Monotonic time source for measuring how long a decode takes."""

    @abstractmethod
    def monotonic_ms(self) -> float:
        """Milliseconds from an arbitrary fixed origin; only differences mean anything."""
        ...
