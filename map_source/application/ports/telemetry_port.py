"""Telemetry port for load/save metrics."""

from typing import Protocol

LOAD_METRIC = "map_source.load.total"
SAVE_METRIC = "map_source.save.total"
DECODE_LATENCY_METRIC = "map_source.load.decode_ms"

COUNTER_METRICS = (LOAD_METRIC, SAVE_METRIC)
HISTOGRAM_METRICS = (DECODE_LATENCY_METRIC,)

MetricTags = dict[str, str]  # content_type, outcome


class TelemetryPort(Protocol):
    """Port for telemetry and monitoring."""

    def incr(self, name: str, tags: MetricTags | None = None) -> None:
        """Increment a counter metric."""
        ...

    def observe(self, name: str, value: float, tags: MetricTags | None = None) -> None:
        """Record one value of a histogram metric."""
        ...
