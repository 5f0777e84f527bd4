from map_source.application.ports.telemetry_port import MetricTags, TelemetryPort


class NoopTelemetry(TelemetryPort):
    """Telemetry sink used when metrics are disabled."""

    def incr(self, name: str, tags: MetricTags | None = None) -> None:
        pass

    def observe(self, name: str, value: float, tags: MetricTags | None = None) -> None:
        pass
