"""OpenTelemetry sink for the map load/save metrics.

The instruments are fixed: two counters and one latency histogram, all
created when the meter is set up. Names outside that set are logged and
dropped rather than turned into new instruments.
"""

import logging
from dataclasses import dataclass
from importlib import import_module
from typing import Any

from map_source.application.ports.telemetry_port import (
    DECODE_LATENCY_METRIC,
    LOAD_METRIC,
    SAVE_METRIC,
    MetricTags,
    TelemetryPort,
)

logger = logging.getLogger(__name__)

_DESCRIPTIONS = {
    LOAD_METRIC: "Map loads by content type and outcome",
    SAVE_METRIC: "Map saves by outcome",
    DECODE_LATENCY_METRIC: "Time spent decoding loaded map content",
}


@dataclass
class OtelConfig:
    service_name: str = "map-source"
    otlp_endpoint: str | None = None  # e.g. "http://localhost:4317"
    environment: str = "production"
    enable_console: bool = False


class OpenTelemetryAdapter(TelemetryPort):
    """Records map_source.load.total, map_source.save.total and map_source.load.decode_ms."""

    def __init__(self, cfg: OtelConfig) -> None:
        self._cfg = cfg
        self._counters: dict[str, Any] = {}
        self._histograms: dict[str, Any] = {}
        self._init_instruments()

    @property
    def enabled(self) -> bool:
        return bool(self._counters)

    def _init_instruments(self) -> None:
        try:
            sdk_metrics = import_module("opentelemetry.sdk.metrics")
            sdk_export = import_module("opentelemetry.sdk.metrics.export")
            sdk_resources = import_module("opentelemetry.sdk.resources")
            api_metrics = import_module("opentelemetry.metrics")
        except ImportError as ex:
            logger.warning("OpenTelemetry SDK unavailable, map metrics disabled: %s", ex)
            return

        readers = []
        if self._cfg.otlp_endpoint:
            grpc = import_module("opentelemetry.exporter.otlp.proto.grpc.metric_exporter")
            exporter = grpc.OTLPMetricExporter(endpoint=self._cfg.otlp_endpoint)
            readers.append(sdk_export.PeriodicExportingMetricReader(exporter))
        if self._cfg.enable_console:
            readers.append(
                sdk_export.PeriodicExportingMetricReader(sdk_export.ConsoleMetricExporter())
            )

        resource = sdk_resources.Resource.create(
            {
                "service.name": self._cfg.service_name,
                "deployment.environment": self._cfg.environment,
            }
        )
        api_metrics.set_meter_provider(
            sdk_metrics.MeterProvider(resource=resource, metric_readers=readers)
        )
        meter = api_metrics.get_meter(__name__)

        for name in (LOAD_METRIC, SAVE_METRIC):
            self._counters[name] = meter.create_counter(name=name, description=_DESCRIPTIONS[name])
        self._histograms[DECODE_LATENCY_METRIC] = meter.create_histogram(
            name=DECODE_LATENCY_METRIC, unit="ms", description=_DESCRIPTIONS[DECODE_LATENCY_METRIC]
        )
        logger.debug("OpenTelemetry metrics ready for %s", self._cfg.service_name)

    def incr(self, name: str, tags: MetricTags | None = None) -> None:
        counter = self._instrument(self._counters, name)
        if counter is not None:
            counter.add(1, attributes=tags or {})

    def observe(self, name: str, value: float, tags: MetricTags | None = None) -> None:
        histogram = self._instrument(self._histograms, name)
        if histogram is not None:
            histogram.record(value, attributes=tags or {})

    def _instrument(self, instruments: dict[str, Any], name: str) -> Any | None:
        if not self.enabled:
            return None
        instrument = instruments.get(name)
        if instrument is None:
            logger.warning("Unknown metric %s dropped", name)
        return instrument
