from map_source.application.ports.clock_port import ClockPort
from map_source.application.ports.storage_backend_port import StorageBackendPort
from map_source.application.ports.telemetry_port import TelemetryPort
from map_source.application.use_cases.format_adapter import FormatAdapter
from map_source.config.settings import AppSettings
from map_source.domain.services.decoder_registry import DecoderRegistry, default_registry
from map_source.infrastructure.telemetry.noop_telemetry import NoopTelemetry
from map_source.infrastructure.time.system_clock import SystemClock


def build_registry() -> DecoderRegistry:
    return default_registry()


def build_clock() -> ClockPort:
    """Build clock adapter for decode timing.

    Note:
        Tests should inject a fake clock instead.
    """
    return SystemClock()


def build_telemetry(settings: AppSettings) -> TelemetryPort:
    """Build telemetry adapter based on settings.telemetry_enabled.

    Returns:
        OpenTelemetryAdapter, or NoopTelemetry when telemetry is disabled.
    """
    if not settings.telemetry_enabled:
        return NoopTelemetry()

    from map_source.infrastructure.telemetry.otel_adapter import OpenTelemetryAdapter, OtelConfig

    cfg = OtelConfig(
        service_name="map-source",
        otlp_endpoint=settings.otlp_endpoint or None,
        environment=settings.telemetry_environment,
        enable_console=False,
    )
    return OpenTelemetryAdapter(cfg)


def build_format_adapter(
    backend: StorageBackendPort, settings: AppSettings | None = None
) -> FormatAdapter:
    """Wrap a storage backend in a FormatAdapter wired from settings.

    The backend itself is provided by the embedding application.
    """
    settings = settings or AppSettings()
    return FormatAdapter(
        backend,
        registry=build_registry(),
        telemetry=build_telemetry(settings),
        clock=build_clock(),
        file_extension=settings.file_extension,
        json_indent=settings.json_indent,
    )
