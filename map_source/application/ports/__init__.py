"""Application ports package."""

from map_source.application.ports.clock_port import ClockPort
from map_source.application.ports.storage_backend_port import StorageBackendPort, is_not_sharable
from map_source.application.ports.telemetry_port import TelemetryPort

__all__ = [
    "ClockPort",
    "StorageBackendPort",
    "TelemetryPort",
    "is_not_sharable",
]
