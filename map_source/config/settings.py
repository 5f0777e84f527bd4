"""Application settings with environment-driven configuration.

This is the ONLY place where environment variables are read.
All other layers receive settings via dependency injection.
"""

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class AppSettings:
    """Settings for the format adapter and its ambient services."""

    # ===== Map Files =====
    file_extension: str = field(default_factory=lambda: os.getenv("MAP_FILE_EXTENSION", ".mup"))
    json_indent: int = field(default_factory=lambda: int(os.getenv("MAP_JSON_INDENT", "2")))

    # ===== Logging =====
    log_level: str = field(
        default_factory=lambda: os.getenv("MAP_SOURCE_LOG_LEVEL", "INFO").upper()
    )

    # ===== Telemetry Configuration =====
    telemetry_enabled: bool = field(
        default_factory=lambda: os.getenv("TELEMETRY_ENABLED", "false").lower() == "true"
    )
    otlp_endpoint: str = field(default_factory=lambda: os.getenv("OTLP_ENDPOINT", ""))
    # Empty string = no OTLP export

    telemetry_environment: str = field(
        default_factory=lambda: os.getenv("TELEMETRY_ENVIRONMENT", "production")
    )
