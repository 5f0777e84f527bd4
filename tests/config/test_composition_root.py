"""Tests for settings and the composition root.

The composition root is the ONLY place that:
1. Reads environment variables (via AppSettings)
2. Instantiates concrete infrastructure adapters
3. Wires them into the FormatAdapter
"""

from map_source.application.use_cases.format_adapter import FormatAdapter
from map_source.config.composition import (
    build_clock,
    build_format_adapter,
    build_registry,
    build_telemetry,
)
from map_source.config.settings import AppSettings
from map_source.domain.async_result import AsyncResult
from map_source.infrastructure.telemetry.noop_telemetry import NoopTelemetry
from map_source.infrastructure.telemetry.otel_adapter import OpenTelemetryAdapter
from map_source.infrastructure.time.system_clock import SystemClock


class RecordingBackend:
    description = "recording"

    def __init__(self) -> None:
        self.saved = []

    def load_map(self, map_id):
        return AsyncResult.resolved('{"title": "T"}', map_id, "application/json")

    def save_map(self, content, map_id, file_name, overwrite=None):
        self.saved.append((content, map_id, file_name, overwrite))
        return AsyncResult.resolved(map_id)

    def recognises(self, map_id):
        return True


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        for var in ("MAP_FILE_EXTENSION", "MAP_JSON_INDENT", "TELEMETRY_ENABLED", "MAP_SOURCE_LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)

        settings = AppSettings()

        assert settings.file_extension == ".mup"
        assert settings.json_indent == 2
        assert settings.telemetry_enabled is False
        assert settings.log_level == "INFO"

    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("MAP_FILE_EXTENSION", ".json")
        monkeypatch.setenv("MAP_JSON_INDENT", "4")
        monkeypatch.setenv("TELEMETRY_ENABLED", "TRUE")
        monkeypatch.setenv("MAP_SOURCE_LOG_LEVEL", "debug")

        settings = AppSettings()

        assert settings.file_extension == ".json"
        assert settings.json_indent == 4
        assert settings.telemetry_enabled is True
        assert settings.log_level == "DEBUG"


class TestCompositionRoot:
    def test_build_clock_returns_system_clock(self) -> None:
        assert isinstance(build_clock(), SystemClock)

    def test_build_registry_has_standard_formats(self) -> None:
        assert "application/x-freemind" in build_registry()

    def test_telemetry_disabled_is_noop(self, monkeypatch) -> None:
        monkeypatch.setenv("TELEMETRY_ENABLED", "false")
        assert isinstance(build_telemetry(AppSettings()), NoopTelemetry)

    def test_telemetry_enabled_builds_otel_adapter(self, monkeypatch) -> None:
        monkeypatch.setenv("TELEMETRY_ENABLED", "true")
        monkeypatch.setenv("OTLP_ENDPOINT", "")
        assert isinstance(build_telemetry(AppSettings()), OpenTelemetryAdapter)

    def test_build_format_adapter_applies_settings(self, monkeypatch) -> None:
        monkeypatch.setenv("MAP_FILE_EXTENSION", ".mm.json")
        monkeypatch.setenv("TELEMETRY_ENABLED", "false")
        backend = RecordingBackend()

        adapter = build_format_adapter(backend)
        adapter.save_map({"title": "plan"}, "m1", False)

        assert isinstance(adapter, FormatAdapter)
        assert backend.saved[0][2] == "plan.mm.json"
        assert backend.saved[0][3] is False

    def test_wired_adapter_loads_json(self, monkeypatch) -> None:
        monkeypatch.setenv("TELEMETRY_ENABLED", "false")
        loaded = []

        build_format_adapter(RecordingBackend()).load_map("m1").done(lambda *a: loaded.append(a))

        assert loaded[0][0] == {"title": "T"}
        assert loaded[0][2].editable is True
