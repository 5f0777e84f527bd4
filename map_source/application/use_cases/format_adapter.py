# map_source/application/use_cases/format_adapter.py
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from map_source.application.ports.clock_port import ClockPort
from map_source.application.ports.storage_backend_port import StorageBackendPort, is_not_sharable
from map_source.application.ports.telemetry_port import (
    DECODE_LATENCY_METRIC,
    LOAD_METRIC,
    SAVE_METRIC,
    MetricTags,
    TelemetryPort,
)
from map_source.domain.async_result import AsyncResult
from map_source.domain.errors import DecodeErrorKind
from map_source.domain.models import MAP_FILE_EXTENSION, MAP_JSON_INDENT
from map_source.domain.services.decoder_registry import DecoderRegistry, default_registry
from map_source.domain.types import Document, raw_content_from

logger = logging.getLogger(__name__)

BACKEND_ERROR = "backend-error"
MISSING_TITLE = "untitled"


class FormatAdapter:
    """
    Wraps a storage backend and normalises the formats it returns.

    Loads are decoded by content type and tagged editable or read-only;
    saves are encoded as indented JSON under "<title>.mup". Progress, success
    and failure of the backend are republished through a fresh AsyncResult
    per call. Neither load_map nor save_map raises: every failure arrives on
    the failure channel.

    The adapter has the same shape as a backend and can replace one.
    """

    def __init__(
        self,
        backend: StorageBackendPort,
        registry: DecoderRegistry | None = None,
        telemetry: TelemetryPort | None = None,
        clock: ClockPort | None = None,
        file_extension: str = MAP_FILE_EXTENSION,
        json_indent: int = MAP_JSON_INDENT,
    ) -> None:
        self._backend = backend
        self._registry = registry or default_registry()
        self._telemetry = telemetry
        self._clock = clock
        self._file_extension = file_extension
        self._json_indent = json_indent

    # ----- passthroughs (read at access time) -----

    @property
    def description(self) -> str:
        return self._backend.description

    @property
    def not_sharable(self) -> bool:
        return is_not_sharable(self._backend)

    def recognises(self, map_id: str) -> bool:
        return self._backend.recognises(map_id)

    # ----- load -----

    def load_map(self, map_id: str) -> AsyncResult:
        result = AsyncResult()

        def _on_failure(*args: Any) -> None:
            logger.warning("Backend failed to load map %s: %r", map_id, args)
            result.reject(*args)
            self._incr(LOAD_METRIC, {"content_type": "unknown", "outcome": BACKEND_ERROR})

        def _on_loaded(content: Any, loaded_id: str, content_type: str | None = None) -> None:
            self._publish_decoded(result, content, loaded_id, content_type)

        try:
            loading = self._backend.load_map(map_id)
        except Exception as ex:  # noqa: BLE001
            _on_failure(ex)
            return result

        loading.progress(result.notify).fail(_on_failure).done(_on_loaded)
        return result

    def _publish_decoded(
        self, result: AsyncResult, content: Any, map_id: str, content_type: str | None
    ) -> None:
        logger.debug("Decoding map %s as %s", map_id, content_type)
        started = self._clock.monotonic_ms() if self._clock else None
        decoded = self._registry.decode(content_type, raw_content_from(content), map_id)
        elapsed_ms = self._clock.monotonic_ms() - started if started is not None else None

        tags = {"content_type": str(content_type)}
        if decoded.ok:
            loaded = decoded.value
            result.resolve(loaded.document, loaded.map_id, loaded.properties)
            tags["outcome"] = "ok"
        else:
            error = decoded.error
            if error.is_redirect:
                logger.info("Map %s is collaborative, redirecting to %s", map_id, error.message)
            else:
                logger.warning("Map %s not loaded: %s", map_id, error)
            result.reject(error.reason, error.message)
            tags["outcome"] = error.reason

        if elapsed_ms is not None:
            self._observe(DECODE_LATENCY_METRIC, elapsed_ms, {"content_type": tags["content_type"]})
        self._incr(LOAD_METRIC, tags)

    # ----- save -----

    def save_map(
        self, document: Document, map_id: str | None = None, overwrite: bool | None = None
    ) -> AsyncResult:
        result = AsyncResult()

        try:
            content = json.dumps(document, indent=self._json_indent, ensure_ascii=False)
        except (TypeError, ValueError, RecursionError) as ex:
            logger.warning("Map %s cannot be serialized: %s", map_id, ex)
            result.reject(DecodeErrorKind.FORMAT_ERROR.value, f"Map cannot be saved: {ex}")
            self._incr(SAVE_METRIC, {"outcome": DecodeErrorKind.FORMAT_ERROR.value})
            return result

        title = document.get("title") if isinstance(document, Mapping) else None
        file_name = f"{MISSING_TITLE if title is None else title}{self._file_extension}"

        def _on_saved(*args: Any) -> None:
            result.resolve(*args)
            self._incr(SAVE_METRIC, {"outcome": "ok"})

        def _on_failure(*args: Any) -> None:
            logger.warning("Backend failed to save %s: %r", file_name, args)
            result.reject(*args)
            self._incr(SAVE_METRIC, {"outcome": BACKEND_ERROR})

        try:
            saving = self._backend.save_map(content, map_id, file_name, overwrite)
        except Exception as ex:  # noqa: BLE001
            _on_failure(ex)
            return result

        saving.progress(result.notify).fail(_on_failure).done(_on_saved)
        return result

    # ----- telemetry (never allowed to break a load or save) -----

    def _incr(self, name: str, tags: MetricTags) -> None:
        if self._telemetry is None:
            return
        try:
            self._telemetry.incr(name, tags)
        except Exception as ex:  # noqa: BLE001
            logger.warning("Telemetry counter %s failed: %s", name, ex)

    def _observe(self, name: str, value: float, tags: MetricTags) -> None:
        if self._telemetry is None:
            return
        try:
            self._telemetry.observe(name, value, tags)
        except Exception as ex:  # noqa: BLE001
            logger.warning("Telemetry histogram %s failed: %s", name, ex)
