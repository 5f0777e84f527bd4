"""Decoder registry: content type -> decoder plus provenance.

Dispatch is a table lookup. Whether a decoded map may be edited is part of
the registration, so adding a format never touches the load pipeline.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from map_source.domain.errors import DecodeError
from map_source.domain.models import (
    COLLABORATIVE_CONTENT_TYPE,
    FREEMIND_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    OCTET_STREAM_CONTENT_TYPE,
    LoadedMap,
    MapProperties,
)
from map_source.domain.services.decoders import (
    Decoder,
    decode_freemind,
    decode_json,
    redirect_collaborative,
)
from map_source.domain.types import RawContent, Result

logger = logging.getLogger(__name__)

Fallback = Callable[[str | None], DecodeError]


@dataclass(frozen=True)
class Decoding:
    decoder: Decoder
    editable: bool


class DecoderRegistry:
    def __init__(self, fallback: Fallback = DecodeError.unsupported) -> None:
        self._decodings: dict[str, Decoding] = {}
        self._fallback = fallback

    def register(self, content_type: str, decoder: Decoder, *, editable: bool) -> None:
        self._decodings[content_type] = Decoding(decoder=decoder, editable=editable)

    def __contains__(self, content_type: object) -> bool:
        return content_type in self._decodings

    @property
    def content_types(self) -> tuple[str, ...]:
        return tuple(self._decodings)

    def decoding_for(self, content_type: str | None) -> Decoding | None:
        if content_type is None:
            return None
        return self._decodings.get(content_type)

    def decode(
        self, content_type: str | None, raw: RawContent, map_id: str
    ) -> Result[LoadedMap, DecodeError]:
        decoding = self.decoding_for(content_type)
        if decoding is None:
            return Result.failure(self._fallback(content_type))

        try:
            decoded = decoding.decoder(raw, map_id)
        except Exception as ex:  # noqa: BLE001
            logger.warning("Decoder for %s failed on map %s: %s", content_type, map_id, ex)
            return Result.failure(DecodeError.format_error())

        if not decoded.ok:
            return Result.failure(decoded.error)

        return Result.success(
            LoadedMap(
                document=decoded.value,
                map_id=map_id,
                properties=MapProperties(editable=decoding.editable),
            )
        )


def default_registry() -> DecoderRegistry:
    registry = DecoderRegistry()
    registry.register(JSON_CONTENT_TYPE, decode_json, editable=True)
    registry.register(OCTET_STREAM_CONTENT_TYPE, decode_json, editable=True)
    registry.register(FREEMIND_CONTENT_TYPE, decode_freemind, editable=False)
    registry.register(COLLABORATIVE_CONTENT_TYPE, redirect_collaborative, editable=False)
    return registry
