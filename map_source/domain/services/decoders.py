# Pure decoders: (raw content, map id) -> Result[Document, DecodeError]
from __future__ import annotations

import json
from collections.abc import Callable

from map_source.domain.errors import DecodeError
from map_source.domain.models import COLLABORATIVE_MAP_PREFIX
from map_source.domain.services.freemind_import import empty_idea, freemind_to_document
from map_source.domain.types import Document, RawContent, Result, StructuredContent

Decoder = Callable[[RawContent, str], Result[Document, DecodeError]]


def decode_json(raw: RawContent, map_id: str) -> Result[Document, DecodeError]:
    if isinstance(raw, StructuredContent):
        return Result.success(raw.value)

    try:
        document = json.loads(raw.text)
    except ValueError:  # includes UnicodeDecodeError for byte content
        return Result.failure(DecodeError.format_error())
    return Result.success(document)


def decode_freemind(raw: RawContent, map_id: str) -> Result[Document, DecodeError]:
    # Never fails; the import degrades to an empty idea on broken input.
    if isinstance(raw, StructuredContent):
        return Result.success(empty_idea())
    return Result.success(freemind_to_document(raw.text))


def redirect_collaborative(raw: RawContent, map_id: str) -> Result[Document, DecodeError]:
    return Result.failure(DecodeError.redirect(COLLABORATIVE_MAP_PREFIX + map_id))
