# map_source/domain/models.py
# Domain models must be pure (no I/O, no external libs)
from __future__ import annotations

from dataclasses import dataclass

from map_source.domain.types import Document

# Content types as published by storage backends; must match exactly.
JSON_CONTENT_TYPE = "application/json"
OCTET_STREAM_CONTENT_TYPE = "application/octet-stream"
FREEMIND_CONTENT_TYPE = "application/x-freemind"
COLLABORATIVE_CONTENT_TYPE = "application/vnd.mindmup.collab"

MAP_FILE_EXTENSION = ".mup"
MAP_JSON_INDENT = 2

COLLABORATIVE_MAP_PREFIX = "c"


@dataclass(frozen=True)
class MapProperties:
    """Properties handed to load subscribers alongside the document."""

    editable: bool


@dataclass(frozen=True)
class LoadedMap:
    """
    A decoded map ready to be handed to the editor.

    - document:   freshly built map content, owned by the caller from now on
    - map_id:     identifier the backend reported for the loaded content
    - properties: provenance-derived flags (read-only for foreign formats)
    """

    document: Document
    map_id: str
    properties: MapProperties
