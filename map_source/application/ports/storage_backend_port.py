"""Storage backend port: the capability contract every map store fulfils.

FormatAdapter implements the same shape, so it can be used wherever a
backend is expected.
"""

from typing import Any, Protocol

from map_source.domain.async_result import AsyncResult


class StorageBackendPort(Protocol):
    """Port for map storage backends (file system, cloud drives, ...)."""

    description: str

    def load_map(self, map_id: str) -> AsyncResult:
        """Load raw content. Resolves with (content, map_id, content_type)."""
        ...

    def save_map(
        self,
        content: str,
        map_id: str | None,
        file_name: str,
        overwrite: bool | None = None,
    ) -> AsyncResult:
        """Save serialized content. Resolves with a backend-defined payload."""
        ...

    def recognises(self, map_id: str) -> bool:
        """Tell whether the map id belongs to this backend (no I/O)."""
        ...


def is_not_sharable(backend: Any) -> bool:
    """Optional capability flag: maps from this backend cannot be shared."""
    return bool(getattr(backend, "not_sharable", False))
