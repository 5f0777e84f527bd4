"""Domain errors (typed) for map loading and saving.

Decode failures travel inside Result values and end up on the failure
channel of an AsyncResult as a (reason, message) pair.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

WRONG_FORMAT_MESSAGE = "File content not in correct format for this file type"


class DomainError(Exception):
    """Base class for domain-specific errors."""


class DecodeErrorKind(str, Enum):
    FORMAT_ERROR = "format-error"
    MAP_LOAD_REDIRECT = "map-load-redirect"
    UNSUPPORTED_FORMAT = "unsupported-format"


@dataclass(frozen=True)
class DecodeError(DomainError):
    """Raw map content could not be turned into a document."""

    kind: DecodeErrorKind
    message: str

    @classmethod
    def format_error(cls, message: str = WRONG_FORMAT_MESSAGE) -> "DecodeError":
        return cls(DecodeErrorKind.FORMAT_ERROR, message)

    @classmethod
    def redirect(cls, target_map_id: str) -> "DecodeError":
        return cls(DecodeErrorKind.MAP_LOAD_REDIRECT, target_map_id)

    @classmethod
    def unsupported(cls, content_type: str | None) -> "DecodeError":
        return cls(DecodeErrorKind.UNSUPPORTED_FORMAT, f"Unsupported format {content_type}")

    @property
    def reason(self) -> str:
        """Reason string published to failure subscribers.

        Unsupported content is reported as a plain format error, so callers
        only ever have to handle format errors and redirects.
        """
        if self.kind is DecodeErrorKind.UNSUPPORTED_FORMAT:
            return DecodeErrorKind.FORMAT_ERROR.value
        return self.kind.value

    @property
    def is_redirect(self) -> bool:
        return self.kind is DecodeErrorKind.MAP_LOAD_REDIRECT

    def __str__(self) -> str:
        return f"{self.reason}: {self.message}"


class AsyncResultRejected(DomainError):
    """An awaited AsyncResult settled on its failure channel.

    ``args`` holds the rejection payload exactly as it was published.
    """

    @property
    def reason(self) -> Any:
        return self.args[0] if self.args else None
