from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


@dataclass(frozen=True)
class Result(Generic[T, E]):
    ok: bool
    value: T | None = None
    error: E | None = None

    @staticmethod
    def success(v: T) -> "Result[T, E]":
        return Result(ok=True, value=v)

    @staticmethod
    def failure(e: E) -> "Result[T, E]":
        return Result(ok=False, error=e)


Document = dict[str, Any]  # opaque map content; only "title" is read here


@dataclass(frozen=True)
class TextContent:
    """Serialized map content as delivered by the backend."""

    text: str | bytes


@dataclass(frozen=True)
class StructuredContent:
    """Map content the backend already parsed into a structure."""

    value: Any


RawContent = TextContent | StructuredContent


def raw_content_from(content: Any) -> RawContent:
    """Tag backend content as text or as an already parsed structure."""
    if isinstance(content, str):
        return TextContent(content)
    if isinstance(content, bytes | bytearray):
        # decoded by the consumer, so bad encodings fail there
        return TextContent(bytes(content))
    return StructuredContent(content)
