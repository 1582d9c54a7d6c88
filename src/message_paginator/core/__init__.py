"""Core components for the message paginator."""

from .paginator import (
    DEFAULT_MAX_LENGTH,
    LONG_WORD_POLICIES,
    MARKER_RESOLUTIONS,
    Paginator,
    WordTooLongError,
    byte_length,
    paginate,
)
from .chunk_renderer import ChunkRenderer

__all__ = [
    "DEFAULT_MAX_LENGTH",
    "LONG_WORD_POLICIES",
    "MARKER_RESOLUTIONS",
    "Paginator",
    "WordTooLongError",
    "byte_length",
    "paginate",
    "ChunkRenderer",
]
