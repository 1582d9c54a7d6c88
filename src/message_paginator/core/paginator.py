"""Paginator for splitting messages into byte-limited [k/N] chunks."""

import logging
import re
from dataclasses import dataclass

from .word_splitter import next_piece

logger = logging.getLogger(__name__)

DEFAULT_MAX_LENGTH = 160  # one GSM SMS segment

LONG_WORD_POLICIES = ("emit", "error", "split")
MARKER_RESOLUTIONS = ("placeholder", "exact")

PLACEHOLDER = "XX"
_PLACEHOLDER_MARKER = re.compile(r"^\[(\d+)/XX\] ")


def byte_length(text: str) -> int:
    """Return the size of text when encoded as UTF-8."""
    return len(text.encode("utf-8"))


class WordTooLongError(ValueError):
    """Raised when a single word cannot fit in any chunk."""

    def __init__(self, word: str, max_length: int):
        self.word = word
        self.word_bytes = byte_length(word)
        self.max_length = max_length
        preview = word if len(word) <= 20 else f"{word[:20]}..."
        super().__init__(
            f"Word {preview!r} ({self.word_bytes} bytes) does not fit "
            f"in a {max_length}-byte chunk"
        )


@dataclass(frozen=True)
class Paginator:
    """Splits messages into chunks of at most max_length bytes.

    Words are never split across chunks unless long_words is "split".
    Multi-chunk output gets a leading "[k/N]" marker on every chunk.

    Attributes:
        max_length: Maximum UTF-8 byte length of a finished chunk.
        long_words: What to do with a word that does not fit in an empty
            chunk: "emit" it oversized, raise an "error", or "split" it.
        marker_resolution: "placeholder" packs with a fixed-width "XX"
            total and fills it in afterwards (may overflow when N >= 100).
            "exact" repacks until the width of N is stable. A chunk can
            still overflow when its marker alone leaves no room, since
            every chunk holds at least one character.
    """

    max_length: int = DEFAULT_MAX_LENGTH
    long_words: str = "emit"
    marker_resolution: str = "placeholder"

    def __post_init__(self):
        if self.max_length < 1:
            raise ValueError(f"max_length must be >= 1, got {self.max_length}")
        if self.long_words not in LONG_WORD_POLICIES:
            raise ValueError(
                f"long_words must be one of {', '.join(LONG_WORD_POLICIES)}, "
                f"got {self.long_words!r}"
            )
        if self.marker_resolution not in MARKER_RESOLUTIONS:
            raise ValueError(
                f"marker_resolution must be one of {', '.join(MARKER_RESOLUTIONS)}, "
                f"got {self.marker_resolution!r}"
            )

    def paginate(self, message: str) -> list[str]:
        """
        Split a message into chunks that fit within max_length bytes.

        Whitespace between words is collapsed to single spaces. If the
        normalized message fits, it is returned as one chunk without a
        marker. Otherwise each chunk starts with "[k/N] ".

        Args:
            message: The text to paginate.

        Returns:
            Ordered list of chunks (empty for empty or blank input).

        Raises:
            WordTooLongError: If long_words is "error" and a word cannot
                fit in a chunk on its own.
        """
        if not message:
            return []

        words = message.split()
        if not words:
            return []

        normalized = " ".join(words)
        if byte_length(normalized) <= self.max_length:
            return [normalized]

        if self.marker_resolution == "exact":
            chunks = self._paginate_exact(words)
        else:
            chunks = self._paginate_placeholder(words)

        logger.debug(
            f"Paginated {byte_length(normalized)} bytes into {len(chunks)} chunks "
            f"(max {self.max_length} bytes)"
        )

        oversized = [
            i for i, chunk in enumerate(chunks, 1) if byte_length(chunk) > self.max_length
        ]
        if oversized:
            logger.warning(
                f"{len(oversized)} chunk(s) oversized beyond {self.max_length} bytes "
                f"(first: chunk {oversized[0]})"
            )
        return chunks

    def _paginate_placeholder(self, words: list[str]) -> list[str]:
        """Pack with "[k/XX]" markers, then substitute the real total."""
        chunks = self._pack(words, lambda index: f"[{index}/{PLACEHOLDER}]")
        total = len(chunks)
        return [
            _PLACEHOLDER_MARKER.sub(lambda m: f"[{m.group(1)}/{total}] ", chunk)
            for chunk in chunks
        ]

    def _paginate_exact(self, words: list[str]) -> list[str]:
        """Repack until the digit width of the total stops changing."""
        width = 1
        while True:
            chunks = self._pack(words, lambda index: f"[{index}/{'9' * width}]")
            needed = len(str(len(chunks)))
            if needed <= width:
                break
            logger.debug(f"Total needs {needed} digits, repacking")
            width = needed

        total = len(chunks)
        result = []
        for index, chunk in enumerate(chunks, 1):
            packing_marker = f"[{index}/{'9' * width}]"
            result.append(f"[{index}/{total}]{chunk[len(packing_marker):]}")
        return result

    def _pack(self, words: list[str], marker_for) -> list[str]:
        """
        Greedily pack words into marker-prefixed chunks.

        Args:
            words: Non-empty words in message order.
            marker_for: Callable mapping a 1-based chunk index to the
                marker text charged while packing that chunk.

        Returns:
            Chunks with the packing markers still in place.
        """
        chunks: list[str] = []
        current = marker_for(1)
        has_words = False

        for word in words:
            if byte_length(current) + 1 + byte_length(word) > self.max_length and has_words:
                chunks.append(current)
                current = marker_for(len(chunks) + 1)
                has_words = False

            room = self.max_length - byte_length(current) - 1
            if byte_length(word) > room:
                if self.long_words == "error":
                    raise WordTooLongError(word, self.max_length)
                if self.long_words == "split":
                    while byte_length(word) > room and len(word) > 1:
                        piece, word = next_piece(word, room)
                        chunks.append(f"{current} {piece}")
                        current = marker_for(len(chunks) + 1)
                        room = self.max_length - byte_length(current) - 1

            current = f"{current} {word}"
            has_words = True

        chunks.append(current)
        return chunks


def paginate(
    message: str,
    max_length: int = DEFAULT_MAX_LENGTH,
    *,
    long_words: str = "emit",
    marker_resolution: str = "placeholder",
) -> list[str]:
    """
    Split a message into byte-limited chunks with [k/N] markers.

    Convenience wrapper around Paginator for one-off calls.

    Args:
        message: The text to paginate.
        max_length: Maximum UTF-8 byte length per chunk (default 160).
        long_words: Oversized word policy ("emit", "error" or "split").
        marker_resolution: "placeholder" or "exact".

    Returns:
        Ordered list of chunk strings.
    """
    paginator = Paginator(
        max_length=max_length,
        long_words=long_words,
        marker_resolution=marker_resolution,
    )
    return paginator.paginate(message)
