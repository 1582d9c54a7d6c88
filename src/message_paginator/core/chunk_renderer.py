"""Chunk renderer for displaying paginated messages."""

from .paginator import byte_length


class ChunkRenderer:
    """Renders paginated chunks as numbered parts ready to copy and send."""

    def render(
        self,
        chunks: list[str],
        show_labels: bool = True,
        show_sizes: bool = False,
    ) -> str:
        """
        Render a list of chunks for display.

        With labels, each chunk gets a "Part n:" header and chunks are
        separated by a blank line. Without labels, chunks are written one
        per line exactly as they should be sent, and an empty list
        renders as an empty string.

        Args:
            chunks: Chunks returned by the paginator.
            show_labels: Whether to add 1-based part headers.
            show_sizes: Whether to include each chunk's byte count.

        Returns:
            Formatted output string.
        """
        if not show_labels:
            return "\n".join(chunks)

        if not chunks:
            return "(empty message)"

        blocks = []
        for i, chunk in enumerate(chunks, 1):
            header = f"Part {i}"
            if show_sizes:
                header += f" ({byte_length(chunk)} bytes)"
            blocks.append(f"{header}:\n{chunk}")

        return "\n\n".join(blocks)
