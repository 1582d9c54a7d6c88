"""Command-line interface for the message paginator."""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .config import Config, load_config
from .core import (
    LONG_WORD_POLICIES,
    ChunkRenderer,
    Paginator,
    WordTooLongError,
    byte_length,
)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Message Paginator - Split long text into numbered SMS-sized parts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "Some long message ..."       # Paginate at 160 bytes
  %(prog)s -f message.txt                # Read message from a file
  echo "..." | %(prog)s                  # Read message from stdin
  %(prog)s -m 160 --reserve 12 -f msg    # 148-byte parts
  %(prog)s --raw -f msg                  # One part per line, no labels
  %(prog)s -c config.yaml -f msg         # Use specific config file
""",
    )

    parser.add_argument(
        "message",
        nargs="*",
        help="Message text (read from stdin when omitted)",
    )

    parser.add_argument(
        "-f", "--file",
        metavar="FILE",
        help="Read the message from a file",
    )

    parser.add_argument(
        "-c", "--config",
        metavar="FILE",
        help="Path to YAML configuration file",
    )

    parser.add_argument(
        "-m", "--max-length",
        type=int,
        metavar="BYTES",
        help="Maximum bytes per part (default: 160)",
    )

    parser.add_argument(
        "--reserve",
        type=int,
        metavar="BYTES",
        help="Bytes reserved for channel overhead, subtracted from max length",
    )

    parser.add_argument(
        "--long-words",
        choices=LONG_WORD_POLICIES,
        help="Handling of words too long for a single part (default: emit)",
    )

    parser.add_argument(
        "--exact-markers",
        action="store_true",
        help="Repack until [k/N] markers fit exactly (avoids overflow past 99 parts)",
    )

    parser.add_argument(
        "--raw",
        action="store_true",
        help="Print one part per line without labels",
    )

    parser.add_argument(
        "--sizes",
        action="store_true",
        help="Show byte count of each part",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def read_message(args: argparse.Namespace) -> str:
    """
    Get the message text from arguments, a file, or stdin.

    Raises:
        FileNotFoundError: If the message file doesn't exist.
    """
    if args.message:
        return " ".join(args.message)

    if args.file:
        path = Path(args.file)
        if not path.is_file():
            raise FileNotFoundError(f"Message file not found: {args.file}")
        return path.read_text(encoding="utf-8")

    return sys.stdin.read()


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    logger = logging.getLogger(__name__)

    # Load configuration
    if args.config:
        try:
            config = load_config(args.config)
        except FileNotFoundError:
            logger.error(f"Config file not found: {args.config}")
            return 1
    else:
        config = Config()

    # Override config with command line arguments
    if args.max_length is not None:
        config = replace(config, max_length=args.max_length)
    if args.reserve is not None:
        config = replace(config, reserved_bytes=args.reserve)
    if args.long_words:
        config = replace(config, long_words=args.long_words)
    if args.exact_markers:
        config = replace(config, marker_resolution="exact")
    if args.raw:
        config = replace(config, show_labels=False)
    if args.sizes:
        config = replace(config, show_sizes=True)

    try:
        paginator = Paginator(
            max_length=config.effective_max_length(),
            long_words=config.long_words,
            marker_resolution=config.marker_resolution,
        )
    except (TypeError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        message = read_message(args)
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1

    logger.debug(
        f"Paginating {byte_length(message)} bytes at {paginator.max_length} bytes per part"
    )

    try:
        chunks = paginator.paginate(message)
    except WordTooLongError as e:
        logger.error(str(e))
        logger.info("Use --long-words split to break long words across parts")
        return 1

    logger.info(f"Message split into {len(chunks)} part(s)")

    renderer = ChunkRenderer()
    output = renderer.render(chunks, show_labels=config.show_labels, show_sizes=config.show_sizes)
    if output:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
