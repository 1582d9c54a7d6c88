"""Configuration handling for the message paginator."""

from dataclasses import dataclass
from pathlib import Path
import yaml


@dataclass
class Config:
    """Configuration settings for the paginator CLI.

    Attributes:
        max_length: Channel byte limit per message.
        reserved_bytes: Bytes held back for channel overhead (signatures,
            carrier headers) before paginating.
        long_words: Oversized word policy (emit, error, split).
        marker_resolution: How [k/N] markers are sized (placeholder, exact).
        show_labels: Print "Part n:" headers above each chunk.
        show_sizes: Print each chunk's byte count in its header.
    """

    max_length: int = 160
    reserved_bytes: int = 0
    long_words: str = "emit"
    marker_resolution: str = "placeholder"
    show_labels: bool = True
    show_sizes: bool = False

    def effective_max_length(self) -> int:
        """Get the byte budget left for chunks after reserved overhead."""
        return self.max_length - self.reserved_bytes


def load_config(path: str | Path) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Config object with loaded values.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    # Extract sections
    paginator = data.get("paginator") or {}
    output = data.get("output") or {}

    return Config(
        max_length=paginator.get("max_length", Config.max_length),
        reserved_bytes=paginator.get("reserved_bytes", Config.reserved_bytes),
        long_words=paginator.get("long_words", Config.long_words),
        marker_resolution=paginator.get("marker_resolution", Config.marker_resolution),
        show_labels=output.get("show_labels", Config.show_labels),
        show_sizes=output.get("show_sizes", Config.show_sizes),
    )
