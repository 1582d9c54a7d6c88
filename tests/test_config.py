"""Tests for the configuration module."""

import pytest
import tempfile
from message_paginator.config import Config, load_config


class TestConfig:
    """Tests for Config dataclass."""

    def test_default_values(self):
        """Config has sensible defaults."""
        config = Config()
        assert config.max_length == 160
        assert config.reserved_bytes == 0
        assert config.long_words == "emit"
        assert config.marker_resolution == "placeholder"
        assert config.show_labels is True
        assert config.show_sizes is False

    def test_custom_values(self):
        """Config accepts custom values."""
        config = Config(
            max_length=200,
            reserved_bytes=10,
            long_words="split",
            marker_resolution="exact",
            show_labels=False,
            show_sizes=True,
        )
        assert config.max_length == 200
        assert config.long_words == "split"
        assert config.marker_resolution == "exact"

    def test_effective_max_length_subtracts_reserve(self):
        """Reserved overhead is taken off the channel limit."""
        config = Config(max_length=160, reserved_bytes=12)
        assert config.effective_max_length() == 148

    def test_effective_max_length_without_reserve(self):
        """No reserve leaves the full limit."""
        assert Config().effective_max_length() == 160


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_from_yaml_file(self):
        """Load config from YAML file."""
        yaml_content = """
paginator:
  max_length: 200
  reserved_bytes: 12
  long_words: error
  marker_resolution: exact

output:
  show_labels: false
  show_sizes: true
"""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            f.flush()

            config = load_config(f.name)

            assert config.max_length == 200
            assert config.reserved_bytes == 12
            assert config.long_words == "error"
            assert config.marker_resolution == "exact"
            assert config.show_labels is False
            assert config.show_sizes is True

    def test_load_partial_config(self):
        """Load config with partial values (rest use defaults)."""
        yaml_content = """
paginator:
  max_length: 70
"""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            f.flush()

            config = load_config(f.name)

            assert config.max_length == 70
            # Rest should be defaults
            assert config.reserved_bytes == 0
            assert config.long_words == "emit"
            assert config.show_labels is True

    def test_load_empty_file(self):
        """Load config from empty file uses defaults."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("")
            f.flush()

            config = load_config(f.name)

            assert config == Config()

    def test_load_empty_section(self, tmp_path):
        """A section with no keys falls back to defaults."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("paginator:\noutput:\n  show_sizes: true\n")

        config = load_config(config_file)

        assert config.max_length == 160
        assert config.show_sizes is True

    def test_load_nonexistent_file_raises(self):
        """Loading nonexistent file raises error."""
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/config.yaml")
