"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def alphabet_message():
    """The letters a-z separated by spaces."""
    return " ".join("abcdefghijklmnopqrstuvwxyz")


@pytest.fixture
def long_message():
    """A message too long for one SMS segment."""
    return "This is a sample text message that keeps going. " * 10


@pytest.fixture
def config_file(tmp_path):
    """Write a YAML config with a small limit and raw output."""
    path = tmp_path / "config.yaml"
    path.write_text("""
paginator:
  max_length: 20
  long_words: split

output:
  show_labels: false
""")
    return path
