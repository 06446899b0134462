"""
Pytest configuration and fixtures for fuzz-wordlist tests
"""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from fuzz_wordlist.core.config import WordlistFilterConfig


@pytest.fixture
def filter_config():
    """Build a filter configuration, all toggles off unless given."""
    def _build(**kwargs):
        return WordlistFilterConfig(**kwargs)
    return _build


@pytest.fixture
def write_wordlist(tmp_path):
    """Write a wordlist file and return its path as a string."""
    def _write(content, name="wordlist.txt"):
        path = tmp_path / name
        if isinstance(content, str):
            content = content.encode("utf-8")
        path.write_bytes(content)
        return str(path)
    return _write
