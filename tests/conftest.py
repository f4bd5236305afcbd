"""Pytest configuration and fixtures."""

import os
import sys
from pathlib import Path

import pytest

# Make the package importable without installation
sys.path.insert(0, str(Path(__file__).parent.parent))

from linkscope.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from LINKSCOPE_* variables in the environment."""
    for name in list(os.environ):
        if name.upper().startswith("LINKSCOPE_"):
            monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mixed_urls():
    """A small collection spanning platforms, media types and invalid input."""
    return [
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://github.com/apple/swift/pull/12345",
        "https://twitter.com/someone/status/1234567890",
        "https://example.com/photo.jpg",
        "not a url",
        "http://unknownsite.xyz/page",
    ]


@pytest.fixture
def url_file(tmp_path, mixed_urls):
    """Write ``mixed_urls`` to a file with a comment and blank lines."""
    path = tmp_path / "urls.txt"
    path.write_text("# exported bookmarks\n\n" + "\n".join(mixed_urls) + "\n\n")
    return path
