"""
Pytest configuration and shared fixtures for netscape_bookmarks tests.

This module provides common fixtures that are shared across multiple test
modules.
"""

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from netscape_bookmarks.core.netscape_parser import BookmarkParser
from netscape_bookmarks.core.netscape_serializer import BookmarkSerializer
from tests.fixtures.test_data import CHROME_EXPORT, FIREFOX_EXPORT

# ============================================================================
# Temporary Directory Fixtures
# ============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp(prefix="bookmark_test_"))
    try:
        yield temp_path
    finally:
        if temp_path.exists():
            shutil.rmtree(temp_path)


# ============================================================================
# Converter Fixtures
# ============================================================================


@pytest.fixture
def parser() -> BookmarkParser:
    """Parser with default configuration."""
    return BookmarkParser()


@pytest.fixture
def serializer() -> BookmarkSerializer:
    """Serializer instance."""
    return BookmarkSerializer()


@pytest.fixture
def chrome_export() -> str:
    """Chrome-style bookmark export."""
    return CHROME_EXPORT


@pytest.fixture
def firefox_export() -> str:
    """Firefox-style bookmark export."""
    return FIREFOX_EXPORT


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """Restore root logger handlers and level after a test reconfigures them."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        yield
    finally:
        for handler in list(root.handlers):
            if handler not in saved_handlers:
                root.removeHandler(handler)
                handler.close()
        for handler in saved_handlers:
            if handler not in root.handlers:
                root.addHandler(handler)
        root.setLevel(saved_level)
