"""Utility helpers shared across netscape_bookmarks."""

from .error_handler import (
    BookmarkConversionError,
    ConfigurationError,
    MalformedDocumentError,
    NestingDepthError,
)
from .logging_setup import setup_logging

__all__ = [
    "BookmarkConversionError",
    "ConfigurationError",
    "MalformedDocumentError",
    "NestingDepthError",
    "setup_logging",
]
