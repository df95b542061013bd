"""
Exception hierarchy for netscape_bookmarks.

All custom exceptions for the project are defined here.
Import these exceptions from netscape_bookmarks.utils.error_handler
"""


class BookmarkConversionError(Exception):
    """Base exception for all bookmark conversion errors."""

    pass


# ============================================================================
# Document Errors
# ============================================================================


class MalformedDocumentError(BookmarkConversionError):
    """Raised when a document has no bookmark list (<DL>) at all."""

    pass


class NestingDepthError(MalformedDocumentError):
    """
    Raised when folders nest deeper than the configured limit.

    Attributes:
        max_depth: The limit that was exceeded
    """

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Folder nesting exceeds the maximum depth of {max_depth}")


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(BookmarkConversionError):
    """Configuration-related errors."""

    pass
