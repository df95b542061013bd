"""
Netscape Bookmark File Converter

Parse NETSCAPE-Bookmark-file-1 exports (as written by Chrome, Firefox and
other browsers) into a tree of folders and bookmarks, and serialize such a
tree back to a canonical bookmark document.
"""

__version__ = "1.0.0"

from .core.data_models import (
    Bookmark,
    BookmarkFile,
    Folder,
    Item,
    count_items,
    is_folder,
    item_from_dict,
)
from .core.netscape_parser import BookmarkParser, parse
from .core.netscape_serializer import BookmarkSerializer, serialize
from .utils.error_handler import (
    BookmarkConversionError,
    ConfigurationError,
    MalformedDocumentError,
    NestingDepthError,
)

__all__ = [
    "Bookmark",
    "BookmarkFile",
    "Folder",
    "Item",
    "count_items",
    "is_folder",
    "item_from_dict",
    "BookmarkParser",
    "parse",
    "BookmarkSerializer",
    "serialize",
    "BookmarkConversionError",
    "ConfigurationError",
    "MalformedDocumentError",
    "NestingDepthError",
]
