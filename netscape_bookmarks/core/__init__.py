"""
Core conversion modules.

data_models holds the Folder/Bookmark tree, netscape_parser and
netscape_serializer convert it from and to bookmark documents.
"""

from .data_models import (
    Bookmark,
    BookmarkFile,
    Folder,
    Item,
    count_items,
    is_folder,
    item_from_dict,
)
from .markup_tree import MarkupTree, SoupMarkupTree
from .netscape_parser import BookmarkParser, parse
from .netscape_serializer import LINE_TERMINATOR, BookmarkSerializer, serialize

__all__ = [
    "Bookmark",
    "BookmarkFile",
    "Folder",
    "Item",
    "count_items",
    "is_folder",
    "item_from_dict",
    "MarkupTree",
    "SoupMarkupTree",
    "BookmarkParser",
    "parse",
    "LINE_TERMINATOR",
    "BookmarkSerializer",
    "serialize",
]
