"""
Netscape bookmark file serializer.

This module renders a Folder tree as a NETSCAPE-Bookmark-file-1 document.
Output is canonical: attribute names are upper case, optional attributes are
written only when set and always in the same order, and every line uses the
same terminator, so serializing an unchanged tree twice gives identical text.
"""

import logging
from typing import List

from .data_models import Bookmark, Folder, Item, count_items, is_folder
from .escaping import escape_html

LINE_TERMINATOR = "\n"
INDENT = "    "

HEADER_LINES = (
    "<!DOCTYPE NETSCAPE-Bookmark-file-1>",
    "<!-- This is an automatically generated file.",
    "     It will be read and overwritten.",
    "     DO NOT EDIT! -->",
    '<META HTTP-EQUIV="Content-Type" CONTENT="text/html; charset=UTF-8">',
    "<TITLE>Bookmarks</TITLE>",
)


class BookmarkSerializer:
    """
    Serializer for Netscape bookmark exports.

    Example:
        >>> serializer = BookmarkSerializer()
        >>> html = serializer.serialize(Folder(name="Bookmarks"))
    """

    def __init__(self):
        """Initialize the serializer."""
        self.logger = logging.getLogger(__name__)

    def serialize(self, root: Folder) -> str:
        """
        Render a bookmark tree as a document.

        Args:
            root: Root folder of the bookmark tree

        Returns:
            Document text, lines joined with LINE_TERMINATOR
        """
        lines = list(HEADER_LINES)
        lines.append(f"<H1>{escape_html(root.name)}</H1>")
        lines.append("")
        lines.append("<DL><p>")
        self._serialize_items(root.items, lines, 1)
        lines.append("</DL><p>")

        folder_count, bookmark_count = count_items(root)
        self.logger.info(
            f"Serialized {bookmark_count} bookmarks in {folder_count} folders"
        )
        return LINE_TERMINATOR.join(lines)

    def _serialize_items(self, items: List[Item], lines: List[str], level: int) -> None:
        for item in items:
            if is_folder(item):
                self._serialize_folder(item, lines, level)
            else:
                self._serialize_bookmark(item, lines, level)

    def _serialize_folder(self, folder: Folder, lines: List[str], level: int) -> None:
        """Append the heading and nested list of a folder."""
        indent = INDENT * level

        attrs = []
        if folder.add_date is not None:
            attrs.append(f'ADD_DATE="{folder.add_date}"')
        if folder.last_modified is not None:
            attrs.append(f'LAST_MODIFIED="{folder.last_modified}"')
        if folder.personal_toolbar_folder is not None:
            flag = "true" if folder.personal_toolbar_folder else "false"
            attrs.append(f'PERSONAL_TOOLBAR_FOLDER="{flag}"')

        attr_string = "".join(f" {attr}" for attr in attrs)
        lines.append(f"{indent}<DT><H3{attr_string}>{escape_html(folder.name)}</H3>")
        lines.append(f"{indent}<DL><p>")
        self._serialize_items(folder.items, lines, level + 1)
        lines.append(f"{indent}</DL><p>")

    def _serialize_bookmark(
        self, bookmark: Bookmark, lines: List[str], level: int
    ) -> None:
        """Append the anchor line of a bookmark."""
        attrs = [f'HREF="{escape_html(bookmark.href)}"']
        if bookmark.add_date is not None:
            attrs.append(f'ADD_DATE="{bookmark.add_date}"')
        if bookmark.last_modified is not None:
            attrs.append(f'LAST_MODIFIED="{bookmark.last_modified}"')
        if bookmark.icon_uri is not None:
            attrs.append(f'ICON_URI="{escape_html(bookmark.icon_uri)}"')
        if bookmark.icon is not None:
            attrs.append(f'ICON="{escape_html(bookmark.icon)}"')

        lines.append(
            f"{INDENT * level}<DT><A {' '.join(attrs)}>{escape_html(bookmark.name)}</A>"
        )


def serialize(root: Folder) -> str:
    """
    Render a bookmark tree as a Netscape bookmark document.

    Args:
        root: Root folder of the bookmark tree

    Returns:
        Document text
    """
    return BookmarkSerializer().serialize(root)
