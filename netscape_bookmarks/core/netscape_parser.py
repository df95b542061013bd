"""
Netscape bookmark file parser.

This module turns a NETSCAPE-Bookmark-file-1 document into a Folder tree.
Exporters disagree on the details of the format: some wrap entries in <p>
elements, the folder's child list may sit inside or beside its <DT>, and
attribute names come in any case. The parser accepts all of these shapes and
only fails when the document has no <DL> list at all.
"""

import logging
import re
from functools import partial
from typing import Any, Callable, List, Optional, Tuple

from ..config.pydantic_config import ParserConfig
from ..utils.error_handler import MalformedDocumentError, NestingDepthError
from .data_models import Bookmark, Folder, Item, count_items
from .escaping import unescape_html
from .markup_tree import MarkupTree, SoupMarkupTree

_TIMESTAMP_PATTERN = re.compile(r"[0-9]+")

# (entry, siblings, index of entry within siblings)
Entry = Tuple[Any, List[Any], int]


def parse_timestamp(value: Optional[str]) -> Optional[int]:
    """
    Parse an ADD_DATE / LAST_MODIFIED value.

    Args:
        value: Raw attribute value (epoch seconds as a decimal string)

    Returns:
        The timestamp, or None if the value is missing or not a
        non-negative base-10 integer
    """
    if value is None:
        return None

    value = value.strip()
    if not _TIMESTAMP_PATTERN.fullmatch(value):
        return None
    return int(value)


def parse_flag(value: Optional[str]) -> Optional[bool]:
    """Parse a boolean marker attribute such as PERSONAL_TOOLBAR_FOLDER."""
    if value is None:
        return None
    return value.strip().lower() != "false"


class BookmarkParser:
    """
    Parser for Netscape bookmark exports.

    Example:
        >>> parser = BookmarkParser()
        >>> root = parser.parse(html)
        >>> [item.name for item in root.items]
    """

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        tree_factory: Optional[Callable[[str], MarkupTree]] = None,
    ):
        """
        Initialize the parser.

        Args:
            config: Parser settings (defaults to ParserConfig())
            tree_factory: Callable loading a document into a MarkupTree;
                defaults to SoupMarkupTree with the configured tree builder
        """
        self.logger = logging.getLogger(__name__)
        self.config = config or ParserConfig()
        self.tree_factory = tree_factory or partial(
            SoupMarkupTree.load, builder=self.config.tree_builder
        )

    def parse(self, document: str) -> Folder:
        """
        Parse a bookmark document.

        Args:
            document: Bookmark file contents

        Returns:
            Root folder of the bookmark tree

        Raises:
            MalformedDocumentError: If the document has no <DL> list
        """
        return self.parse_tree(self.tree_factory(document))

    def parse_tree(self, tree: MarkupTree) -> Folder:
        """
        Build the bookmark tree from an already loaded document.

        Args:
            tree: Loaded markup document

        Returns:
            Root folder of the bookmark tree

        Raises:
            MalformedDocumentError: If the document has no <DL> list
        """
        root_list = tree.find_first("dl")
        if root_list is None:
            raise MalformedDocumentError("No bookmark data found (missing <DL> element)")

        heading = tree.find_first("h1")
        if heading is None or not tree.precedes(heading, root_list):
            self.logger.debug("No <H1> heading before the list, root folder is unnamed")
            name = ""
        else:
            name = unescape_html(tree.text(heading).strip())

        root = Folder(name=name, items=self._parse_items(tree, root_list, depth=0))

        folder_count, bookmark_count = count_items(root)
        self.logger.info(
            f"Parsed {bookmark_count} bookmarks in {folder_count} folders"
        )
        return root

    def _resolve_entries(self, tree: MarkupTree, container: Any) -> List[Entry]:
        """
        Collect the <DT> entries of a list in document order.

        Entries are either direct children of the list or children of a <p>
        that is itself a direct child of the list.
        """
        entries = []
        children = tree.children(container)

        for index, child in enumerate(children):
            tag = tree.tag_name(child)
            if tag == "dt":
                entries.append((child, children, index))
            elif tag == "p":
                wrapped = tree.children(child)
                for inner_index, inner in enumerate(wrapped):
                    if tree.tag_name(inner) == "dt":
                        entries.append((inner, wrapped, inner_index))

        return entries

    def _parse_items(self, tree: MarkupTree, container: Any, depth: int) -> List[Item]:
        """
        Parse the entries of a list into folders and bookmarks.

        Args:
            tree: Loaded markup document
            container: The <DL> element
            depth: Nesting depth of the folder owning this list (root is 0)

        Returns:
            Items in document order
        """
        items: List[Item] = []

        for entry, siblings, index in self._resolve_entries(tree, container):
            parts = tree.children(entry)
            first = parts[0] if parts else None
            first_tag = tree.tag_name(first) if first is not None else None

            if first_tag == "h3":
                items.append(
                    self._parse_folder(tree, first, parts, siblings, index, depth + 1)
                )
            elif first_tag == "a":
                items.append(self._parse_bookmark(tree, first))
            else:
                self.logger.debug(
                    f"Skipping entry of unknown shape (first child: {first_tag})"
                )

        return items

    def _parse_folder(
        self,
        tree: MarkupTree,
        heading: Any,
        parts: List[Any],
        siblings: List[Any],
        index: int,
        depth: int,
    ) -> Folder:
        """Build a Folder from its <H3> heading and nested list."""
        max_depth = self.config.max_depth
        if max_depth is not None and depth > max_depth:
            raise NestingDepthError(max_depth)

        folder = Folder(
            name=unescape_html(tree.text(heading).strip()),
            add_date=parse_timestamp(tree.attribute(heading, "ADD_DATE")),
            last_modified=parse_timestamp(tree.attribute(heading, "LAST_MODIFIED")),
            personal_toolbar_folder=parse_flag(
                tree.attribute(heading, "PERSONAL_TOOLBAR_FOLDER")
            ),
        )

        nested = self._find_list_after(tree, parts, 0)
        if nested is None:
            nested = self._find_list_after(tree, siblings, index)

        if nested is None:
            self.logger.debug(f"Folder '{folder.name}' has no nested list")
        else:
            folder.items = self._parse_items(tree, nested, depth)

        return folder

    def _find_list_after(
        self, tree: MarkupTree, nodes: List[Any], index: int
    ) -> Optional[Any]:
        """
        Find the nearest <DL> following nodes[index].

        A <DD> description may wrap the list, in which case the list inside it
        is returned. The search ends at the next <DT>, which owns everything
        after it.
        """
        for node in nodes[index + 1:]:
            tag = tree.tag_name(node)
            if tag == "dl":
                return node
            if tag == "dd":
                for inner in tree.children(node):
                    if tree.tag_name(inner) == "dl":
                        return inner
            elif tag == "dt":
                return None
        return None

    def _parse_bookmark(self, tree: MarkupTree, anchor: Any) -> Bookmark:
        """Build a Bookmark from its <A> element."""
        href = tree.attribute(anchor, "HREF")
        icon = tree.attribute(anchor, "ICON")
        icon_uri = tree.attribute(anchor, "ICON_URI")

        return Bookmark(
            href=unescape_html(href) if href is not None else "",
            name=unescape_html(tree.text(anchor).strip()),
            add_date=parse_timestamp(tree.attribute(anchor, "ADD_DATE")),
            last_modified=parse_timestamp(tree.attribute(anchor, "LAST_MODIFIED")),
            icon=unescape_html(icon) if icon is not None else None,
            icon_uri=unescape_html(icon_uri) if icon_uri is not None else None,
        )


def parse(document: str, config: Optional[ParserConfig] = None) -> Folder:
    """
    Parse a Netscape bookmark document into a Folder tree.

    Args:
        document: Bookmark file contents
        config: Optional parser settings

    Returns:
        Root folder of the bookmark tree

    Raises:
        MalformedDocumentError: If the document has no <DL> list
    """
    return BookmarkParser(config).parse(document)
