"""
Markup tree access for the bookmark parser.

The parser only needs a handful of queries over a parsed document. They are
described by the MarkupTree base class so the parser can run against any
markup engine, or against a small in-memory tree in tests. SoupMarkupTree is
the BeautifulSoup-backed implementation used by default.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from bs4 import BeautifulSoup, Tag

from ..utils.error_handler import MalformedDocumentError

# Private-use code points that may stand in for "&" while the document is
# loaded, so the markup engine has no entities to decode.
_SENTINEL_RANGE = range(0xE000, 0xF900)


class MarkupTree(ABC):
    """
    Query interface over a parsed markup document.

    Nodes are opaque to callers: they are only ever passed back into the
    methods of the tree that returned them. Tag and attribute names are
    matched case-insensitively, and text is returned exactly as written in
    the source document.
    """

    @abstractmethod
    def find_first(self, tag: str, scope: Optional[Any] = None) -> Optional[Any]:
        """
        Find the first element with the given tag name.

        Args:
            tag: Tag name to look for
            scope: Node to search below (whole document when None)

        Returns:
            The first matching element in document order, or None
        """
        pass

    @abstractmethod
    def precedes(self, node: Any, other: Any) -> bool:
        """Return True if node starts before other in document order."""
        pass

    @abstractmethod
    def children(self, node: Any) -> List[Any]:
        """Return the direct child elements of a node in document order."""
        pass

    @abstractmethod
    def tag_name(self, node: Any) -> str:
        """Return the lower-cased tag name of an element."""
        pass

    @abstractmethod
    def attribute(self, node: Any, name: str) -> Optional[str]:
        """Return an attribute value (name matched case-insensitively), or None."""
        pass

    @abstractmethod
    def text(self, node: Any) -> str:
        """Return the concatenated text content of an element."""
        pass


class SoupMarkupTree(MarkupTree):
    """
    MarkupTree backed by a BeautifulSoup document.

    Markup engines decode character references while loading. To keep text
    and attribute values exactly as written, every "&" is swapped for a
    private-use sentinel before parsing and swapped back on every read.

    Example:
        >>> tree = SoupMarkupTree.load("<DL><DT><A HREF='a?b=1&amp;c=2'>x</A></DL>")
        >>> tree.attribute(tree.find_first("a"), "HREF")
        'a?b=1&amp;c=2'
    """

    def __init__(self, soup: BeautifulSoup, sentinel: Optional[str] = None):
        """
        Wrap an already parsed document.

        Args:
            soup: Parsed BeautifulSoup document
            sentinel: Character that replaced "&" before parsing, if any
        """
        self.soup = soup
        self.sentinel = sentinel

    @classmethod
    def load(cls, document: str, builder: str = "html5lib") -> "SoupMarkupTree":
        """
        Parse a document without decoding character references.

        Args:
            document: Raw markup text
            builder: BeautifulSoup tree builder (the parser expects the html5lib
                tree shape)

        Returns:
            SoupMarkupTree over the parsed document
        """
        sentinel = cls._pick_sentinel(document)
        soup = BeautifulSoup(document.replace("&", sentinel), builder)
        logging.getLogger(__name__).debug(
            f"Loaded {len(document)} characters with the {builder} tree builder"
        )
        return cls(soup, sentinel)

    @staticmethod
    def _pick_sentinel(document: str) -> str:
        """Pick a private-use character that does not occur in the document."""
        for codepoint in _SENTINEL_RANGE:
            candidate = chr(codepoint)
            if candidate not in document:
                return candidate
        raise MalformedDocumentError(
            "Document uses every private-use character; cannot load it verbatim"
        )

    def _restore(self, value: str) -> str:
        if self.sentinel is None:
            return value
        return value.replace(self.sentinel, "&")

    def find_first(self, tag: str, scope: Optional[Any] = None) -> Optional[Tag]:
        root = self.soup if scope is None else scope
        return root.find(tag.lower())

    def precedes(self, node: Tag, other: Tag) -> bool:
        return any(element is node for element in other.previous_elements)

    def children(self, node: Tag) -> List[Tag]:
        return [child for child in node.children if isinstance(child, Tag)]

    def tag_name(self, node: Tag) -> str:
        return node.name.lower()

    def attribute(self, node: Tag, name: str) -> Optional[str]:
        wanted = name.lower()
        for key, value in node.attrs.items():
            if key.lower() == wanted:
                # Multi-valued attributes (class, rel) come back as lists
                if isinstance(value, list):
                    value = " ".join(value)
                return self._restore(value)
        return None

    def text(self, node: Tag) -> str:
        return self._restore(node.get_text())
