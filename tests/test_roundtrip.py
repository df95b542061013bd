"""
Round-trip tests: parse -> serialize -> parse and serialize -> parse -> serialize.
"""

import pytest

from netscape_bookmarks import Bookmark, Folder, parse, serialize
from tests.fixtures.test_data import (
    CHROME_EXPORT,
    CHROME_TREE,
    FIREFOX_EXPORT,
    FIREFOX_TREE,
    find_by_name,
)

COMPLEX_TREE = Folder(
    name="Complex Test",
    items=[
        Folder(
            name="Folder 1",
            add_date=1234567890,
            last_modified=1234567999,
            items=[
                Bookmark(
                    href="https://example.com",
                    name="Bookmark 1",
                    add_date=1234567800,
                    icon="data:image/png;base64,test",
                ),
                Folder(
                    name="Subfolder",
                    items=[Bookmark(href="https://sub.example.com", name="Sub Bookmark")],
                ),
            ],
        ),
        Bookmark(href="https://root.com", name="Root Bookmark", add_date=1234567000),
    ],
)

SPECIAL_CHARS_TREE = Folder(
    name="Test & < > \" '",
    items=[
        Bookmark(
            href="https://example.com?a=1&b=2&c=<>\"'",
            name="Special & < > \" ' chars",
            add_date=1234567890,
            icon_uri="https://example.com/favicon.ico?x=1&y=2",
        )
    ],
)

EXPLICIT_EMPTY_TREE = Folder(
    name="",
    items=[
        Bookmark(href="", name="", add_date=0, last_modified=0, icon="", icon_uri=""),
        Folder(name="", add_date=0, personal_toolbar_folder=False),
        Bookmark(href="https://unicode.example/ü", name="日本語 ☃"),
    ],
)


def deep_chain(depth: int) -> Folder:
    """Build a chain of nested folders ending in one bookmark."""
    node = Bookmark(href="https://deep.com", name="Deep Link")
    for level in range(depth, 0, -1):
        node = Folder(name=f"Level {level}", items=[node])
    return Folder(name="Deep", items=[node])


class TestTreeRoundTrip:
    """parse(serialize(tree)) reproduces the tree."""

    @pytest.mark.parametrize(
        "tree",
        [COMPLEX_TREE, SPECIAL_CHARS_TREE, EXPLICIT_EMPTY_TREE, CHROME_TREE, FIREFOX_TREE],
        ids=["complex", "special-chars", "explicit-empty", "chrome", "firefox"],
    )
    def test_parse_serialize_identity(self, tree):
        """Test structural equality after a round trip."""
        assert parse(serialize(tree)) == tree

    @pytest.mark.parametrize(
        "tree",
        [COMPLEX_TREE, SPECIAL_CHARS_TREE, EXPLICIT_EMPTY_TREE, FIREFOX_TREE],
        ids=["complex", "special-chars", "explicit-empty", "firefox"],
    )
    def test_serialization_idempotent(self, tree):
        """Test serialize(parse(serialize(tree))) is byte-identical."""
        first = serialize(tree)

        assert serialize(parse(first)) == first

    def test_escaping_round_trip(self):
        """Test escaped output and recovery of the original values."""
        tree = Folder(
            name="Root",
            items=[Bookmark(href="https://example.com?a=1&b=2", name="Test & < > \" '")],
        )

        output = serialize(tree)

        assert "Test &amp; &lt; &gt; &quot; &#39;" in output
        assert 'HREF="https://example.com?a=1&amp;b=2"' in output
        reparsed = parse(output).items[0]
        assert reparsed.name == "Test & < > \" '"
        assert reparsed.href == "https://example.com?a=1&b=2"

    def test_toolbar_folder_round_trip(self):
        """Test the toolbar flag survives a round trip."""
        tree = Folder(
            name="Bookmarks",
            items=[Folder(name="Bar", personal_toolbar_folder=True, items=[])],
        )

        output = serialize(tree)

        assert 'PERSONAL_TOOLBAR_FOLDER="true"' in output
        assert parse(output).items[0].personal_toolbar_folder is True

    def test_deep_nesting(self):
        """Test nested folders keep names, leaf and increasing indentation."""
        tree = deep_chain(3)

        output = serialize(tree)
        reparsed = parse(output)

        assert reparsed == tree
        assert find_by_name(reparsed, "Deep Link").href == "https://deep.com"

        indents = []
        for name in ["Level 1", "Level 2", "Level 3", "Deep Link"]:
            line = next(line for line in output.split("\n") if f">{name}<" in line)
            indents.append(len(line) - len(line.lstrip(" ")))
        assert indents == [4, 8, 12, 16]

    def test_carriage_returns_normalized(self):
        """Test carriage returns come back as line feeds after loading."""
        tree = Folder(
            items=[Bookmark(href="https://a.com/\r\nx", name="a\r\nb\rc")]
        )

        reparsed = parse(serialize(tree)).items[0]

        assert reparsed.name == "a\nb\nc"
        assert reparsed.href == "https://a.com/\nx"

    def test_interchange_round_trip(self):
        """Test the dict projection of a parsed tree rebuilds the same tree."""
        parsed = parse(FIREFOX_EXPORT)

        assert Folder.from_dict(parsed.to_dict()) == parsed


class TestDocumentRoundTrip:
    """Round trips starting from exported documents."""

    def test_canonical_document_reproduced(self):
        """Test a canonical document is reproduced byte for byte."""
        assert serialize(parse(CHROME_EXPORT)) == CHROME_EXPORT

    @pytest.mark.parametrize("document", [CHROME_EXPORT, FIREFOX_EXPORT])
    def test_parse_serialize_parse(self, document):
        """Test data integrity through parse -> serialize -> parse."""
        parsed = parse(document)

        assert parse(serialize(parsed)) == parsed

    @pytest.mark.parametrize("document", [CHROME_EXPORT, FIREFOX_EXPORT])
    def test_reserialize_identical(self, document):
        """Test a second serialization matches the first."""
        serialized = serialize(parse(document))

        assert serialize(parse(serialized)) == serialized
