"""
Minimal HTML escaping used by bookmark files.

Only the five characters that are significant in element text and quoted
attribute values are handled. unescape_html() is the exact inverse of
escape_html(); no other entities are decoded.
"""

# Order matters: "&" must be replaced first so the entities introduced by
# the later replacements are not escaped again.
_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def escape_html(text: str) -> str:
    """
    Escape HTML special characters.

    Args:
        text: Text to escape

    Returns:
        HTML-escaped text
    """
    for char, entity in _ESCAPES:
        text = text.replace(char, entity)
    return text


def unescape_html(text: str) -> str:
    """
    Reverse escape_html().

    "&amp;" is decoded last so that "&amp;lt;" yields "&lt;" and not "<".
    """
    for char, entity in reversed(_ESCAPES):
        text = text.replace(entity, char)
    return text
