# ABOUTME: Text normalization for markup subtrees and plain strings
# ABOUTME: Line breaks and dividers become spaces, other markup is dropped, whitespace collapsed

import re

from bs4 import NavigableString, Tag
from bs4.element import PreformattedString

_WHITESPACE = re.compile(r"\s+")

# Tags whose presence separates words even though they carry no text
_SPACING_TAGS = frozenset({"br", "hr"})
_SILENT_TAGS = frozenset({"script", "style"})


def normalize_text(text: str | None) -> str | None:
    """Collapse whitespace runs and trim; an empty result is None."""
    if not text:
        return None
    return _WHITESPACE.sub(" ", text).strip() or None


def _iter_text(node: Tag):
    for descendant in node.descendants:
        if isinstance(descendant, Tag):
            if descendant.name in _SPACING_TAGS:
                yield " "
        elif isinstance(descendant, NavigableString) and not isinstance(descendant, PreformattedString):
            if descendant.parent is not None and descendant.parent.name in _SILENT_TAGS:
                continue
            yield str(descendant)


def node_text(node: Tag | NavigableString | None) -> str:
    """Raw text content of a node with line breaks rendered as spaces."""
    if node is None:
        return ""
    if isinstance(node, NavigableString):
        return "" if isinstance(node, PreformattedString) else str(node)
    return "".join(_iter_text(node))


def normalize_node(node: Tag | NavigableString | None) -> str | None:
    """Normalize a markup subtree into clean, collapsed text.

    Comments and script/style content are ignored. The node is only read.
    """
    return normalize_text(node_text(node))
