# ABOUTME: Parsed document helpers: HTML parsing, fact panel lookup, typed sibling cursor
# ABOUTME: Sibling nodes are classified once into Paragraph, List, Header or Other

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from bs4 import BeautifulSoup, Tag

_HEADING_TAG = re.compile(r"^h([1-6])$")
_HEADING_WRAPPER_CLASS = re.compile(r"^mw-heading([1-6])$")


def parse_document(html: str) -> BeautifulSoup:
    """Parse raw HTML into the document tree handed to every resolver."""
    return BeautifulSoup(html, "html.parser")


def find_fact_panel(document: Tag) -> Tag | None:
    """The infobox sidebar holding the page's key/value facts."""
    return document.select_one('aside[role="complementary"]') or document.select_one("aside.portable-infobox")


class NodeKind(Enum):
    PARAGRAPH = "paragraph"
    LIST = "list"
    HEADER = "header"
    OTHER = "other"


@dataclass(frozen=True)
class SiblingNode:
    """One classified step of a sibling walk."""

    kind: NodeKind
    node: Tag
    level: int | None = None


def heading_level(node: Tag) -> int | None:
    """Section level of a heading tag or a ``div.mw-heading`` wrapper, else None."""
    match = _HEADING_TAG.match(node.name or "")
    if match:
        return int(match.group(1))
    if node.name == "div":
        for css_class in node.get("class") or []:
            wrapper = _HEADING_WRAPPER_CLASS.match(css_class)
            if wrapper:
                return int(wrapper.group(1))
    return None


def classify(node: Tag) -> SiblingNode:
    level = heading_level(node)
    if level is not None:
        return SiblingNode(NodeKind.HEADER, node, level)
    if node.name == "p":
        return SiblingNode(NodeKind.PARAGRAPH, node)
    if node.name in ("ul", "ol"):
        return SiblingNode(NodeKind.LIST, node)
    return SiblingNode(NodeKind.OTHER, node)


def section_anchor(header: Tag) -> Tag:
    """The node whose siblings hold a section's body.

    Newer MediaWiki skins wrap headings in ``div.mw-heading``; the body then
    follows the wrapper rather than the heading itself.
    """
    parent = header.parent
    if isinstance(parent, Tag) and parent.name == "div" and heading_level(parent) is not None:
        return parent
    return header


def iter_following_siblings(header: Tag) -> Iterator[SiblingNode]:
    """Yield classified element siblings after a section header, skipping bare text."""
    for sibling in section_anchor(header).next_siblings:
        if isinstance(sibling, Tag):
            yield classify(sibling)
