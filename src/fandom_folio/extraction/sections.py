# ABOUTME: Section body collection after a resolved header
# ABOUTME: Prose mode joins paragraphs, list mode stops after the first list

from enum import Enum

from bs4 import Tag

from fandom_folio.extraction.document import NodeKind, SiblingNode, heading_level, iter_following_siblings
from fandom_folio.extraction.text import normalize_node

SectionValue = str | tuple[str, ...] | None


class SectionMode(Enum):
    PROSE = "prose"
    LIST = "list"


def list_items(list_node: Tag) -> list[str]:
    """Normalized text of a list's own items, empties dropped."""
    items = (normalize_node(item) for item in list_node.find_all("li", recursive=False))
    return [item for item in items if item is not None]


def _is_boundary(step: SiblingNode, level: int) -> bool:
    return step.kind is NodeKind.HEADER and step.level is not None and step.level <= level


def _collect_prose(header: Tag, level: int) -> str | None:
    paragraphs: list[str] = []
    for step in iter_following_siblings(header):
        if _is_boundary(step, level):
            break
        if step.kind is NodeKind.PARAGRAPH:
            text = normalize_node(step.node)
            if text is not None:
                paragraphs.append(text)
    return "\n".join(paragraphs) or None


def _collect_list(header: Tag, level: int) -> tuple[str, ...] | None:
    entries: list[str] = []
    for step in iter_following_siblings(header):
        if _is_boundary(step, level):
            break
        if step.kind is NodeKind.LIST:
            entries.extend(list_items(step.node))
            # Only the first list under a header belongs to the section
            break
        if step.kind is NodeKind.PARAGRAPH:
            text = normalize_node(step.node)
            if text is not None:
                entries.append(text)
    return tuple(entries) or None


def collect_section(header: Tag | None, mode: SectionMode) -> SectionValue:
    """Harvest the body of a section from the siblings following its header.

    The walk ends at the next header of the same or a higher level. In prose
    mode paragraphs are joined with newlines; in list mode leading paragraphs
    and the items of the first list become entries.

    Returns:
        Text (prose), a tuple of entries (list), or None if nothing was found
    """
    if header is None:
        return None
    level = heading_level(header) or 2
    if mode is SectionMode.PROSE:
        return _collect_prose(header, level)
    return _collect_list(header, level)
