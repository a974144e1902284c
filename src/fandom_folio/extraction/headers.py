# ABOUTME: Section header lookup over a list of candidate labels
# ABOUTME: Three match tiers per label: heading id, nested headline id, heading text

import re
from collections.abc import Callable, Sequence

from bs4 import NavigableString, Tag
from bs4.element import PreformattedString

from fandom_folio.extraction.text import normalize_node, normalize_text

HeaderMatcher = Callable[[list[Tag], str], Tag | None]

_SPACES = re.compile(r"\s+")


def label_ids(label: str) -> tuple[str, ...]:
    """Identifier forms a label may take: spaces to underscores, exact and lower-cased."""
    ident = _SPACES.sub("_", label.strip())
    return tuple(dict.fromkeys((ident, ident.lower())))


def heading_own_text(heading: Tag) -> str | None:
    """Visible label of a heading, excluding edit links and other nested decorations."""
    headline = heading.find("span", class_="mw-headline")
    if headline is not None:
        return normalize_node(headline)
    direct = "".join(
        str(child)
        for child in heading.children
        if isinstance(child, NavigableString) and not isinstance(child, PreformattedString)
    )
    return normalize_text(direct)


def match_heading_id(headings: list[Tag], label: str) -> Tag | None:
    ids = label_ids(label)
    return next((h for h in headings if h.get("id") in ids), None)


def match_headline_id(headings: list[Tag], label: str) -> Tag | None:
    ids = label_ids(label)
    for heading in headings:
        for headline in heading.find_all("span", class_="mw-headline"):
            if headline.get("id") in ids:
                return heading
    return None


def match_heading_text(headings: list[Tag], label: str) -> Tag | None:
    wanted = label.strip().casefold()
    for heading in headings:
        text = heading_own_text(heading)
        if text is not None and text.casefold() == wanted:
            return heading
    return None


# Most precise tier first
HEADER_MATCHERS: tuple[HeaderMatcher, ...] = (match_heading_id, match_headline_id, match_heading_text)


def find_section_header(
    document: Tag,
    candidates: Sequence[str],
    level: int = 2,
    matchers: Sequence[HeaderMatcher] = HEADER_MATCHERS,
) -> Tag | None:
    """Find the section heading for the first candidate label that matches at all.

    Candidates are tried in order. For each one the matcher tiers run in order
    and the first tier with a match wins; within a tier the earliest heading in
    document order is returned.

    Args:
        document: Parsed page
        candidates: Alternative labels for the same section
        level: Heading tier to search (2 searches ``<h2>``)
        matchers: Ordered match tiers

    Returns:
        The heading tag, or None when no candidate matches under any tier
    """
    headings = document.find_all(f"h{level}")
    if not headings:
        return None

    for label in candidates:
        if not label or not label.strip():
            continue
        for matcher in matchers:
            heading = matcher(headings, label)
            if heading is not None:
                return heading
    return None
