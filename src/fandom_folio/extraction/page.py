# ABOUTME: Page extractor composing title, fact panel, section and image resolvers
# ABOUTME: Pure function of the parsed document; each field resolves independently

from collections.abc import Callable, Sequence

from bs4 import Tag

from fandom_folio.extraction.document import find_fact_panel
from fandom_folio.extraction.headers import find_section_header
from fandom_folio.extraction.images import DEFAULT_IMAGE_HOSTS, canonicalize_image_url, resolve_cover_image
from fandom_folio.extraction.infobox import resolve_first
from fandom_folio.extraction.sections import SectionMode, collect_section
from fandom_folio.extraction.text import normalize_node
from fandom_folio.models import ExtractionRecord

TitleMatcher = Callable[[Tag], str | None]

# Longer panel headings are usually captions, not titles
MAX_PANEL_HEADING_TITLE = 70

INFOBOX_FIELDS: dict[str, tuple[str, ...]] = {
    "author": ("author",),
    "cover_artist": ("cover_artist", "cover artist"),
    "genre": ("genre",),
    "based_on": ("based_on", "based on"),
    "publisher": ("publisher",),
    "publication_date": ("publication_date", "publication date"),
    "pages": ("pages",),
    "preceded_by": ("preceded_by", "preceded by"),
    "followed_by": ("followed_by", "followed by"),
}

SECTIONS: dict[str, tuple[tuple[str, ...], SectionMode]] = {
    "plot_summary": (("Plot summary", "Summary", "Synopsis"), SectionMode.PROSE),
    "characters": (("Characters", "Cast"), SectionMode.LIST),
    "locations": (("Locations", "Setting"), SectionMode.LIST),
}


def title_from_page_header(document: Tag) -> str | None:
    return normalize_node(document.select_one("h1.page-header__title"))


def title_from_panel_title(document: Tag) -> str | None:
    panel = find_fact_panel(document)
    return normalize_node(panel.select_one("h2.pi-title")) if panel is not None else None


def title_from_first_panel_heading(document: Tag) -> str | None:
    panel = find_fact_panel(document)
    if panel is None:
        return None
    title = normalize_node(panel.find("h2"))
    if title is not None and len(title) < MAX_PANEL_HEADING_TITLE:
        return title
    return None


TITLE_MATCHERS: tuple[TitleMatcher, ...] = (
    title_from_page_header,
    title_from_panel_title,
    title_from_first_panel_heading,
)


def resolve_title(document: Tag, matchers: Sequence[TitleMatcher] = TITLE_MATCHERS) -> str | None:
    for matcher in matchers:
        title = matcher(document)
        if title is not None:
            return title
    return None


def resolve_section(document: Tag, labels: Sequence[str], mode: SectionMode) -> str | tuple[str, ...] | None:
    return collect_section(find_section_header(document, labels), mode)


def extract_page(document: Tag, image_hosts: Sequence[str] = DEFAULT_IMAGE_HOSTS) -> ExtractionRecord:
    """Build the extraction record for a parsed item page.

    The document is only read. A fact that cannot be located is None and
    never prevents the other facts from resolving.

    Args:
        document: Parsed page
        image_hosts: Host suffixes whose image URLs are canonicalized

    Returns:
        The immutable extraction record
    """
    values: dict[str, object] = {"title": resolve_title(document)}

    for field, (labels, mode) in SECTIONS.items():
        values[field] = resolve_section(document, labels, mode)

    for field, keys in INFOBOX_FIELDS.items():
        values[field] = resolve_first(document, keys)

    values["cover_image_url"] = canonicalize_image_url(resolve_cover_image(document), image_hosts)

    return ExtractionRecord(**values)
