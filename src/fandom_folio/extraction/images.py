# ABOUTME: Representative image lookup in the fact panel plus image URL canonicalization
# ABOUTME: Ordered matcher chain from template-specific to generic, then two fallbacks

import re
from collections.abc import Callable, Sequence
from urllib.parse import urlsplit, urlunsplit

from bs4 import Tag

from fandom_folio.extraction.base import CanonicalizationError
from fandom_folio.extraction.document import find_fact_panel
from fandom_folio.utils.logging import get_logger

logger = get_logger(__name__)

ImageMatcher = Callable[[Tag], Tag | None]

DEFAULT_IMAGE_HOSTS: tuple[str, ...] = ("wikia.nocookie.net", "fandom.com")

# Rendition segments Fandom's image service appends to the original file path
_RENDITION_SEGMENTS = re.compile(
    r"/(?:scale-to-(?:width|height)(?:-down)?/\d+"
    r"|(?:smart|thumbnail|zoom-crop|fixed-aspect-ratio(?:-down)?)/width/\d+/height/\d+)"
)
_REVISION_SUFFIX = re.compile(r"/revision/.*$")
_VECTOR_PATH = re.compile(r"\.svg(?:/|$|[?#])", re.IGNORECASE)


def image_source(img: Tag) -> str | None:
    """Source of an image node; lazy-loaded images keep the real one in ``data-src``."""
    for attribute in ("data-src", "src"):
        value = (img.get(attribute) or "").strip()
        if value and not value.startswith("data:"):
            return value
    return None


def _first_with_source(candidates: Sequence[Tag]) -> Tag | None:
    return next((img for img in candidates if image_source(img)), None)


def match_figure_link_image(panel: Tag) -> Tag | None:
    return _first_with_source(panel.select("figure.pi-image a.image img"))


def match_figure_image(panel: Tag) -> Tag | None:
    return _first_with_source(panel.select("figure.pi-image img"))


def match_image_collection(panel: Tag) -> Tag | None:
    return _first_with_source(panel.select(".pi-image-collection img"))


def match_image_link(panel: Tag) -> Tag | None:
    return _first_with_source(panel.select("a.image img"))


def match_thumbnail(panel: Tag) -> Tag | None:
    return _first_with_source(panel.select("img.pi-image-thumbnail"))


# Most template-specific first; append new template variants at the end
IMAGE_MATCHERS: tuple[ImageMatcher, ...] = (
    match_figure_link_image,
    match_figure_image,
    match_image_collection,
    match_image_link,
    match_thumbnail,
)


def _is_vector(source: str) -> bool:
    # Hosted files keep the extension before any /revision/ suffix
    return _VECTOR_PATH.search(source) is not None


def match_linked_raster(panel: Tag) -> Tag | None:
    """Raster image wrapped in a link; skips decorative icons."""
    for img in panel.find_all("img"):
        source = image_source(img)
        if source and not _is_vector(source) and img.find_parent("a") is not None:
            return img
    return None


def resolve_cover_image(document: Tag, matchers: Sequence[ImageMatcher] = IMAGE_MATCHERS) -> str | None:
    """Find the representative image URL of the page's fact panel.

    Returns:
        The raw image source, or None if the panel holds no images
    """
    panel = find_fact_panel(document)
    if panel is None:
        return None

    for matcher in (*matchers, match_linked_raster):
        img = matcher(panel)
        if img is not None:
            return image_source(img)

    first = panel.find("img")
    if first is None:
        return None
    return image_source(first)


def is_known_host(url: str, hosts: Sequence[str] = DEFAULT_IMAGE_HOSTS) -> bool:
    netloc = urlsplit(url).hostname or ""
    return any(netloc == host or netloc.endswith("." + host) for host in hosts)


def strip_renditions(url: str) -> str:
    """Drop thumbnail scaling segments, the revision suffix, query and fragment.

    Raises:
        CanonicalizationError: If the URL cannot be parsed
    """
    try:
        parts = urlsplit(url)
        path = _RENDITION_SEGMENTS.sub("", parts.path)
        path = _REVISION_SUFFIX.sub("", path)
        return urlunsplit((parts.scheme, parts.netloc, path, "", ""))
    except ValueError as e:
        raise CanonicalizationError(f"Malformed image URL {url!r}: {e}") from e


def canonicalize_image_url(url: str | None, hosts: Sequence[str] = DEFAULT_IMAGE_HOSTS) -> str | None:
    """Reduce a hosted image URL to its stable original-file address.

    URLs from unknown hosts are returned untouched. A malformed URL is kept
    as-is and reported as a warning.
    """
    if not url:
        return None
    if url.startswith("//"):
        url = "https:" + url
    try:
        if not is_known_host(url, hosts):
            return url
        return strip_renditions(url)
    except (CanonicalizationError, ValueError) as e:
        logger.warning("Image URL canonicalization skipped", url=url, error=str(e))
        return url
