# ABOUTME: Fact panel (portable infobox) field resolution
# ABOUTME: data-source attribute match, relaxed child match, then label text match

from collections.abc import Callable, Sequence

from bs4 import Tag

from fandom_folio.extraction.document import find_fact_panel
from fandom_folio.extraction.text import normalize_node

LabelMatcher = Callable[[Tag, str], Tag | None]


def data_source_key(key: str) -> str:
    """Key in the underscore form used by ``data-source`` attributes."""
    return "_".join(key.split())


def humanize_key(key: str) -> str:
    """Key as a human-readable label: underscores to spaces, case-folded."""
    return " ".join(key.replace("_", " ").split()).casefold()


def find_value_by_attribute(document: Tag, key: str) -> Tag | None:
    """Value node under the ``div[data-source=key]`` container, if the container exists."""
    container = document.find("div", attrs={"data-source": data_source_key(key)})
    if container is None:
        return None
    strict = container.find("div", class_="pi-data-value", recursive=False)
    if strict is not None:
        return strict
    # Older templates nest the value in an unclassed div
    return container.find("div", recursive=False)


def _label_text_matches(label: Tag, wanted: str) -> bool:
    text = normalize_node(label)
    return text is not None and text.casefold() == wanted


def match_data_label(panel: Tag, wanted: str) -> Tag | None:
    return next(
        (h3 for h3 in panel.find_all("h3", class_="pi-data-label") if _label_text_matches(h3, wanted)),
        None,
    )


def match_any_label(panel: Tag, wanted: str) -> Tag | None:
    return next((h3 for h3 in panel.find_all("h3") if _label_text_matches(h3, wanted)), None)


LABEL_MATCHERS: tuple[LabelMatcher, ...] = (match_data_label, match_any_label)


def _is_image_only(node: Tag) -> bool:
    return node.find(["img", "figure"]) is not None and normalize_node(node) is None


def value_after_label(label: Tag) -> Tag | None:
    """First block after a label that carries text, skipping empties and bare images."""
    classed = label.find_next_sibling("div", class_="pi-data-value")
    if classed is not None and normalize_node(classed) is not None:
        return classed
    for sibling in label.find_next_siblings("div"):
        if _is_image_only(sibling) or normalize_node(sibling) is None:
            continue
        return sibling
    return None


def find_value_by_label(document: Tag, key: str) -> Tag | None:
    panel = find_fact_panel(document)
    if panel is None:
        return None
    wanted = humanize_key(key)
    for matcher in LABEL_MATCHERS:
        label = matcher(panel, wanted)
        if label is not None:
            return value_after_label(label)
    return None


def resolve_infobox_field(document: Tag, key: str) -> str | None:
    """Resolve one fact from the fact panel.

    Tries the ``data-source`` container first; only when no container with a
    value child exists does it fall back to matching the humanized label text.
    Never raises for missing or odd markup and never modifies the document.
    """
    if not key or not key.strip():
        return None
    value = find_value_by_attribute(document, key)
    if value is not None:
        return normalize_node(value)
    value = find_value_by_label(document, key)
    return normalize_node(value) if value is not None else None


def resolve_first(document: Tag, keys: Sequence[str]) -> str | None:
    """Try each spelling of a field in turn and return the first value found."""
    for key in keys:
        value = resolve_infobox_field(document, key)
        if value is not None:
            return value
    return None
