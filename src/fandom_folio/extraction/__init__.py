# ABOUTME: Field-resolution engine for wiki item pages
# ABOUTME: Resolvers read an already-parsed document and degrade to None on odd markup

"""
Extraction Layer: turn a parsed page into an extraction record

This layer handles:
- Text normalization of markup subtrees
- Section header lookup and section body collection
- Fact panel field resolution
- Cover image lookup and URL canonicalization

Data Flow: HTML → parsed document → resolvers → ExtractionRecord
"""

from fandom_folio.extraction.base import CanonicalizationError, ExtractionError, RetrievalError
from fandom_folio.extraction.document import parse_document
from fandom_folio.extraction.page import extract_page

__all__ = [
    "CanonicalizationError",
    "ExtractionError",
    "RetrievalError",
    "extract_page",
    "parse_document",
]
