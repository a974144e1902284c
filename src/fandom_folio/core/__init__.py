# ABOUTME: Core service layer tying retrieval to the extraction engine
# ABOUTME: Exposes PageExtractionService for the CLI and library callers

from fandom_folio.core.service import PageExtractionService

__all__ = [
    "PageExtractionService",
]
