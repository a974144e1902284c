# ABOUTME: Error taxonomy and retrieval protocol for page extraction
# ABOUTME: Retrieval failures abort a page, markup surprises never raise out of resolvers

from typing import Protocol


class PageFetcher(Protocol):
    """Protocol for retrieving the raw HTML of a wiki page. Retrieval sits outside the
    resolution engine; the engine only ever sees an already-parsed document."""

    async def fetch(self, url: str) -> str:
        """Fetch the raw HTML for the given page address.

        Args:
            url: The page address

        Returns:
            The HTML document as text

        Raises:
            RetrievalError: If the page could not be retrieved
        """
        ...


class ExtractionError(Exception):
    """Raised when page extraction fails."""

    pass


class RetrievalError(ExtractionError):
    """Raised when the page could not be fetched (network or host failure)."""

    pass


class CanonicalizationError(ExtractionError):
    """Raised when an image URL cannot be parsed for canonicalization."""

    pass
