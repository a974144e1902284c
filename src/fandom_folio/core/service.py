# ABOUTME: High-level service API: fetch a page, parse it and extract its record
# ABOUTME: Retrieval failure yields no record; markup surprises yield None fields

from __future__ import annotations

from collections.abc import Sequence

from fandom_folio.config import get_config
from fandom_folio.extraction.base import PageFetcher, RetrievalError
from fandom_folio.extraction.document import parse_document
from fandom_folio.extraction.page import extract_page
from fandom_folio.extraction.wiki.client import WikiPageClient, page_title_from_url
from fandom_folio.models import ExtractionRecord
from fandom_folio.utils.logging import get_logger, log_extraction_step, with_page_context


class PageExtractionService:
    """Service for extracting one item page into an ExtractionRecord."""

    def __init__(self, fetcher: PageFetcher | None = None, image_hosts: Sequence[str] | None = None):
        self.fetcher = fetcher or WikiPageClient()
        self.image_hosts = tuple(image_hosts or get_config().image_hosts)
        self.logger = get_logger(__name__)

    @log_extraction_step("fetch_page")
    async def _fetch(self, url: str) -> str:
        return await self.fetcher.fetch(url)

    def extract_html(self, html: str) -> ExtractionRecord:
        """Extract a record from HTML already in memory."""
        return extract_page(parse_document(html), self.image_hosts)

    async def extract_url(self, url: str) -> ExtractionRecord | None:
        """Fetch and extract a page.

        Returns:
            The record, or None if the page could not be retrieved
        """
        with with_page_context(url) as logger:
            logger = logger.bind(page_title=page_title_from_url(url))
            logger.info("Starting page extraction")
            try:
                html = await self._fetch(url)
            except RetrievalError as e:
                logger.error("Page retrieval failed", error=str(e))
                return None

            record = self.extract_html(html)
            logger.info(
                "Page extraction complete",
                title=record.title,
                resolved=len(record.resolved_fields),
                missing=[name for name in type(record).model_fields if getattr(record, name) is None],
            )
            return record

    def extract(self, url: str) -> ExtractionRecord | None:
        """Synchronous wrapper around extract_url for non-async callers."""
        import anyio

        return anyio.run(self.extract_url, url)

    async def close(self) -> None:
        close = getattr(self.fetcher, "close", None)
        if close is not None:
            await close()
