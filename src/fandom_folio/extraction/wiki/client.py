# ABOUTME: httpx-based retrieval of raw wiki page HTML with tenacity retries
# ABOUTME: Transport failures are retried, every failure surfaces as RetrievalError

import re
from urllib.parse import unquote

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    retry_if_not_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from fandom_folio.config import get_config
from fandom_folio.extraction.base import RetrievalError
from fandom_folio.utils.logging import get_logger, log_api_call


class WikiPageClient:
    """Fetches wiki pages over HTTP. Implements the ``PageFetcher`` protocol."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        max_retries: int | None = None,
        timeout: float | None = None,
    ):
        config = get_config()
        self.max_retries = max_retries or config.max_retries
        self.http_client = client or httpx.AsyncClient(  # Allow for dependency injection
            headers={"User-Agent": config.user_agent},
            timeout=timeout or config.request_timeout,
        )
        self.logger = get_logger(__name__)

    async def fetch(self, url: str) -> str:
        """Fetch the raw HTML of a page.

        Raises:
            RetrievalError: On malformed URLs and on network, host or HTTP status failures
        """
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.max_retries),
                wait=wait_exponential(multiplier=0.5, min=0.5, max=8),
                # A bad scheme fails the same way on every attempt
                retry=retry_if_exception_type(httpx.TransportError)
                & retry_if_not_exception_type(httpx.UnsupportedProtocol),
                reraise=True,
            ):
                with attempt:
                    return await self._get(url)
        except httpx.HTTPStatusError as e:
            raise RetrievalError(f"{url} returned HTTP {e.response.status_code}") from e
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            raise RetrievalError(f"Cannot fetch {url}: {e}") from e
        except httpx.HTTPError as e:
            raise RetrievalError(f"Failed to fetch {url}: {e}") from e
        raise RetrievalError(f"Failed to fetch {url}")

    @log_api_call("wiki")
    async def _get(self, url: str) -> str:
        response = await self.http_client.get(url, follow_redirects=True)
        response.raise_for_status()

        self.logger.debug(
            "Retrieved page",
            url=url,
            final_url=str(response.url),
            page_title=page_title_from_url(str(response.url)),
            content_length=len(response.text),
        )
        return response.text

    async def close(self) -> None:
        await self.http_client.aclose()


def page_title_from_url(url: str | None) -> str | None:
    """Extract the human-readable page title from a ``/wiki/<Title>`` address."""
    if not url:
        return None
    # Example: "https://x.fandom.com/wiki/The_Hobbit#Plot" -> "The Hobbit"
    match = re.search(r"/wiki/([^?#]+)", str(url))
    if not match:
        return None
    return unquote(match.group(1)).replace("_", " ")
