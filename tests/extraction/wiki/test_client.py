# ABOUTME: Tests for HTTP page retrieval and wiki URL helpers
# ABOUTME: Uses pytest-httpx to mock responses, no real network access

import httpx
import pytest

from fandom_folio.extraction.base import RetrievalError
from fandom_folio.extraction.wiki.client import WikiPageClient, page_title_from_url

PAGE_URL = "https://tides.fandom.com/wiki/The_Silver_Tide"


class TestPageTitleFromUrl:
    """Pure URL parsing, no HTTP calls."""

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://tides.fandom.com/wiki/The_Silver_Tide", "The Silver Tide"),
            ("https://tides.fandom.com/wiki/Caf%C3%A9_Stories#Plot", "Café Stories"),
            ("https://tides.fandom.com/wiki/Book?action=view", "Book"),
            ("invalid-url", None),
            ("", None),
            (None, None),
        ],
    )
    def test_page_title_from_url(self, url, expected):
        assert page_title_from_url(url) == expected


class TestWikiPageClient:
    """HTTP integration for page retrieval."""

    @pytest.mark.asyncio
    async def test_fetch_success(self, httpx_mock):
        httpx_mock.add_response(url=PAGE_URL, text="<html><h1>Hello</h1></html>")

        client = WikiPageClient(max_retries=1)
        try:
            assert await client.fetch(PAGE_URL) == "<html><h1>Hello</h1></html>"
        finally:
            await client.close()

    @pytest.mark.asyncio
    async def test_fetch_follows_redirects(self, httpx_mock):
        httpx_mock.add_response(
            url="https://tides.fandom.com/wiki/Silver_Tide",
            status_code=301,
            headers={"Location": PAGE_URL},
        )
        httpx_mock.add_response(url=PAGE_URL, text="<p>moved</p>")

        client = WikiPageClient(max_retries=1)
        try:
            assert await client.fetch("https://tides.fandom.com/wiki/Silver_Tide") == "<p>moved</p>"
        finally:
            await client.close()

    @pytest.mark.asyncio
    async def test_http_status_error_is_retrieval_error(self, httpx_mock):
        httpx_mock.add_response(url=PAGE_URL, status_code=404)

        client = WikiPageClient(max_retries=1)
        try:
            with pytest.raises(RetrievalError, match="HTTP 404"):
                await client.fetch(PAGE_URL)
        finally:
            await client.close()

    @pytest.mark.asyncio
    async def test_transport_error_is_retrieval_error(self, httpx_mock):
        httpx_mock.add_exception(httpx.ConnectError("Connection refused"), url=PAGE_URL)

        client = WikiPageClient(max_retries=1)
        try:
            with pytest.raises(RetrievalError, match="Failed to fetch"):
                await client.fetch(PAGE_URL)
        finally:
            await client.close()

    def test_initialization_default_client(self):
        client = WikiPageClient()
        assert "fandom-folio" in client.http_client.headers["User-Agent"]
        assert client.max_retries >= 1

    def test_initialization_custom_client(self):
        custom_client = httpx.AsyncClient()
        client = WikiPageClient(client=custom_client)
        assert client.http_client is custom_client

    @pytest.mark.asyncio
    async def test_transport_error_is_retried(self, httpx_mock):
        httpx_mock.add_exception(httpx.ConnectError("Connection reset"), url=PAGE_URL)
        httpx_mock.add_response(url=PAGE_URL, text="<p>second try</p>")

        client = WikiPageClient(max_retries=2)
        try:
            assert await client.fetch(PAGE_URL) == "<p>second try</p>"
        finally:
            await client.close()

        assert len(httpx_mock.get_requests()) == 2

    @pytest.mark.asyncio
    async def test_invalid_url_is_retrieval_error(self):
        client = WikiPageClient(max_retries=1)
        try:
            with pytest.raises(RetrievalError, match="Cannot fetch"):
                await client.fetch("https://[::1")
        finally:
            await client.close()

    @pytest.mark.asyncio
    async def test_unsupported_scheme_is_not_retried(self):
        calls = []

        def handler(request):
            calls.append(request)
            raise httpx.UnsupportedProtocol("Request URL has an unsupported protocol 'ftp://'.")

        client = WikiPageClient(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)), max_retries=3)
        try:
            with pytest.raises(RetrievalError, match="Cannot fetch"):
                await client.fetch("ftp://tides.fandom.com/wiki/The_Silver_Tide")
        finally:
            await client.close()

        assert len(calls) == 1
