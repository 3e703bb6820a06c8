"""DuckDuckGo HTML scraping searcher."""

from __future__ import annotations

import asyncio
from dataclasses import replace
from urllib.parse import quote_plus

import httpx
from loguru import logger

from searchagent.searcher.base import Searcher
from searchagent.searcher.errors import SearchError
from searchagent.searcher.html import extract_text, parse_result_page
from searchagent.searcher.models import SearchResult

DEFAULT_SCRAPER_URL = "https://html.duckduckgo.com/html/?q="

BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)
CONTENT_USER_AGENT = "SearchAgent/1.0"
REFERER = "https://duckduckgo.com/"


class WebScraper(Searcher):
    """Scrape a results page, then enrich each hit with page text."""

    def __init__(
        self,
        base_url: str = DEFAULT_SCRAPER_URL,
        *,
        timeout: float = 10.0,
        max_concurrency: int = 4,
    ):
        self.base_url = base_url or DEFAULT_SCRAPER_URL
        self.timeout = timeout
        self.max_concurrency = max(1, max_concurrency)

    def build_search_url(self, query: str) -> str:
        return self.base_url + quote_plus(query)

    async def search(self, query: str, limit: int) -> list[SearchResult]:
        """Search the results page and fetch content for every hit."""
        async with httpx.AsyncClient(follow_redirects=True) as client:
            try:
                response = await client.get(
                    self.build_search_url(query),
                    headers={
                        "User-Agent": BROWSER_USER_AGENT,
                        "Referer": REFERER,
                    },
                    timeout=self.timeout,
                )
            except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as e:
                raise SearchError(f"scraper search failed: {e}") from e
            if not response.is_success:
                raise SearchError(f"status code error: {response.status_code}")

            results = parse_result_page(response.text, limit)
            if not results:
                return []

            semaphore = asyncio.Semaphore(self.max_concurrency)

            async def _bounded(result: SearchResult) -> SearchResult:
                async with semaphore:
                    return await self._enrich(client, result)

            return list(await asyncio.gather(*(_bounded(r) for r in results)))

    async def _enrich(self, client: httpx.AsyncClient, result: SearchResult) -> SearchResult:
        """Replace the snippet with page text, or return *result* unchanged."""
        try:
            content = await self._fetch_content(client, result.url)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError, SearchError) as e:
            logger.debug("Content fetch failed for {}: {}", result.url, e)
            return result
        return replace(result, content=content)

    async def _fetch_content(self, client: httpx.AsyncClient, url: str) -> str:
        response = await client.get(
            url,
            headers={"User-Agent": CONTENT_USER_AGENT},
            timeout=self.timeout,
        )
        if not response.is_success:
            raise SearchError(f"status code error: {response.status_code}")
        return extract_text(response.text)
