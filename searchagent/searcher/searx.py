"""SearXNG JSON API searcher."""

from __future__ import annotations

import httpx
from loguru import logger
from pydantic import ValidationError

from searchagent.searcher.base import Searcher
from searchagent.searcher.errors import NoValidResponseError
from searchagent.searcher.models import SearchResult, SearXNGResponse

DEFAULT_SEARX_URL = "https://searx.grailfinder.net/"

API_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    ),
    "Accept": "application/json, */*;q=0.1",
    "Accept-Language": "en-US,en;q=0.5",
    "Accept-Encoding": "gzip, deflate",
}


class SearXNGAPISearcher(Searcher):
    """Query a SearXNG instance, trying each known JSON endpoint in turn.

    SearXNG has no page-size parameter, so results are limited after
    decoding. The first endpoint whose body decodes wins; an empty result
    list from that endpoint is reported as a failure.
    """

    ENDPOINTS: tuple[str, ...] = ("/api/v1/search", "/search")

    def __init__(self, base_url: str = DEFAULT_SEARX_URL, *, timeout: float = 10.0):
        base_url = base_url or DEFAULT_SEARX_URL
        if not base_url.endswith("/"):
            base_url += "/"
        self.base_url = base_url
        self.timeout = timeout

    def endpoint_urls(self) -> list[str]:
        return [self.base_url + endpoint.lstrip("/") for endpoint in self.ENDPOINTS]

    async def search(self, query: str, limit: int) -> list[SearchResult]:
        """Search SearXNG and normalize the first decodable response."""
        envelope = await self._query(query)
        if envelope is None or not envelope.results:
            raise NoValidResponseError("no valid JSON response from any endpoint")

        results: list[SearchResult] = []
        for item in envelope.results:
            if len(results) >= limit:
                break
            if not item.title or not item.url:
                continue
            results.append(SearchResult(url=item.url, title=item.title, content=item.content or ""))
        return results

    async def _query(self, query: str) -> SearXNGResponse | None:
        async with httpx.AsyncClient() as client:
            for url in self.endpoint_urls():
                try:
                    response = await client.get(
                        url,
                        params={"q": query, "format": "json"},
                        headers=API_HEADERS,
                        timeout=self.timeout,
                    )
                except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as e:
                    logger.debug("SearXNG endpoint {} failed: {}", url, e)
                    continue

                if not response.is_success:
                    logger.debug("SearXNG endpoint {} returned status {}", url, response.status_code)
                    continue

                # httpx has already undone any gzip Content-Encoding here.
                try:
                    return SearXNGResponse.model_validate_json(response.content)
                except ValidationError as e:
                    logger.debug("SearXNG endpoint {} returned undecodable body: {}", url, e.errors()[:1])
        return None
