"""Searcher construction from a kind tag or from configuration."""

from typing import TYPE_CHECKING

from searchagent.searcher.base import Searcher
from searchagent.searcher.models import SearcherKind
from searchagent.searcher.scraper import DEFAULT_SCRAPER_URL, WebScraper
from searchagent.searcher.searx import DEFAULT_SEARX_URL, SearXNGAPISearcher

if TYPE_CHECKING:
    from searchagent.config.schema import SearchConfig

DEFAULT_BASE_URLS: dict[SearcherKind, str] = {
    "scraper": DEFAULT_SCRAPER_URL,
    "api": DEFAULT_SEARX_URL,
}


def new_search_service(
    kind: SearcherKind | str,
    url: str = "",
    *,
    timeout: float = 10.0,
    max_concurrency: int = 4,
) -> Searcher:
    """Create the searcher for *kind*, using the kind's default URL when *url* is empty."""
    normalized = (kind or "").strip().lower()
    if normalized not in DEFAULT_BASE_URLS:
        raise ValueError(f"unknown searcher type: {kind}")

    base_url = url or DEFAULT_BASE_URLS[normalized]  # type: ignore[index]
    if normalized == "scraper":
        return WebScraper(base_url, timeout=timeout, max_concurrency=max_concurrency)
    return SearXNGAPISearcher(base_url, timeout=timeout)


def searcher_from_config(config: "SearchConfig | None" = None) -> Searcher:
    """Create the searcher selected by a ``SearchConfig``."""
    from searchagent.config.schema import SearchConfig

    config = config or SearchConfig()
    kind = (config.type or "").strip().lower()
    backend = getattr(config.backends, kind, None)
    return new_search_service(
        kind,
        backend.base_url if backend is not None else "",
        timeout=config.timeout,
        max_concurrency=config.content_concurrency,
    )
