"""Search backends: DuckDuckGo HTML scraping and the SearXNG JSON API."""

from searchagent.searcher.base import Searcher
from searchagent.searcher.errors import NoValidResponseError, SearchError
from searchagent.searcher.html import extract_text, parse_result_page
from searchagent.searcher.models import SearcherKind, SearchResult
from searchagent.searcher.scraper import WebScraper
from searchagent.searcher.searx import SearXNGAPISearcher
from searchagent.searcher.service import new_search_service, searcher_from_config

__all__ = [
    "Searcher",
    "SearcherKind",
    "SearchResult",
    "SearchError",
    "NoValidResponseError",
    "WebScraper",
    "SearXNGAPISearcher",
    "extract_text",
    "parse_result_page",
    "new_search_service",
    "searcher_from_config",
]
