"""Searcher capability shared by all backends."""

from abc import ABC, abstractmethod

from searchagent.searcher.models import SearchResult


class Searcher(ABC):
    """Abstract search backend.

    Implementations return at most ``limit`` results, return an empty list
    when the backend has no matches and raise ``SearchError`` when the
    backend cannot be reached or yields nothing decodable. Cancelling the
    awaiting task aborts any in-flight request.
    """

    @abstractmethod
    async def search(self, query: str, limit: int) -> list[SearchResult]:
        """Return up to *limit* results for *query*."""
