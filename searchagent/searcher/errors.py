"""Search error types."""


class SearchError(Exception):
    """Raised when a search backend cannot produce results."""


class NoValidResponseError(SearchError):
    """Raised when no API endpoint returned a usable response."""
