"""HTML helpers for result pages and fetched documents."""

from __future__ import annotations

from typing import Iterator

from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag
from loguru import logger

from searchagent.searcher.models import SearchResult

MAX_SNIPPET_CHARS = 300
MAX_CONTENT_CHARS = 2000
ELLIPSIS = "..."

RESULT_CLASS = "result"
TITLE_CLASS = "result__a"
SNIPPET_CLASS = "result__snippet"
URL_CLASS = "result__url"

BLOCK_TAGS = frozenset({"p", "div", "h1", "h2", "h3", "h4", "h5", "h6", "br", "li", "tr", "td"})

_BLOCK_END = object()


def parse_result_page(markup: str | bytes, limit: int) -> list[SearchResult]:
    """Extract up to *limit* results from a DuckDuckGo-style results page."""
    if limit <= 0:
        return []
    soup = _parse(markup)
    if soup is None:
        return []

    results: list[SearchResult] = []
    for node in _walk(soup):
        if not (isinstance(node, Tag) and has_class(node, RESULT_CLASS)):
            continue
        result = _extract_result(node)
        if result.url and result.title:
            results.append(result)
            if len(results) >= limit:
                break
    return results


def extract_text(markup: str | bytes, max_chars: int = MAX_CONTENT_CHARS) -> str:
    """Strip markup and return whitespace-collapsed visible text."""
    soup = _parse(markup)
    if soup is None:
        return ""

    parts: list[str] = []
    stack: list[object] = [soup]
    while stack:
        node = stack.pop()
        if node is _BLOCK_END:
            parts.append(" ")
        elif _is_text(node):
            parts.append(str(node))
        elif isinstance(node, Tag):
            if node.name in BLOCK_TAGS:
                stack.append(_BLOCK_END)
            stack.extend(reversed(node.contents))

    text = " ".join("".join(parts).split())
    return text[:max_chars]


def has_class(tag: Tag, name: str) -> bool:
    """Check whether *tag* carries *name* in its class token list."""
    classes = tag.get("class")
    if not classes:
        return False
    if isinstance(classes, str):
        classes = classes.split()
    return name in classes


def text_content(tag: Tag) -> str:
    """Concatenate every text node below *tag* in document order, trimmed."""
    return "".join(str(node) for node in tag.descendants if _is_text(node)).strip()


def truncate_snippet(text: str, max_chars: int = MAX_SNIPPET_CHARS) -> str:
    text = text.strip()
    if len(text) > max_chars:
        return text[:max_chars] + ELLIPSIS
    return text


def _extract_result(container: Tag) -> SearchResult:
    title_anchor: Tag | None = None
    snippet_anchor: Tag | None = None
    url_anchor: Tag | None = None

    for node in _walk(container):
        if not (isinstance(node, Tag) and node.name == "a"):
            continue
        if title_anchor is None and has_class(node, TITLE_CLASS):
            title_anchor = node
        if snippet_anchor is None and has_class(node, SNIPPET_CLASS):
            snippet_anchor = node
        if url_anchor is None and has_class(node, URL_CLASS):
            url_anchor = node

    url = ""
    title = ""
    if title_anchor is not None:
        href = title_anchor.get("href")
        url = href if isinstance(href, str) else ""
        title = text_content(title_anchor)
    if not url and url_anchor is not None:
        # Display text only, may not be a fetchable URL.
        url = text_content(url_anchor)

    content = text_content(snippet_anchor) if snippet_anchor is not None else ""
    if not content:
        content = _longest_text(container, skip=title_anchor)

    return SearchResult(url=url, title=title, content=truncate_snippet(content))


def _longest_text(root: Tag, skip: Tag | None) -> str:
    longest = ""
    for node in _walk(root, skip=skip):
        if not _is_text(node):
            continue
        text = node.strip()
        if len(text) > len(longest):
            longest = text
    return longest


def _walk(root: PageElement, skip: PageElement | None = None) -> Iterator[PageElement]:
    """Depth-first pre-order walk that does not descend into *skip*."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, Tag) and node is not skip:
            stack.extend(reversed(node.contents))


def _is_text(node: object) -> bool:
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def _parse(markup: str | bytes) -> BeautifulSoup | None:
    if not markup:
        return None
    try:
        return BeautifulSoup(markup, "html.parser")
    except ParserRejectedMarkup as e:
        logger.debug("Unparsable HTML skipped: {}", e)
        return None
