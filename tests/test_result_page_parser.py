from searchagent.searcher.html import parse_result_page


def _result_block(url: str, title: str, snippet: str) -> str:
    return (
        '<div class="result results_links results_links_deep web-result">'
        '<div class="links_main links_deep result__body">'
        f'<h2 class="result__title"><a rel="nofollow" class="result__a" href="{url}">{title}</a></h2>'
        f'<div class="result__extras"><a class="result__url" href="{url}">{url.split("//")[-1]}</a></div>'
        f'<a class="result__snippet" href="{url}">{snippet}</a>'
        "</div></div>"
    )


def _page(*blocks: str) -> str:
    return (
        "<!DOCTYPE html><html><head><title>DuckDuckGo</title></head><body>"
        '<div id="links" class="results">' + "".join(blocks) + "</div></body></html>"
    )


FIXTURE = _page(
    _result_block("https://example.com/one", "First <b>result</b>", "Snippet one"),
    _result_block("https://example.com/two", "Second result", "Snippet two"),
    _result_block("https://example.com/three", "Third result", "Snippet three"),
)


def test_parse_returns_results_in_document_order() -> None:
    results = parse_result_page(FIXTURE, limit=10)

    assert [r.url for r in results] == [
        "https://example.com/one",
        "https://example.com/two",
        "https://example.com/three",
    ]
    assert results[0].title == "First result"
    assert [r.content for r in results] == ["Snippet one", "Snippet two", "Snippet three"]


def test_parse_caps_results_at_limit() -> None:
    assert len(parse_result_page(FIXTURE, limit=2)) == 2
    assert len(parse_result_page(FIXTURE, limit=3)) == 3
    assert parse_result_page(FIXTURE, limit=0) == []


def test_parse_drops_container_without_title_or_url_anchor() -> None:
    html = _page(
        '<div class="result"><p>Sponsored block with no links at all</p></div>',
        _result_block("https://example.com/kept", "Kept", "Kept snippet"),
    )

    results = parse_result_page(html, limit=5)

    assert len(results) == 1
    assert results[0].url == "https://example.com/kept"


def test_parse_drops_container_with_url_but_no_title() -> None:
    html = _page('<div class="result"><a class="result__url" href="#">example.com/page</a></div>')

    assert parse_result_page(html, limit=5) == []


def test_parse_falls_back_to_display_url_when_href_missing() -> None:
    html = _page(
        '<div class="result">'
        '<a class="result__a">Title without href</a>'
        '<a class="result__url"> example.com/page </a>'
        '<a class="result__snippet">Snippet</a>'
        "</div>"
    )

    results = parse_result_page(html, limit=5)

    assert len(results) == 1
    assert results[0].url == "example.com/page"
    assert results[0].title == "Title without href"


def test_parse_uses_first_title_anchor() -> None:
    html = _page(
        '<div class="result">'
        '<a class="result__a" href="https://first.example">First</a>'
        '<a class="result__a" href="https://second.example">Second</a>'
        "</div>"
    )

    results = parse_result_page(html, limit=5)

    assert results[0].url == "https://first.example"
    assert results[0].title == "First"


def test_parse_content_falls_back_to_longest_text_outside_title() -> None:
    html = _page(
        '<div class="result">'
        '<a class="result__a" href="https://example.com">A title that is longer than any other text node</a>'
        "<span>short</span>"
        "<span>  the longest description  </span>"
        "<!-- a comment that is much longer than every text node in this block -->"
        "</div>"
    )

    results = parse_result_page(html, limit=5)

    assert results[0].content == "the longest description"


def test_parse_content_fallback_prefers_first_of_equal_length() -> None:
    html = _page(
        '<div class="result">'
        '<a class="result__a" href="https://example.com">Title</a>'
        "<span>alpha</span><span>bravo</span>"
        "</div>"
    )

    results = parse_result_page(html, limit=5)

    assert results[0].content == "alpha"


def test_parse_content_fallback_when_snippet_is_blank() -> None:
    html = _page(
        '<div class="result">'
        '<a class="result__a" href="https://example.com">Title</a>'
        '<a class="result__snippet">   </a>'
        "<p>Body text</p>"
        "</div>"
    )

    assert parse_result_page(html, limit=5)[0].content == "Body text"


def test_parse_truncates_long_snippet() -> None:
    long_snippet = "x" * 350
    html = _page(_result_block("https://example.com", "Title", long_snippet))

    content = parse_result_page(html, limit=1)[0].content

    assert len(content) == 303
    assert content == "x" * 300 + "..."


def test_parse_keeps_snippet_at_limit_verbatim() -> None:
    snippet = "y" * 300
    html = _page(_result_block("https://example.com", "Title", f"  {snippet}  "))

    assert parse_result_page(html, limit=1)[0].content == snippet


def test_parse_malformed_html_returns_empty() -> None:
    assert parse_result_page("", limit=3) == []
    assert parse_result_page("<<<>>> not html at all </div></div>", limit=3) == []


def test_parse_accepts_bytes() -> None:
    results = parse_result_page(FIXTURE.encode("utf-8"), limit=1)

    assert results[0].url == "https://example.com/one"


def test_parse_is_repeatable() -> None:
    first = parse_result_page(FIXTURE, limit=10)
    second = parse_result_page(FIXTURE, limit=10)

    assert [r.to_dict() for r in first] == [r.to_dict() for r in second]


def test_parse_rejected_markup_returns_empty(monkeypatch) -> None:
    from bs4 import ParserRejectedMarkup

    def _reject(*args, **kwargs):
        raise ParserRejectedMarkup("boom")

    monkeypatch.setattr("searchagent.searcher.html.BeautifulSoup", _reject)

    assert parse_result_page(FIXTURE, limit=3) == []
