"""Unit tests for table-of-contents extraction."""

from __future__ import annotations

from bs4 import BeautifulSoup

from tutorial_pages.generator import HtmlContentRenderer
from tutorial_pages.toc import TocEntry, extract_toc


def test_no_headings_gives_empty_toc() -> None:
    assert extract_toc("<p>Just text</p>") == []
    assert extract_toc("") == []


def test_headings_are_returned_in_document_order() -> None:
    html = (
        '<h1 id="top">Top</h1>'
        '<h2 id="one">One</h2><p>x</p>'
        '<h3 id="one-a">One A</h3>'
        '<h4 id="deep">Deep</h4>'
        '<h2 id="two">Two</h2>'
    )

    assert extract_toc(html) == [
        TocEntry(level=2, text="One", anchor="one"),
        TocEntry(level=3, text="One A", anchor="one-a"),
        TocEntry(level=2, text="Two", anchor="two"),
    ]


def test_custom_levels() -> None:
    html = '<h1 id="top">Top</h1><h2 id="one">One</h2><h4 id="deep">Deep</h4>'

    toc = extract_toc(html, levels=(1, 4))

    assert [(entry.level, entry.anchor) for entry in toc] == [(1, "top"), (4, "deep")]


def test_nested_markup_is_flattened_to_text() -> None:
    toc = extract_toc('<h2 id="use-x">Use <code>x</code>\n  now</h2>')

    assert toc[0].text == "Use x now"
    assert toc[0].href == "#use-x"


def test_headings_without_ids_get_unique_slugs() -> None:
    html = '<h2>Same Name</h2><h2 id="same-name_1">Taken</h2><h2>Same Name</h2>'

    anchors = [entry.anchor for entry in extract_toc(html)]

    assert anchors == ["same-name", "same-name_1", "same-name_2"]


def test_anchors_match_rendered_heading_ids() -> None:
    renderer = HtmlContentRenderer()
    html = renderer.markdown("## Getting Started\nText\n\n### Hello World\nMore\n")

    toc = extract_toc(html)
    soup = BeautifulSoup(html, "html.parser")

    assert [entry.anchor for entry in toc] == ["getting-started", "hello-world"]
    for entry in toc:
        assert soup.find(id=entry.anchor) is not None
