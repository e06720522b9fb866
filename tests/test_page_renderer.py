"""Tests for the layout renderer and its context builders."""

from __future__ import annotations

import typing as typ

from bs4 import BeautifulSoup

from tutorial_pages.content_loader import load_pages, parse_markdown_file
from tutorial_pages.generator import PageRenderer
from tutorial_pages.menu import build_menu

if typ.TYPE_CHECKING:
    from pathlib import Path

    from tutorial_pages.config import SiteConfig


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def test_entry_page_renders_without_menu(site_config: SiteConfig) -> None:
    renderer = PageRenderer(site_config)
    index_page = parse_markdown_file(site_config.index_file)

    soup = _soup(renderer.render(renderer.entry_context(index_page)))

    assert soup.title is not None
    assert soup.title.get_text() == "Home | Test Site"
    assert soup.body is not None
    assert soup.body["class"] == ["page-entry"]
    assert soup.select_one(".content__body strong").get_text() == "home"
    assert soup.select_one("nav.main-menu") is None
    assert soup.select_one("aside.toc") is None


def test_tutorial_page_includes_menu_and_toc(site_config: SiteConfig) -> None:
    renderer = PageRenderer(site_config)
    pages = load_pages(site_config.content_dir)
    alpha = next(page for page in pages if page.frontmatter.href == "a")

    context = renderer.tutorial_context(alpha, build_menu(pages))
    soup = _soup(renderer.render(context))

    assert context["toc_length"] == 3
    assert [a["href"] for a in soup.select("aside.toc a")] == [
        "#first-steps",
        "#detail",
        "#second-part",
    ]
    categories = [h.get_text() for h in soup.select(".main-menu__category")]
    assert categories == ["Basics", "Advanced"]
    links = [a.get_text() for a in soup.select(".main-menu__link")]
    assert links == ["Beta", "Alpha", "Gamma"]
    active = soup.select(".main-menu__link.is-active")
    assert [a["href"] for a in active] == ["/tutorial/a"]


def test_tutorial_page_without_headings_omits_toc(site_config: SiteConfig) -> None:
    renderer = PageRenderer(site_config)
    pages = load_pages(site_config.content_dir)
    beta = next(page for page in pages if page.frontmatter.href == "b")

    context = renderer.tutorial_context(beta, build_menu(pages))

    assert context["toc_length"] == 0
    assert _soup(renderer.render(context)).select_one("aside.toc") is None


def test_not_found_page(site_config: SiteConfig) -> None:
    renderer = PageRenderer(site_config)

    soup = _soup(renderer.render(renderer.not_found_context()))

    assert soup.select_one(".content__title").get_text() == "Page Not Found"
    assert soup.body is not None
    assert soup.body["class"] == ["page-not-found"]
    assert soup.select_one(".content__body") is None


def test_frontmatter_text_is_escaped(site_config: SiteConfig) -> None:
    renderer = PageRenderer(site_config)

    html = renderer.render(
        {"title": "<script>x</script>", "description": "a & b", "entry_route": True}
    )

    assert "<script>x</script>" not in html
    assert "&lt;script&gt;" in html


def test_render_to_file_creates_parents(
    site_config: SiteConfig, tmp_path: Path
) -> None:
    renderer = PageRenderer(site_config)
    target = tmp_path / "deep" / "er" / "index.html"

    written = renderer.render_to_file(renderer.not_found_context(), target)

    assert written == target
    assert target.read_text(encoding="utf-8").endswith("</html>\n")


def test_content_error_page(site_config: SiteConfig) -> None:
    renderer = PageRenderer(site_config)

    soup = _soup(renderer.render(renderer.content_error_context()))

    assert soup.select_one(".content__title").get_text() == "Content Unavailable"
    assert soup.body is not None
    assert soup.body["class"] == ["page-error"]
    assert soup.select_one("section.not-found a")["href"] == "/"
