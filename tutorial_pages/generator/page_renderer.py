"""Merge page content, menu, and TOC into the shared Jinja layout.

:class:`PageRenderer` sits between content and HTML. Both the static
:class:`~tutorial_pages.generator.SiteBuilder` and the Flask app build their
template context through it.

The layout receives a flat context bag:

``title``, ``description``
    Copied from the page frontmatter (or the fixed not-found copy).
``html_content``
    Rendered Markdown body.
``main_menu``
    Ordered :class:`~tutorial_pages.menu.MenuGroup` list, tutorial pages only.
``html_toc``, ``toc_length``
    Table of contents entries and their count, tutorial pages only.
``entry_route`` / ``tutorial_route`` / ``not_found_route``
    Exactly one is true and selects the page variant.

Example
-------
>>> from tutorial_pages.config import SiteConfig
>>> from tutorial_pages.generator import PageRenderer
>>> renderer = PageRenderer(SiteConfig())
>>> "Page Not Found" in renderer.render(renderer.not_found_context())
True
"""

from __future__ import annotations

import typing as typ

from jinja2 import Environment, FileSystemLoader

from tutorial_pages._constants import (
    CONTENT_ERROR_DESCRIPTION,
    CONTENT_ERROR_TITLE,
    LAYOUT_TEMPLATE,
    NOT_FOUND_DESCRIPTION,
    NOT_FOUND_TITLE,
)
from tutorial_pages.generator.renderer import HtmlContentRenderer
from tutorial_pages.toc import extract_toc

if typ.TYPE_CHECKING:
    from pathlib import Path

    from tutorial_pages.config import SiteConfig
    from tutorial_pages.content_loader import Page
    from tutorial_pages.menu import MenuGroup


class PageRenderer:
    """Render entry, tutorial, and not-found pages through one layout."""

    def __init__(
        self,
        config: SiteConfig,
        *,
        content_renderer: HtmlContentRenderer | None = None,
    ) -> None:
        """Initialize the Jinja environment and shared Markdown renderer.

        Parameters
        ----------
        config : SiteConfig
            Resolved site configuration; supplies the templates directory,
            highlight settings, TOC levels, and site name.
        content_renderer : HtmlContentRenderer, optional
            Pre-built Markdown renderer. One is created from ``config`` when
            omitted.
        """
        self.config = config
        self.content_renderer = content_renderer or HtmlContentRenderer(
            config.pygments_style, config.languages
        )
        self.env = Environment(
            loader=FileSystemLoader(str(config.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template(LAYOUT_TEMPLATE)

    def render(self, context: typ.Mapping[str, typ.Any]) -> str:
        """Render the layout with ``context`` merged over the site-wide values."""
        merged = {
            "site_name": self.config.site_name,
            "pygments_css": self.content_renderer.stylesheet,
            "main_menu": [],
            "html_toc": [],
            "toc_length": 0,
            "entry_route": False,
            "tutorial_route": False,
            "not_found_route": False,
            "error_route": False,
            **context,
        }
        html = self.template.render(**merged)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def render_to_file(self, context: typ.Mapping[str, typ.Any], path: Path) -> Path:
        """Render ``context`` and write it to ``path`` as UTF-8."""
        html = self.render(context)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding="utf-8")
        return path

    def entry_context(self, page: Page) -> dict[str, typ.Any]:
        """Return the context for the site entry page."""
        return {
            "title": page.frontmatter.title,
            "description": page.frontmatter.description,
            "html_content": self.content_renderer.markdown(page.content),
            "entry_route": True,
        }

    def tutorial_context(
        self, page: Page, main_menu: list[MenuGroup]
    ) -> dict[str, typ.Any]:
        """Return the context for a tutorial page, including menu and TOC."""
        html_content = self.content_renderer.markdown(page.content)
        html_toc = extract_toc(html_content, self.config.toc_levels)
        return {
            "title": page.frontmatter.title,
            "description": page.frontmatter.description,
            "html_content": html_content,
            "main_menu": main_menu,
            "html_toc": html_toc,
            "toc_length": len(html_toc),
            "current_href": page.frontmatter.href,
            "tutorial_route": True,
        }

    @staticmethod
    def not_found_context() -> dict[str, typ.Any]:
        """Return the context for the fixed not-found page."""
        return {
            "title": NOT_FOUND_TITLE,
            "description": NOT_FOUND_DESCRIPTION,
            "not_found_route": True,
        }

    @staticmethod
    def content_error_context() -> dict[str, typ.Any]:
        """Return the context for a page whose content could not be loaded."""
        return {
            "title": CONTENT_ERROR_TITLE,
            "description": CONTENT_ERROR_DESCRIPTION,
            "error_route": True,
        }


__all__ = ["PageRenderer"]
