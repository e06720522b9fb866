"""Utilities for rendering Markdown pages and assembling the static site."""

from .page_renderer import PageRenderer
from .renderer import HtmlContentRenderer
from .site_builder import BuildError, SiteBuilder

__all__ = [
    "BuildError",
    "HtmlContentRenderer",
    "PageRenderer",
    "SiteBuilder",
]
