"""Typed dataclasses describing tutorial site configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

DEFAULT_LANGUAGES: tuple[str, ...] = (
    "javascript",
    "markdown",
    "bash",
    "xml",
    "css",
    "text",
    "json",
    "handlebars",
)
DEFAULT_TOC_LEVELS: tuple[int, ...] = (2, 3)


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class ServerConfig:
    """Bind address for the development HTTP server."""

    host: str = "127.0.0.1"
    port: int = 8000


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """A fully resolved site definition sourced from YAML config.

    Attributes
    ----------
    site_name : str
        Name shown in the page header and appended to HTML titles.
    index_file : Path
        Markdown file rendered as the entry page.
    content_dir : Path
        Directory scanned recursively for tutorial Markdown files.
    static_dir : Path
        Asset directory copied verbatim into the static build and served at
        ``/static`` by the HTTP server.
    output_dir : Path
        Root of the static build output.
    templates_dir : Path
        Directory holding the Jinja layout.
    pygments_style : str
        Pygments style used for highlighted code blocks.
    languages : tuple[str, ...]
        Fenced-code languages to register with the highlighter; anything else
        is rendered as plain text.
    toc_levels : tuple[int, ...]
        Heading levels collected into the table of contents.
    server : ServerConfig
        Host and port for ``tutorial-pages serve``.
    """

    site_name: str = "Tutorial"
    index_file: Path = Path("index.md")
    content_dir: Path = Path("markdown")
    static_dir: Path = Path("static")
    output_dir: Path = Path("_site")
    templates_dir: Path = Path(__file__).resolve().parents[1] / "templates"
    pygments_style: str = "monokai"
    languages: tuple[str, ...] = DEFAULT_LANGUAGES
    toc_levels: tuple[int, ...] = DEFAULT_TOC_LEVELS
    server: ServerConfig = dc.field(default_factory=ServerConfig)


__all__ = [
    "DEFAULT_LANGUAGES",
    "DEFAULT_TOC_LEVELS",
    "ServerConfig",
    "SiteConfig",
    "SiteConfigError",
]
