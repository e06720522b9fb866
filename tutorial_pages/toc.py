"""Extract a table of contents from rendered page HTML.

The Markdown renderer gives every heading an ``id`` through the ``toc``
extension, so the extractor only has to read headings back out of the final
HTML in document order. Callers use ``len()`` of the result to decide whether
a TOC widget is rendered at all.

Example
-------
>>> from tutorial_pages.toc import extract_toc
>>> toc = extract_toc('<h2 id="setup">Setup</h2><p>Body</p><h3 id="pip">pip</h3>')
>>> [(entry.level, entry.anchor) for entry in toc]
[(2, 'setup'), (3, 'pip')]
>>> extract_toc("<p>No headings</p>")
[]
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from bs4 import BeautifulSoup
from markdown.extensions.toc import slugify, unique

from .config import DEFAULT_TOC_LEVELS

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dc.dataclass(frozen=True, slots=True)
class TocEntry:
    """A single heading reference for in-page navigation."""

    level: int
    text: str
    anchor: str

    @property
    def href(self) -> str:
        """Return the fragment link for this heading."""
        return f"#{self.anchor}"


def extract_toc(
    html: str, levels: cabc.Iterable[int] = DEFAULT_TOC_LEVELS
) -> list[TocEntry]:
    """Return TOC entries for headings of ``levels`` found in ``html``.

    Parameters
    ----------
    html : str
        Rendered page body.
    levels : Iterable[int], optional
        Heading levels to collect; defaults to ``h2`` and ``h3``.

    Returns
    -------
    list[TocEntry]
        Entries in document order. Headings without an ``id`` receive the
        slug the renderer would have assigned. Empty when no heading matches.
    """
    tags = [f"h{level}" for level in levels]
    if not html.strip() or not tags:
        return []

    soup = BeautifulSoup(html, "html.parser")
    used: set[str] = {str(node["id"]) for node in soup.find_all(id=True)}
    entries: list[TocEntry] = []
    for heading in soup.find_all(tags):
        text = " ".join(heading.get_text().split())
        anchor = str(heading.get("id") or "")
        if not anchor:
            anchor = unique(slugify(text, "-") or "section", used)
        entries.append(TocEntry(level=int(heading.name[1]), text=text, anchor=anchor))
    return entries


__all__ = ["TocEntry", "extract_toc"]
