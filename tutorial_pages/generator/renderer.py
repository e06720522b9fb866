"""Utilities for rendering markdown and syntax-highlighted code snippets."""

from __future__ import annotations

import logging
import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from tutorial_pages.config import DEFAULT_LANGUAGES

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)

PLAINTEXT_LANGUAGE = "text"
FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})[ \t]*([A-Za-z0-9_+#.-]+)?([^\r\n`~]*)$", re.MULTILINE
)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')


def register_languages(languages: cabc.Iterable[str]) -> frozenset[str]:
    """Return the subset of ``languages`` that Pygments can highlight.

    Unknown names are logged and dropped; code fenced with them is later
    rendered as plain text.
    """
    registered: set[str] = set()
    for language in languages:
        try:
            get_lexer_by_name(language)
        except ClassNotFound:
            logger.error("Failed to register %s language lexer", language)
            continue
        registered.add(language.lower())
    return frozenset(registered)


class HtmlContentRenderer:
    """Render markdown and code snippets with consistent styling.

    One instance is built at startup and shared by every render call; it holds
    no per-call state.
    """

    def __init__(
        self,
        pygments_style: str = "monokai",
        languages: cabc.Iterable[str] = DEFAULT_LANGUAGES,
    ) -> None:
        """Initialize a renderer with a pygments style and highlight languages.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"monokai"``.
        languages : Iterable[str], optional
            Fence labels to highlight. Any other label falls back to plain
            text.
        """
        self.pygments_style = pygments_style
        self.languages = register_languages(languages)
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render markdown into HTML with heading ids and highlighted code."""
        normalized, labels = self._normalize_fenced_blocks(text)
        if not normalized.strip():
            return ""
        md = Markdown(
            extensions=["fenced_code", "codehilite", "tables", "sane_lists", "toc"],
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        return self._annotate_codehilite(md.convert(normalized), labels)

    def resolve_language(self, label: str | None) -> str:
        """Return ``label`` when it is registered, otherwise plain text."""
        if label and label.lower() in self.languages:
            return label.lower()
        return PLAINTEXT_LANGUAGE

    @staticmethod
    def _annotate_codehilite(html: str, labels: cabc.Sequence[str]) -> str:
        """Tag each highlighted block with the language its fence resolved to."""
        if not labels:
            return html
        remaining = iter(labels)

        def _repl(match: re.Match[str]) -> str:
            language = escape(next(remaining, PLAINTEXT_LANGUAGE), quote=True)
            return f'<div class="codehilite" data-language="{language}">'

        return CODEHILITE_OPEN_TAG.sub(_repl, html, len(labels))

    def _normalize_fenced_blocks(self, text: str) -> tuple[str, list[str]]:
        """Dedent fences and map every opening label onto a registered language.

        Returns the rewritten markdown and the resolved label of each block in
        document order.
        """
        without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)
        labels: list[str] = []
        opening: str | None = None

        def _relabel(match: re.Match[str]) -> str:
            nonlocal opening
            fence, language, _extras = match.groups()
            closes = (
                opening is not None
                and language is None
                and fence[0] == opening[0]
                and len(fence) >= len(opening)
            )
            if closes:
                opening = None
                return fence
            if opening is not None:
                return match.group(0)
            opening = fence
            labels.append(self.resolve_language(language))
            return f"{fence}{labels[-1]}"

        return FENCE_LABEL_PATTERN.sub(_relabel, without_indent), labels


__all__ = ["PLAINTEXT_LANGUAGE", "HtmlContentRenderer", "register_languages"]
