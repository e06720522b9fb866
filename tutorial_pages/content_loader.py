r"""Load Markdown content files and split their YAML frontmatter.

Each tutorial page lives in its own Markdown file that opens with a
``---``-delimited YAML block describing where the page sits in the menu::

    ---
    title: Installing
    description: Set up the toolchain
    href: installing
    category: Getting Started
    catIndex: 1
    subcategory: Installing
    subCatIndex: 2
    ---
    ## Requirements
    ...

The loader returns frozen :class:`Page` records; nothing here renders
Markdown.

Example
-------
>>> from tutorial_pages.content_loader import parse_markdown_text
>>> page = parse_markdown_text("---\ntitle: Intro\nhref: intro\n---\nBody")
>>> page.frontmatter.href
'intro'
>>> page.content
'Body'
"""

from __future__ import annotations

import dataclasses as dc
import logging
import re
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)

FRONTMATTER_PATTERN = re.compile(
    r"\A\ufeff?---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE
)
INDEX_PATTERN = re.compile(r"[+-]?[0-9]+")
_KNOWN_KEYS = frozenset(
    {
        "title",
        "description",
        "href",
        "category",
        "catIndex",
        "subcategory",
        "subCatIndex",
    }
)


class ContentError(RuntimeError):
    """Raised when a content file or directory cannot be loaded."""


@dc.dataclass(frozen=True, slots=True)
class Frontmatter:
    """Metadata block parsed from the top of a content file.

    Attributes
    ----------
    title : str
        Display title of the page.
    description : str
        Short summary used for the meta description and page header.
    href : str or None
        Unique slug used for the route and output directory.
    category : str or None
        Menu group the page belongs to.
    cat_index : int or None
        Rank of the page's category in the menu (``catIndex`` in YAML).
    subcategory : str or None
        Label of the page within its menu group.
    sub_cat_index : int or None
        Rank of the page within its category (``subCatIndex`` in YAML).
    extra : dict[str, Any]
        Any additional keys found in the block, preserved verbatim.
    """

    title: str = ""
    description: str = ""
    href: str | None = None
    category: str | None = None
    cat_index: int | None = None
    subcategory: str | None = None
    sub_cat_index: int | None = None
    extra: dict[str, typ.Any] = dc.field(default_factory=dict)


@dc.dataclass(frozen=True, slots=True)
class Page:
    """One Markdown source file: its body text and parsed frontmatter."""

    content: str
    frontmatter: Frontmatter
    source: Path | None = None

    @property
    def file_name(self) -> str:
        """Return the source filename, or ``"<string>"`` for in-memory pages."""
        return self.source.name if self.source else "<string>"


def _text(value: object | None) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _index(value: object | None, *, key: str, source: str) -> int | None:
    """Coerce an index field to ``int``, warning and dropping invalid values."""
    match value:
        case None:
            return None
        case bool():
            pass
        case int():
            return value
        case float() if value.is_integer():
            return int(value)
        case str() if INDEX_PATTERN.fullmatch(value.strip()):
            return int(value)
    logger.warning("Ignoring non-integer %s=%r in %s", key, value, source)
    return None


def _build_frontmatter(raw: typ.Mapping[str, typ.Any], source: str) -> Frontmatter:
    """Map raw YAML keys onto a Frontmatter record."""
    return Frontmatter(
        title=_text(raw.get("title")) or "",
        description=_text(raw.get("description")) or "",
        href=_text(raw.get("href")),
        category=_text(raw.get("category")),
        cat_index=_index(raw.get("catIndex"), key="catIndex", source=source),
        subcategory=_text(raw.get("subcategory")),
        sub_cat_index=_index(raw.get("subCatIndex"), key="subCatIndex", source=source),
        extra={key: value for key, value in raw.items() if key not in _KNOWN_KEYS},
    )


def parse_markdown_text(text: str, source: Path | None = None) -> Page:
    """Split ``text`` into frontmatter and Markdown body.

    Parameters
    ----------
    text : str
        Raw file contents. A leading ``---`` line opens the frontmatter block,
        which runs until the next line consisting of ``---``.
    source : Path, optional
        Originating file, kept on the returned page for error reporting.

    Returns
    -------
    Page
        The parsed page. Text without a frontmatter block yields empty
        metadata and the whole text as content.

    Raises
    ------
    ContentError
        If the frontmatter is not valid YAML or is not a mapping.
    """
    label = str(source) if source else "<string>"
    match = FRONTMATTER_PATTERN.match(text)
    if not match:
        return Page(content=text.strip(), frontmatter=Frontmatter(), source=source)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(match.group(1)) or {}
    except YAMLError as exc:
        msg = f"Invalid frontmatter in {label}: {exc}"
        raise ContentError(msg) from exc
    if not isinstance(loaded, dict):
        msg = f"Frontmatter in {label} must be a mapping."
        raise ContentError(msg)

    body = text[match.end() :].strip()
    return Page(
        content=body,
        frontmatter=_build_frontmatter(loaded, label),
        source=source,
    )


def parse_markdown_file(path: Path) -> Page:
    """Read ``path`` as UTF-8 and parse it into a Page."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Unable to read content file '{path}': {exc}"
        raise ContentError(msg) from exc
    return parse_markdown_text(text, source=path)


def load_pages(directory: Path) -> list[Page]:
    """Load every ``*.md`` file under ``directory`` in sorted path order.

    A file that fails to parse is logged and skipped.

    Raises
    ------
    ContentError
        If ``directory`` does not exist.
    """
    if not directory.is_dir():
        msg = f"Content directory '{directory}' not found."
        raise ContentError(msg)
    pages: list[Page] = []
    for path in sorted(directory.rglob("*.md")):
        try:
            pages.append(parse_markdown_file(path))
        except ContentError:
            logger.exception("Error loading content file: %s", path)
    return pages


def _checked_href(page: Page, seen: set[str]) -> str:
    """Return the page's ``href`` as a single, unclaimed path segment."""
    href = page.frontmatter.href
    if not href:
        msg = f"Page '{page.file_name}' has no 'href' in its frontmatter."
        raise ContentError(msg)
    if "/" in href or "\\" in href or href in {".", ".."}:
        msg = f"Page '{page.file_name}' has an invalid href {href!r}."
        raise ContentError(msg)
    if href in seen:
        msg = f"Page '{page.file_name}' reuses the href {href!r}."
        raise ContentError(msg)
    return href


def routable_pages(pages: cabc.Iterable[Page]) -> list[Page]:
    """Return the pages that can be served under ``/tutorial/<href>``.

    Pages without an ``href``, with one that is not a single path segment, or
    reusing an earlier page's ``href`` are logged and dropped. The first page
    claiming an ``href`` keeps it.
    """
    seen: set[str] = set()
    routable: list[Page] = []
    for page in pages:
        try:
            href = _checked_href(page, seen)
        except ContentError as exc:
            logger.error("Skipping page %s: %s", page.source or page.file_name, exc)
            continue
        seen.add(href)
        routable.append(page)
    return routable


__all__ = [
    "ContentError",
    "Frontmatter",
    "Page",
    "load_pages",
    "parse_markdown_file",
    "parse_markdown_text",
    "routable_pages",
]
