"""Group loaded pages into the category/subcategory navigation menu.

The menu is a list of :class:`MenuGroup` records, one per ``category``. Within
a group, entries are ordered by ``subCatIndex``; the groups themselves are
ordered by the ``catIndex`` of whichever entry sorts first in the group. Both
passes use Python's stable sort, so ties keep their load order and the menu
is identical across runs.

Pages missing an index sort after every indexed page. Pages missing a
category are grouped under :data:`~tutorial_pages._constants.DEFAULT_CATEGORY`.
Pages without an ``href`` have no route and are left out.

Example
-------
>>> from tutorial_pages.content_loader import Frontmatter, Page
>>> from tutorial_pages.menu import build_menu
>>> pages = [
...     Page("", Frontmatter(href="b", category="Two", cat_index=2, sub_cat_index=1)),
...     Page("", Frontmatter(href="a", category="One", cat_index=1, sub_cat_index=1)),
... ]
>>> [group.key for group in build_menu(pages)]
['One', 'Two']
"""

from __future__ import annotations

import dataclasses as dc
import math
import typing as typ

from ._constants import DEFAULT_CATEGORY, TUTORIAL_ROUTE

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .content_loader import Page


@dc.dataclass(frozen=True, slots=True)
class MenuEntry:
    """Navigation link derived from a single page's frontmatter."""

    title: str
    href: str
    category: str
    cat_index: int | None
    subcategory: str | None
    sub_cat_index: int | None

    @property
    def label(self) -> str:
        """Return the subcategory label, falling back to the page title."""
        return self.subcategory or self.title or self.href

    @property
    def url(self) -> str:
        """Return the site-relative route for this entry."""
        return TUTORIAL_ROUTE.format(href=self.href)


@dc.dataclass(frozen=True, slots=True)
class MenuGroup:
    """A category heading and its ordered entries."""

    key: str
    entries: tuple[MenuEntry, ...]

    @property
    def cat_index(self) -> int | None:
        """Return the rank taken from the group's first sorted entry."""
        return self.entries[0].cat_index if self.entries else None


def _rank(value: int | None) -> float:
    """Return a sort key that places missing indexes last."""
    return math.inf if value is None else value


def _entry(page: Page) -> MenuEntry | None:
    meta = page.frontmatter
    if not meta.href:
        return None
    return MenuEntry(
        title=meta.title,
        href=meta.href,
        category=meta.category or DEFAULT_CATEGORY,
        cat_index=meta.cat_index,
        subcategory=meta.subcategory,
        sub_cat_index=meta.sub_cat_index,
    )


def group_by_category(pages: cabc.Iterable[Page]) -> dict[str, list[MenuEntry]]:
    """Return menu entries keyed by category in order of first appearance."""
    grouped: dict[str, list[MenuEntry]] = {}
    for page in pages:
        entry = _entry(page)
        if entry is None:
            continue
        grouped.setdefault(entry.category, []).append(entry)
    return grouped


def build_menu(pages: cabc.Iterable[Page]) -> list[MenuGroup]:
    """Build the ordered navigation menu for ``pages``.

    Parameters
    ----------
    pages : Iterable[Page]
        Loaded content pages. The iterable is only read.

    Returns
    -------
    list[MenuGroup]
        Groups ordered ascending by the ``cat_index`` of their first entry,
        each holding entries ordered ascending by ``sub_cat_index``.
    """
    groups = [
        MenuGroup(
            key=key,
            entries=tuple(
                sorted(entries, key=lambda item: _rank(item.sub_cat_index))
            ),
        )
        for key, entries in group_by_category(pages).items()
    ]
    # The group rank depends on the result of the entry sort above.
    return sorted(groups, key=lambda group: _rank(group.cat_index))


__all__ = ["MenuEntry", "MenuGroup", "build_menu", "group_by_category"]
