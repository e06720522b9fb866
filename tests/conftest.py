"""Shared fixtures for tutorial_pages tests.

``site_config`` lays out a small tutorial site in ``tmp_path``::

    index.md
    markdown/alpha.md    href a, Basics (catIndex 1), subCatIndex 2, 3 headings
    markdown/beta.md     href b, Basics (catIndex 1), subCatIndex 1, no headings
    markdown/gamma.md    href c, Advanced (catIndex 2), subCatIndex 1, 1 heading
    static/css/style.css
    static/js/app.js
    static/img/nested/logo.svg

and returns a :class:`~tutorial_pages.config.SiteConfig` pointing at it, with
``_site`` as the output directory.
"""

from __future__ import annotations

import typing as typ

import pytest

from tutorial_pages.config import SiteConfig

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

ALPHA_BODY = (
    "## First Steps\n"
    "Intro text.\n\n"
    "### Detail\n"
    "More text.\n\n"
    "## Second Part\n"
    "```python\n"
    "print('hi')\n"
    "```\n"
)
STATIC_FILES = {
    "css/style.css": "body { margin: 0; }\n",
    "js/app.js": "console.log('app')\n",
    "img/nested/logo.svg": "<svg xmlns='http://www.w3.org/2000/svg'></svg>\n",
}


def write_markdown(
    path: Path, frontmatter: cabc.Mapping[str, object] | None, body: str
) -> Path:
    """Write a Markdown file with an optional YAML frontmatter block."""
    lines: list[str] = []
    if frontmatter is not None:
        lines.append("---")
        lines.extend(f"{key}: {value}" for key, value in frontmatter.items())
        lines.append("---")
    lines.append(body)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Create the sample site sources and return their root directory."""
    root = tmp_path / "site"
    write_markdown(
        root / "index.md",
        {"title": "Home", "description": "Start here"},
        "Welcome **home**.",
    )
    content = root / "markdown"
    write_markdown(
        content / "alpha.md",
        {
            "title": "Alpha Page",
            "description": "Alpha description",
            "href": "a",
            "category": "Basics",
            "catIndex": 1,
            "subcategory": "Alpha",
            "subCatIndex": 2,
        },
        ALPHA_BODY,
    )
    write_markdown(
        content / "beta.md",
        {
            "title": "Beta Page",
            "description": "Beta description",
            "href": "b",
            "category": "Basics",
            "catIndex": 1,
            "subcategory": "Beta",
            "subCatIndex": 1,
        },
        "Just prose, no headings.",
    )
    write_markdown(
        content / "gamma.md",
        {
            "title": "Gamma Page",
            "description": "Gamma description",
            "href": "c",
            "category": "Advanced",
            "catIndex": 2,
            "subcategory": "Gamma",
            "subCatIndex": 1,
        },
        "## Only Heading\nBody.",
    )
    for relative, text in STATIC_FILES.items():
        target = root / "static" / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def site_config(site_root: Path) -> SiteConfig:
    """Return a SiteConfig pointing at the sample site sources."""
    return SiteConfig(
        site_name="Test Site",
        index_file=site_root / "index.md",
        content_dir=site_root / "markdown",
        static_dir=site_root / "static",
        output_dir=site_root.parent / "_site",
    )


@pytest.fixture
def markdown_writer() -> cabc.Callable[..., Path]:
    """Return the helper that writes Markdown files with frontmatter."""
    return write_markdown
