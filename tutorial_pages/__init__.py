"""Generate and serve a Markdown-driven tutorial site.

This package reads Markdown files with YAML frontmatter, groups them into a
category/subcategory menu, extracts a table of contents from each rendered
page, and either writes a static HTML site or serves the same pages through
Flask.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``create_app``: Flask application factory for dynamic serving.

Examples
--------
>>> from tutorial_pages import main
>>> main(["build"])  # doctest: +SKIP
>>> from tutorial_pages import app
>>> callable(app)
True
"""

from __future__ import annotations

from .cli import app, main
from .server import create_app

__all__ = ["app", "create_app", "main"]
