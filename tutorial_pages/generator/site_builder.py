"""High-level orchestration for the static site build.

This module turns a :class:`~tutorial_pages.config.SiteConfig` into a complete
static output tree::

    {output_dir}/index.html
    {output_dir}/tutorial/{href}/index.html   # one per content page
    {output_dir}/404.html
    {output_dir}/static/**                    # copied verbatim

Setting up the output directory, copying assets, and loading content are
fatal steps: a failure is logged and raised as :class:`BuildError`. Rendering
an individual tutorial page is not: the error is logged with the offending
file and the build moves on to the next page.

Example
-------
>>> from pathlib import Path
>>> from tutorial_pages.config import load_site_config
>>> from tutorial_pages.generator import SiteBuilder
>>> config = load_site_config(Path("site.yaml"))  # doctest: +SKIP
>>> SiteBuilder(config).run()  # doctest: +SKIP
[PosixPath('_site/index.html'), PosixPath('_site/tutorial/intro/index.html'), ...]
"""

from __future__ import annotations

import logging
import shutil
import typing as typ
from pathlib import Path

from jinja2 import TemplateError

from tutorial_pages._constants import (
    INDEX_FILENAME,
    NOT_FOUND_FILENAME,
    STATIC_DIRNAME,
    TUTORIAL_DIRNAME,
)
from tutorial_pages.content_loader import (
    ContentError,
    Page,
    load_pages,
    parse_markdown_file,
    routable_pages,
)
from tutorial_pages.generator.page_renderer import PageRenderer
from tutorial_pages.menu import MenuGroup, build_menu

if typ.TYPE_CHECKING:
    from tutorial_pages.config import SiteConfig

logger = logging.getLogger(__name__)


class BuildError(RuntimeError):
    """Raised when the static build cannot continue."""


class SiteBuilder:
    """Render every configured page into a static output directory."""

    def __init__(
        self,
        config: SiteConfig,
        *,
        page_renderer: PageRenderer | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        config : SiteConfig
            Resolved site configuration naming the entry file, content and
            static directories, and the output directory.
        page_renderer : PageRenderer, optional
            Shared renderer; one is built from ``config`` when omitted.
        output_dir : Path, optional
            Override for ``config.output_dir``.
        """
        self.config = config
        self.page_renderer = page_renderer or PageRenderer(config)
        self.output_dir = output_dir or config.output_dir

    def run(self) -> list[Path]:
        """Build the site and return the written HTML paths.

        Returns
        -------
        list[Path]
            The entry page, each successfully rendered tutorial page, and the
            not-found page, in that order.

        Raises
        ------
        BuildError
            If the output directory cannot be prepared, the static assets
            cannot be copied, or the content cannot be loaded.
        """
        root = self.output_dir
        try:
            self._check_output_dir(root)
            self._prepare_output(root)
            self._copy_static(root)
            index_page = parse_markdown_file(self.config.index_file)
            pages = routable_pages(load_pages(self.config.content_dir))
            main_menu = build_menu(pages)

            written = [self._write_entry(root, index_page)]
            written.extend(self._write_tutorials(root, pages, main_menu))
            written.append(self._write_not_found(root))
        except BuildError:
            logger.exception("Build error")
            raise
        except (OSError, ContentError, TemplateError) as exc:
            logger.exception("Build error")
            msg = f"Site build into '{root}' failed: {exc}"
            raise BuildError(msg) from exc
        logger.info("Built %d pages into %s", len(written), root)
        return written

    def _check_output_dir(self, root: Path) -> None:
        """Refuse to clear a directory that holds the site's own sources."""
        resolved = root.resolve()
        sources = (
            self.config.content_dir,
            self.config.static_dir,
            self.config.index_file,
            self.config.templates_dir,
        )
        for source in sources:
            if resolved == source.resolve() or resolved in source.resolve().parents:
                msg = f"Output directory '{root}' contains the source path '{source}'."
                raise BuildError(msg)

    @staticmethod
    def _prepare_output(root: Path) -> None:
        """Remove any previous build and recreate the output skeleton."""
        if root.exists():
            shutil.rmtree(root)
        (root / STATIC_DIRNAME).mkdir(parents=True, exist_ok=True)
        (root / TUTORIAL_DIRNAME).mkdir(parents=True, exist_ok=True)

    def _copy_static(self, root: Path) -> None:
        """Copy the static asset tree verbatim into the output directory."""
        shutil.copytree(
            self.config.static_dir, root / STATIC_DIRNAME, dirs_exist_ok=True
        )

    def _write_entry(self, root: Path, index_page: Page) -> Path:
        context = self.page_renderer.entry_context(index_page)
        return self.page_renderer.render_to_file(context, root / INDEX_FILENAME)

    def _write_tutorials(
        self, root: Path, pages: list[Page], main_menu: list[MenuGroup]
    ) -> list[Path]:
        """Render one directory per page; log and skip pages that fail."""
        written: list[Path] = []
        for page in pages:
            href = typ.cast("str", page.frontmatter.href)
            try:
                context = self.page_renderer.tutorial_context(page, main_menu)
                path = root / TUTORIAL_DIRNAME / href / INDEX_FILENAME
                written.append(self.page_renderer.render_to_file(context, path))
            except Exception:  # noqa: BLE001
                logger.exception(
                    "Error processing page: %s", page.source or page.file_name
                )
        return written

    def _write_not_found(self, root: Path) -> Path:
        context = self.page_renderer.not_found_context()
        return self.page_renderer.render_to_file(context, root / NOT_FOUND_FILENAME)


__all__ = ["BuildError", "SiteBuilder"]
