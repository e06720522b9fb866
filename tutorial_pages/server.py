"""Serve tutorial pages dynamically over HTTP.

The Flask application built by :func:`create_app` answers the same URLs the
static build writes to disk:

``GET /``
    The entry page rendered from ``index_file``.
``GET /tutorial/<href>`` (with or without a trailing slash)
    The content page whose frontmatter ``href`` matches, with menu and TOC.
    Unknown hrefs redirect to ``/404``.
``GET /static/<path>``
    Files from ``static_dir``.

Anything else renders the not-found page with status 404. A missing entry file
or content directory is logged and answered with an error page and status 500.
Each request reloads content from disk; nothing is cached between requests.

Example
-------
>>> from tutorial_pages.config import SiteConfig
>>> from tutorial_pages.server import create_app
>>> app = create_app(SiteConfig())  # doctest: +SKIP
>>> app.test_client().get("/tutorial/missing").status_code  # doctest: +SKIP
302
"""

from __future__ import annotations

import logging
import typing as typ

from flask import Flask, redirect, request

from ._constants import NOT_FOUND_ROUTE
from .config import load_site_config
from .content_loader import (
    ContentError,
    load_pages,
    parse_markdown_file,
    routable_pages,
)
from .generator import PageRenderer
from .menu import build_menu

if typ.TYPE_CHECKING:
    from werkzeug.exceptions import HTTPException
    from werkzeug.wrappers import Response

    from .config import SiteConfig

logger = logging.getLogger(__name__)

SITE_CONFIG_KEY = "TUTORIAL_SITE_CONFIG"


def create_app(
    config: SiteConfig | None = None, *, page_renderer: PageRenderer | None = None
) -> Flask:
    """Build the Flask application serving the tutorial site.

    Parameters
    ----------
    config : SiteConfig, optional
        Resolved site configuration; loaded from ``site.yaml`` (or defaults)
        when omitted.
    page_renderer : PageRenderer, optional
        Shared renderer constructed once for the process; built from
        ``config`` when omitted.

    Returns
    -------
    Flask
        Application with the entry, tutorial, and not-found handlers
        registered.
    """
    site_config = config or load_site_config()
    renderer = page_renderer or PageRenderer(site_config)
    app = Flask(
        __name__,
        static_folder=str(site_config.static_dir),
        static_url_path="/static",
    )
    app.config[SITE_CONFIG_KEY] = site_config

    @app.get("/")
    def entry() -> str:
        index_page = parse_markdown_file(site_config.index_file)
        return renderer.render(renderer.entry_context(index_page))

    @app.get("/tutorial/<href>", strict_slashes=False)
    def tutorial(href: str) -> str | Response:
        pages = routable_pages(load_pages(site_config.content_dir))
        current = next((page for page in pages if page.frontmatter.href == href), None)
        if current is None:
            logger.debug("No page with href %r; redirecting", href)
            return redirect(NOT_FOUND_ROUTE, code=302)
        context = renderer.tutorial_context(current, build_menu(pages))
        return renderer.render(context)

    @app.errorhandler(404)
    def not_found(_error: HTTPException) -> tuple[str, int]:
        return renderer.render(renderer.not_found_context()), 404

    @app.errorhandler(ContentError)
    def content_error(error: ContentError) -> tuple[str, int]:
        logger.exception("Error loading content for %s", request.path, exc_info=error)
        return renderer.render(renderer.content_error_context()), 500

    return app


def serve(
    config: SiteConfig,
    *,
    host: str | None = None,
    port: int | None = None,
    debug: bool = False,
) -> None:
    """Run the Flask development server for ``config``."""
    app = create_app(config)
    bind_host = host or config.server.host
    bind_port = port or config.server.port
    logger.info("Serving %s at http://%s:%d", config.site_name, bind_host, bind_port)
    app.run(host=bind_host, port=bind_port, debug=debug)


__all__ = ["SITE_CONFIG_KEY", "create_app", "serve"]
