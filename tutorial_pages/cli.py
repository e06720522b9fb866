"""Cyclopts CLI entrypoint for building and serving the tutorial site.

The ``tutorial-pages`` console script defined here either renders the whole
site to static HTML (``tutorial-pages build``) or serves the same pages
dynamically through Flask (``tutorial-pages serve``). Both commands read
``site.yaml`` from the current directory unless ``--config`` points elsewhere.

Examples
--------
Build the site using the default configuration:

>>> from tutorial_pages.cli import main
>>> main(["build"])  # doctest: +SKIP

Build into a custom directory:

>>> from tutorial_pages.cli import app
>>> app(["build", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_site_config
from .generator import BuildError, SiteBuilder
from .logging_config import configure_logging
from .server import serve as serve_site

app = App(name="tutorial-pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path | None,
    Parameter(help="Path to site config", env_var="INPUT_CONFIG"),
]
LogLevelOption = typ.Annotated[
    str, Parameter(help="Logging level", env_var="INPUT_LOG_LEVEL")
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Build the static site from Markdown content.")
def build(
    *,
    config: ConfigOption = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    log_level: LogLevelOption = "INFO",
) -> None:
    """Render the entry page, every tutorial page, and the 404 page to disk.

    Parameters
    ----------
    config : Path or None, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``). Defaults are used when no file is found.
    output_dir : Path or None, optional
        Override for the configured output directory.
    log_level : str, optional
        Logging level name; defaults to ``INFO``.

    Returns
    -------
    None
        Writes the site and prints each generated path.

    Raises
    ------
    SystemExit
        With status 1 when the build aborts; the cause has already been
        logged.
    """
    configure_logging(log_level)
    site_config = load_site_config(config)
    try:
        written = SiteBuilder(site_config, output_dir=output_dir).run()
    except BuildError:
        raise SystemExit(1) from None
    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(help="Serve the tutorial site dynamically over HTTP.")
def serve(
    *,
    config: ConfigOption = None,
    host: typ.Annotated[
        str | None, Parameter(help="Interface to bind", env_var="INPUT_HOST")
    ] = None,
    port: typ.Annotated[
        int | None, Parameter(help="Port to listen on", env_var="INPUT_PORT")
    ] = None,
    debug: bool = False,
    log_level: LogLevelOption = "INFO",
) -> None:
    """Run the Flask development server for the configured site."""
    configure_logging(log_level)
    site_config = load_site_config(config)
    serve_site(site_config, host=host, port=port, debug=debug)


def main(tokens: list[str] | None = None) -> None:
    """Invoke the Cyclopts application that powers ``tutorial-pages``.

    Parameters
    ----------
    tokens : list[str] or None, optional
        Arguments to parse instead of ``sys.argv``.

    Examples
    --------
    >>> main(["build"])  # doctest: +SKIP
    """
    app(tokens)


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
