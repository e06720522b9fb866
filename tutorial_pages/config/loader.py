"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _int_tuple, _optional_str, _port, _resolve_path, _str_tuple
from .models import (
    DEFAULT_LANGUAGES,
    DEFAULT_TOC_LEVELS,
    ServerConfig,
    SiteConfig,
    SiteConfigError,
)

DEFAULT_CONFIG_NAME = "site.yaml"


def load_site_config(path: Path | None = None) -> SiteConfig:
    """Load the YAML configuration describing content locations and rendering.

    Parameters
    ----------
    path : Path, optional
        Filesystem path to the YAML file. When ``None``, ``site.yaml`` in the
        current directory is used if present; otherwise the built-in defaults
        are returned, rooted at the current directory.

    Returns
    -------
    SiteConfig
        Parsed configuration with every relative path resolved against the
        directory holding the YAML file.

    Raises
    ------
    FileNotFoundError
        If an explicit ``path`` does not exist.
    SiteConfigError
        If the top-level document is not a mapping or a value is invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from tutorial_pages.config import load_site_config
    >>> config = load_site_config(Path("site.yaml"))  # doctest: +SKIP
    >>> config.output_dir.name  # doctest: +SKIP
    '_site'
    """
    if path is None:
        candidate = Path(DEFAULT_CONFIG_NAME)
        if not candidate.exists():
            return build_site_config({}, base_dir=Path.cwd())
        path = candidate

    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise SiteConfigError(msg)
    return build_site_config(loaded, base_dir=path.resolve().parent)


def build_site_config(
    raw: typ.Mapping[str, typ.Any], *, base_dir: Path
) -> SiteConfig:
    """Build a SiteConfig from a parsed mapping, resolving paths at ``base_dir``."""
    base = SiteConfig()
    server_raw = raw.get("server") or {}
    if not isinstance(server_raw, dict):
        msg = "The 'server' section must be a mapping."
        raise SiteConfigError(msg)

    templates_dir = base.templates_dir
    if raw.get("templates_dir") is not None:
        templates_dir = _resolve_path(base_dir, raw["templates_dir"], templates_dir)

    return SiteConfig(
        site_name=_optional_str(raw.get("site_name")) or base.site_name,
        index_file=_resolve_path(base_dir, raw.get("index_file"), base.index_file),
        content_dir=_resolve_path(
            base_dir, raw.get("content_dir"), base.content_dir
        ),
        static_dir=_resolve_path(base_dir, raw.get("static_dir"), base.static_dir),
        output_dir=_resolve_path(base_dir, raw.get("output_dir"), base.output_dir),
        templates_dir=templates_dir,
        pygments_style=_optional_str(raw.get("pygments_style"))
        or base.pygments_style,
        languages=_str_tuple(raw.get("languages"), DEFAULT_LANGUAGES),
        toc_levels=_int_tuple(raw.get("toc_levels"), DEFAULT_TOC_LEVELS),
        server=ServerConfig(
            host=_optional_str(server_raw.get("host")) or base.server.host,
            port=_port(server_raw.get("port"), base.server.port),
        ),
    )


__all__ = ["DEFAULT_CONFIG_NAME", "build_site_config", "load_site_config"]
