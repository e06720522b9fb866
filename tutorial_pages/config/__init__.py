"""Load and validate site configuration YAML for tutorial builds.

This subpackage parses the project's ``site.yaml`` file, applies defaults for
every omitted key, resolves content/static/output paths relative to the file,
and produces frozen dataclasses (:class:`SiteConfig`, :class:`ServerConfig`)
that the renderer, static builder, and HTTP server consume. The primary entry
point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from tutorial_pages.config import load_site_config
>>> site = load_site_config(Path("site.yaml"))  # doctest: +SKIP
>>> site.content_dir.name  # doctest: +SKIP
'markdown'
"""

from .loader import DEFAULT_CONFIG_NAME, build_site_config, load_site_config
from .models import (
    DEFAULT_LANGUAGES,
    DEFAULT_TOC_LEVELS,
    ServerConfig,
    SiteConfig,
    SiteConfigError,
)

__all__ = [
    "DEFAULT_CONFIG_NAME",
    "DEFAULT_LANGUAGES",
    "DEFAULT_TOC_LEVELS",
    "ServerConfig",
    "SiteConfig",
    "SiteConfigError",
    "build_site_config",
    "load_site_config",
]
