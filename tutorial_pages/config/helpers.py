"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import SiteConfigError


def _resolve_path(base_dir: Path, value: object | None, default: Path) -> Path:
    """Return ``value`` as a path anchored at ``base_dir`` when relative."""
    if value is None:
        candidate = default
    elif isinstance(value, str | Path):
        candidate = Path(value).expanduser()
    else:
        msg = f"Expected a path string, got {value!r}."
        raise SiteConfigError(msg)
    if candidate.is_absolute():
        return candidate
    return base_dir / candidate


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _str_tuple(value: object | None, default: tuple[str, ...]) -> tuple[str, ...]:
    """Normalize a string or list of strings into a tuple of non-empty names."""
    match value:
        case None:
            return default
        case str() as text:
            return tuple(segment for segment in text.split() if segment)
        case list() | tuple():
            return tuple(
                text for text in (str(item).strip() for item in value) if text
            )
        case _:
            msg = f"Expected a string or list of strings, got {value!r}."
            raise SiteConfigError(msg)


def _int_tuple(value: object | None, default: tuple[int, ...]) -> tuple[int, ...]:
    """Normalize a list of heading levels into a sorted tuple of ints in 1..6."""
    if value is None:
        return default
    if not isinstance(value, list | tuple):
        msg = f"Expected a list of integers, got {value!r}."
        raise SiteConfigError(msg)
    levels: set[int] = set()
    for item in value:
        try:
            level = int(item)
        except (TypeError, ValueError) as exc:
            msg = f"Heading level {item!r} is not an integer."
            raise SiteConfigError(msg) from exc
        if not 1 <= level <= 6:
            msg = f"Heading level {level} is outside the range 1-6."
            raise SiteConfigError(msg)
        levels.add(level)
    return tuple(sorted(levels))


def _port(value: object | None, default: int) -> int:
    """Return a TCP port parsed from ``value``."""
    if value is None:
        return default
    try:
        port = int(typ.cast("typ.Any", value))
    except (TypeError, ValueError) as exc:
        msg = f"Server port {value!r} is not an integer."
        raise SiteConfigError(msg) from exc
    if not 0 < port < 65536:
        msg = f"Server port {port} is out of range."
        raise SiteConfigError(msg)
    return port


__all__ = [
    "_int_tuple",
    "_optional_str",
    "_port",
    "_resolve_path",
    "_str_tuple",
]
