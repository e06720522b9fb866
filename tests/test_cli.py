"""Tests for the ``tutorial-pages`` command-line entrypoint."""

from __future__ import annotations

import typing as typ

import pytest

from tutorial_pages import cli

if typ.TYPE_CHECKING:
    from pathlib import Path

    from tutorial_pages.config import SiteConfig


@pytest.fixture
def config_file(site_config: SiteConfig) -> Path:
    """Write a ``site.yaml`` describing the sample site."""
    root = site_config.content_dir.parent
    path = root / "site.yaml"
    path.write_text(
        "\n".join(
            [
                "site_name: CLI Site",
                "index_file: index.md",
                "content_dir: markdown",
                "static_dir: static",
                "output_dir: ../_site",
                "languages: [python, text]",
            ]
        )
        + "\n",
        encoding="utf-8",
    )
    return path


def test_build_prints_written_paths(
    config_file: Path,
    site_config: SiteConfig,
    mocker: typ.Any,
    capsys: pytest.CaptureFixture[str],
) -> None:
    configure = mocker.patch("tutorial_pages.cli.configure_logging")

    cli.build(config=config_file, log_level="DEBUG")

    configure.assert_called_once_with("DEBUG")
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 5
    assert all(line.startswith("wrote ") for line in out)
    assert out[0].endswith("index.html")
    assert out[-1].endswith("404.html")
    assert (site_config.output_dir / "tutorial" / "c" / "index.html").exists()


def test_build_output_dir_override(
    config_file: Path, tmp_path: Path, mocker: typ.Any
) -> None:
    mocker.patch("tutorial_pages.cli.configure_logging")
    target = tmp_path / "dist"

    cli.build(config=config_file, output_dir=target)

    assert (target / "index.html").exists()


def test_build_failure_exits_with_status_one(
    config_file: Path, mocker: typ.Any
) -> None:
    mocker.patch("tutorial_pages.cli.configure_logging")
    (config_file.parent / "index.md").unlink()

    with pytest.raises(SystemExit) as excinfo:
        cli.build(config=config_file)

    assert excinfo.value.code == 1


def test_serve_passes_overrides(config_file: Path, mocker: typ.Any) -> None:
    mocker.patch("tutorial_pages.cli.configure_logging")
    serve_site = mocker.patch("tutorial_pages.cli.serve_site")

    cli.serve(config=config_file, host="0.0.0.0", port=9001, debug=True)

    serve_site.assert_called_once()
    site_config = serve_site.call_args.args[0]
    assert site_config.site_name == "CLI Site"
    assert serve_site.call_args.kwargs == {
        "host": "0.0.0.0",
        "port": 9001,
        "debug": True,
    }


def test_format_path_prefers_cwd_relative(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)

    assert cli._format_path(tmp_path / "out" / "index.html") == "out/index.html"
