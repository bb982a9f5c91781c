from __future__ import annotations

import os
from pathlib import Path
from typing import Dict

import pytest

from n2h.exceptions import ConfigurationError
from n2h.generator import Generator, generate
from n2h.models import GeneratorConfig

from .conftest import write_file


def _snapshot(root: Path) -> Dict[str, bytes]:
    result = {}
    for dirpath, _dirnames, filenames in os.walk(root):
        for filename in filenames:
            path = Path(dirpath) / filename
            result[path.relative_to(root).as_posix()] = path.read_bytes()
    return result


@pytest.fixture
def notes(site: Path) -> Path:
    notes = site / "notes"
    write_file(notes / "a.md", "# Alpha\n\nFirst *note*.\n")
    write_file(notes / "sub" / "b.md", "# Beta\n")
    return notes


def test_generates_expected_tree(site: Path, dest: Path, notes: Path) -> None:
    result = generate(site, dest)

    assert sorted(_snapshot(dest)) == ["a.html", "index.html", "sub/b.html", "sub/index.html"]
    assert result.converted == {"dir": 2, "markdown": 2}
    assert result.total == 4

    a_html = (dest / "a.html").read_text(encoding="utf-8")
    assert "<title>a</title>" in a_html
    assert "<h1>Alpha</h1>" in a_html
    assert "<em>note</em>" in a_html

    sub_index = (dest / "sub" / "index.html").read_text(encoding="utf-8")
    assert sub_index.count("<li ") == 1
    assert '<li class="markdown"><a href="/sub/b.html">b</a></li>' in sub_index

    root_index = (dest / "index.html").read_text(encoding="utf-8")
    assert "<title>root</title>" in root_index
    assert root_index.index('href="/sub/"') < root_index.index('href="/a.html"')


def test_breadcrumbs_in_nested_note(site: Path, dest: Path, notes: Path) -> None:
    generate(site, dest, base_url="wiki")
    b_html = (dest / "sub" / "b.html").read_text(encoding="utf-8")
    assert '<nav><a href="/wiki/">root</a>/<a href="/wiki/sub">sub</a>/</nav>' in b_html


def test_rerun_is_byte_identical(site: Path, dest: Path, notes: Path) -> None:
    generate(site, dest)
    first = _snapshot(dest)
    generate(site, dest)
    assert _snapshot(dest) == first


def test_stale_destination_files_are_removed(site: Path, dest: Path, notes: Path) -> None:
    write_file(dest / "stale.html", "old")
    write_file(dest / "old-dir" / "page.html", "old")

    generate(site, dest)

    assert not (dest / "stale.html").exists()
    assert not (dest / "old-dir").exists()


def test_missing_note_layout_touches_nothing(site: Path, dest: Path, notes: Path) -> None:
    (site / "layouts" / "note.hbs").unlink()
    write_file(dest / "keep.txt", "keep")

    with pytest.raises(ConfigurationError, match="layouts/note.hbs"):
        generate(site, dest)

    assert _snapshot(dest) == {"keep.txt": b"keep"}


def test_missing_notes_directory(tmp_path: Path, dest: Path) -> None:
    source = tmp_path / "empty-site"
    source.mkdir()
    with pytest.raises(ConfigurationError, match="notes"):
        generate(source, dest)


def test_invalid_source_path(tmp_path: Path, dest: Path) -> None:
    with pytest.raises(ConfigurationError, match="Invalid source path"):
        generate(tmp_path / "nope", dest)


def test_destination_is_created(site: Path, tmp_path: Path, notes: Path) -> None:
    dest = tmp_path / "out" / "nested"
    generate(site, dest)
    assert (dest / "index.html").is_file()


def test_assets_and_passthrough_files_are_copied(site: Path, dest: Path, notes: Path) -> None:
    write_file(site / "assets" / "css" / "site.css", "body {}")
    write_file(notes / "sub" / "diagram.svg", "<svg/>")

    result = generate(site, dest)

    assert result.copied_assets == 1
    assert (dest / "assets" / "css" / "site.css").read_text() == "body {}"
    assert (dest / "sub" / "diagram.svg").read_text() == "<svg/>"
    assert result.converted["unknown"] == 1
    sub_index = (dest / "sub" / "index.html").read_text(encoding="utf-8")
    assert '<li class="unknown"><a href="/sub/diagram.svg">diagram</a></li>' in sub_index


def test_empty_directories_are_listed(site: Path, dest: Path, notes: Path) -> None:
    (notes / "empty").mkdir()
    generate(site, dest)
    assert (dest / "empty" / "index.html").is_file()
    assert 'href="/empty/"' in (dest / "index.html").read_text(encoding="utf-8")


def test_base_url_from_config_file(site: Path, dest: Path, notes: Path) -> None:
    write_file(site / "config.toml", 'base_url = "/docs"\n')
    generator = Generator.create(GeneratorConfig(source_path=site, dest_path=dest))
    assert generator.context.base_url == "/docs/"


def test_base_url_option_overrides_config(site: Path, dest: Path, notes: Path) -> None:
    write_file(site / "config.yml", "base_url: docs\n")
    generator = Generator.create(GeneratorConfig(source_path=site, dest_path=dest, base_url="/wiki/"))
    assert generator.context.base_url == "/wiki/"


def test_markdown_extensions_from_config(site: Path, dest: Path, notes: Path) -> None:
    write_file(site / "config.yml", "markdown_extensions: [toc]\n")
    generate(site, dest)
    assert '<h1 id="alpha">Alpha</h1>' in (dest / "a.html").read_text(encoding="utf-8")


def test_note_with_colon_line_between_rules_is_rendered(site: Path, dest: Path, notes: Path) -> None:
    write_file(notes / "a.md", "---\nNote: see below: here\n---\n\nBody text.\n")

    generate(site, dest)

    html = (dest / "a.html").read_text(encoding="utf-8")
    assert "Note: see below: here" in html
    assert "Body text." in html


def test_unknown_markdown_extension_touches_nothing(site: Path, dest: Path, notes: Path) -> None:
    write_file(site / "config.yml", "markdown_extensions: [nope_ext]\n")
    write_file(dest / "keep.txt", "keep")

    with pytest.raises(ConfigurationError, match="nope_ext"):
        generate(site, dest)

    assert _snapshot(dest) == {"keep.txt": b"keep"}


def test_unreadable_directory_aborts_conversion(
    site: Path, dest: Path, notes: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    locked = (notes / "locked").resolve()
    locked.mkdir()
    real_scandir = os.scandir

    def _scandir(path="."):
        if Path(path) == locked:
            raise PermissionError(13, "Permission denied", str(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", _scandir)

    with pytest.raises(PermissionError):
        generate(site, dest)
