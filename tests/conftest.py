from __future__ import annotations

from pathlib import Path

import pytest

from n2h.file_types import default_registry
from n2h.models import AppContext
from n2h.templates import TemplateStore

HEADER = "<html><head><title>{{ name }}</title></head><body>"
FOOTER = "</body></html>"
NOTE = (
    '<nav>{% for link in parents %}<a href="{{ link.url }}">{{ link.name }}</a>/{% endfor %}</nav>\n'
    "<article>{{ content }}</article>"
)
DIR = (
    '<nav>{% for link in parents %}<a href="{{ link.url }}">{{ link.name }}</a>/{% endfor %}</nav>\n'
    "<ul>{% for child in children %}"
    '<li class="{{ child.fileType }}"><a href="{{ child.url }}">{{ child.name }}</a></li>'
    "{% endfor %}</ul>"
)


def write_file(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """Source tree with templates and an empty notes directory."""
    root = tmp_path / "site"
    write_file(root / "partials" / "header.hbs", HEADER)
    write_file(root / "partials" / "footer.hbs", FOOTER)
    write_file(root / "layouts" / "note.hbs", NOTE)
    write_file(root / "layouts" / "dir.hbs", DIR)
    (root / "notes").mkdir()
    return root


@pytest.fixture
def dest(tmp_path: Path) -> Path:
    path = tmp_path / "public"
    path.mkdir()
    return path


@pytest.fixture
def make_context(site: Path, dest: Path):
    def _make(base_url: str = "/") -> AppContext:
        return AppContext(
            source_root=site.resolve(),
            dest_root=dest.resolve(),
            notes_root=(site / "notes").resolve(),
            templates=TemplateStore(),
            registry=default_registry(),
            base_url=base_url,
        )

    return _make
