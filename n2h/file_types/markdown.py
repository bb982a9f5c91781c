"""Markdown notes, rendered to HTML pages."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import frontmatter
import markdown
import yaml
from markupsafe import Markup

from ..exceptions import ConfigurationError
from ..logger import logger
from ..models import AppContext
from ..utils import PathLike, read_text
from .base import FileType, FileTypeFactory, compose_template, create_parent_links

TYPE_STR = "markdown"
NOTE_TEMPLATE = "layouts/note.hbs"
EXTENSIONS = (".md", ".markdown", ".mkd")


def is_markdown_path(path: Path) -> bool:
    """Regular file with a markdown extension (case-sensitive)."""
    return path.is_file() and path.name.endswith(EXTENSIONS)


def create_renderer(extensions: List[str]) -> markdown.Markdown:
    """Build a Markdown renderer, loading every extension up front.

    Raises:
        ConfigurationError: If an extension can not be loaded
    """
    try:
        return markdown.Markdown(extensions=list(extensions))
    except (ImportError, AttributeError) as e:
        raise ConfigurationError(
            f"Invalid markdown_extensions {list(extensions)}: {e}"
        ) from e


def split_front_matter(text: str, source: PathLike = "") -> Tuple[Dict[str, Any], str]:
    """Split front matter off a note.

    A leading block that is not a mapping is part of the note body:
    the metadata is empty and the text is returned untouched.
    """
    handler = frontmatter.detect_format(text, frontmatter.handlers)
    if handler is None:
        return {}, text
    try:
        header, body = handler.split(text)
        metadata = handler.load(header)
    except (yaml.YAMLError, ValueError) as e:
        logger.warning(f"Ignoring front matter of {source}: {e}")
        return {}, text
    if metadata is None:
        return {}, body
    if not isinstance(metadata, dict):
        return {}, text
    return metadata, body


class MarkdownFactory(FileTypeFactory):
    def try_create(self, path: PathLike) -> Optional[FileType]:
        path = Path(path)
        if is_markdown_path(path):
            return Markdown(path)
        return None

    def initialize(self, context: AppContext) -> None:
        context.renderer = create_renderer(context.markdown_extensions)
        context.templates.register(TYPE_STR, compose_template(context, NOTE_TEMPLATE))


class Markdown(FileType):
    type_str = TYPE_STR

    def get_url(self, context: AppContext) -> str:
        return f"{context.base_url}{self.parent_url_path(context)}{self.path.stem}.html"

    def dest_path(self, context: AppContext) -> Path:
        relative = self.relative(context)
        return context.dest_root / relative.parent / f"{self.path.stem}.html"

    def build_model(self, context: AppContext) -> Dict[str, Any]:
        """Render model exposed to the note template.

        Front matter is split off the note; its `title` (or the file stem)
        becomes `title` and the whole mapping `meta`.
        """
        metadata, body = split_front_matter(read_text(self.path), self.path)
        renderer = context.renderer
        if renderer is None:
            renderer = context.renderer = create_renderer(context.markdown_extensions)
        content = renderer.reset().convert(body)
        parents = create_parent_links(context.base_url, self.relative(context), False)
        title = metadata.get("title") or self.path.stem
        return {
            "name": self.path.stem,
            "parents": [link.to_dict() for link in parents],
            "content": Markup(content),
            "baseUrl": context.base_url,
            "title": str(title),
            "meta": metadata,
        }

    def convert(self, context: AppContext) -> None:
        rendered = context.templates.render(TYPE_STR, self.build_model(context))
        dest = self.dest_path(context)
        logger.debug(f"Writing note: {dest}")
        dest.write_text(rendered, encoding="utf-8")
