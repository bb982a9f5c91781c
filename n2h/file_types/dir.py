"""Directories, rendered to an index page listing their children."""

import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from ..logger import logger
from ..models import AppContext, Child
from ..utils import PathLike, url_path
from .base import FileType, FileTypeFactory, compose_template, create_parent_links

TYPE_STR = "dir"
DIR_TEMPLATE = "layouts/dir.hbs"
INDEX_FILENAME = "index.html"
ROOT_NAME = "root"


def sort_children(children: Iterable[Child]) -> List[Child]:
    """Directories first, then everything else; by name inside each group."""
    return sorted(children, key=lambda c: (c.file_type != TYPE_STR, c.name))


class DirFactory(FileTypeFactory):
    def try_create(self, path: PathLike) -> Optional[FileType]:
        path = Path(path)
        if path.is_dir():
            return Dir(path)
        return None

    def initialize(self, context: AppContext) -> None:
        context.templates.register(TYPE_STR, compose_template(context, DIR_TEMPLATE))


class Dir(FileType):
    type_str = TYPE_STR

    def get_url(self, context: AppContext) -> str:
        relative = url_path(self.relative(context))
        if not relative:
            return context.base_url
        return f"{context.base_url}{relative}/"

    def dest_path(self, context: AppContext) -> Path:
        return context.dest_root / self.relative(context) / INDEX_FILENAME

    def get_children(self, context: AppContext) -> List[Child]:
        """Classify the immediate children and return the sorted listing."""
        children = []
        with os.scandir(self.path) as it:
            entries = list(it)
        for entry in entries:
            child = context.registry.classify(entry.path)
            children.append(
                Child(
                    name=Path(entry.name).stem,
                    url=child.get_url(context),
                    file_type=child.type_str,
                )
            )
        return sort_children(children)

    def build_model(self, context: AppContext) -> Dict[str, Any]:
        relative = self.relative(context)
        parents = create_parent_links(context.base_url, relative, True)
        return {
            "name": relative.name or ROOT_NAME,
            "parents": [link.to_dict() for link in parents],
            "children": [child.to_dict() for child in self.get_children(context)],
            "baseUrl": context.base_url,
        }

    def convert(self, context: AppContext) -> None:
        dest = self.dest_path(context)
        dest.parent.mkdir(parents=True, exist_ok=True)
        rendered = context.templates.render(TYPE_STR, self.build_model(context))
        logger.debug(f"Writing index: {dest}")
        dest.write_text(rendered, encoding="utf-8")
