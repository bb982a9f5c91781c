"""Converter interfaces shared by every file type."""

from abc import ABC, abstractmethod
from pathlib import Path, PurePath
from typing import List, Optional

from ..exceptions import ConfigurationError
from ..models import AppContext, Link
from ..utils import PathLike, read_text, relative_from, url_path

HEADER_TEMPLATE = "partials/header.hbs"
FOOTER_TEMPLATE = "partials/footer.hbs"


class FileType(ABC):
    """Converter for one filesystem entry.

    An instance wraps a single path and is discarded after use.
    """

    type_str: str = ""

    def __init__(self, path: PathLike):
        self.path = Path(path)

    def relative(self, context: AppContext) -> Path:
        """Path relative to the notes root."""
        return relative_from(self.path, context.notes_root)

    def parent_url_path(self, context: AppContext) -> str:
        """URL fragment of the parent directory, "" or ending with "/"."""
        parent = url_path(self.relative(context).parent)
        return f"{parent}/" if parent else ""

    @abstractmethod
    def get_url(self, context: AppContext) -> str:
        """Public URL of the converted entry."""

    @abstractmethod
    def convert(self, context: AppContext) -> None:
        """Write the converted entry below the destination root."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self.path)!r})"


class FileTypeFactory(ABC):
    """Recognizes paths of one kind and prepares its templates."""

    @abstractmethod
    def try_create(self, path: PathLike) -> Optional[FileType]:
        """Return a converter for `path`, or None if the path is not this kind."""

    def initialize(self, context: AppContext) -> None:
        """Validate and register the templates this kind renders with."""


def compose_template(context: AppContext, body_template: str) -> str:
    """Read header, body and footer partials and join them.

    Args:
        context: Application context
        body_template: Body layout path, relative to the source root

    Returns:
        `header + "\\n" + body + "\\n" + footer`

    Raises:
        ConfigurationError: Naming the first missing template file
    """
    parts = [HEADER_TEMPLATE, FOOTER_TEMPLATE, body_template]
    for part in parts:
        if not (context.source_root / part).is_file():
            raise ConfigurationError(f"Missing template file: {part}")

    header = read_text(context.source_root / HEADER_TEMPLATE)
    footer = read_text(context.source_root / FOOTER_TEMPLATE)
    body = read_text(context.source_root / body_template)
    return f"{header}\n{body}\n{footer}"


def create_parent_links(base_url: str, relative: PurePath, is_dir: bool) -> List[Link]:
    """Build the breadcrumb trail for a path relative to the notes root.

    The trail starts with a "root" link followed by each ancestor directory,
    nearest to the root first. The notes root itself (only in directory
    mode) has no trail.

    Args:
        base_url: Site base URL
        relative: Path relative to the notes root
        is_dir: Whether the trail is for a directory page

    Returns:
        List of links
    """
    relative = PurePath(relative)
    if is_dir and not relative.name:
        return []

    result = [Link(name="root", url=base_url)]
    current = relative.parent
    while current.name:
        result.insert(1, Link(name=current.name, url=f"{base_url}{current.as_posix()}"))
        current = current.parent
    return result
