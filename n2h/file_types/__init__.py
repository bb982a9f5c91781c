"""File type dispatch.

Factories are probed in priority order; the first one that recognizes a
path provides its converter. The fallback factory handles everything else,
so classification never fails.
"""

from typing import List, Optional, Sequence

from ..exceptions import ClassificationError
from ..logger import logger
from ..models import AppContext
from ..utils import PathLike
from .base import FileType, FileTypeFactory, compose_template, create_parent_links
from .dir import Dir, DirFactory
from .markdown import Markdown, MarkdownFactory
from .unknown import Unknown, UnknownFactory


class FileTypeRegistry:
    """Ordered list of converter factories with a mandatory fallback."""

    def __init__(
        self,
        factories: Sequence[FileTypeFactory],
        fallback: Optional[FileTypeFactory] = None,
    ):
        self._factories: List[FileTypeFactory] = list(factories)
        self._fallback = fallback if fallback is not None else UnknownFactory()

    @property
    def factories(self) -> List[FileTypeFactory]:
        """All factories in probing order, fallback last."""
        return self._factories + [self._fallback]

    def classify(self, path: PathLike) -> FileType:
        """Return the converter for `path`.

        Args:
            path: Filesystem path

        Returns:
            Converter of the first factory recognizing the path, or of the
            fallback factory
        """
        for factory in self._factories:
            file_type = factory.try_create(path)
            if file_type is not None:
                return file_type
        file_type = self._fallback.try_create(path)
        if file_type is None:
            raise ClassificationError(f"Fallback factory rejected {path}")
        return file_type

    def initialize(self, context: AppContext) -> None:
        """Run every factory's template initialization, then freeze the store.

        Raises:
            ConfigurationError: On the first missing template file
        """
        for factory in self.factories:
            factory.initialize(context)
        context.templates.freeze()
        logger.debug(f"Registered templates: {', '.join(context.templates.names())}")


def default_registry() -> FileTypeRegistry:
    """Markdown, then Dir, with the passthrough fallback."""
    return FileTypeRegistry([MarkdownFactory(), DirFactory()], UnknownFactory())


__all__ = [
    "Dir",
    "DirFactory",
    "FileType",
    "FileTypeFactory",
    "FileTypeRegistry",
    "Markdown",
    "MarkdownFactory",
    "Unknown",
    "UnknownFactory",
    "compose_template",
    "create_parent_links",
    "default_registry",
]
