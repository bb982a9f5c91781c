"""Passthrough files, copied verbatim."""

import shutil
from pathlib import Path
from typing import Optional

from ..logger import logger
from ..models import AppContext
from ..utils import PathLike
from .base import FileType, FileTypeFactory

TYPE_STR = "unknown"


class UnknownFactory(FileTypeFactory):
    """Fallback factory, accepts every path."""

    def try_create(self, path: PathLike) -> Optional[FileType]:
        return Unknown(path)


class Unknown(FileType):
    type_str = TYPE_STR

    def get_url(self, context: AppContext) -> str:
        return f"{context.base_url}{self.parent_url_path(context)}{self.path.name}"

    def dest_path(self, context: AppContext) -> Path:
        return context.dest_root / self.relative(context)

    def convert(self, context: AppContext) -> None:
        dest = self.dest_path(context)
        logger.debug(f"Copying file: {dest}")
        shutil.copyfile(self.path, dest)
