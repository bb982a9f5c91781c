import os
import shutil
from pathlib import Path, PurePath
from typing import Iterator, List, Optional, Union

from .exceptions import PathDerivationError
from .logger import logger

PathLike = Union[str, os.PathLike]


def relative_from(path: PathLike, base: PathLike) -> Path:
    """
    Express `path` relative to `base`, comparing components left to right.

    Returns `Path(".")` when both are the same path.

    Raises:
        PathDerivationError, if `path` is neither `base` nor below it.
    """
    path_parts = PurePath(path).parts
    base_parts = PurePath(base).parts
    if path_parts[: len(base_parts)] != base_parts:
        raise PathDerivationError(f"{path} is not under {base}")
    return Path(*path_parts[len(base_parts) :])


def url_path(relative: PurePath) -> str:
    """Relative path as a URL fragment, "" for the current directory."""
    if relative == PurePath("."):
        return ""
    return relative.as_posix()


def walk(root: PathLike) -> Iterator[os.DirEntry]:
    """
    Depth-first, pre-order walk below `root` (root itself not included).

    A directory is yielded before its children. Order inside a directory is
    whatever `os.scandir` returns. Subdirectories that can not be read are
    skipped; an unreadable `root` raises.

    Each call starts a fresh walk.
    """
    with os.scandir(root) as it:
        entries = list(it)
    yield from _walk_entries(entries)


def _walk_entries(entries: List[os.DirEntry]) -> Iterator[os.DirEntry]:
    for entry in entries:
        yield entry
        if entry.is_dir():
            children = _scandir_or_none(entry.path)
            if children is not None:
                yield from _walk_entries(children)


def _scandir_or_none(path: str) -> Optional[List[os.DirEntry]]:
    try:
        with os.scandir(path) as it:
            return list(it)
    except OSError as e:
        logger.debug(f"Skip unreadable directory {path}: {e}")
        return None


def read_text(path: PathLike) -> str:
    return Path(path).read_text(encoding="utf-8")


def copy_tree(source: PathLike, dest: PathLike) -> int:
    """
    Recursively copy `source` to `dest`, creating directories as needed.

    Returns: number of files copied.
    """
    copied = 0

    def _copy(src, dst, *, follow_symlinks=True):
        nonlocal copied
        copied += 1
        return shutil.copy2(src, dst, follow_symlinks=follow_symlinks)

    shutil.copytree(source, dest, copy_function=_copy, dirs_exist_ok=True)
    return copied


def clean_dir(path: PathLike) -> int:
    """
    Remove every entry directly under `path`. Files are unlinked, directories
    removed recursively. `path` itself is kept.

    Returns: number of entries removed.
    """
    removed = 0
    with os.scandir(path) as it:
        entries = list(it)
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            shutil.rmtree(entry.path)
        else:
            os.unlink(entry.path)
        removed += 1
    return removed
