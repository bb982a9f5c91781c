"""Data models for N2H generator."""

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    import markdown

    from .file_types import FileTypeRegistry
    from .templates import TemplateStore


DEFAULT_BASE_URL = "/"
DEFAULT_MARKDOWN_EXTENSIONS = ["extra"]


@dataclass(frozen=True)
class Link:
    """A name/URL pair used for breadcrumbs."""

    name: str
    url: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "url": self.url}


@dataclass(frozen=True)
class Child:
    """An entry of a directory listing."""

    name: str
    url: str
    file_type: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "url": self.url, "fileType": self.file_type}


@dataclass
class GeneratorConfig:
    """Options a generator run is created from."""

    source_path: Path
    dest_path: Path
    base_url: Optional[str] = None  # Overrides base_url from the config file
    config_file: Optional[Path] = None  # Auto-detected in source_path when None


@dataclass
class AppContext:
    """Shared state of a run.

    Templates are registered while the registry is initialized; after that
    the context is only read.
    """

    source_root: Path
    dest_root: Path
    notes_root: Path
    templates: "TemplateStore"
    registry: "FileTypeRegistry"
    base_url: str = DEFAULT_BASE_URL
    markdown_extensions: List[str] = field(
        default_factory=lambda: list(DEFAULT_MARKDOWN_EXTENSIONS)
    )
    renderer: Optional["markdown.Markdown"] = None  # Set while the registry initializes


@dataclass
class GenerationResult:
    """Result of a generator run."""

    converted: Counter = field(default_factory=Counter)  # {type_str: count}
    copied_assets: int = 0

    @property
    def total(self) -> int:
        return sum(self.converted.values())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "converted": dict(self.converted),
            "copied_assets": self.copied_assets,
            "total": self.total,
        }
