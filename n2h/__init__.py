"""N2H - Convert a tree of Markdown notes to a static HTML site."""

__version__ = "0.1.0"
__title__ = "N2H"
__license__ = "MIT"

from .exceptions import (
    ClassificationError,
    ConfigurationError,
    N2HError,
    PathDerivationError,
    RenderError,
)
from .file_types import FileTypeRegistry, create_parent_links, default_registry
from .generator import Generator, generate
from .models import AppContext, Child, GenerationResult, GeneratorConfig, Link

__all__ = [
    "AppContext",
    "Child",
    "ClassificationError",
    "ConfigurationError",
    "FileTypeRegistry",
    "GenerationResult",
    "Generator",
    "GeneratorConfig",
    "Link",
    "N2HError",
    "PathDerivationError",
    "RenderError",
    "create_parent_links",
    "default_registry",
    "generate",
    "__version__",
    "__title__",
]
