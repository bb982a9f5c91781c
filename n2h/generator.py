"""Site generator: validates the source tree and converts it into the destination."""

from pathlib import Path
from typing import Optional

from .config import SiteConfigReader, get_markdown_extensions, normalize_base_url
from .exceptions import ConfigurationError
from .file_types import FileTypeRegistry, default_registry
from .logger import logger
from .models import AppContext, GenerationResult, GeneratorConfig
from .templates import TemplateStore
from .utils import PathLike, clean_dir, copy_tree, walk

NOTES_DIRNAME = "notes"
ASSETS_DIRNAME = "assets"


class Generator:
    """Full, clean rebuild of a site.

    Use `Generator.create` to validate the inputs and initialize templates;
    nothing in the destination is touched until `run` is called.
    """

    def __init__(self, context: AppContext):
        self.context = context

    @classmethod
    def create(
        cls,
        config: GeneratorConfig,
        registry: Optional[FileTypeRegistry] = None,
    ) -> "Generator":
        """Validate paths, build the context and register templates.

        Args:
            config: Generator options
            registry: File type registry, defaults to `default_registry()`

        Returns:
            Generator ready to run

        Raises:
            ConfigurationError: If a path is invalid or a template is missing
        """
        source_path = Path(config.source_path).resolve()
        dest_path = Path(config.dest_path).resolve()

        if not source_path.is_dir():
            raise ConfigurationError(f"Invalid source path: {source_path}")

        notes_path = source_path / NOTES_DIRNAME
        if not notes_path.is_dir():
            raise ConfigurationError(f"Source directory missing required directory: {notes_path}")

        site_config = SiteConfigReader.load(source_path, config.config_file)
        base_url = config.base_url
        if base_url is None:
            base_url = site_config.get("base_url")

        if not dest_path.is_dir():
            try:
                dest_path.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ConfigurationError(f"Cannot create destination directory {dest_path}: {e}") from e

        if registry is None:
            registry = default_registry()

        context = AppContext(
            source_root=source_path,
            dest_root=dest_path,
            notes_root=notes_path,
            templates=TemplateStore(),
            registry=registry,
            base_url=normalize_base_url(base_url),
            markdown_extensions=get_markdown_extensions(site_config),
        )
        registry.initialize(context)
        return cls(context)

    def run(self) -> GenerationResult:
        """Clean the destination, copy assets and convert every note.

        Returns:
            Counts of converted entries and copied assets
        """
        result = GenerationResult()
        logger.info(f"Generating site: {self.context.source_root} -> {self.context.dest_root}")

        self.clean_dest()
        result.copied_assets = self.copy_assets()

        logger.info("Converting notes...")
        self.convert(self.context.notes_root, result)
        for entry in walk(self.context.notes_root):
            self.convert(entry.path, result)

        logger.info(
            f"Generation completed! {result.total} entries converted, "
            f"{result.copied_assets} assets copied."
        )
        return result

    def clean_dest(self) -> None:
        logger.info(f"Cleaning destination directory: {self.context.dest_root}")
        removed = clean_dir(self.context.dest_root)
        logger.debug(f"Removed {removed} entries")

    def copy_assets(self) -> int:
        """Copy `source/assets` to `dest/assets` if present.

        Returns:
            Number of files copied
        """
        assets_path = self.context.source_root / ASSETS_DIRNAME
        if not assets_path.is_dir():
            return 0
        logger.info("Copying assets...")
        return copy_tree(assets_path, self.context.dest_root / ASSETS_DIRNAME)

    def convert(self, path: PathLike, result: Optional[GenerationResult] = None) -> None:
        file_type = self.context.registry.classify(path)
        logger.debug(f"Converting {file_type.type_str}: {path}")
        file_type.convert(self.context)
        if result is not None:
            result.converted[file_type.type_str] += 1


def generate(
    source_path: PathLike,
    dest_path: PathLike,
    base_url: Optional[str] = None,
    config_file: Optional[PathLike] = None,
) -> GenerationResult:
    """Create a generator for the given paths and run it."""
    config = GeneratorConfig(
        source_path=Path(source_path),
        dest_path=Path(dest_path),
        base_url=base_url,
        config_file=Path(config_file) if config_file is not None else None,
    )
    return Generator.create(config).run()
