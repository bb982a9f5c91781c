"""Command-line interface for N2H generator."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from . import __title__, __version__
from .exceptions import N2HError
from .generator import Generator
from .logger import logger, set_verbose
from .models import GeneratorConfig


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    description = f"""{__title__} ver {__version__}

Convert a tree of Markdown notes to a static HTML site.

The source directory must contain:
  partials/header.hbs, partials/footer.hbs   shared page header and footer
  layouts/note.hbs, layouts/dir.hbs          note and directory page bodies
  notes/                                     the notes to convert
  assets/                                    (optional) copied verbatim

The destination directory is emptied before every build.

Examples:
  n2h "/path/to/site" "/path/to/public"

  # Serve the site under https://example.com/wiki/
  n2h "/path/to/site" "/path/to/public" --base-url wiki
"""

    parser = argparse.ArgumentParser(
        prog=__title__.lower(),
        description=description,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "source",
        help="Path to the site source directory",
        type=Path,
    )

    parser.add_argument(
        "dest",
        help="Path to the destination directory (created if missing)",
        type=Path,
    )

    parser.add_argument(
        "-b", "--base-url",
        help="URL prefix for generated links, without hostname (default: /)",
        type=str,
        default=None,
        metavar="BASE",
    )

    parser.add_argument(
        "-c", "--config",
        help="Site config file (default: config.toml, config.yml or config.yaml in source)",
        type=Path,
        default=None,
        metavar="PATH",
    )

    parser.add_argument(
        "--verbose", "-v",
        help="Enable verbose logging",
        action="store_true",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"{__title__} {__version__}"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    set_verbose(args.verbose)

    config = GeneratorConfig(
        source_path=args.source,
        dest_path=args.dest,
        base_url=args.base_url,
        config_file=args.config,
    )

    try:
        generator = Generator.create(config)
        result = generator.run()
    except KeyboardInterrupt:
        logger.error("Generation interrupted by user")
        sys.exit(1)
    except (N2HError, OSError) as e:
        logger.error(f"{e}")
        if args.verbose:
            logger.exception("Traceback:")
        sys.exit(1)

    for type_str, count in sorted(result.converted.items()):
        logger.info(f"  {type_str}: {count}")


if __name__ == "__main__":
    main()
