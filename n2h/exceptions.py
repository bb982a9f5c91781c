"""Exceptions raised by N2H."""


class N2HError(Exception):
    """Base class for all N2H errors."""


class ConfigurationError(N2HError):
    """Invalid source/destination paths, missing templates or bad config file."""


class RenderError(N2HError):
    """The template engine rejected a template or a render model."""


class PathDerivationError(N2HError, ValueError):
    """A path is not located under the root it was expected to be under."""


class ClassificationError(N2HError):
    """No factory, not even the fallback, produced a converter for a path."""
