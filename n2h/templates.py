"""Compiled template registry backed by Jinja2."""

from typing import Any, Dict, Mapping

import jinja2

from .exceptions import RenderError


class TemplateStore:
    """Maps template names to compiled Jinja2 templates.

    Templates are registered during initialization. Once frozen, the store
    only renders.
    """

    def __init__(self):
        self._env = jinja2.Environment(
            autoescape=True,
            keep_trailing_newline=True,
        )
        self._templates: Dict[str, jinja2.Template] = {}
        self._frozen = False

    def register(self, name: str, source: str) -> None:
        """Compile and register a template.

        Args:
            name: Template name
            source: Template text

        Raises:
            RenderError: If the template does not compile
        """
        if self._frozen:
            raise RuntimeError(f"Template store is frozen, cannot register '{name}'")
        try:
            self._templates[name] = self._env.from_string(source)
        except jinja2.TemplateSyntaxError as e:
            raise RenderError(
                f"Error compiling template '{name}' (line {e.lineno}): {e.message}"
            ) from e

    def render(self, name: str, model: Mapping[str, Any]) -> str:
        """Render a registered template with the given model.

        Args:
            name: Template name
            model: Values exposed to the template

        Returns:
            Rendered text

        Raises:
            RenderError: If the template is unknown or rendering fails
        """
        template = self._templates.get(name)
        if template is None:
            raise RenderError(f"Template not registered: {name}")
        try:
            return template.render(**model)
        except jinja2.TemplateError as e:
            raise RenderError(f"Error rendering template '{name}': {e}") from e

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, name: str) -> bool:
        return name in self._templates

    def names(self):
        return list(self._templates)
