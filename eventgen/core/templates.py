"""
Jinja2 environment used by the language generators.

Each target language keeps its templates in a ``templates`` directory next to
its generator module and registers the filters that produce string literals
in its own syntax.
"""

from pathlib import Path
from typing import Any, Callable, Dict, List

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
    TemplateError as Jinja2Error,
)

from ..logging_config import get_logger

logger = get_logger(__name__)

TEMPLATE_SUFFIX = ".j2"


class TemplateError(Exception):
    """Exception raised when a template can't be loaded or rendered."""

    pass


class TemplateEngine:
    """Renders generated modules from a directory of templates."""

    def __init__(self, template_dir: Path):
        """
        Initialize template engine.

        Args:
            template_dir: Directory holding the ``*.j2`` templates

        Raises:
            TemplateError: If the directory doesn't exist
        """
        self.template_dir = Path(template_dir)
        if not self.template_dir.is_dir():
            raise TemplateError(f"Template directory not found: {self.template_dir}")

        self._env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def add_filter(self, name: str, func: Callable[..., str]):
        """Register a language-specific filter."""
        self._env.filters[name] = func

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: File name relative to the template directory
            context: Variables to pass to the template

        Returns:
            Rendered text

        Raises:
            TemplateError: If the template is missing, invalid or refers to
                an undefined variable
        """
        try:
            template = self._env.get_template(template_name)
        except TemplateNotFound as e:
            raise TemplateError(
                f"Template {template_name} not found in {self.template_dir}"
            ) from e
        except Jinja2Error as e:
            raise TemplateError(f"Failed to load template {template_name}: {e}") from e

        logger.debug("Rendering %s", template_name)
        try:
            return template.render(**context)
        except Jinja2Error as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def template_exists(self, template_name: str) -> bool:
        """Check if a template can be loaded."""
        try:
            self._env.get_template(template_name)
            return True
        except TemplateNotFound:
            return False

    def list_templates(self) -> List[str]:
        """Names of all templates in the directory."""
        return self._env.list_templates(
            filter_func=lambda name: name.endswith(TEMPLATE_SUFFIX)
        )


def create_template_engine(template_dir: Path) -> TemplateEngine:
    """Create a template engine backed by a template directory."""
    return TemplateEngine(template_dir)
