"""
Python code generator implementation.

Generates one module per category with a container class of event types,
plus the shared ``BaseEvent`` module, using Jinja2 templates.
"""

import json
from pathlib import Path

from ...core.config import GeneratorConfig
from ...core.emitter import BaseEventModule, CategoryModule
from ...core.generator import CodeGenerator
from ...core.naming import NameSanitizer
from ...core.templates import TemplateEngine
from .naming import create_python_sanitizer


def python_string_literal(value: str) -> str:
    """Double-quoted Python string literal for ``value``."""
    # JSON string escapes are a subset of Python's
    return json.dumps(value, ensure_ascii=False)


class PythonGenerator(CodeGenerator):
    """Code generator for Python event classes."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "python"

    @property
    def file_extension(self) -> str:
        """Return Python file extension."""
        return ".py"

    def get_template_directory(self) -> Path:
        """Return the Python templates directory."""
        return Path(__file__).parent / "templates"

    def create_sanitizer(self) -> NameSanitizer:
        return create_python_sanitizer()

    def register_filters(self, engine: TemplateEngine):
        engine.add_filter("py_str", python_string_literal)

    def render_category(self, module: CategoryModule, base: BaseEventModule) -> str:
        """Render a category module."""
        context = {
            "module": module,
            "base_import": self._base_import(base),
            "add_comments": self.config.add_comments,
        }
        return self.render_template("category.py.j2", context)

    def render_base_event(self, base: BaseEventModule) -> str:
        """Render the BaseEvent module."""
        context = {
            "base": base,
            "add_comments": self.config.add_comments,
        }
        return self.render_template("base_event.py.j2", context)

    def _base_import(self, base: BaseEventModule) -> str:
        """Absolute module name of the base event module."""
        if base.module_path:
            return f"{base.module_path}.{base.type_name}"
        return base.type_name


def create_python_generator(config: GeneratorConfig = None) -> PythonGenerator:
    """Create a Python generator."""
    if config is None:
        config = GeneratorConfig(language="python")
    return PythonGenerator(config)
