"""
Kotlin code generator implementation.

Generates one file per category holding an ``object`` container with an
``object`` per simple event and a ``data class`` per parameterized event,
plus the ``open class BaseEvent`` they extend.
"""

from pathlib import Path

from ...core.config import GeneratorConfig
from ...core.emitter import BaseEventModule, CategoryModule
from ...core.generator import CodeGenerator
from ...core.naming import NameSanitizer
from ...core.templates import TemplateEngine
from .naming import create_kotlin_sanitizer

_KOTLIN_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "$": "\\$",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
}


def kotlin_string_literal(value: str) -> str:
    """Double-quoted Kotlin string literal for ``value``."""
    chars = []
    for char in value:
        if char in _KOTLIN_ESCAPES:
            chars.append(_KOTLIN_ESCAPES[char])
        elif ord(char) < 0x20:
            chars.append(f"\\u{ord(char):04x}")
        else:
            chars.append(char)
    return '"' + "".join(chars) + '"'


class KotlinGenerator(CodeGenerator):
    """Code generator for Kotlin event classes."""

    @property
    def language_name(self) -> str:
        return "kotlin"

    @property
    def file_extension(self) -> str:
        return ".kt"

    def get_template_directory(self) -> Path:
        """Return the Kotlin templates directory."""
        return Path(__file__).parent / "templates"

    def create_sanitizer(self) -> NameSanitizer:
        return create_kotlin_sanitizer()

    def register_filters(self, engine: TemplateEngine):
        engine.add_filter("kt_str", kotlin_string_literal)

    def render_category(self, module: CategoryModule, base: BaseEventModule) -> str:
        context = {
            "module": module,
            "base": base,
            "add_comments": self.config.add_comments,
        }
        return self.render_template("category.kt.j2", context)

    def render_base_event(self, base: BaseEventModule) -> str:
        context = {
            "base": base,
            "add_comments": self.config.add_comments,
        }
        return self.render_template("base_event.kt.j2", context)


def create_kotlin_generator(config: GeneratorConfig = None) -> KotlinGenerator:
    """Create a Kotlin generator."""
    if config is None:
        config = GeneratorConfig(
            language="kotlin", package_name="com.example.analytics.events"
        )
    return KotlinGenerator(config)
