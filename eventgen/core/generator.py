"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional
from pathlib import Path, PurePosixPath

from .config import GeneratorConfig
from .emitter import BaseEventModule, CategoryModule
from .naming import NameSanitizer
from .schema import AnalyticsCategory, SCREEN_NAME_KEY
from .templates import TemplateEngine, create_template_engine
from .writer import GeneratedFile


class CodeGenerator(ABC):
    """Abstract base class for all target language generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig(language=self.language_name)
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())
        self.register_filters(self._template_engine)

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'python', 'kotlin')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.py', '.kt')."""
        pass

    @abstractmethod
    def create_sanitizer(self) -> NameSanitizer:
        """Return a name sanitizer knowing the target's reserved words."""
        pass

    @abstractmethod
    def render_category(self, module: CategoryModule, base: BaseEventModule) -> str:
        """
        Render one category module.

        Args:
            module: Category module tree
            base: Base event module the event types extend

        Returns:
            Source text of the module
        """
        pass

    @abstractmethod
    def render_base_event(self, base: BaseEventModule) -> str:
        """
        Render the shared base event type.

        Args:
            base: Base event module tree

        Returns:
            Source text of the module
        """
        pass

    @abstractmethod
    def get_template_directory(self) -> Path:
        """Return the directory containing templates for this generator."""
        pass

    def register_filters(self, engine: TemplateEngine):
        """Hook for language-specific template filters."""
        pass

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    def category_file(self, module: CategoryModule, base: BaseEventModule) -> GeneratedFile:
        """Render a category module and place it below its package directory."""
        code = self.format_code(self.render_category(module, base))
        return GeneratedFile(
            relative_path=self._module_file_path(module.module_path, module.container_name),
            content=code,
            kind="category",
        )

    def base_event_file(self, base: BaseEventModule) -> GeneratedFile:
        """Render the base event module."""
        code = self.format_code(self.render_base_event(base))
        return GeneratedFile(
            relative_path=self._module_file_path(base.module_path, base.type_name),
            content=code,
            kind="base",
        )

    def _module_file_path(self, package_path: str, file_stem: str) -> PurePosixPath:
        parts = [part for part in package_path.split(".") if part]
        return PurePosixPath(*parts, f"{file_stem}{self.file_extension}")

    def validate_categories(self, categories: List[AnalyticsCategory]) -> List[str]:
        """
        Validate categories for basic issues.

        Args:
            categories: Parsed schema

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for category in categories:
            if not category.events:
                warnings.append(f"Category '{category.name}' has no events")

            for event in category.events:
                keys = [param.key for param in event.parameters]
                if SCREEN_NAME_KEY not in keys:
                    warnings.append(
                        f"Event {category.name}.{event.name} has no screen_name parameter"
                    )
                if len(keys) != len(set(keys)):
                    warnings.append(
                        f"Event {category.name}.{event.name} repeats parameter keys, "
                        f"first occurrence is used"
                    )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        indent_size = self.config.indent_size
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:  # Allow max 2 consecutive blank lines
                    formatted_lines.append("")
                continue

            blank_count = 0
            if indent_size != 4:
                # Templates are written with 4-space indents
                content = stripped.lstrip(" ")
                depth, rest = divmod(len(stripped) - len(content), 4)
                stripped = " " * (depth * indent_size + rest) + content
            formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n") + "\n"

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Args:
            template_name: Template file name
            context: Template variables

        Returns:
            Rendered content
        """
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        files: List[GeneratedFile] = None,
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            files: Generated files, in the order they were written
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.files = files or []
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.locations: List[str] = []

    @property
    def category_files(self) -> List[GeneratedFile]:
        return [f for f in self.files if f.kind == "category"]

    @property
    def base_file(self) -> Optional[GeneratedFile]:
        for f in self.files:
            if f.kind == "base":
                return f
        return None
