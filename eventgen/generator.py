"""
Generation run orchestration.

Parses the schema once, resolves and builds every category in schema order,
renders all modules and only then hands them to the writer, so a failing
category aborts the run before anything is written.
"""

from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .core.config import GeneratorConfig, get_config_manager, load_config
from .core.emitter import (
    BaseEventModule,
    CategoryEmitter,
    CategoryModule,
    build_base_event_module,
)
from .core.generator import CodeGenerator, GenerationResult
from .core.resolver import EventShapeResolver
from .core.schema import AnalyticsCategory, parse_schema
from .core.writer import FileSystemWriter, GeneratedFile, SourceWriter
from .logging_config import get_logger
from .registry import get_generator, get_registry
from .utils import load_schema_text

logger = get_logger(__name__)


class EventsGenerator:
    """Generates event modules from an analytics schema."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        writer: Optional[SourceWriter] = None,
        code_generator: Optional[CodeGenerator] = None,
    ):
        """
        Initialize the generator.

        Args:
            config: Run configuration (defaults for the default language if None)
            writer: Destination for generated files; defaults to the
                configured destination directory
            code_generator: Target language generator; looked up in the
                registry by ``config.language`` if None
        """
        config = config or load_config()
        self.code_generator = code_generator or get_generator(config.language, config)
        if config.language != self.code_generator.language_name:
            # Aliases such as "py" resolve to the primary language name
            config = replace(config, language=self.code_generator.language_name)
        self.config = config
        self.writer = writer or FileSystemWriter(self.config.destination_path)

        self.sanitizer = self.code_generator.create_sanitizer()
        self.resolver = EventShapeResolver(
            self.sanitizer, strict_screen_name=self.config.strict_screen_name
        )
        self.emitter = CategoryEmitter(self.config.package_name, self.sanitizer)

    @property
    def base_module(self) -> BaseEventModule:
        return build_base_event_module(self.config.package_name)

    def build_category_module(self, category: AnalyticsCategory) -> CategoryModule:
        """Resolve a category's events and build its module tree."""
        resolved, predefined_values = self.resolver.resolve_category(category)
        return self.emitter.build(category, resolved, predefined_values)

    def generate(self, schema_text: str) -> GenerationResult:
        """
        Generate one module per category plus the base event module.

        Args:
            schema_text: JSON schema text

        Returns:
            GenerationResult listing the written files
        """
        categories = parse_schema(schema_text)
        return self.generate_categories(categories)

    def generate_from_file(
        self, file_path: Union[str, Path, None] = None, url: Optional[str] = None
    ) -> GenerationResult:
        """Load the schema from a file or URL and generate."""
        return self.generate(load_schema_text(file_path=file_path, url=url))

    def generate_categories(
        self, categories: List[AnalyticsCategory]
    ) -> GenerationResult:
        """Generate modules for already parsed categories."""
        warnings = get_config_manager().validate_config(self.config)
        warnings.extend(self.code_generator.validate_categories(categories))
        for warning in warnings:
            logger.warning(warning)

        base = self.base_module
        modules: List[CategoryModule] = []
        files: List[GeneratedFile] = []

        for category in categories:
            module = self.build_category_module(category)
            modules.append(module)
            files.append(self.code_generator.category_file(module, base))

        files.append(self.code_generator.base_event_file(base))

        result = GenerationResult(
            files=files,
            warnings=warnings,
            metadata=self._build_metadata(modules),
        )
        for generated in files:
            result.locations.append(self.writer.write(generated))

        logger.info(
            "Generated %d category modules and %s",
            len(modules),
            base.type_name,
        )
        return result

    def generate_base_type(self) -> GeneratedFile:
        """Render and write only the shared base event module."""
        generated = self.code_generator.base_event_file(self.base_module)
        self.writer.write(generated)
        return generated

    def _build_metadata(self, modules: List[CategoryModule]) -> Dict[str, Any]:
        event_types = [event for module in modules for event in module.event_types]
        return {
            "language": self.code_generator.language_name,
            "file_extension": self.code_generator.file_extension,
            "package_name": self.config.package_name,
            "category_count": len(modules),
            "event_count": len(event_types),
            "simple_event_count": sum(1 for event in event_types if event.is_simple),
            "parameterized_event_count": sum(
                1 for event in event_types if not event.is_simple
            ),
            "constant_count": sum(len(module.constants) for module in modules),
        }


def generate_events(
    schema_text: str,
    language: Optional[str] = None,
    writer: Optional[SourceWriter] = None,
    **options,
) -> GenerationResult:
    """
    Generate event modules from schema text.

    Args:
        schema_text: JSON schema text
        language: Target language (default: python)
        writer: Destination for generated files
        **options: GeneratorConfig overrides (destination_path, package_name, ...)

    Returns:
        GenerationResult with the generated files
    """
    config = _load_run_config(language, options)
    return EventsGenerator(config, writer=writer).generate(schema_text)


def generate_base_type(
    language: Optional[str] = None,
    writer: Optional[SourceWriter] = None,
    **options,
) -> GeneratedFile:
    """Generate only the shared base event module."""
    config = _load_run_config(language, options)
    return EventsGenerator(config, writer=writer).generate_base_type()


def _load_run_config(language: Optional[str], options: Dict[str, Any]) -> GeneratorConfig:
    if language:
        language = get_registry().resolve_language(language)
    return load_config(language, custom_config=options)
