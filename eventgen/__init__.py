"""
Analytics event code generator.

Reads a JSON schema of analytics categories, events and parameters and
generates one typed module per category plus a shared base event type.
"""

__version__ = "0.1.0"

from .core import (
    AnalyticsCategory,
    CodeGenerator,
    ConfigError,
    EventDef,
    FileSystemWriter,
    GeneratedFile,
    GenerationResult,
    GeneratorConfig,
    GeneratorError,
    MemoryWriter,
    MissingScreenNameError,
    ParamDef,
    SchemaParseError,
    load_config,
    parse_schema,
)
from .generator import EventsGenerator, generate_base_type, generate_events
from .registry import (
    GeneratorRegistry,
    get_generator,
    is_language_supported,
    list_supported_languages,
    register_generator,
)
from .utils import SchemaLoaderError, load_schema_text

__all__ = [
    "__version__",
    # Orchestration
    "EventsGenerator",
    "generate_events",
    "generate_base_type",
    # Schema
    "AnalyticsCategory",
    "EventDef",
    "ParamDef",
    "parse_schema",
    "load_schema_text",
    # Generators
    "CodeGenerator",
    "GeneratorRegistry",
    "get_generator",
    "register_generator",
    "list_supported_languages",
    "is_language_supported",
    # Output
    "GeneratedFile",
    "GenerationResult",
    "FileSystemWriter",
    "MemoryWriter",
    # Configuration
    "GeneratorConfig",
    "load_config",
    # Errors
    "GeneratorError",
    "SchemaParseError",
    "MissingScreenNameError",
    "ConfigError",
    "SchemaLoaderError",
]
