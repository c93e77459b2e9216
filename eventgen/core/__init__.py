"""
Core code generation components.

Provides the schema model, shape resolution, module tree and base classes
used by all language generators.
"""

from .errors import GeneratorError, SchemaParseError, MissingScreenNameError
from .generator import CodeGenerator, GenerationResult
from .schema import (
    AnalyticsCategory,
    EventDef,
    ParamDef,
    SCREEN_NAME_KEY,
    parse_schema,
    convert_schema_data,
)
from .resolver import CustomParam, EventShapeResolver, ResolvedEvent
from .emitter import (
    BaseEventModule,
    CategoryEmitter,
    CategoryModule,
    Constant,
    EventField,
    EventType,
    build_base_event_module,
)
from .naming import (
    NameSanitizer,
    NamingCase,
    to_pascal_case,
    to_camel_case,
    to_constant_name,
    module_segment,
    module_path,
)
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine
from .writer import FileSystemWriter, GeneratedFile, MemoryWriter, SourceWriter

__all__ = [
    # Errors
    "GeneratorError",
    "SchemaParseError",
    "MissingScreenNameError",
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    # Schema model
    "AnalyticsCategory",
    "EventDef",
    "ParamDef",
    "SCREEN_NAME_KEY",
    "parse_schema",
    "convert_schema_data",
    # Shape resolution
    "CustomParam",
    "EventShapeResolver",
    "ResolvedEvent",
    # Module tree
    "BaseEventModule",
    "CategoryEmitter",
    "CategoryModule",
    "Constant",
    "EventField",
    "EventType",
    "build_base_event_module",
    # Naming utilities
    "NameSanitizer",
    "NamingCase",
    "to_pascal_case",
    "to_camel_case",
    "to_constant_name",
    "module_segment",
    "module_path",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
    # Output
    "FileSystemWriter",
    "GeneratedFile",
    "MemoryWriter",
    "SourceWriter",
]
