"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
import re
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dataclasses import asdict, dataclass, field, fields

from ..logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_LANGUAGE = "python"

_PACKAGE_SEGMENT = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""
    pass


@dataclass
class GeneratorConfig:
    """Configuration for an event generation run."""

    # Input / output
    schema_file: Optional[str] = None
    destination_path: str = "generated"
    package_name: str = "analytics.events"

    # Target
    language: str = DEFAULT_LANGUAGE

    # Validation
    strict_screen_name: bool = False

    # Code style settings
    add_comments: bool = True
    indent_size: int = 4

    # Custom settings (language-specific)
    custom: Dict[str, Any] = field(default_factory=dict)


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported languages."""
        self._configs["python"] = {
            "package_name": "analytics.events",
            "indent_size": 4,
        }

        self._configs["kotlin"] = {
            "package_name": "com.example.analytics.events",
            "indent_size": 4,
        }

    def get_config(self, language: Optional[str] = None,
                   custom_config: Optional[Dict[str, Any]] = None,
                   config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
        """
        Get complete configuration for a run.

        Language defaults are applied first, then the config file, then
        custom overrides. The language itself may come from any layer.

        Args:
            language: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        file_config = self._load_config_file(config_file) if config_file else {}
        overrides = dict(custom_config or {})

        resolved_language = (
            overrides.get("language")
            or language
            or file_config.get("language")
            or DEFAULT_LANGUAGE
        ).lower()
        resolved_language = self._primary_language(resolved_language)

        # Start with defaults
        base_config = self._configs.get(resolved_language, {}).copy()
        base_config.update(file_config)
        base_config.update(overrides)
        base_config["language"] = resolved_language

        return self._dict_to_config(base_config)

    def _primary_language(self, language: str) -> str:
        """Map an alias such as 'kt' to its primary name; unknown names pass through."""
        from ..registry import get_registry

        registry = get_registry()
        if registry.is_supported(language):
            return registry.resolve_language(language)
        return language

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == '.json':
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}")
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {str(e)}")

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration file %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Unknown keys end up in the custom dict
        if custom_args:
            existing_custom = dict(config_args.get('custom', {}))
            existing_custom.update(custom_args)
            config_args['custom'] = existing_custom

        return GeneratorConfig(**config_args)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {str(e)}")

    def list_languages(self) -> list[str]:
        """Get list of languages with default settings."""
        return list(self._configs.keys())

    def validate_config(self, config: GeneratorConfig) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        if config.language not in self._configs:
            warnings.append(f"No defaults for language: {config.language}")

        if config.package_name:
            invalid = [
                segment for segment in config.package_name.split(".")
                if not _PACKAGE_SEGMENT.match(segment)
            ]
            if invalid:
                warnings.append(
                    f"Invalid package name: {config.package_name} "
                    f"(bad segments: {', '.join(repr(s) for s in invalid)})"
                )

        if config.indent_size < 1:
            warnings.append(f"Invalid indent_size: {config.indent_size}")

        return warnings


# Global configuration manager instance
_config_manager = None

def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(language: Optional[str] = None,
                custom_config: Optional[Dict[str, Any]] = None,
                config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        language: Target language name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)
