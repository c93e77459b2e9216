"""
Registry of target languages.

Maps language names and their aliases to generator classes and creates
configured generator instances for a run.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Type, Union

from .core.config import GeneratorConfig, load_config
from .core.generator import CodeGenerator
from .logging_config import get_logger

logger = get_logger(__name__)

ConfigSource = Union[GeneratorConfig, Dict[str, Any], str, Path, None]


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


@dataclass(frozen=True)
class LanguageInfo:
    """Description of a registered target language."""

    name: str
    class_name: str
    module: str
    file_extension: str
    aliases: Tuple[str, ...]
    package_name: str


class GeneratorRegistry:
    """Target languages known to the generator, by name and alias."""

    def __init__(self):
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a generator class for a language.

        Args:
            language: Primary language name (e.g. 'python', 'kotlin')
            generator_class: CodeGenerator subclass
            aliases: Alternative names for the language
            replace: Replace an existing registration instead of keeping it

        Raises:
            RegistryError: If the class isn't a generator or an alias is taken
        """
        if not isinstance(generator_class, type) or not issubclass(
            generator_class, CodeGenerator
        ):
            raise RegistryError(
                f"{generator_class!r} is not a CodeGenerator subclass"
            )

        language_key = language.lower()
        if language_key in self._generators and not replace:
            logger.debug("Language %s is already registered", language_key)
            return

        alias_keys = [
            alias.lower() for alias in aliases or [] if alias.lower() != language_key
        ]
        if not replace:
            # Check every alias before touching the registry
            for alias in alias_keys:
                if alias in self._generators:
                    raise RegistryError(
                        f"Alias '{alias}' conflicts with existing primary language"
                    )
                owner = self._aliases.get(alias)
                if owner is not None and owner != language_key:
                    raise RegistryError(f"Alias '{alias}' already points to '{owner}'")

        self._generators[language_key] = generator_class
        for alias in alias_keys:
            self._aliases[alias] = language_key
        logger.debug(
            "Registered %s -> %s (aliases: %s)",
            language_key,
            generator_class.__name__,
            ", ".join(alias_keys) or "none",
        )

    def unregister(self, language: str):
        """Remove a language and its aliases."""
        language_key = language.lower()
        self._generators.pop(language_key, None)
        self._aliases = {
            alias: target
            for alias, target in self._aliases.items()
            if target != language_key
        }

    def resolve_language(self, language: str) -> str:
        """
        Map a language name or alias to its primary name.

        Raises:
            RegistryError: If the language isn't registered
        """
        language_key = language.lower()
        if language_key in self._generators:
            return language_key
        if language_key in self._aliases:
            return self._aliases[language_key]

        raise RegistryError(
            f"No generator registered for language: {language}. "
            f"Available: {', '.join(self.list_languages())}"
        )

    def get_generator_class(self, language: str) -> Type[CodeGenerator]:
        return self._generators[self.resolve_language(language)]

    def create_generator(
        self, language: str, config: ConfigSource = None
    ) -> CodeGenerator:
        """
        Create a configured generator.

        Args:
            language: Language name or alias
            config: GeneratorConfig, dict of overrides, path to a JSON
                config file, or None for the language defaults

        Returns:
            Generator instance
        """
        primary = self.resolve_language(language)
        generator_class = self._generators[primary]

        if isinstance(config, GeneratorConfig):
            final_config = config
        elif isinstance(config, (str, Path)):
            final_config = load_config(primary, config_file=config)
        elif isinstance(config, dict):
            final_config = load_config(primary, custom_config=config)
        elif config is None:
            final_config = load_config(primary)
        else:
            raise RegistryError(f"Invalid config type: {type(config)}")

        return generator_class(final_config)

    def list_languages(self) -> List[str]:
        """Sorted primary language names."""
        return sorted(self._generators)

    def aliases_for(self, language: str) -> Tuple[str, ...]:
        language_key = language.lower()
        return tuple(
            sorted(alias for alias, target in self._aliases.items() if target == language_key)
        )

    def is_supported(self, language: str) -> bool:
        language_key = language.lower()
        return language_key in self._generators or language_key in self._aliases

    def describe(self, language: str) -> LanguageInfo:
        """Describe a registered language using its default configuration."""
        primary = self.resolve_language(language)
        generator = self.create_generator(primary)
        generator_class = type(generator)

        return LanguageInfo(
            name=generator.language_name,
            class_name=generator_class.__name__,
            module=generator_class.__module__,
            file_extension=generator.file_extension,
            aliases=self.aliases_for(primary),
            package_name=generator.config.package_name,
        )


_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global registry, registering the built-in languages on first use."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _register_builtin_generators(_global_registry)
    return _global_registry


def _register_builtin_generators(registry: GeneratorRegistry):
    from .languages.kotlin import KotlinGenerator
    from .languages.python import PythonGenerator

    registry.register("python", PythonGenerator, aliases=["py"])
    registry.register("kotlin", KotlinGenerator, aliases=["kt"])


def register_generator(
    language: str,
    generator_class: Type[CodeGenerator],
    aliases: Optional[List[str]] = None,
):
    """Register a generator in the global registry."""
    get_registry().register(language, generator_class, aliases)


def get_generator(language: str, config: ConfigSource = None) -> CodeGenerator:
    """Create a generator from the global registry."""
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    return get_registry().is_supported(language)


def get_language_info(language: str) -> LanguageInfo:
    return get_registry().describe(language)


def list_all_language_info() -> Dict[str, LanguageInfo]:
    """Describe every supported language."""
    registry = get_registry()
    return {language: registry.describe(language) for language in registry.list_languages()}
