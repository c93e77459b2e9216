from __future__ import annotations

import pytest

from eventgen.core.config import GeneratorConfig
from eventgen.languages.kotlin import KotlinGenerator
from eventgen.languages.python import PythonGenerator
from eventgen.registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    is_language_supported,
    list_supported_languages,
)


def test_builtin_languages() -> None:
    assert list_supported_languages() == ["kotlin", "python"]
    assert is_language_supported("PY")
    assert is_language_supported("kt")
    assert not is_language_supported("cobol")


def test_get_generator_by_alias() -> None:
    generator = get_generator("kt")
    assert isinstance(generator, KotlinGenerator)
    assert generator.config.package_name == "com.example.analytics.events"


def test_get_generator_with_config_dict() -> None:
    generator = get_generator("python", {"package_name": "my.events"})
    assert isinstance(generator, PythonGenerator)
    assert generator.config.package_name == "my.events"


def test_unknown_language() -> None:
    with pytest.raises(RegistryError, match="Available: kotlin, python"):
        get_generator("cobol")


def test_language_info() -> None:
    info = get_language_info("py")
    assert info.name == "python"
    assert info.file_extension == ".py"
    assert info.aliases == ("py",)
    assert info.class_name == "PythonGenerator"


def test_register_rejects_non_generators() -> None:
    registry = GeneratorRegistry()
    with pytest.raises(RegistryError):
        registry.register("text", str)


def test_alias_conflicts() -> None:
    registry = GeneratorRegistry()
    registry.register("python", PythonGenerator, aliases=["py"])
    with pytest.raises(RegistryError, match="already points to 'python'"):
        registry.register("kotlin", KotlinGenerator, aliases=["py"])
    with pytest.raises(RegistryError, match="conflicts with existing primary"):
        registry.register("kotlin2", KotlinGenerator, aliases=["python"])

    # Failed registrations leave nothing behind
    assert registry.list_languages() == ["python"]
    assert registry.aliases_for("python") == ("py",)


def test_unregister_drops_aliases() -> None:
    registry = GeneratorRegistry()
    registry.register("kotlin", KotlinGenerator, aliases=["kt"])
    registry.unregister("kotlin")
    assert not registry.is_supported("kt")
    assert registry.list_languages() == []


def test_create_generator_keeps_given_config() -> None:
    registry = GeneratorRegistry()
    registry.register("python", PythonGenerator)
    config = GeneratorConfig(package_name="given.events")
    assert registry.create_generator("python", config).config is config
