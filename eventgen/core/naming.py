"""
Naming utilities for safe code generation.

Turns raw schema identifiers (category, event and parameter names, predefined
values) into identifiers for the generated code, and guards the results
against invalid characters and reserved words of the target language.
"""

import re
from typing import Iterable, Optional, Set
from enum import Enum

# Type names every generated category module refers to
BASE_EVENT_TYPE_NAME = "BaseEvent"
VALUES_CONTAINER_NAME = "Values"


class NamingCase(Enum):
    """Naming styles used by the generated code."""
    PASCAL_CASE = "pascal"      # UserProfile
    CAMEL_CASE = "camel"        # userId
    CONSTANT_CASE = "constant"  # HOME_SCREEN


def _capitalize_first(segment: str) -> str:
    """Upper-case the first character only, leave the rest untouched."""
    return segment[:1].upper() + segment[1:]


def to_pascal_case(raw: str) -> str:
    """``user_profile`` -> ``UserProfile``."""
    return "".join(_capitalize_first(segment) for segment in raw.split("_"))


def to_camel_case(raw: str) -> str:
    """``user_id`` -> ``userId``."""
    first, *rest = raw.split("_")
    return first + "".join(_capitalize_first(segment) for segment in rest)


def to_constant_name(raw: str) -> str:
    """``Home Screen`` -> ``HOME_SCREEN``."""
    return raw.upper().replace(" ", "_")


def module_segment(category_name: str) -> str:
    """Package segment for a category: lower-cased, underscores removed."""
    return category_name.lower().replace("_", "")


def module_path(package_name: str, segment: str) -> str:
    """Append a package segment to the base package."""
    if not package_name:
        return segment
    return f"{package_name}.{segment}"


class NameSanitizer:
    """Handles case conversion and identifier safety."""

    def __init__(self, reserved_words: Optional[Set[str]] = None,
                 fallback: str = "value"):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Words that can't be used as identifiers as-is
            fallback: Name used when nothing usable is left after cleanup
        """
        self.reserved_words = reserved_words or set()
        self.fallback = fallback
        self._used_names: Set[str] = set()

    def sanitize_name(self, name: str, target_case: NamingCase,
                      unique: bool = False, suffix_on_conflict: str = "_") -> str:
        """
        Convert a raw schema name and make it a valid identifier.

        Args:
            name: Raw name from the schema
            target_case: Desired case style
            unique: Resolve clashes with earlier unique names and record this one
            suffix_on_conflict: Suffix appended to reserved words

        Returns:
            Identifier safe for use in generated code
        """
        converted = self._convert_case(name, target_case)
        cleaned = self._clean_basic(converted)
        final_name = self._resolve_conflicts(cleaned, suffix_on_conflict, unique)

        if unique:
            self._used_names.add(final_name)
        return final_name

    def _convert_case(self, name: str, target_case: NamingCase) -> str:
        """Convert name to target case style."""
        if target_case == NamingCase.PASCAL_CASE:
            return to_pascal_case(name)
        elif target_case == NamingCase.CAMEL_CASE:
            return to_camel_case(name)
        elif target_case == NamingCase.CONSTANT_CASE:
            return to_constant_name(name)
        else:
            return name

    def _clean_basic(self, name: str) -> str:
        """Replace characters that can't appear in an identifier."""
        cleaned = re.sub(r"[^A-Za-z0-9_]", "_", name)

        # Ensure doesn't start with number
        if cleaned and cleaned[0].isdigit():
            cleaned = f"_{cleaned}"

        if not cleaned:
            cleaned = self.fallback

        return cleaned

    def _resolve_conflicts(self, name: str, suffix: str, unique: bool) -> str:
        """Resolve clashes with reserved words and, optionally, earlier names."""
        if name in self.reserved_words:
            name = f"{name}{suffix}"

        if not unique:
            return name

        original_name = name
        counter = 1
        while name in self._used_names:
            name = f"{original_name}{counter}"
            counter += 1

        return name

    def module_name(self, category_name: str) -> str:
        """Valid package segment for a category."""
        segment = self._clean_basic(module_segment(category_name))
        if segment in self.reserved_words:
            segment = f"{segment}_"
        return segment

    def fork(self, extra_reserved: Optional[Iterable[str]] = None) -> "NameSanitizer":
        """
        New sanitizer with the same rules and an empty set of used names.

        Args:
            extra_reserved: Additional words reserved in the new scope only
        """
        reserved = set(self.reserved_words)
        reserved.update(extra_reserved or ())
        return NameSanitizer(reserved, self.fallback)
