"""
Kotlin-specific naming utilities and sanitization.
"""

from ...core.naming import NameSanitizer


# Kotlin hard keywords
KOTLIN_RESERVED_WORDS = {
    "as",
    "break",
    "class",
    "continue",
    "do",
    "else",
    "false",
    "for",
    "fun",
    "if",
    "in",
    "interface",
    "is",
    "null",
    "object",
    "package",
    "return",
    "super",
    "this",
    "throw",
    "true",
    "try",
    "typealias",
    "typeof",
    "val",
    "var",
    "when",
    "while",
}

# Properties of the generated BaseEvent
BASE_EVENT_PROPERTIES = {
    "categoryName",
    "screenName",
    "eventName",
    "params",
}


def create_kotlin_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Kotlin."""
    return NameSanitizer(KOTLIN_RESERVED_WORDS | BASE_EVENT_PROPERTIES)
