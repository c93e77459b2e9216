"""
Python-specific naming utilities and sanitization.

Handles Python reserved words and the attribute names taken by the
generated ``BaseEvent``.
"""

from ...core.naming import NameSanitizer


# Python reserved keywords
PYTHON_RESERVED_WORDS = {
    "False",
    "None",
    "True",
    "and",
    "as",
    "assert",
    "async",
    "await",
    "break",
    "class",
    "continue",
    "def",
    "del",
    "elif",
    "else",
    "except",
    "finally",
    "for",
    "from",
    "global",
    "if",
    "import",
    "in",
    "is",
    "lambda",
    "nonlocal",
    "not",
    "or",
    "pass",
    "raise",
    "return",
    "try",
    "while",
    "with",
    "yield",
}

# Attributes of the generated BaseEvent; fields must not shadow them
BASE_EVENT_ATTRIBUTES = {
    "category_name",
    "screen_name",
    "event_name",
    "params",
}


def create_python_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Python."""
    return NameSanitizer(PYTHON_RESERVED_WORDS | BASE_EVENT_ATTRIBUTES)
