"""
Kotlin code generator module.

Generates Kotlin objects and data classes from an analytics event schema.
"""

from .generator import KotlinGenerator, create_kotlin_generator, kotlin_string_literal
from .naming import create_kotlin_sanitizer, KOTLIN_RESERVED_WORDS

__all__ = [
    "KotlinGenerator",
    "create_kotlin_generator",
    "kotlin_string_literal",
    "create_kotlin_sanitizer",
    "KOTLIN_RESERVED_WORDS",
]
