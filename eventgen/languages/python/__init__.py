"""
Python code generator module.

Generates Python event classes from an analytics event schema.
"""

from .generator import PythonGenerator, create_python_generator, python_string_literal
from .naming import create_python_sanitizer, PYTHON_RESERVED_WORDS

__all__ = [
    "PythonGenerator",
    "create_python_generator",
    "python_string_literal",
    "create_python_sanitizer",
    "PYTHON_RESERVED_WORDS",
]
