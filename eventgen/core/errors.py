"""Exceptions raised while generating event code."""


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class SchemaParseError(GeneratorError):
    """Raised when the schema text doesn't have the expected structure."""

    pass


class MissingScreenNameError(GeneratorError):
    """Raised in strict mode when an event has no screen_name parameter."""

    def __init__(self, category_name: str, event_name: str):
        self.category_name = category_name
        self.event_name = event_name
        super().__init__(
            f"screen_name parameter is not defined for event "
            f"'{category_name}.{event_name}'!"
        )
