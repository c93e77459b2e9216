"""
Schema model for analytics event definitions.

Parses the JSON schema text (categories -> events -> parameters) into
immutable records that the resolver and emitter work with.
"""

import json
from dataclasses import dataclass
from typing import Any, List, Tuple

from .errors import SchemaParseError
from ..logging_config import get_logger

logger = get_logger(__name__)

SCREEN_NAME_KEY = "screen_name"
NULL_LITERAL = "null"


@dataclass(frozen=True)
class ParamDef:
    """One event parameter: schema key plus its predefined value."""

    key: str
    value: str

    @property
    def has_predefined_value(self) -> bool:
        """Empty values and the literal ``"null"`` mean "no value"."""
        return bool(self.value) and self.value != NULL_LITERAL


@dataclass(frozen=True)
class EventDef:
    """A single trackable event."""

    name: str
    parameters: Tuple[ParamDef, ...] = ()


@dataclass(frozen=True)
class AnalyticsCategory:
    """A named group of related events."""

    name: str
    events: Tuple[EventDef, ...] = ()

    @property
    def event_count(self) -> int:
        return len(self.events)


def parse_schema(text: str) -> List[AnalyticsCategory]:
    """
    Parse schema text into analytics categories.

    Args:
        text: JSON array of category objects

    Returns:
        Categories in schema order

    Raises:
        SchemaParseError: If the text isn't JSON or doesn't match the shape
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaParseError(f"Schema is not valid JSON: {e}") from e

    categories = convert_schema_data(data)
    logger.debug(
        "Parsed %d categories with %d events",
        len(categories),
        sum(category.event_count for category in categories),
    )
    return categories


def convert_schema_data(data: Any) -> List[AnalyticsCategory]:
    """
    Convert already-decoded JSON data into analytics categories.

    Args:
        data: Decoded JSON (expected to be a list of category objects)

    Returns:
        Categories in schema order
    """
    if not isinstance(data, list):
        raise SchemaParseError(
            f"Schema root must be an array of categories, got {_json_type(data)}"
        )

    return [_convert_category(item, f"[{index}]") for index, item in enumerate(data)]


def _convert_category(node: Any, path: str) -> AnalyticsCategory:
    obj = _expect_object(node, path)
    name = _expect_name(obj, path)
    events = _expect_array(obj, "events", path)

    return AnalyticsCategory(
        name=name,
        events=tuple(
            _convert_event(item, f"{path}.events[{index}]", name)
            for index, item in enumerate(events)
        ),
    )


def _convert_event(node: Any, path: str, category_name: str) -> EventDef:
    obj = _expect_object(node, f"{path} (category '{category_name}')")
    name = _expect_name(obj, path)
    parameters = _expect_array(obj, "parameters", f"{path} (event '{name}')")

    return EventDef(
        name=name,
        parameters=tuple(
            _convert_parameter(item, f"{path}.parameters[{index}] (event '{name}')")
            for index, item in enumerate(parameters)
        ),
    )


def _convert_parameter(node: Any, path: str) -> ParamDef:
    obj = _expect_object(node, path)
    key = _expect_name(obj, path)

    value = obj.get("value")
    if value is None:
        value = ""
    elif isinstance(value, bool):
        value = "true" if value else "false"
    elif isinstance(value, (int, float)):
        value = str(value)
    elif isinstance(value, str):
        _check_encodable(value, f"{path}: parameter '{key}' value")
    else:
        raise SchemaParseError(
            f"{path}: parameter '{key}' value must be a string, got {_json_type(value)}"
        )

    return ParamDef(key=key, value=value)


def _expect_object(node: Any, path: str) -> dict:
    if not isinstance(node, dict):
        raise SchemaParseError(f"{path}: expected an object, got {_json_type(node)}")
    return node


def _expect_name(obj: dict, path: str) -> str:
    name = obj.get("name")
    if not isinstance(name, str):
        raise SchemaParseError(f"{path}: 'name' must be a string")
    _check_encodable(name, f"{path}: 'name'")
    return name


def _check_encodable(text: str, what: str):
    # JSON escapes can decode to lone surrogates
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise SchemaParseError(
            f"{what} contains a character that can't be encoded as UTF-8 "
            f"at position {e.start}"
        ) from e


def _expect_array(obj: dict, key: str, path: str) -> list:
    # A missing list is read as empty
    value = obj.get(key, [])
    if value is None:
        return []
    if not isinstance(value, list):
        raise SchemaParseError(f"{path}: '{key}' must be an array, got {_json_type(value)}")
    return value


def _json_type(value: Any) -> str:
    type_names = {
        dict: "object",
        list: "array",
        str: "string",
        bool: "boolean",
        int: "number",
        float: "number",
        type(None): "null",
    }
    return type_names.get(type(value), type(value).__name__)
