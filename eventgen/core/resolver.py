"""
Event shape resolution.

Decides, per event, whether the generated type is a parameterless singleton
or a record with one field per custom parameter, and collects the predefined
values that end up in the category's ``Values`` container.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .errors import MissingScreenNameError
from .naming import (
    BASE_EVENT_TYPE_NAME,
    VALUES_CONTAINER_NAME,
    NameSanitizer,
    NamingCase,
)
from .schema import AnalyticsCategory, EventDef, ParamDef, SCREEN_NAME_KEY
from ..logging_config import get_logger

logger = get_logger(__name__)

RESERVED_TYPE_NAMES = (BASE_EVENT_TYPE_NAME, VALUES_CONTAINER_NAME)


@dataclass(frozen=True)
class CustomParam:
    """A non-screen_name parameter turned into a field."""

    original_key: str
    identifier: str
    value: str = ""


@dataclass(frozen=True)
class ResolvedEvent:
    """Everything the emitter needs to know about one event."""

    event_name: str
    event_class_name: str
    is_simple: bool
    screen_name: str
    custom_params: Tuple[CustomParam, ...] = ()
    constant_values: Tuple[str, ...] = ()

    @property
    def field_count(self) -> int:
        return len(self.custom_params)


class EventShapeResolver:
    """Resolves schema events into generated type shapes."""

    def __init__(
        self,
        sanitizer: Optional[NameSanitizer] = None,
        strict_screen_name: bool = False,
    ):
        """
        Initialize resolver.

        Args:
            sanitizer: Naming rules of the target language
            strict_screen_name: Fail on events without a screen_name parameter
        """
        self.sanitizer = sanitizer or NameSanitizer()
        self.strict_screen_name = strict_screen_name

    def resolve_category(
        self, category: AnalyticsCategory
    ) -> Tuple[List[ResolvedEvent], List[str]]:
        """
        Resolve every event of a category.

        Returns:
            Resolved events in schema order and the category's distinct
            predefined values in first-seen order
        """
        predefined_values: List[str] = []
        type_names = self.type_name_scope()
        resolved = [
            self.resolve(category.name, event, predefined_values, type_names)
            for event in category.events
        ]
        return resolved, predefined_values

    def type_name_scope(self) -> NameSanitizer:
        """
        Naming scope for the event types of one category container.

        The shared base type and the values container are visible inside the
        container, so event types may not take their names.
        """
        return self.sanitizer.fork(RESERVED_TYPE_NAMES)

    def resolve(
        self,
        category_name: str,
        event: EventDef,
        predefined_values: Optional[List[str]] = None,
        type_names: Optional[NameSanitizer] = None,
    ) -> ResolvedEvent:
        """
        Resolve the shape of a single event.

        Args:
            category_name: Name of the enclosing category
            event: Event definition from the schema
            predefined_values: Category accumulator, extended in place with
                this event's values not seen before
            type_names: Scope of the category's event type names; a fresh
                one is used when omitted

        Returns:
            ResolvedEvent for the emitter
        """
        screen_param = self._find_screen_param(event.parameters)
        if screen_param is None:
            if self.strict_screen_name:
                raise MissingScreenNameError(category_name, event.name)
            logger.debug(
                "Event %s.%s has no screen_name, using empty string",
                category_name,
                event.name,
            )
        screen_name = screen_param.value if screen_param else ""
        if type_names is None:
            type_names = self.type_name_scope()

        custom_params = self._collect_custom_params(event.parameters)
        is_simple = self._is_simple(event.parameters)

        constant_values = tuple(
            param.value for param in event.parameters if param.has_predefined_value
        )
        if predefined_values is not None:
            for value in constant_values:
                if value not in predefined_values:
                    predefined_values.append(value)

        resolved = ResolvedEvent(
            event_name=event.name,
            event_class_name=type_names.sanitize_name(
                f"{event.name}_event", NamingCase.PASCAL_CASE, unique=True
            ),
            is_simple=is_simple,
            screen_name=screen_name,
            custom_params=() if is_simple else custom_params,
            constant_values=constant_values,
        )
        logger.debug(
            "Resolved %s.%s -> %s (%s, %d fields)",
            category_name,
            event.name,
            resolved.event_class_name,
            "simple" if is_simple else "parameterized",
            resolved.field_count,
        )
        return resolved

    @staticmethod
    def _find_screen_param(parameters: Tuple[ParamDef, ...]) -> Optional[ParamDef]:
        for param in parameters:
            if param.key == SCREEN_NAME_KEY:
                return param
        return None

    @staticmethod
    def _is_simple(parameters: Tuple[ParamDef, ...]) -> bool:
        if not parameters:
            return True
        return len(parameters) == 1 and parameters[0].key == SCREEN_NAME_KEY

    def _collect_custom_params(
        self, parameters: Tuple[ParamDef, ...]
    ) -> Tuple[CustomParam, ...]:
        # Field names are unique per event, so every event gets its own scope
        field_names = self.sanitizer.fork()
        seen: Dict[str, CustomParam] = {}

        for param in parameters:
            if param.key == SCREEN_NAME_KEY or param.key in seen:
                continue
            seen[param.key] = CustomParam(
                original_key=param.key,
                identifier=field_names.sanitize_name(
                    param.key, NamingCase.CAMEL_CASE, unique=True
                ),
                value=param.value,
            )

        return tuple(seen.values())
