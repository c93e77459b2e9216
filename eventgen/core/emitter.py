"""
Intermediate representation of generated modules.

The emitter turns resolved events into a small tree of records
(module -> event types -> fields, plus constants). Language generators
render that tree to source text; nothing in here knows about syntax.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .naming import (
    BASE_EVENT_TYPE_NAME,
    VALUES_CONTAINER_NAME,
    NameSanitizer,
    NamingCase,
    module_path,
)
from .resolver import ResolvedEvent
from .schema import AnalyticsCategory
from ..logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class EventField:
    """Field of a parameterized event type."""

    name: str
    original_key: str
    predefined_value: str = ""


@dataclass(frozen=True)
class EventType:
    """One generated event type nested in a category container."""

    name: str
    event_name: str
    category_name: str
    screen_name: str
    is_simple: bool
    fields: Tuple[EventField, ...] = ()


@dataclass(frozen=True)
class Constant:
    """Named string constant in the ``Values`` container."""

    name: str
    value: str


@dataclass
class CategoryModule:
    """Everything generated for one analytics category."""

    category_name: str
    container_name: str
    module_path: str
    event_types: List[EventType] = field(default_factory=list)
    constants: List[Constant] = field(default_factory=list)
    values_name: str = VALUES_CONTAINER_NAME
    base_type_name: str = BASE_EVENT_TYPE_NAME

    @property
    def has_constants(self) -> bool:
        return bool(self.constants)

    @property
    def has_records(self) -> bool:
        return any(not event_type.is_simple for event_type in self.event_types)

    @property
    def has_singletons(self) -> bool:
        return any(event_type.is_simple for event_type in self.event_types)

    def constant_for(self, value: str) -> Optional[str]:
        """Name of the constant holding ``value``, if one survived."""
        for constant in self.constants:
            if constant.value == value:
                return constant.name
        return None


@dataclass(frozen=True)
class BaseEventModule:
    """The shared supertype of every generated event."""

    module_path: str
    type_name: str = BASE_EVENT_TYPE_NAME


class CategoryEmitter:
    """Builds the module tree for a category."""

    def __init__(self, package_name: str, sanitizer: NameSanitizer):
        self.package_name = package_name
        self.sanitizer = sanitizer

    def build(
        self,
        category: AnalyticsCategory,
        resolved_events: List[ResolvedEvent],
        predefined_values: List[str],
    ) -> CategoryModule:
        """
        Assemble the category module.

        Args:
            category: Category from the schema
            resolved_events: Output of the resolver, in schema order
            predefined_values: Distinct values of the category, first-seen order

        Returns:
            CategoryModule ready for rendering
        """
        module = CategoryModule(
            category_name=category.name,
            container_name=self.sanitizer.sanitize_name(
                f"{category.name}_events", NamingCase.PASCAL_CASE
            ),
            module_path=module_path(
                self.package_name, self.sanitizer.module_name(category.name)
            ),
        )

        for resolved in resolved_events:
            module.event_types.append(self._build_event_type(category.name, resolved))

        module.constants = self._build_constants(predefined_values)

        logger.debug(
            "Built %s: %d event types, %d constants",
            module.container_name,
            len(module.event_types),
            len(module.constants),
        )
        return module

    def _build_event_type(
        self, category_name: str, resolved: ResolvedEvent
    ) -> EventType:
        return EventType(
            name=resolved.event_class_name,
            event_name=resolved.event_name,
            category_name=category_name,
            screen_name=resolved.screen_name,
            is_simple=resolved.is_simple,
            fields=tuple(
                EventField(
                    name=param.identifier,
                    original_key=param.original_key,
                    predefined_value=param.value,
                )
                for param in resolved.custom_params
            ),
        )

    def _build_constants(self, predefined_values: List[str]) -> List[Constant]:
        # Keyed by constant name: values that normalize to the same name
        # overwrite each other, the position of the first one is kept
        by_name: Dict[str, str] = {}
        for value in predefined_values:
            by_name[self.sanitizer.sanitize_name(value, NamingCase.CONSTANT_CASE)] = value

        return [Constant(name=name, value=value) for name, value in by_name.items()]


def build_base_event_module(package_name: str) -> BaseEventModule:
    """Module tree for the shared base event type."""
    return BaseEventModule(module_path=package_name)
