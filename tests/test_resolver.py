from __future__ import annotations

import pytest

from eventgen.core.errors import MissingScreenNameError
from eventgen.core.resolver import CustomParam, EventShapeResolver
from eventgen.core.schema import AnalyticsCategory, EventDef, ParamDef
from eventgen.languages.python.naming import create_python_sanitizer


def _event(name: str, *params: tuple[str, str]) -> EventDef:
    return EventDef(name, tuple(ParamDef(key, value) for key, value in params))


def test_only_screen_name_is_simple() -> None:
    resolved = EventShapeResolver().resolve("onboarding", _event("view_welcome", ("screen_name", "welcome")))
    assert resolved.is_simple
    assert resolved.event_class_name == "ViewWelcomeEvent"
    assert resolved.screen_name == "welcome"
    assert resolved.custom_params == ()


def test_no_parameters_is_simple() -> None:
    resolved = EventShapeResolver().resolve("session", _event("logout"))
    assert resolved.is_simple
    assert resolved.screen_name == ""


def test_custom_parameters_make_a_record() -> None:
    event = _event(
        "edit_field",
        ("screen_name", "profile"),
        ("field_name", "null"),
        ("source", "Home Screen"),
    )
    resolved = EventShapeResolver().resolve("user_profile", event)
    assert not resolved.is_simple
    assert resolved.custom_params == (
        CustomParam("field_name", "fieldName", "null"),
        CustomParam("source", "source", "Home Screen"),
    )
    assert resolved.constant_values == ("profile", "Home Screen")


def test_single_custom_parameter_without_screen_name() -> None:
    resolved = EventShapeResolver().resolve("menu", _event("open_menu", ("source", "menu")))
    assert not resolved.is_simple
    assert resolved.screen_name == ""
    assert [p.identifier for p in resolved.custom_params] == ["source"]


def test_repeated_screen_name_is_record_without_fields() -> None:
    event = _event("twice", ("screen_name", "a"), ("screen_name", "b"))
    resolved = EventShapeResolver().resolve("misc", event)
    assert not resolved.is_simple
    assert resolved.screen_name == "a"
    assert resolved.field_count == 0


def test_repeated_keys_keep_first() -> None:
    event = _event("buy", ("screen_name", "shop"), ("item", "a"), ("item", "b"))
    resolved = EventShapeResolver().resolve("shop", event)
    assert resolved.custom_params == (CustomParam("item", "item", "a"),)


def test_field_names_are_unique_per_event() -> None:
    resolver = EventShapeResolver(create_python_sanitizer())
    event = _event("buy", ("item_id", ""), ("itemId", ""), ("class", ""))
    resolved = resolver.resolve("shop", event)
    assert [p.identifier for p in resolved.custom_params] == ["itemId", "itemId1", "class_"]

    # A second event starts over
    again = resolver.resolve("shop", _event("sell", ("item_id", "")))
    assert [p.identifier for p in again.custom_params] == ["itemId"]


def test_strict_mode_requires_screen_name() -> None:
    resolver = EventShapeResolver(strict_screen_name=True)
    with pytest.raises(MissingScreenNameError) as exc_info:
        resolver.resolve("session", _event("logout"))

    assert str(exc_info.value) == (
        "screen_name parameter is not defined for event 'session.logout'!"
    )
    assert exc_info.value.category_name == "session"


def test_category_collects_distinct_values_in_order() -> None:
    category = AnalyticsCategory(
        "user_profile",
        (
            _event("open", ("screen_name", "profile")),
            _event("edit", ("screen_name", "profile"), ("source", "home"), ("mode", "null")),
            _event("close", ("screen_name", "")),
        ),
    )
    resolved, values = EventShapeResolver().resolve_category(category)
    assert [r.event_class_name for r in resolved] == ["OpenEvent", "EditEvent", "CloseEvent"]
    assert values == ["profile", "home"]


def test_event_types_avoid_container_names() -> None:
    resolved = EventShapeResolver().resolve("app", _event("base", ("screen_name", "home")))
    assert resolved.event_class_name == "BaseEvent_"

    values = EventShapeResolver().resolve("app", _event("values", ("screen_name", "home")))
    assert values.event_class_name == "ValuesEvent"


def test_event_types_are_unique_per_category() -> None:
    category = AnalyticsCategory(
        "app",
        (
            _event("view_home", ("screen_name", "home")),
            _event("viewHome", ("screen_name", "home")),
            _event("view home", ("screen_name", "home")),
        ),
    )
    resolver = EventShapeResolver(create_python_sanitizer())
    resolved, _ = resolver.resolve_category(category)
    assert [r.event_class_name for r in resolved] == [
        "ViewHomeEvent",
        "ViewHomeEvent1",
        "View_homeEvent",
    ]

    # Another category starts over
    other, _ = resolver.resolve_category(
        AnalyticsCategory("shop", (_event("view_home", ("screen_name", "shop")),))
    )
    assert [r.event_class_name for r in other] == ["ViewHomeEvent"]
