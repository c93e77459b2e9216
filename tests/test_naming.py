from __future__ import annotations

from eventgen.core.naming import (
    NameSanitizer,
    NamingCase,
    module_path,
    module_segment,
    to_camel_case,
    to_constant_name,
    to_pascal_case,
)
from eventgen.languages.kotlin.naming import create_kotlin_sanitizer
from eventgen.languages.python.naming import create_python_sanitizer


def test_case_conversions() -> None:
    assert to_pascal_case("user_profile") == "UserProfile"
    assert to_camel_case("user_id") == "userId"
    assert to_constant_name("Home Screen") == "HOME_SCREEN"


def test_pascal_case_keeps_inner_capitals() -> None:
    assert to_pascal_case("userProfile_view_event") == "UserProfileViewEvent"
    assert to_pascal_case("view__welcome") == "ViewWelcome"


def test_camel_case_leaves_first_segment_alone() -> None:
    assert to_camel_case("Item_count") == "ItemCount"
    assert to_camel_case("query") == "query"


def test_module_path() -> None:
    assert module_segment("User_Profile") == "userprofile"
    assert module_path("com.app.events", "userprofile") == "com.app.events.userprofile"
    assert module_path("", "userprofile") == "userprofile"


def test_sanitize_invalid_characters() -> None:
    sanitizer = NameSanitizer()
    assert sanitizer.sanitize_name("Home Screen!", NamingCase.CONSTANT_CASE) == "HOME_SCREEN_"
    assert sanitizer.sanitize_name("1st_place", NamingCase.PASCAL_CASE) == "_1stPlace"
    assert sanitizer.sanitize_name("", NamingCase.CAMEL_CASE) == "value"


def test_sanitize_reserved_words() -> None:
    python = create_python_sanitizer()
    assert python.sanitize_name("class", NamingCase.CAMEL_CASE) == "class_"
    assert python.sanitize_name("params", NamingCase.CAMEL_CASE) == "params_"

    kotlin = create_kotlin_sanitizer()
    assert kotlin.sanitize_name("screen_name", NamingCase.CAMEL_CASE) == "screenName_"
    assert kotlin.sanitize_name("val", NamingCase.CAMEL_CASE) == "val_"


def test_unique_names_get_counter() -> None:
    sanitizer = NameSanitizer()
    assert sanitizer.sanitize_name("item_id", NamingCase.CAMEL_CASE, unique=True) == "itemId"
    assert sanitizer.sanitize_name("itemId", NamingCase.CAMEL_CASE, unique=True) == "itemId1"
    assert sanitizer.sanitize_name("item_id", NamingCase.CAMEL_CASE, unique=True) == "itemId2"


def test_fork_starts_with_no_used_names() -> None:
    sanitizer = NameSanitizer({"if"})
    sanitizer.sanitize_name("value", NamingCase.CAMEL_CASE)
    forked = sanitizer.fork()
    assert forked.sanitize_name("value", NamingCase.CAMEL_CASE, unique=True) == "value"
    assert forked.sanitize_name("if", NamingCase.CAMEL_CASE) == "if_"


def test_module_name_is_valid_segment() -> None:
    python = create_python_sanitizer()
    assert python.module_name("User_Profile") == "userprofile"
    assert python.module_name("Import") == "import_"
    assert python.module_name("2fa-setup") == "_2fa_setup"


def test_plain_names_do_not_block_unique_ones() -> None:
    sanitizer = NameSanitizer()
    assert sanitizer.sanitize_name("home", NamingCase.CONSTANT_CASE) == "HOME"
    assert sanitizer.sanitize_name("home", NamingCase.CONSTANT_CASE, unique=True) == "HOME"


def test_fork_with_extra_reserved_words() -> None:
    sanitizer = NameSanitizer({"if"})
    scoped = sanitizer.fork(["BaseEvent"])
    assert scoped.sanitize_name("base_event", NamingCase.PASCAL_CASE) == "BaseEvent_"
    assert scoped.sanitize_name("if", NamingCase.CAMEL_CASE) == "if_"
    assert sanitizer.sanitize_name("base_event", NamingCase.PASCAL_CASE) == "BaseEvent"
