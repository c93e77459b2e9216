from __future__ import annotations

import importlib
import io
import json
import sys
from pathlib import Path

import pytest
from rich.console import Console

SAMPLE_SCHEMA = [
    {
        "name": "onboarding",
        "events": [
            {
                "name": "view_welcome",
                "parameters": [{"name": "screen_name", "value": "welcome"}],
            }
        ],
    },
    {
        "name": "user_profile",
        "events": [
            {
                "name": "open",
                "parameters": [{"name": "screen_name", "value": "profile"}],
            },
            {
                "name": "edit_field",
                "parameters": [
                    {"name": "screen_name", "value": "profile"},
                    {"name": "field_name", "value": "null"},
                    {"name": "source", "value": "Home Screen"},
                ],
            },
            {"name": "logout", "parameters": []},
        ],
    },
]


@pytest.fixture
def schema_text() -> str:
    return json.dumps(SAMPLE_SCHEMA)


@pytest.fixture
def schema_file(tmp_path: Path, schema_text: str) -> Path:
    path = tmp_path / "analytics.json"
    path.write_text(schema_text, encoding="utf-8")
    return path


@pytest.fixture
def import_generated(monkeypatch):
    """Import modules from a directory of generated sources.

    Generated packages are dropped from ``sys.modules`` afterwards so the
    next test can generate the same package names somewhere else.
    """
    roots: set[str] = set()

    def _import(root: Path, module_name: str):
        monkeypatch.syspath_prepend(str(root))
        importlib.invalidate_caches()
        roots.add(module_name.split(".")[0])
        return importlib.import_module(module_name)

    yield _import

    for name in list(sys.modules):
        if name.split(".")[0] in roots:
            del sys.modules[name]


@pytest.fixture
def cli_output(monkeypatch) -> io.StringIO:
    """Capture everything the CLI prints on a wide, colorless console."""
    import eventgen.cli

    buffer = io.StringIO()
    monkeypatch.setattr(
        eventgen.cli,
        "console",
        Console(file=buffer, width=200, color_system=None, force_terminal=False),
    )
    return buffer
