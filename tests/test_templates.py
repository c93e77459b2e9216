from __future__ import annotations

from pathlib import Path

import pytest

from eventgen.core.templates import TemplateEngine, TemplateError


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    (tmp_path / "event.txt.j2").write_text(
        "{{ name }}: {{ key }}={{ value }}\n",
        encoding="utf-8",
    )
    (tmp_path / "quoted.txt.j2").write_text("{{ value|quote }}\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("not a template", encoding="utf-8")
    return tmp_path


def test_render_leaves_markup_alone(template_dir: Path) -> None:
    engine = TemplateEngine(template_dir)
    rendered = engine.render_template(
        "event.txt.j2", {"name": "view_welcome", "key": "source", "value": "<Home & Away>"}
    )
    assert rendered == "view_welcome: source=<Home & Away>\n"


def test_language_filter(template_dir: Path) -> None:
    engine = TemplateEngine(template_dir)
    engine.add_filter("quote", lambda value: f"<{value}>")
    assert engine.render_template("quoted.txt.j2", {"value": 'a "b"'}) == '<a "b">\n'


def test_undefined_variable(template_dir: Path) -> None:
    engine = TemplateEngine(template_dir)
    with pytest.raises(TemplateError, match="event.txt.j2"):
        engine.render_template("event.txt.j2", {"name": "x"})


def test_missing_template(template_dir: Path) -> None:
    engine = TemplateEngine(template_dir)
    assert not engine.template_exists("missing.j2")
    with pytest.raises(TemplateError, match="not found"):
        engine.render_template("missing.j2", {})


def test_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(TemplateError, match="directory not found"):
        TemplateEngine(tmp_path / "nope")


def test_list_templates(template_dir: Path) -> None:
    assert TemplateEngine(template_dir).list_templates() == ["event.txt.j2", "quoted.txt.j2"]


def test_builtin_templates_exist() -> None:
    from eventgen.languages.kotlin import KotlinGenerator
    from eventgen.languages.python import PythonGenerator

    for generator in (PythonGenerator(), KotlinGenerator()):
        names = generator.template_engine.list_templates()
        assert len(names) == 2
        assert all(generator.template_exists(name) for name in names)
