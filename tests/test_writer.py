from __future__ import annotations

from pathlib import Path, PurePosixPath

import pytest

from eventgen.core import writer as writer_module
from eventgen.core.writer import FileSystemWriter, GeneratedFile, MemoryWriter


def _file(content: str) -> GeneratedFile:
    return GeneratedFile(PurePosixPath("app", "events", "shop", "ShopEvents.py"), content)


def test_writes_below_destination(tmp_path: Path) -> None:
    location = FileSystemWriter(tmp_path).write(_file("first\n"))

    path = tmp_path / "app" / "events" / "shop" / "ShopEvents.py"
    assert location == str(path)
    assert path.read_text(encoding="utf-8") == "first\n"
    assert list(path.parent.iterdir()) == [path]


def test_overwrites_existing_file(tmp_path: Path) -> None:
    writer = FileSystemWriter(tmp_path)
    writer.write(_file("first\n"))
    location = writer.write(_file("second\n"))
    assert Path(location).read_text(encoding="utf-8") == "second\n"


def test_failed_replace_keeps_previous_content(tmp_path: Path, monkeypatch) -> None:
    writer = FileSystemWriter(tmp_path)
    location = Path(writer.write(_file("first\n")))

    def failing_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(writer_module.os, "replace", failing_replace)
    with pytest.raises(OSError, match="disk full"):
        writer.write(_file("second\n"))

    assert location.read_text(encoding="utf-8") == "first\n"
    assert list(location.parent.iterdir()) == [location]


def test_memory_writer() -> None:
    writer = MemoryWriter()
    location = writer.write(_file("content\n"))
    assert location == "app/events/shop/ShopEvents.py"
    assert writer.files == {"app/events/shop/ShopEvents.py": "content\n"}


def test_unencodable_content_leaves_no_temp_file(tmp_path: Path) -> None:
    writer = FileSystemWriter(tmp_path)
    location = Path(writer.write(_file("first\n")))

    with pytest.raises(UnicodeEncodeError):
        writer.write(_file("broken \ud800\n"))

    assert location.read_text(encoding="utf-8") == "first\n"
    assert list(location.parent.iterdir()) == [location]
