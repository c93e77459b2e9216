"""
Output writers for generated modules.

A writer receives rendered files and persists them somewhere. The file system
writer replaces every file atomically, so an aborted run never leaves a
half-written module behind.
"""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Dict, Union

from ..logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class GeneratedFile:
    """A rendered module and where it goes, relative to the destination."""

    relative_path: PurePosixPath
    content: str
    kind: str = "category"


class SourceWriter(ABC):
    """Destination for generated files."""

    @abstractmethod
    def write(self, generated: GeneratedFile) -> str:
        """
        Persist a generated file.

        Returns:
            Location the file was written to
        """
        pass


class FileSystemWriter(SourceWriter):
    """Writes generated files below a destination directory."""

    def __init__(self, destination: Union[str, Path]):
        self.destination = Path(destination)

    def write(self, generated: GeneratedFile) -> str:
        path = self.destination.joinpath(*generated.relative_path.parts)
        path.parent.mkdir(parents=True, exist_ok=True)

        tmp = path.with_name(path.name + ".tmp")
        try:
            with open(tmp, "w", encoding="utf-8", newline="\n") as f:
                f.write(generated.content)
            os.replace(tmp, path)
        except BaseException:
            tmp.unlink(missing_ok=True)
            raise

        logger.info("Wrote %s", path)
        return str(path)


class MemoryWriter(SourceWriter):
    """Keeps generated files in memory (dry runs, tests)."""

    def __init__(self):
        self.files: Dict[str, str] = {}

    def write(self, generated: GeneratedFile) -> str:
        location = str(generated.relative_path)
        self.files[location] = generated.content
        return location
