"""Project sources read straight from a directory on disk."""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from planguard.storage.repository import SourceStorage


class LocationOutsideProjectError(ValueError):
    """Raised when a location resolves to a file outside the project root."""


def to_project_path(root: Path, file: Path) -> PurePosixPath:
    """Project-relative location (``/model/Schedule.src``) of a file under ``root``."""
    return PurePosixPath("/") / PurePosixPath(file.relative_to(root).as_posix())


class FileSystemStorage(SourceStorage):
    """Reads project-relative locations below a root directory."""

    def __init__(self, root: Path) -> None:
        self._root = root.resolve()

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self, path: PurePosixPath) -> Path:
        """Map a project location to a file under the root.

        Raises ``LocationOutsideProjectError`` when the location points outside the project.
        """
        relative = str(path).lstrip("/")
        target = (self._root / relative).resolve()
        if not target.is_relative_to(self._root):
            raise LocationOutsideProjectError(f"Location '{path}' is outside the project root")
        return target

    def read_all_text(self, path: PurePosixPath) -> str:
        return self.resolve(path).read_text(encoding="utf-8")
