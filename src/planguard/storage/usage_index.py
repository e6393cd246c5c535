"""Usage search by scanning project files for fully-qualified type names."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Sequence
from pathlib import Path, PurePosixPath

from planguard.models.domain import ResourceType
from planguard.storage.filesystem import to_project_path
from planguard.storage.repository import AssetsUsageService, UsageSearchError

logger = logging.getLogger("planguard.storage")


def _fqn_pattern(fqn: str) -> re.Pattern[str]:
    # Whole dotted token: "a.b.Foo" must not match "a.b.FooBar" or "x.a.b.Foo".
    return re.compile(rf"(?<![\w.]){re.escape(fqn)}(?![\w])")


class TextScanUsageService(AssetsUsageService):
    """Finds type references by reading every project file with a known suffix.

    Only type references (``ResourceType.DATA_OBJECT``) can be searched this
    way. Results are sorted by location, so repeated queries against an
    unchanged tree return identical lists.
    """

    supported_types = frozenset({ResourceType.DATA_OBJECT})

    def __init__(self, root: Path, suffixes: Sequence[str]) -> None:
        self._root = root.resolve()
        self._suffixes = tuple(suffixes)

    def _resolve(self, location: PurePosixPath) -> Path:
        # Same mapping as FileSystemStorage.resolve: ".." and symlinks collapse.
        return (self._root / str(location).lstrip("/")).resolve()

    def _iter_files(self) -> Iterator[Path]:
        if not self._root.is_dir():
            raise UsageSearchError(f"Project root '{self._root}' is not a directory")
        for file in sorted(self._root.rglob("*")):
            if file.is_file() and file.name.endswith(self._suffixes):
                yield file

    def get_asset_usages(
        self,
        resource_fqn: str,
        resource_type: ResourceType,
        excluding: PurePosixPath | None = None,
    ) -> list[PurePosixPath]:
        if resource_type not in self.supported_types:
            raise UsageSearchError(f"Usage search does not support resource type '{resource_type}'")

        pattern = _fqn_pattern(resource_fqn)
        excluded_file = self._resolve(excluding) if excluding is not None else None
        usages: list[PurePosixPath] = []
        for file in self._iter_files():
            if excluded_file is not None and file.resolve() == excluded_file:
                continue
            location = to_project_path(self._root, file)
            try:
                text = file.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                raise UsageSearchError(f"Cannot read '{location}': {exc}") from exc
            if pattern.search(text):
                usages.append(location)

        logger.debug("%d usage(s) of %s found", len(usages), resource_fqn)
        return usages
