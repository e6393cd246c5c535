"""Abstract collaborator interfaces consumed by delete validators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import PurePosixPath

from planguard.models.domain import ResourceType


class UsageSearchError(RuntimeError):
    """Raised when the project usage search cannot answer a query."""


class SourceStorage(ABC):
    @abstractmethod
    def read_all_text(self, path: PurePosixPath) -> str:
        """Return the full text stored at ``path``.  Raises ``OSError`` if unreadable."""


class AssetsUsageService(ABC):
    @abstractmethod
    def get_asset_usages(
        self,
        resource_fqn: str,
        resource_type: ResourceType,
        excluding: PurePosixPath | None = None,
    ) -> list[PurePosixPath]:
        """Return every project location referencing ``resource_fqn``, minus ``excluding``."""
