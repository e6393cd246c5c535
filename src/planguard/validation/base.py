"""Base class for validators that run before an artifact is deleted."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import PurePosixPath

from planguard.models.domain import DataObject
from planguard.models.messages import ValidationMessage


class DeleteValidator(ABC):
    """Checks what would break if the artifact at a location were deleted.

    The host calls :meth:`accept` first and only calls :meth:`validate` for
    locations the validator accepts. Validators inform; they never block the
    delete themselves.
    """

    @abstractmethod
    def accept(self, path: PurePosixPath) -> bool:
        """Whether this validator applies to ``path``.  Must not read content."""

    @abstractmethod
    def validate(
        self,
        path: PurePosixPath | None,
        data_object: DataObject | None = None,
    ) -> list[ValidationMessage]:
        """Return the messages describing what deleting ``path`` would break."""
