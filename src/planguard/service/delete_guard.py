"""Host-facing entry point: runs every delete validator that accepts a location."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import PurePosixPath

from planguard.models.domain import DataObject
from planguard.models.messages import ValidationMessage
from planguard.service.data_object_loader import DataObjectLoader
from planguard.settings import Settings
from planguard.storage.filesystem import FileSystemStorage
from planguard.storage.usage_index import TextScanUsageService
from planguard.validation.base import DeleteValidator
from planguard.validation.score_holder import ScoreHolderUtils
from planguard.validation.solution_delete import PlanningSolutionScoreHolderDeleteValidator

logger = logging.getLogger("planguard.service")


class DeleteGuard:
    """Collects delete validation messages from a fixed list of validators.

    Holds no mutable state; safe to share between threads.
    """

    def __init__(self, validators: Sequence[DeleteValidator]) -> None:
        self._validators = tuple(validators)

    @property
    def validators(self) -> tuple[DeleteValidator, ...]:
        return self._validators

    def accepts(self, path: PurePosixPath) -> bool:
        """True when at least one validator applies to ``path``."""
        return any(v.accept(path) for v in self._validators)

    def validate(
        self,
        path: PurePosixPath | None,
        data_object: DataObject | None = None,
    ) -> list[ValidationMessage]:
        """Messages from every accepting validator, in registration order.

        Collaborator failures propagate to the caller.
        """
        if path is None:
            return []
        messages: list[ValidationMessage] = []
        for validator in self._validators:
            if validator.accept(path):
                messages.extend(validator.validate(path, data_object))
        logger.debug("%s: %d delete validation message(s)", path, len(messages))
        return messages


def build_delete_guard(settings: Settings) -> DeleteGuard:
    """Wire a ``DeleteGuard`` over the project directory named in ``settings``."""
    root = settings.project_root
    validator = PlanningSolutionScoreHolderDeleteValidator(
        storage=FileSystemStorage(root),
        loader=DataObjectLoader(),
        score_holder_utils=ScoreHolderUtils(),
        usage_service=TextScanUsageService(root, settings.usage_scan_suffixes),
        suffix=settings.data_object_suffix,
    )
    return DeleteGuard([validator])
