"""Delete check for data objects annotated as planning solutions."""

from __future__ import annotations

import logging
from pathlib import PurePosixPath

from planguard.models.domain import PLANNING_SOLUTION_ANNOTATION, DataObject, ResourceType
from planguard.models.messages import (
    Level,
    ScoreHolderGlobalToBeRemovedMessage,
    ScoreHolderGlobalTypeNotRecognizedMessage,
    ValidationMessage,
)
from planguard.service.data_object_loader import DataObjectLoader
from planguard.storage.repository import AssetsUsageService, SourceStorage
from planguard.validation.base import DeleteValidator
from planguard.validation.score_holder import ScoreHolderUtils

logger = logging.getLogger("planguard.validation")


class PlanningSolutionScoreHolderDeleteValidator(DeleteValidator):
    """Warns when deleting a planning solution removes a referenced ``scoreHolder`` global.

    A planning solution's score type implies a ``scoreHolder`` global of the
    matching score holder type. Deleting the solution deletes that global too,
    which breaks every rule that still references it.

    The object is always re-read from storage: a caller-supplied ``DataObject``
    may be stale and is ignored.
    """

    def __init__(
        self,
        storage: SourceStorage,
        loader: DataObjectLoader,
        score_holder_utils: ScoreHolderUtils,
        usage_service: AssetsUsageService,
        suffix: str = ResourceType.DATA_OBJECT.suffix,
    ) -> None:
        self._storage = storage
        self._loader = loader
        self._score_holder_utils = score_holder_utils
        self._usage_service = usage_service
        self._suffix = suffix

    def accept(self, path: PurePosixPath) -> bool:
        return path.name.endswith(self._suffix)

    def validate(
        self,
        path: PurePosixPath | None,
        data_object: DataObject | None = None,
    ) -> list[ValidationMessage]:
        if path is None:
            return []

        source = self._storage.read_all_text(path)
        result = self._loader.load_data_object(path, source, path)
        if result.has_errors or result.data_object is None:
            logger.debug("Skipping %s: source does not load cleanly", path)
            return []

        original = result.data_object
        if original.get_annotation(PLANNING_SOLUTION_ANNOTATION) is None:
            return []

        score_type_fqn = self._score_holder_utils.extract_score_type_fqn(original)
        if score_type_fqn is None:
            logger.debug("Skipping %s: planning solution declares no score field", path)
            return []

        score_holder_type_fqn = self._score_holder_utils.get_score_holder_type_fqn(score_type_fqn)
        if score_holder_type_fqn is None:
            logger.info("%s: score type %s has no known score holder", path, score_type_fqn)
            return [ScoreHolderGlobalTypeNotRecognizedMessage(level=Level.WARNING)]

        usages = self._usage_service.get_asset_usages(
            score_holder_type_fqn, ResourceType.DATA_OBJECT, path
        )
        if not usages:
            return []

        logger.info(
            "%s: deleting removes scoreHolder global %s used by %d asset(s)",
            path, score_holder_type_fqn, len(usages),
        )
        return [ScoreHolderGlobalToBeRemovedMessage(level=Level.WARNING)]
