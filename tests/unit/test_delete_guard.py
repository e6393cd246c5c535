"""Tests for the DeleteGuard facade and its filesystem wiring."""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from planguard.models.domain import DataObject
from planguard.models.messages import (
    ScoreHolderGlobalToBeRemovedMessage,
    ScoreHolderGlobalTypeNotRecognizedMessage,
    ValidationMessage,
)
from planguard.service.delete_guard import DeleteGuard, build_delete_guard
from planguard.settings import Settings
from planguard.validation.base import DeleteValidator
from tests.conftest import (
    CUSTOM_SCORE_SOURCE,
    HARD_SOFT_SCORE_HOLDER,
    PENALTY_RULE_PATH,
    SCHEDULE_PATH,
    SCHEDULE_SOURCE,
    FakeStorage,
    FakeUsageService,
    make_validator,
    write_project,
)


class _StaticValidator(DeleteValidator):
    def __init__(self, suffix: str, messages: list[ValidationMessage]) -> None:
        self.suffix = suffix
        self.messages = messages
        self.calls = 0

    def accept(self, path: PurePosixPath) -> bool:
        return path.name.endswith(self.suffix)

    def validate(
        self, path: PurePosixPath | None, data_object: DataObject | None = None
    ) -> list[ValidationMessage]:
        self.calls += 1
        return list(self.messages)


class TestDeleteGuard:
    def test_rejected_path_touches_no_collaborator(self) -> None:
        storage = FakeStorage({str(PENALTY_RULE_PATH): "rule"})
        usages = FakeUsageService()
        guard = DeleteGuard([make_validator(storage, usages)])
        assert not guard.accepts(PENALTY_RULE_PATH)
        assert guard.validate(PENALTY_RULE_PATH) == []
        assert storage.reads == []
        assert usages.calls == []

    def test_no_path(self) -> None:
        validator = _StaticValidator(".src", [ScoreHolderGlobalToBeRemovedMessage()])
        assert DeleteGuard([validator]).validate(None) == []
        assert validator.calls == 0

    def test_messages_in_registration_order(self) -> None:
        first = _StaticValidator(".src", [ScoreHolderGlobalTypeNotRecognizedMessage()])
        skipped = _StaticValidator(".rule", [ScoreHolderGlobalToBeRemovedMessage()])
        last = _StaticValidator(".src", [ScoreHolderGlobalToBeRemovedMessage()])
        guard = DeleteGuard([first, skipped, last])
        assert guard.validate(SCHEDULE_PATH) == [
            ScoreHolderGlobalTypeNotRecognizedMessage(),
            ScoreHolderGlobalToBeRemovedMessage(),
        ]
        assert skipped.calls == 0

    def test_delegates_to_solution_validator(self) -> None:
        storage = FakeStorage({str(SCHEDULE_PATH): SCHEDULE_SOURCE})
        usages = FakeUsageService({HARD_SOFT_SCORE_HOLDER: [str(PENALTY_RULE_PATH)]})
        guard = DeleteGuard([make_validator(storage, usages)])
        assert guard.validate(SCHEDULE_PATH) == [ScoreHolderGlobalToBeRemovedMessage()]


class TestBuildDeleteGuard:
    def test_rule_referencing_score_holder(self, schedule_project: Path) -> None:
        guard = build_delete_guard(Settings(project_root=schedule_project))
        assert guard.validate(SCHEDULE_PATH) == [ScoreHolderGlobalToBeRemovedMessage()]

    def test_no_rules(self, tmp_path: Path) -> None:
        write_project(tmp_path, {str(SCHEDULE_PATH): SCHEDULE_SOURCE})
        guard = build_delete_guard(Settings(project_root=tmp_path))
        assert guard.validate(SCHEDULE_PATH) == []

    def test_unrecognized_score(self, tmp_path: Path) -> None:
        write_project(tmp_path, {str(SCHEDULE_PATH): CUSTOM_SCORE_SOURCE})
        guard = build_delete_guard(Settings(project_root=tmp_path))
        assert guard.validate(SCHEDULE_PATH) == [ScoreHolderGlobalTypeNotRecognizedMessage()]

    def test_entity_delete_is_silent(self, schedule_project: Path) -> None:
        guard = build_delete_guard(Settings(project_root=schedule_project))
        assert guard.validate(PurePosixPath("/model/Lesson.src")) == []

    def test_custom_suffix(self, tmp_path: Path) -> None:
        write_project(tmp_path, {"/model/Schedule.yaml": SCHEDULE_SOURCE})
        settings = Settings(project_root=tmp_path, data_object_suffix=".yaml")
        guard = build_delete_guard(settings)
        assert guard.accepts(PurePosixPath("/model/Schedule.yaml"))
        assert not guard.accepts(SCHEDULE_PATH)
