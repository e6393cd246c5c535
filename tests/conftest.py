"""Shared test fixtures for planguard."""

from __future__ import annotations

from pathlib import Path, PurePosixPath

import pytest

from planguard.models.domain import ResourceType
from planguard.service.data_object_loader import DataObjectLoader
from planguard.storage.repository import AssetsUsageService, SourceStorage, UsageSearchError
from planguard.validation.score_holder import ScoreHolderUtils
from planguard.validation.solution_delete import PlanningSolutionScoreHolderDeleteValidator

SCHEDULE_PATH = PurePosixPath("/model/Schedule.src")
PENALTY_RULE_PATH = PurePosixPath("/rules/Penalty.rule")

HARD_SOFT_SCORE = "org.optaplanner.core.api.score.buildin.hardsoft.HardSoftScore"
HARD_SOFT_SCORE_HOLDER = "org.optaplanner.core.api.score.buildin.hardsoft.HardSoftScoreHolder"

SCHEDULE_SOURCE = """\
name: Schedule
package: org.acme.schedule
annotations:
  PlanningSolution: {}
fields:
  lessons: java.util.List
  score:
    type: HardSoftScore
    annotations:
      PlanningScore: {}
"""

QUALIFIED_SCHEDULE_SOURCE = """\
name: Schedule
package: org.acme.schedule
annotations:
  org.optaplanner.core.api.domain.solution.PlanningSolution: {}
fields:
  score:
    type: org.optaplanner.core.api.score.buildin.hardsoft.HardSoftScore
    annotations:
      org.optaplanner.core.api.domain.solution.PlanningScore: {}
"""

CUSTOM_SCORE_SOURCE = """\
name: Schedule
package: org.acme.schedule
annotations:
  PlanningSolution: {}
fields:
  score:
    type: CustomScore
    annotations:
      PlanningScore: {}
"""

LESSON_SOURCE = """\
name: Lesson
package: org.acme.schedule
annotations:
  PlanningEntity: {}
fields:
  subject: java.lang.String
  score: org.optaplanner.core.api.score.buildin.hardsoft.HardSoftScore
"""

PENALTY_RULE = """\
package org.acme.schedule;

import org.optaplanner.core.api.score.buildin.hardsoft.HardSoftScoreHolder;

global HardSoftScoreHolder scoreHolder;

rule "Room conflict"
    when
        Lesson($room : room)
    then
        scoreHolder.addHardConstraintMatch(kcontext, -1);
end
"""


class FakeStorage(SourceStorage):
    """In-memory storage that records every read."""

    def __init__(self, sources: dict[str, str] | None = None) -> None:
        self.sources = {PurePosixPath(k): v for k, v in (sources or {}).items()}
        self.reads: list[PurePosixPath] = []

    def read_all_text(self, path: PurePosixPath) -> str:
        self.reads.append(path)
        try:
            return self.sources[path]
        except KeyError:
            raise FileNotFoundError(str(path)) from None


class FakeUsageService(AssetsUsageService):
    """Canned usage answers keyed by FQN; records every query."""

    def __init__(self, usages: dict[str, list[str]] | None = None, *, fail: bool = False) -> None:
        self.usages = {
            fqn: [PurePosixPath(p) for p in paths] for fqn, paths in (usages or {}).items()
        }
        self.fail = fail
        self.calls: list[tuple[str, ResourceType, PurePosixPath | None]] = []

    def get_asset_usages(
        self,
        resource_fqn: str,
        resource_type: ResourceType,
        excluding: PurePosixPath | None = None,
    ) -> list[PurePosixPath]:
        self.calls.append((resource_fqn, resource_type, excluding))
        if self.fail:
            raise UsageSearchError("index unavailable")
        return [p for p in self.usages.get(resource_fqn, []) if p != excluding]


def make_validator(
    storage: SourceStorage, usage_service: AssetsUsageService
) -> PlanningSolutionScoreHolderDeleteValidator:
    return PlanningSolutionScoreHolderDeleteValidator(
        storage=storage,
        loader=DataObjectLoader(),
        score_holder_utils=ScoreHolderUtils(),
        usage_service=usage_service,
    )


def write_project(root: Path, files: dict[str, str]) -> Path:
    """Write ``files`` (project location -> text) below ``root``."""
    for location, text in files.items():
        target = root / location.lstrip("/")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def loader() -> DataObjectLoader:
    return DataObjectLoader()


@pytest.fixture
def score_holder_utils() -> ScoreHolderUtils:
    return ScoreHolderUtils()


@pytest.fixture
def schedule_project(tmp_path: Path) -> Path:
    """A project with a solution, an entity, and a rule using the score holder."""
    return write_project(
        tmp_path,
        {
            str(SCHEDULE_PATH): QUALIFIED_SCHEDULE_SOURCE,
            "/model/Lesson.src": LESSON_SOURCE,
            str(PENALTY_RULE_PATH): PENALTY_RULE,
        },
    )
