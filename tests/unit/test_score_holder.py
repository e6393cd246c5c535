"""Tests for score type extraction and score holder type resolution."""

from __future__ import annotations

import pytest

from planguard.models.domain import Annotation, DataObject, ObjectField
from planguard.validation.score_holder import BUILDIN_SCORE_TYPES, ScoreHolderUtils
from tests.conftest import HARD_SOFT_SCORE, HARD_SOFT_SCORE_HOLDER


def _field(name: str, type_name: str, *annotations: str) -> ObjectField:
    return ObjectField(
        name=name,
        type_name=type_name,
        annotations={a: Annotation(class_name=a) for a in annotations},
    )


class TestGetScoreHolderTypeFqn:
    def test_hard_soft(self, score_holder_utils: ScoreHolderUtils) -> None:
        assert score_holder_utils.get_score_holder_type_fqn(HARD_SOFT_SCORE) == (
            HARD_SOFT_SCORE_HOLDER
        )

    @pytest.mark.parametrize("score_type", BUILDIN_SCORE_TYPES)
    def test_every_buildin_score_resolves(
        self, score_holder_utils: ScoreHolderUtils, score_type: str
    ) -> None:
        holder = score_holder_utils.get_score_holder_type_fqn(score_type)
        assert holder == f"{score_type}Holder"

    def test_simple_name(self, score_holder_utils: ScoreHolderUtils) -> None:
        assert score_holder_utils.get_score_holder_type_fqn("HardSoftScore") == (
            HARD_SOFT_SCORE_HOLDER
        )

    def test_bendable_long(self, score_holder_utils: ScoreHolderUtils) -> None:
        assert score_holder_utils.get_score_holder_type_fqn("BendableLongScore") == (
            "org.optaplanner.core.api.score.buildin.bendablelong.BendableLongScoreHolder"
        )

    @pytest.mark.parametrize(
        "score_type",
        [
            "CustomScore",
            "com.example.score.HardSoftScore",
            "org.optaplanner.core.api.score.buildin.hardsoft.HardSoftScoreHolder",
            "",
            None,
        ],
    )
    def test_unknown_is_unresolved(
        self, score_holder_utils: ScoreHolderUtils, score_type: str | None
    ) -> None:
        assert score_holder_utils.get_score_holder_type_fqn(score_type) is None


class TestExtractScoreTypeFqn:
    def test_planning_score_annotation_wins(self, score_holder_utils: ScoreHolderUtils) -> None:
        obj = DataObject(
            name="Schedule",
            fields={
                "score": _field("score", "SimpleScore"),
                "total": _field("total", HARD_SOFT_SCORE, "PlanningScore"),
            },
        )
        assert score_holder_utils.extract_score_type_fqn(obj) == HARD_SOFT_SCORE

    def test_field_named_score(self, score_holder_utils: ScoreHolderUtils) -> None:
        obj = DataObject(name="Schedule", fields={"score": _field("score", HARD_SOFT_SCORE)})
        assert score_holder_utils.extract_score_type_fqn(obj) == HARD_SOFT_SCORE

    def test_no_score_field(self, score_holder_utils: ScoreHolderUtils) -> None:
        obj = DataObject(name="Schedule", fields={"lessons": _field("lessons", "java.util.List")})
        assert score_holder_utils.extract_score_type_fqn(obj) is None
