"""Delete validators for data objects."""

from planguard.validation.base import DeleteValidator
from planguard.validation.score_holder import ScoreHolderUtils
from planguard.validation.solution_delete import PlanningSolutionScoreHolderDeleteValidator

__all__ = [
    "DeleteValidator",
    "PlanningSolutionScoreHolderDeleteValidator",
    "ScoreHolderUtils",
]
