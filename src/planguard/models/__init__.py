"""Pydantic domain models for planguard."""

from planguard.models.domain import (
    PLANNING_SCORE_ANNOTATION,
    PLANNING_SOLUTION_ANNOTATION,
    Annotation,
    DataObject,
    ObjectField,
    ResourceType,
)
from planguard.models.errors import GenerationResult, LoadError, SourceSpan
from planguard.models.messages import (
    Level,
    MessageKind,
    ScoreHolderGlobalToBeRemovedMessage,
    ScoreHolderGlobalTypeNotRecognizedMessage,
    ValidationMessage,
)

__all__ = [
    "PLANNING_SCORE_ANNOTATION",
    "PLANNING_SOLUTION_ANNOTATION",
    "Annotation",
    "DataObject",
    "GenerationResult",
    "Level",
    "LoadError",
    "MessageKind",
    "ObjectField",
    "ResourceType",
    "ScoreHolderGlobalToBeRemovedMessage",
    "ScoreHolderGlobalTypeNotRecognizedMessage",
    "SourceSpan",
    "ValidationMessage",
]
