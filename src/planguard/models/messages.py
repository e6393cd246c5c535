"""Validation messages returned to the delete workflow."""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel


class Level(StrEnum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class MessageKind(StrEnum):
    SCORE_HOLDER_GLOBAL_TYPE_NOT_RECOGNIZED = "score_holder_global_type_not_recognized"
    SCORE_HOLDER_GLOBAL_TO_BE_REMOVED = "score_holder_global_to_be_removed"


class ValidationMessage(BaseModel):
    """An immutable, severity-tagged outcome of a delete validation.

    The message carries no text of its own: rendering a kind into words is
    left to the presentation layer.
    """

    kind: MessageKind
    level: Level = Level.WARNING

    model_config = {"frozen": True}


class ScoreHolderGlobalTypeNotRecognizedMessage(ValidationMessage):
    """The solution's score type has no known score holder type."""

    kind: Literal[MessageKind.SCORE_HOLDER_GLOBAL_TYPE_NOT_RECOGNIZED] = (
        MessageKind.SCORE_HOLDER_GLOBAL_TYPE_NOT_RECOGNIZED
    )


class ScoreHolderGlobalToBeRemovedMessage(ValidationMessage):
    """The ``scoreHolder`` global is referenced elsewhere and will disappear."""

    kind: Literal[MessageKind.SCORE_HOLDER_GLOBAL_TO_BE_REMOVED] = (
        MessageKind.SCORE_HOLDER_GLOBAL_TO_BE_REMOVED
    )
