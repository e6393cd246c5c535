"""Structured load errors with YAML source position tracking."""

from __future__ import annotations

from pydantic import BaseModel

from planguard.models.domain import DataObject


class SourceSpan(BaseModel):
    """Points to exact location in YAML source for error reporting."""

    file: str
    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None


class LoadError(BaseModel):
    """A structured error raised while turning source text into a data object."""

    code: str
    message: str
    path: str | None = None
    span: SourceSpan | None = None


class GenerationResult(BaseModel):
    """Outcome of loading a data object from source.

    ``data_object`` is ``None`` whenever the source could not be turned into
    an object at all; it may be partially populated when ``errors`` is not
    empty.
    """

    data_object: DataObject | None = None
    errors: list[LoadError] = []

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)
