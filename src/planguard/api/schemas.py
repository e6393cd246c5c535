"""API request/response Pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from planguard.models.domain import DataObject


class DeleteValidationRequest(BaseModel):
    """Request body for POST /delete-validation."""

    path: str = Field(
        description="Project location of the artifact to delete, e.g. /model/Schedule.src"
    )
    data_object: DataObject | None = Field(
        default=None,
        description="Caller's copy of the data object; advisory only, the stored source is re-read",
    )


class MessageDetail(BaseModel):
    """A single rendered validation message."""

    kind: str
    level: str
    text: str


class DeleteValidationResponse(BaseModel):
    """Response body for POST /delete-validation."""

    path: str
    accepted: bool
    messages: list[MessageDetail] = []


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str = ""
