"""Delete validation endpoint used by the host delete workflow."""

from __future__ import annotations

from pathlib import PurePosixPath

from fastapi import APIRouter, Depends, HTTPException

from planguard.api.deps import get_delete_guard
from planguard.api.presentation import render
from planguard.api.schemas import DeleteValidationRequest, DeleteValidationResponse, MessageDetail
from planguard.service.delete_guard import DeleteGuard
from planguard.storage.filesystem import LocationOutsideProjectError
from planguard.storage.repository import UsageSearchError

router = APIRouter()


def _location(raw: str) -> PurePosixPath:
    path = PurePosixPath(raw)
    return path if path.is_absolute() else PurePosixPath("/") / path


@router.post("", response_model=DeleteValidationResponse)
def validate_delete(
    body: DeleteValidationRequest,
    guard: DeleteGuard = Depends(get_delete_guard),  # noqa: B008
) -> DeleteValidationResponse:
    """Report what deleting the artifact at ``body.path`` would break."""
    path = _location(body.path)
    if not guard.accepts(path):
        return DeleteValidationResponse(path=str(path), accepted=False)

    try:
        messages = guard.validate(path, body.data_object)
    except LocationOutsideProjectError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from None
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail=f"No artifact at '{path}'") from None
    except UsageSearchError as exc:
        raise HTTPException(status_code=502, detail=f"Usage search failed: {exc}") from None

    return DeleteValidationResponse(
        path=str(path),
        accepted=True,
        messages=[
            MessageDetail(kind=m.kind.value, level=m.level.value, text=render(m))
            for m in messages
        ],
    )
