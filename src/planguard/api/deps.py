"""Dependency injection for FastAPI: DeleteGuard singleton."""

from __future__ import annotations

from planguard.service.delete_guard import DeleteGuard

_delete_guard: DeleteGuard | None = None


def init_delete_guard(guard: DeleteGuard) -> None:
    """Set the global DeleteGuard (called at app startup)."""
    global _delete_guard  # noqa: PLW0603
    _delete_guard = guard


def get_delete_guard() -> DeleteGuard:
    """FastAPI ``Depends`` provider for DeleteGuard."""
    if _delete_guard is None:
        raise RuntimeError("DeleteGuard not initialised; call init_delete_guard() first")
    return _delete_guard


def reset_delete_guard() -> None:
    """Clear the global DeleteGuard (for tests)."""
    global _delete_guard  # noqa: PLW0603
    _delete_guard = None
