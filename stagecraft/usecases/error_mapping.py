"""Translate view-loading errors into user-facing UseCaseError instances."""

from __future__ import annotations

from typing import Optional

from stagecraft.domain.errors import MalformedDefinition, ResourceNotFound
from stagecraft.domain.ports import UseCaseError


def map_view_error(exc: Exception, *, view_name: str) -> UseCaseError:
    """Map loader exceptions to stable UseCaseError codes.

    Args:
        exc: Exception raised while loading the view.
        view_name: Name of the view being opened, used in messages.

    Returns:
        UseCaseError with code ``VIEW_NOT_FOUND``, ``VIEW_MALFORMED`` or
        ``VIEW_UNAVAILABLE`` (any other loader or transport failure).
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, ResourceNotFound):
        return UseCaseError("VIEW_NOT_FOUND", _compose(f"View {view_name} not found", str(exc)))
    if isinstance(exc, MalformedDefinition):
        return UseCaseError(
            "VIEW_MALFORMED", _compose(f"View {view_name} has an invalid definition", str(exc))
        )
    return UseCaseError("VIEW_UNAVAILABLE", _compose(f"View {view_name} unavailable", str(exc)))


def _compose(base: str, hint: Optional[str]) -> str:
    hint_text = (hint or "").strip()
    if hint_text:
        return f"{base}: {hint_text}"
    return f"{base}."


__all__ = ["map_view_error"]
