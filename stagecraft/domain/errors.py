"""Domain-level error types for view loading and window lifecycle.

Adapters raise these instead of leaking parser, filesystem, or transport
exceptions; use cases map them to ``UseCaseError`` codes.
"""

from __future__ import annotations

from typing import Optional


class ViewLoadError(RuntimeError):
    """Base class for recoverable view-definition load failures."""

    def __init__(self, message: str, *, locator: Optional[str] = None) -> None:
        super().__init__(message)
        self.locator = locator


class ResourceNotFound(ViewLoadError):
    """The locator could not be resolved to a loadable definition."""


class MalformedDefinition(ViewLoadError):
    """The definition was read but could not be built into a visual tree."""


class ControllerConstructionFailure(RuntimeError):
    """The controller factory failed to instantiate a controller.

    Fatal for the open attempt in progress; never retried.
    """

    def __init__(self, message: str, *, controller_type: Optional[type] = None) -> None:
        super().__init__(message)
        self.controller_type = controller_type


class WrongThreadError(RuntimeError):
    """View manager state was touched from a thread other than its UI thread."""


__all__ = [
    "ControllerConstructionFailure",
    "MalformedDefinition",
    "ResourceNotFound",
    "ViewLoadError",
    "WrongThreadError",
]
