"""Static registry of the views the application can open.

Each ``ViewId`` carries the locator of its declarative definition and the
default title of the window that shows it. Values are fixed at build time.
"""

from __future__ import annotations

from enum import Enum

ResourceLocator = str


class ViewId(Enum):
    """Logical identifier for a displayable view."""

    HELLO = ("hello-view.xml", "Hello!")

    def __init__(self, definition_path: ResourceLocator, title: str) -> None:
        self.definition_path = definition_path
        self.title = title

    @classmethod
    def from_name(cls, name: str) -> "ViewId":
        """Look up a view by enum name, ignoring case.

        Raises:
            KeyError: If no view carries that name.
        """
        key = (name or "").strip().upper()
        try:
            return cls[key]
        except KeyError:
            available = ", ".join(v.name for v in cls)
            raise KeyError(f"Unknown view '{name}'. Available views: {available}") from None


def locator_for(view_id: ViewId) -> ResourceLocator:
    return view_id.definition_path


def title_for(view_id: ViewId) -> str:
    return view_id.title


__all__ = ["ResourceLocator", "ViewId", "locator_for", "title_for"]
