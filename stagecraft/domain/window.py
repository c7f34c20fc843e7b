"""Value objects exchanged between the view manager and the window host."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from uuid import uuid4

from .views import ViewId

WindowId = str

# Host-specific node graph produced by the view loader; opaque to the core.
VisualTree = Any


def new_window_id() -> WindowId:
    return uuid4().hex


@dataclass(frozen=True)
class Anchors:
    """Offsets pinning a child to the four edges of its container."""

    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0

    @classmethod
    def fill(cls) -> "Anchors":
        """Anchors that stretch the child to the container bounds on all sides."""
        return cls(0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True, eq=False)
class Container:
    """Per-open wrapper holding exactly one visual tree.

    A cached tree is never handed to the host as window content directly;
    every open gets a new container so the same tree can be shown again.
    Equality is identity: two containers wrapping the same tree are distinct.
    """

    child: VisualTree
    anchors: Anchors = field(default_factory=Anchors.fill)
    container_id: str = field(default_factory=lambda: uuid4().hex)

    @property
    def children(self) -> tuple:
        return (self.child,)


@dataclass(frozen=True)
class WindowHandle:
    """Manager-side handle of a host window.

    Identity is the manager-assigned ``window_id``; the host object in
    ``native`` does not take part in equality or hashing.
    """

    window_id: WindowId
    view_id: ViewId = field(compare=False)
    title: str = field(compare=False)
    native: Any = field(default=None, compare=False, repr=False)


__all__ = [
    "Anchors",
    "Container",
    "VisualTree",
    "WindowHandle",
    "WindowId",
    "new_window_id",
]
