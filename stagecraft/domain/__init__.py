"""Domain package exports for view identifiers, window values, and errors."""

from .controllers import ViewController, is_view_controller
from .errors import (
    ControllerConstructionFailure,
    MalformedDefinition,
    ResourceNotFound,
    ViewLoadError,
    WrongThreadError,
)
from .views import ResourceLocator, ViewId, locator_for, title_for
from .window import Anchors, Container, VisualTree, WindowHandle, WindowId, new_window_id

__all__ = [
    "Anchors",
    "Container",
    "ControllerConstructionFailure",
    "MalformedDefinition",
    "ResourceLocator",
    "ResourceNotFound",
    "ViewController",
    "ViewId",
    "ViewLoadError",
    "VisualTree",
    "WindowHandle",
    "WindowId",
    "WrongThreadError",
    "is_view_controller",
    "locator_for",
    "new_window_id",
    "title_for",
]
