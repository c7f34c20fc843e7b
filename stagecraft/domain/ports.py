from __future__ import annotations
from typing import Any, Callable, Iterable, Optional, Protocol

from .views import ResourceLocator, ViewId
from .window import Container, VisualTree

ControllerFactory = Callable[[type], Any]
CloseCallback = Callable[[], None]


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class WindowHostPort(Protocol):
    """Windowing toolkit: top-level surfaces plus the view-definition loader.

    ``load`` invokes ``controller_factory`` once per load to obtain the
    controller declared by the definition.
    """

    def create_window(
        self, content: Container, title: str, on_close: Optional[CloseCallback] = None
    ) -> Any: ...  # native window object
    def close_window(self, window: Any) -> None: ...
    def load(
        self, locator: ResourceLocator, controller_factory: ControllerFactory
    ) -> VisualTree: ...


class DefinitionSourcePort(Protocol):
    """Reads raw view-definition bytes for a locator."""

    def read(self, locator: ResourceLocator) -> bytes: ...


class ViewCachePort(Protocol):
    """Materialized visual trees keyed by view. No eviction is assumed."""

    def get(self, view_id: ViewId) -> Optional[VisualTree]: ...
    def put(self, view_id: ViewId, tree: VisualTree) -> None: ...
    def __contains__(self, view_id: object) -> bool: ...
    def __len__(self) -> int: ...
    def keys(self) -> Iterable[ViewId]: ...


class SettingsStoragePort(Protocol):
    """Persistence for user preferences."""

    def save_user_prefs(self, prefs: dict) -> None: ...
    def load_user_prefs(self) -> dict: ...
