from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from stagecraft.adapters.definition_source import DefinitionSource
from stagecraft.adapters.xml_view_loader import XmlViewLoader
from stagecraft.domain.ports import CloseCallback, ControllerFactory, WindowHostPort
from stagecraft.domain.views import ResourceLocator
from stagecraft.domain.window import Container, VisualTree

LoadFn = Callable[[ResourceLocator, ControllerFactory], VisualTree]


@dataclass(eq=False)
class RecordedWindow:
    """Window created by ``InMemoryWindowHost``."""

    number: int
    content: Container
    title: str
    on_close: Optional[CloseCallback] = None
    closed: bool = False


@dataclass
class InMemoryWindowHost(WindowHostPort):
    """Offline substitute for ``TkWindowHost`` used by tests and headless runs.

    ``load_fn`` defaults to the XML loader over the bundled resources, so
    headless runs still parse real definitions.
    """

    load_fn: Optional[LoadFn] = None

    def __post_init__(self) -> None:
        self.windows: List[RecordedWindow] = []
        self.load_calls: List[ResourceLocator] = []
        self.close_calls: List[RecordedWindow] = []
        if self.load_fn is None:
            self.load_fn = XmlViewLoader(DefinitionSource()).load

    # ---------- WindowHostPort ----------

    def load(self, locator: ResourceLocator, controller_factory: ControllerFactory) -> VisualTree:
        self.load_calls.append(locator)
        return self.load_fn(locator, controller_factory)

    def create_window(
        self, content: Container, title: str, on_close: Optional[CloseCallback] = None
    ) -> RecordedWindow:
        window = RecordedWindow(
            number=len(self.windows) + 1, content=content, title=title, on_close=on_close
        )
        self.windows.append(window)
        return window

    def close_window(self, window: Any) -> None:
        self.close_calls.append(window)
        window.closed = True

    # ---------- Test helpers ----------

    def request_close(self, window: RecordedWindow) -> None:
        """Simulate the user pressing the window's close button."""
        if window.on_close is not None:
            window.on_close()
        else:
            self.close_window(window)
