"""Process-wide view manager: view resolution, caching, and open windows.

Loading a definition is by far the slowest step of opening a view, so every
view's tree is cached on first open and reused afterwards. The cache is never
evicted; memory grows with the number of distinct views ever opened.

The manager is confined to the thread that constructed it (the Tk main
thread in normal runs). Only singleton creation is guarded by a lock.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, List, Optional, Tuple

from ..adapters.view_cache import InMemoryViewCache
from ..domain.errors import WrongThreadError
from ..domain.ports import UseCaseError, ViewCachePort, WindowHostPort
from ..domain.views import ViewId
from ..domain.window import VisualTree, WindowHandle, WindowId, new_window_id
from ..usecases.close_window import CloseWindow
from ..usecases.open_view import OpenView
from ..usecases.resolve_visual_tree import FactoryBuilder, ResolveVisualTree
from ..usecases.controller_factory import DefaultControllerFactory
from .composition import build_window_host

logger = logging.getLogger(__name__)

HostFactory = Callable[[], WindowHostPort]


class ViewManager:
    """Open views as windows and keep track of them.

    Call chain:
        ``stagecraft.app.main`` obtains the singleton via ``get_instance`` and
        calls ``show_hello_window``; controllers and tests call ``open_view``
        and ``close_window``.
    """

    _instance: Optional["ViewManager"] = None
    _instance_lock = threading.Lock()

    def __init__(
        self,
        host: WindowHostPort,
        *,
        cache: Optional[ViewCachePort] = None,
        factory_builder: FactoryBuilder = DefaultControllerFactory,
    ) -> None:
        """Wire use cases around a window host.

        Args:
            host: Window host that creates/closes windows and loads views.
            cache: View cache; an unbounded in-memory cache by default.
            factory_builder: Builds the controller factory for each load.
        """
        self.host = host
        self._cache: ViewCachePort = cache if cache is not None else InMemoryViewCache()
        self._windows: Dict[WindowId, WindowHandle] = {}
        self._ui_thread = threading.get_ident()
        self.last_error: Optional[UseCaseError] = None
        self.on_all_windows_closed: Optional[Callable[[], None]] = None

        self.uc_resolve = ResolveVisualTree(self._cache, host, factory_builder)
        self.uc_open = OpenView(self.uc_resolve, host)
        self.uc_close = CloseWindow(host)

    # ------------------------------------------------------------------
    # Singleton access
    # ------------------------------------------------------------------
    @classmethod
    def get_instance(cls, host_factory: Optional[HostFactory] = None) -> "ViewManager":
        """Return the process-wide manager, creating it on first call.

        Args:
            host_factory: Builds the window host on first construction only;
                ignored once the instance exists. Defaults to
                :func:`stagecraft.app.composition.build_window_host`.
        """
        instance = cls._instance
        if instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    host = host_factory() if host_factory is not None else build_window_host()
                    cls._instance = cls(host)
                    logger.debug("ViewManager created on thread %s", threading.get_ident())
                instance = cls._instance
        return instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the singleton. Intended for test teardown."""
        with cls._instance_lock:
            cls._instance = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def open_windows(self) -> List[WindowHandle]:
        """Open windows in the order they were opened."""
        return list(self._windows.values())

    @property
    def cached_views(self) -> Tuple[ViewId, ...]:
        return tuple(self._cache.keys())

    def is_open(self, handle: WindowHandle) -> bool:
        return handle.window_id in self._windows

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def show_hello_window(self) -> Optional[WindowHandle]:
        return self.open_view(ViewId.HELLO)

    def open_view(self, view_id: ViewId, title: Optional[str] = None) -> Optional[WindowHandle]:
        """Show ``view_id`` in a new window and register it.

        Returns:
            The new window's handle, or ``None`` if the view could not be
            loaded; ``last_error`` then holds the reason and no window exists.

        Raises:
            ControllerConstructionFailure: The view's controller could not be
                constructed. Nothing is registered.
            WrongThreadError: Called off the UI thread.
        """
        self._ensure_ui_thread()
        window_id = new_window_id()
        try:
            handle = self.uc_open(
                view_id,
                window_id,
                title=title,
                on_close=lambda: self._on_close_requested(window_id),
            )
        except UseCaseError as exc:
            self.last_error = exc
            logger.warning("Cannot open view %s [%s]: %s", view_id.name, exc.code, exc.message)
            return None
        self.last_error = None
        self._windows[handle.window_id] = handle
        logger.info(
            "Opened window '%s' for view %s (%d open)", handle.title, view_id.name, len(self._windows)
        )
        return handle

    def resolve_visual_tree(self, view_id: ViewId) -> Optional[VisualTree]:
        """Return the view's tree from cache, loading it on first use.

        Returns ``None`` when the definition is missing or invalid.
        """
        self._ensure_ui_thread()
        try:
            tree = self.uc_resolve(view_id)
        except UseCaseError as exc:
            self.last_error = exc
            logger.warning("View %s unavailable [%s]: %s", view_id.name, exc.code, exc.message)
            return None
        self.last_error = None
        return tree

    def close_window(self, handle: WindowHandle) -> bool:
        """Close a window opened by this manager.

        Unknown or already closed handles are ignored.

        Returns:
            ``True`` if a window was closed.
        """
        self._ensure_ui_thread()
        if handle is None or handle.window_id not in self._windows:
            logger.debug("close_window ignored unknown window %s", getattr(handle, "window_id", None))
            return False
        self.uc_close(handle)
        self._windows.pop(handle.window_id, None)
        logger.info("Closed window '%s' (%d open)", handle.title, len(self._windows))
        if not self._windows and self.on_all_windows_closed is not None:
            self.on_all_windows_closed()
        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _on_close_requested(self, window_id: WindowId) -> None:
        handle = self._windows.get(window_id)
        if handle is not None:
            self.close_window(handle)

    def _ensure_ui_thread(self) -> None:
        if threading.get_ident() != self._ui_thread:
            raise WrongThreadError(
                "ViewManager must only be used from the thread that created it."
            )


__all__ = ["ViewManager"]
