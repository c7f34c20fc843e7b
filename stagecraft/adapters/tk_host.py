"""
TkWindowHost
------------
Tkinter implementation of the window host port. Each window is a
``tk.Toplevel`` of a shared (usually withdrawn) root. The container passed
by the view manager becomes a ``ttk.Frame`` filling the window, and the
cached ``ViewNode`` tree is materialized into fresh widgets inside it.

Notes:
- Tk widgets cannot be reparented, so the cached object is the node graph,
  not the widgets. Every mount builds new widgets and keeps a per-window
  ``{node_id: widget}`` map. The shared controller is re-pointed at a
  window's widgets whenever one of its buttons fires, and at a surviving
  window when one closes, so it never holds destroyed widgets.
- Must be driven from the thread that created the Tk root.
"""
from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from stagecraft.adapters.view_nodes import ViewNode
from stagecraft.adapters.xml_view_loader import XmlViewLoader
from stagecraft.domain.ports import CloseCallback, ControllerFactory, WindowHostPort
from stagecraft.domain.views import ResourceLocator
from stagecraft.domain.window import Container, VisualTree

logger = logging.getLogger(__name__)

# Cross-axis sticky values per layout direction and alignment.
_STICKY = {
    "vbox": {"center": "", "start": "w", "end": "e"},
    "hbox": {"center": "", "start": "n", "end": "s"},
}


class TkWindowHost(WindowHostPort):
    """Top-level windows and view loading on a Tk interpreter."""

    def __init__(self, root: tk.Misc, loader: XmlViewLoader, *, min_size: tuple = (320, 240)) -> None:
        """Bind the host to a Tk root and a view loader.

        Args:
            root: Tk root that owns every created ``Toplevel``.
            loader: Loader used by :meth:`load`.
            min_size: Minimum ``(width, height)`` applied to new windows.
        """
        self.root = root
        self.loader = loader
        self.min_size = min_size
        # window -> (controller, that window's widgets by node id)
        self._mounts: Dict[Any, Tuple[Any, Dict[str, tk.Widget]]] = {}

    # ------------------------------------------------------------------
    # WindowHostPort
    # ------------------------------------------------------------------
    def load(self, locator: ResourceLocator, controller_factory: ControllerFactory) -> VisualTree:
        return self.loader.load(locator, controller_factory)

    def create_window(
        self, content: Container, title: str, on_close: Optional[CloseCallback] = None
    ) -> tk.Toplevel:
        win = tk.Toplevel(self.root)
        win.title(title)
        win.resizable(True, True)
        win.minsize(*self.min_size)
        win.rowconfigure(0, weight=1)
        win.columnconfigure(0, weight=1)
        try:
            self._mount(win, content)
        except Exception:
            self._unmount(win)
            win.destroy()
            raise
        win.protocol("WM_DELETE_WINDOW", on_close or (lambda: self.close_window(win)))
        return win

    def close_window(self, window: Any) -> None:
        self._unmount(window)
        try:
            exists = bool(window.winfo_exists())
        except tk.TclError:
            exists = False
        if exists:
            window.destroy()
        else:
            logger.debug("Window %s already destroyed", window)

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------
    def run(self) -> None:
        self.root.mainloop()

    def quit(self) -> None:
        self.root.quit()

    # ------------------------------------------------------------------
    # Materialization
    # ------------------------------------------------------------------
    def _mount(self, win: tk.Toplevel, content: Container) -> None:
        frame = ttk.Frame(win)
        frame.grid(row=0, column=0, sticky="nsew")
        frame.rowconfigure(0, weight=1)
        frame.columnconfigure(0, weight=1)

        tree = content.child
        controller = getattr(tree, "controller", None)
        widgets: Dict[str, tk.Widget] = {}
        widget = self._build(frame, tree, controller, widgets)
        anchors = content.anchors
        widget.grid(
            row=0,
            column=0,
            sticky="nsew",
            padx=(int(anchors.left), int(anchors.right)),
            pady=(int(anchors.top), int(anchors.bottom)),
        )
        if controller is None:
            return
        self._mounts[win] = (controller, widgets)
        _inject(controller, widgets)
        if callable(getattr(controller, "on_show", None)):
            controller.on_show()

    def _unmount(self, window: Any) -> None:
        mount = self._mounts.pop(window, None)
        if mount is None:
            return
        controller, widgets = mount
        # Point the controller at the newest window still showing this view.
        for other_controller, other_widgets in reversed(list(self._mounts.values())):
            if other_controller is controller:
                _inject(controller, other_widgets)
                return
        _inject(controller, dict.fromkeys(widgets))

    def _build(
        self, parent: tk.Widget, node: ViewNode, controller: Any, widgets: Dict[str, tk.Widget]
    ) -> tk.Widget:
        if node.is_layout:
            widget = ttk.Frame(parent, padding=node.padding)
            self._layout_children(widget, node, controller, widgets)
        elif node.kind == "label":
            widget = ttk.Label(parent, text=node.text)
        elif node.kind == "button":
            command = _action(controller, node.on_action, widgets) if node.on_action else None
            widget = ttk.Button(parent, text=node.text, command=command)
        elif node.kind == "entry":
            widget = ttk.Entry(parent)
        else:
            raise ValueError(f"Unsupported node kind: {node.kind}")
        if node.node_id:
            widgets[node.node_id] = widget
        return widget

    def _layout_children(
        self, frame: ttk.Frame, node: ViewNode, controller: Any, widgets: Dict[str, tk.Widget]
    ) -> None:
        sticky = _STICKY[node.kind][node.alignment]
        vertical = node.kind == "vbox"
        if vertical:
            frame.columnconfigure(0, weight=1)
        else:
            frame.rowconfigure(0, weight=1)
        for index, child in enumerate(node.children):
            gap = (node.spacing if index else 0, 0)
            widget = self._build(frame, child, controller, widgets)
            if vertical:
                widget.grid(row=index, column=0, sticky=sticky, pady=gap)
            else:
                widget.grid(row=0, column=index, sticky=sticky, padx=gap)


def _inject(controller: Any, widgets: Mapping[str, Optional[tk.Widget]]) -> None:
    for node_id, widget in widgets.items():
        setattr(controller, node_id, widget)


def _action(controller: Any, handler: str, widgets: Dict[str, tk.Widget]) -> Callable[[], Any]:
    """Button command that runs ``handler`` against its own window's widgets."""

    def command() -> Any:
        _inject(controller, widgets)
        return getattr(controller, handler)()

    return command


__all__ = ["TkWindowHost"]
