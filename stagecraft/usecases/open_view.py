from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from stagecraft.domain.ports import CloseCallback, WindowHostPort
from stagecraft.domain.views import ViewId, title_for
from stagecraft.domain.window import Anchors, Container, WindowHandle, WindowId
from stagecraft.usecases.resolve_visual_tree import ResolveVisualTree


@dataclass
class OpenView:
    """Use-case showing a view in a new host window.

    The resolved tree is always wrapped in a new container anchored to all
    four edges; the cached tree itself is never window content.
    """

    resolve: ResolveVisualTree
    host: WindowHostPort

    def __call__(
        self,
        view_id: ViewId,
        window_id: WindowId,
        *,
        title: Optional[str] = None,
        on_close: Optional[CloseCallback] = None,
    ) -> WindowHandle:
        tree = self.resolve(view_id)
        container = Container(child=tree, anchors=Anchors.fill())
        window_title = title if title is not None else title_for(view_id)
        native = self.host.create_window(container, window_title, on_close)
        return WindowHandle(window_id=window_id, view_id=view_id, title=window_title, native=native)
