"""Node graph produced by the XML view loader.

A ``ViewNode`` tree is the visual tree handed back to the view manager and
cached per view. It describes widgets; the Tk host turns it into real widgets
each time the view is mounted in a window, so one cached tree can back any
number of windows.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional

LAYOUT_KINDS = ("vbox", "hbox")
LEAF_KINDS = ("label", "button", "entry")
NODE_KINDS = LAYOUT_KINDS + LEAF_KINDS
ALIGNMENTS = ("center", "start", "end")


@dataclass(eq=False)
class ViewNode:
    """One widget declaration.

    Attributes:
        kind: One of ``NODE_KINDS``.
        node_id: Controller attribute name the mounted widget is injected as.
        text: Label/button caption.
        on_action: Controller method name a button invokes.
        padding: Inner padding in pixels (layout nodes).
        spacing: Gap between children in pixels (layout nodes).
        alignment: Placement of children along the cross axis.
        children: Child nodes, only for layout kinds.
        controller: Controller instance; set on the root node only.
    """

    kind: str
    node_id: Optional[str] = None
    text: str = ""
    on_action: Optional[str] = None
    padding: int = 0
    spacing: int = 0
    alignment: str = "center"
    children: List["ViewNode"] = field(default_factory=list)
    controller: Any = None

    @property
    def is_layout(self) -> bool:
        return self.kind in LAYOUT_KINDS

    def walk(self) -> Iterator["ViewNode"]:
        yield self
        for child in self.children:
            yield from child.walk()


__all__ = ["ALIGNMENTS", "LAYOUT_KINDS", "LEAF_KINDS", "NODE_KINDS", "ViewNode"]
