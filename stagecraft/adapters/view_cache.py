from __future__ import annotations
from typing import Dict, Iterable, Optional

from stagecraft.domain.ports import ViewCachePort
from stagecraft.domain.views import ViewId
from stagecraft.domain.window import VisualTree


class InMemoryViewCache(ViewCachePort):
    """Unbounded dict-backed cache of loaded visual trees.

    Trees live for the process lifetime; nothing is evicted.
    """

    def __init__(self) -> None:
        self._trees: Dict[ViewId, VisualTree] = {}

    def get(self, view_id: ViewId) -> Optional[VisualTree]:
        return self._trees.get(view_id)

    def put(self, view_id: ViewId, tree: VisualTree) -> None:
        if tree is None:
            raise ValueError("Cannot cache an empty visual tree.")
        self._trees[view_id] = tree

    def __contains__(self, view_id: object) -> bool:
        return view_id in self._trees

    def __len__(self) -> int:
        return len(self._trees)

    def keys(self) -> Iterable[ViewId]:
        return tuple(self._trees.keys())
