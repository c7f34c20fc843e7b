from __future__ import annotations
from dataclasses import dataclass

from stagecraft.domain.ports import WindowHostPort
from stagecraft.domain.window import WindowHandle


@dataclass
class CloseWindow:
    host: WindowHostPort

    def __call__(self, handle: WindowHandle) -> None:
        self.host.close_window(handle.native)
