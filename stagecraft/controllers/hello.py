from __future__ import annotations

from typing import Any, Optional

from stagecraft.domain.controllers import ViewController

WELCOME_TEXT = "Welcome to the stagecraft application!"


class HelloController(ViewController):
    """Handlers for ``hello-view.xml``."""

    def __init__(self) -> None:
        # injected on mount
        self.welcome_text: Optional[Any] = None
        self.clicks = 0

    def on_hello_button_click(self) -> None:
        self.clicks += 1
        if self.welcome_text is not None:
            self.welcome_text.configure(text=WELCOME_TEXT)
