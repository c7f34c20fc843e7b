"""Capability marker for view controllers.

A view definition names its controller class; the controller factory checks
``is_view_controller`` to pick the construction path for that class.
"""

from __future__ import annotations


class ViewController:
    """Base for per-view event handlers.

    Subclasses must be constructible without arguments. Widgets declared with
    an ``id`` in the definition are set as attributes of the same name each
    time the view is mounted, after which ``on_show`` is called.
    """

    def on_show(self) -> None:
        """Hook run after the view's widgets are mounted in a window."""
        return None


def is_view_controller(controller_type: object) -> bool:
    return isinstance(controller_type, type) and issubclass(controller_type, ViewController)


__all__ = ["ViewController", "is_view_controller"]
