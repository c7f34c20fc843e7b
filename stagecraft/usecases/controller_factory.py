"""Controller construction policy used by the view loader.

The loader asks the factory for an instance of the controller class a view
definition declares. Classes implementing the ``ViewController`` capability
go through ``_construct_view_controller``; everything else through
``_construct_default``. Both currently call the no-argument constructor.

``ControllerContext`` travels with the factory so a subclass can override
``_construct_view_controller`` and pass richer constructor arguments (for
example the manager or the definition locator) without changing the
``factory(controller_type)`` call signature the loader relies on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from stagecraft.domain.controllers import is_view_controller
from stagecraft.domain.errors import ControllerConstructionFailure
from stagecraft.domain.views import ResourceLocator, ViewId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ControllerContext:
    """What is being loaded when a controller is requested."""

    view_id: ViewId
    locator: ResourceLocator


class DefaultControllerFactory:
    """Callable ``controller_type -> instance`` bound to one load."""

    def __init__(self, context: ControllerContext) -> None:
        self.context = context

    def __call__(self, controller_type: type) -> Any:
        try:
            if is_view_controller(controller_type):
                return self._construct_view_controller(controller_type)
            return self._construct_default(controller_type)
        except Exception as exc:
            name = getattr(controller_type, "__name__", repr(controller_type))
            logger.error(
                "Cannot construct controller %s for view %s: %s",
                name,
                self.context.view_id.name,
                exc,
            )
            raise ControllerConstructionFailure(
                f"Cannot construct controller {name} for view {self.context.view_id.name}: {exc}",
                controller_type=controller_type if isinstance(controller_type, type) else None,
            ) from exc

    def _construct_view_controller(self, controller_type: type) -> Any:
        return controller_type()

    def _construct_default(self, controller_type: type) -> Any:
        return controller_type()


__all__ = ["ControllerContext", "DefaultControllerFactory"]
