from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

from stagecraft.domain.errors import ControllerConstructionFailure
from stagecraft.domain.ports import ControllerFactory, UseCaseError, ViewCachePort, WindowHostPort
from stagecraft.domain.views import ViewId, locator_for
from stagecraft.domain.window import VisualTree
from stagecraft.usecases.controller_factory import ControllerContext, DefaultControllerFactory
from stagecraft.usecases.error_mapping import map_view_error

logger = logging.getLogger(__name__)

FactoryBuilder = Callable[[ControllerContext], ControllerFactory]


@dataclass
class ResolveVisualTree:
    """Return the cached tree for a view, loading and caching it on a miss.

    Load failures surface as ``UseCaseError``; a failing controller
    constructor raises ``ControllerConstructionFailure`` unchanged.
    """

    cache: ViewCachePort
    host: WindowHostPort
    factory_builder: FactoryBuilder = DefaultControllerFactory

    def __call__(self, view_id: ViewId) -> VisualTree:
        started = time.perf_counter()
        if view_id in self.cache:
            logger.info("View %s served from cache", view_id.name)
            tree = self.cache.get(view_id)
        else:
            tree = self._load(view_id)
            self.cache.put(view_id, tree)
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        logger.info("View %s resolved in %.1f ms", view_id.name, elapsed_ms)
        return tree

    def _load(self, view_id: ViewId) -> VisualTree:
        locator = locator_for(view_id)
        logger.info("Loading view %s from definition %s", view_id.name, locator)
        factory = self.factory_builder(ControllerContext(view_id=view_id, locator=locator))
        try:
            tree = self.host.load(locator, factory)
        except ControllerConstructionFailure:
            raise
        except Exception as exc:
            logger.error("Loading view %s from %s failed: %s", view_id.name, locator, exc)
            raise map_view_error(exc, view_name=view_id.name) from exc
        if tree is None:
            raise UseCaseError("VIEW_UNAVAILABLE", f"Loader returned no tree for {locator}.")
        return tree
