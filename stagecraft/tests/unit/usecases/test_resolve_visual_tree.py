from __future__ import annotations

import logging
from typing import List

import pytest

from stagecraft.adapters.view_cache import InMemoryViewCache
from stagecraft.adapters.window_host_mock import InMemoryWindowHost
from stagecraft.domain.errors import ControllerConstructionFailure, MalformedDefinition, ResourceNotFound
from stagecraft.domain.ports import UseCaseError
from stagecraft.domain.views import ViewId
from stagecraft.usecases.controller_factory import ControllerContext, DefaultControllerFactory
from stagecraft.usecases.resolve_visual_tree import ResolveVisualTree

LOGGER = "stagecraft.usecases.resolve_visual_tree"


class _LoaderStub:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: List[str] = []
        self.factories: List[object] = []

    def __call__(self, locator, controller_factory):
        self.calls.append(locator)
        self.factories.append(controller_factory)
        if self.error is not None:
            raise self.error
        return {"tree-for": locator}


def _resolver(loader: _LoaderStub) -> ResolveVisualTree:
    return ResolveVisualTree(cache=InMemoryViewCache(), host=InMemoryWindowHost(load_fn=loader))


def test_miss_loads_and_caches_then_hit_reuses(caplog):
    caplog.set_level(logging.INFO, logger=LOGGER)
    loader = _LoaderStub()
    resolve = _resolver(loader)

    first = resolve(ViewId.HELLO)
    second = resolve(ViewId.HELLO)

    assert first is second
    assert loader.calls == ["hello-view.xml"]
    assert ViewId.HELLO in resolve.cache
    messages = [r.getMessage() for r in caplog.records]
    assert any("Loading view HELLO" in m for m in messages)
    assert any("served from cache" in m for m in messages)
    assert sum("resolved in" in m for m in messages) == 2


def test_factory_receives_view_context():
    loader = _LoaderStub()
    _resolver(loader)(ViewId.HELLO)

    factory = loader.factories[0]
    assert isinstance(factory, DefaultControllerFactory)
    assert factory.context == ControllerContext(view_id=ViewId.HELLO, locator="hello-view.xml")


@pytest.mark.parametrize(
    "error, code",
    [
        (ResourceNotFound("gone"), "VIEW_NOT_FOUND"),
        (MalformedDefinition("bad"), "VIEW_MALFORMED"),
        (OSError("disk"), "VIEW_UNAVAILABLE"),
    ],
)
def test_load_failures_become_use_case_errors_and_are_not_cached(error, code):
    loader = _LoaderStub(error)
    resolve = _resolver(loader)

    with pytest.raises(UseCaseError) as excinfo:
        resolve(ViewId.HELLO)
    assert excinfo.value.code == code
    assert len(resolve.cache) == 0

    with pytest.raises(UseCaseError):
        resolve(ViewId.HELLO)
    assert len(loader.calls) == 2


def test_controller_construction_failure_propagates():
    loader = _LoaderStub(ControllerConstructionFailure("ctor"))
    resolve = _resolver(loader)

    with pytest.raises(ControllerConstructionFailure):
        resolve(ViewId.HELLO)
    assert len(resolve.cache) == 0


def test_loader_returning_nothing_is_unavailable():
    resolve = ResolveVisualTree(
        cache=InMemoryViewCache(),
        host=InMemoryWindowHost(load_fn=lambda locator, factory: None),
    )
    with pytest.raises(UseCaseError) as excinfo:
        resolve(ViewId.HELLO)
    assert excinfo.value.code == "VIEW_UNAVAILABLE"
