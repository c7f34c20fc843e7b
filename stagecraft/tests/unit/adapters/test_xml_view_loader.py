from __future__ import annotations

from collections import OrderedDict
from typing import Dict, List

import pytest

from stagecraft.adapters.definition_source import DefinitionSource
from stagecraft.adapters.view_nodes import ViewNode
from stagecraft.adapters.xml_view_loader import XmlViewLoader, resolve_controller_type
from stagecraft.controllers.hello import HelloController
from stagecraft.domain.errors import (
    ControllerConstructionFailure,
    MalformedDefinition,
    ResourceNotFound,
)


class _SourceStub:
    def __init__(self, documents: Dict[str, str]) -> None:
        self._documents = documents
        self.reads: List[str] = []

    def read(self, locator: str) -> bytes:
        self.reads.append(locator)
        if locator not in self._documents:
            raise ResourceNotFound(f"missing {locator}", locator=locator)
        return self._documents[locator].encode("utf-8")


class _RecordingFactory:
    def __init__(self) -> None:
        self.requested: List[type] = []

    def __call__(self, controller_type: type):
        self.requested.append(controller_type)
        return controller_type()


def _load(xml: str, factory=None) -> ViewNode:
    loader = XmlViewLoader(_SourceStub({"view.xml": xml}))
    return loader.load("view.xml", factory or _RecordingFactory())


def test_bundled_hello_view_parses_with_controller():
    loader = XmlViewLoader(DefinitionSource())
    factory = _RecordingFactory()

    tree = loader.load("hello-view.xml", factory)

    assert factory.requested == [HelloController]
    assert isinstance(tree.controller, HelloController)
    assert tree.kind == "vbox"
    assert tree.alignment == "center"
    assert tree.spacing == 20
    assert tree.padding == 20
    assert [child.kind for child in tree.children] == ["label", "button"]
    assert tree.children[0].node_id == "welcome_text"
    button = tree.children[1]
    assert button.text == "Hello!"
    assert button.on_action == "on_hello_button_click"


def test_definition_without_controller_does_not_call_factory():
    factory = _RecordingFactory()
    tree = _load('<hbox><label text="a"/><entry id="name"/></hbox>', factory)

    assert factory.requested == []
    assert tree.controller is None
    assert [n.kind for n in tree.walk()] == ["hbox", "label", "entry"]


def test_plain_controller_class_is_accepted():
    factory = _RecordingFactory()
    tree = _load('<vbox controller="collections:OrderedDict"><label/></vbox>', factory)

    assert factory.requested == [OrderedDict]
    assert isinstance(tree.controller, OrderedDict)


@pytest.mark.parametrize(
    "xml",
    [
        "<vbox><label>",
        "<grid/>",
        '<vbox><slider/></vbox>',
        '<vbox padding="wide"/>',
        '<vbox spacing="-3"/>',
        '<vbox alignment="middle"/>',
        '<label text="root must be a layout"/>',
        '<vbox><label><label/></label></vbox>',
        '<vbox><label on_action="#go"/></vbox>',
        '<vbox><button on_action="#go"/></vbox>',
        '<vbox controller="collections:OrderedDict"><button on_action="#missing"/></vbox>',
    ],
)
def test_invalid_definitions_raise_malformed(xml):
    with pytest.raises(MalformedDefinition):
        _load(xml)


def test_unresolvable_controller_is_malformed_and_factory_not_called():
    factory = _RecordingFactory()
    with pytest.raises(MalformedDefinition):
        _load('<vbox controller="stagecraft.no_such_module:Nope"/>', factory)
    with pytest.raises(MalformedDefinition):
        _load('<vbox controller="stagecraft.controllers.hello:Nope"/>', factory)
    assert factory.requested == []


def test_factory_error_is_wrapped_as_construction_failure():
    def failing_factory(controller_type):
        raise ValueError("no")

    with pytest.raises(ControllerConstructionFailure) as excinfo:
        _load('<vbox controller="collections:OrderedDict"/>', failing_factory)
    assert excinfo.value.controller_type is OrderedDict
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_missing_resource_propagates_resource_not_found():
    loader = XmlViewLoader(_SourceStub({}))
    with pytest.raises(ResourceNotFound):
        loader.load("absent.xml", _RecordingFactory())


def test_resolve_controller_type_accepts_dotted_form():
    assert resolve_controller_type("stagecraft.controllers.hello.HelloController") is HelloController
    with pytest.raises(MalformedDefinition):
        resolve_controller_type("NoModule")
