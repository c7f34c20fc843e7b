"""Build ``ViewNode`` trees from declarative XML view definitions.

Definition format::

    <vbox alignment="center" spacing="20" padding="20"
          controller="stagecraft.controllers.hello:HelloController">
        <label id="welcome_text"/>
        <button text="Hello!" on_action="#on_hello_button_click"/>
    </vbox>

The root element may name a controller class as ``module:Class`` (or the
dotted ``module.Class`` form). The loader resolves that class and asks the
supplied controller factory for an instance exactly once per load.
"""

from __future__ import annotations

import importlib
import logging
import xml.etree.ElementTree as ET
from typing import Any, Optional

from stagecraft.adapters.view_nodes import ALIGNMENTS, LAYOUT_KINDS, NODE_KINDS, ViewNode
from stagecraft.domain.errors import ControllerConstructionFailure, MalformedDefinition
from stagecraft.domain.ports import ControllerFactory, DefinitionSourcePort
from stagecraft.domain.views import ResourceLocator

logger = logging.getLogger(__name__)


def resolve_controller_type(spec: str, locator: Optional[ResourceLocator] = None) -> type:
    """Import the controller class named by ``module:Class`` or ``module.Class``.

    Raises:
        MalformedDefinition: If the module or class cannot be resolved.
    """
    text = (spec or "").strip()
    if ":" in text:
        module_name, _, attr = text.partition(":")
    else:
        module_name, _, attr = text.rpartition(".")
    if not module_name or not attr:
        raise MalformedDefinition(f"Invalid controller reference '{spec}'.", locator=locator)
    try:
        module = importlib.import_module(module_name)
    except Exception as exc:
        raise MalformedDefinition(
            f"Cannot import controller module '{module_name}': {exc}", locator=locator
        ) from exc
    controller_type = getattr(module, attr, None)
    if not isinstance(controller_type, type):
        raise MalformedDefinition(
            f"Controller '{attr}' not found in module '{module_name}'.", locator=locator
        )
    return controller_type


class XmlViewLoader:
    """Parse definitions read from a ``DefinitionSourcePort``."""

    def __init__(self, source: DefinitionSourcePort) -> None:
        self.source = source

    def load(self, locator: ResourceLocator, controller_factory: ControllerFactory) -> ViewNode:
        raw = self.source.read(locator)
        try:
            root_el = ET.fromstring(raw)
        except ET.ParseError as exc:
            raise MalformedDefinition(f"Cannot parse {locator}: {exc}", locator=locator) from exc

        tree = self._build(root_el, locator)
        if not tree.is_layout:
            raise MalformedDefinition(
                f"Root of {locator} must be one of {', '.join(LAYOUT_KINDS)}.", locator=locator
            )

        controller_ref = root_el.get("controller")
        if controller_ref:
            controller_type = resolve_controller_type(controller_ref, locator)
            tree.controller = self._construct(controller_factory, controller_type)
            self._check_actions(tree, locator)
        else:
            self._check_no_actions(tree, locator)
        logger.debug("Parsed %s into %d nodes", locator, sum(1 for _ in tree.walk()))
        return tree

    @staticmethod
    def _construct(controller_factory: ControllerFactory, controller_type: type) -> Any:
        try:
            return controller_factory(controller_type)
        except ControllerConstructionFailure:
            raise
        except Exception as exc:
            raise ControllerConstructionFailure(
                f"Controller factory failed for {controller_type.__name__}: {exc}",
                controller_type=controller_type,
            ) from exc

    def _build(self, element: ET.Element, locator: ResourceLocator) -> ViewNode:
        kind = element.tag.strip().lower()
        if kind not in NODE_KINDS:
            raise MalformedDefinition(f"Unknown node <{element.tag}> in {locator}.", locator=locator)

        alignment = (element.get("alignment") or "center").strip().lower()
        if alignment not in ALIGNMENTS:
            raise MalformedDefinition(
                f"Invalid alignment '{alignment}' on <{element.tag}> in {locator}.", locator=locator
            )

        on_action = element.get("on_action")
        if on_action is not None:
            on_action = on_action.strip().lstrip("#")
            if kind != "button" or not on_action:
                raise MalformedDefinition(
                    f"on_action is only valid on <button> and must name a method ({locator}).",
                    locator=locator,
                )

        node = ViewNode(
            kind=kind,
            node_id=(element.get("id") or "").strip() or None,
            text=element.get("text") or (element.text or "").strip(),
            on_action=on_action,
            padding=self._int_attr(element, "padding", locator),
            spacing=self._int_attr(element, "spacing", locator),
            alignment=alignment,
        )
        children = list(element)
        if children and kind not in LAYOUT_KINDS:
            raise MalformedDefinition(f"<{kind}> cannot have children ({locator}).", locator=locator)
        node.children = [self._build(child, locator) for child in children]
        return node

    @staticmethod
    def _int_attr(element: ET.Element, name: str, locator: ResourceLocator) -> int:
        value = element.get(name)
        if value is None or not value.strip():
            return 0
        try:
            number = int(value.strip())
        except ValueError:
            raise MalformedDefinition(
                f"Attribute {name}='{value}' on <{element.tag}> is not an integer ({locator}).",
                locator=locator,
            ) from None
        if number < 0:
            raise MalformedDefinition(f"Attribute {name} must be >= 0 ({locator}).", locator=locator)
        return number

    @staticmethod
    def _check_actions(tree: ViewNode, locator: ResourceLocator) -> None:
        controller = tree.controller
        for node in tree.walk():
            if node.on_action and not callable(getattr(controller, node.on_action, None)):
                raise MalformedDefinition(
                    f"Controller {type(controller).__name__} has no handler '{node.on_action}' ({locator}).",
                    locator=locator,
                )

    @staticmethod
    def _check_no_actions(tree: ViewNode, locator: ResourceLocator) -> None:
        for node in tree.walk():
            if node.on_action:
                raise MalformedDefinition(
                    f"Handler '{node.on_action}' declared without a controller ({locator}).",
                    locator=locator,
                )


__all__ = ["XmlViewLoader", "resolve_controller_type"]
