"""Per-target tree transform stage.

Runs inside the optimizer pipeline after the caller's stages, so renaming
and element filtering are finished before the tree is rendered.
"""

import re
from typing import Any

from .mappings import DOM_ATTRIBUTES, NATIVE_TAGS, PREACT_ATTRIBUTES, Target
from .optimizer import Stage, Visitor
from .xast import Element, Node, Parent, Root, detach_node

_NAMESPACE_SEPARATOR = re.compile(r":(.)")


def convert_dom_attribute(name: str) -> str:
    """Rename an attribute for React DOM.

    Known SVG names come from the static table; any other namespaced name
    continues capitalized after the separator.

    Examples:
        >>> convert_dom_attribute("fill-opacity")
        'fillOpacity'
        >>> convert_dom_attribute("xmlns:title")
        'xmlnsTitle'
        >>> convert_dom_attribute("data-value")
        'data-value'
    """
    if name in DOM_ATTRIBUTES:
        return DOM_ATTRIBUTES[name]
    return _NAMESPACE_SEPARATOR.sub(lambda m: m.group(1).upper(), name)


def convert_preact_attribute(name: str) -> str | None:
    """Rename an attribute for Preact, or None if it must be dropped."""
    if name in PREACT_ATTRIBUTES:
        return PREACT_ATTRIBUTES[name]
    if ":" in name:
        return None
    return name


class ReactDomVisitor(Visitor):
    def enter(self, node: Node, parent: Parent | None) -> None:
        if isinstance(node, Element):
            node.attributes = {
                convert_dom_attribute(name): value
                for name, value in node.attributes.items()
            }


class PreactVisitor(Visitor):
    def enter(self, node: Node, parent: Parent | None) -> None:
        if not isinstance(node, Element):
            return
        attributes = {}
        for name, value in node.attributes.items():
            new_name = convert_preact_attribute(name)
            if new_name is not None:
                attributes[new_name] = value
        node.attributes = attributes


class ReactNativeSvgVisitor(Visitor):
    """Map tags to react-native-svg components, dropping unsupported ones.

    An unsupported element is removed together with its subtree.
    """

    def enter(self, node: Node, parent: Parent | None) -> None:
        if not isinstance(node, Element) or parent is None:
            return
        component = NATIVE_TAGS.get(node.name)
        if component is None:
            detach_node(node, parent)
            return
        node.name = component
        node.attributes = {
            convert_dom_attribute(name): value
            for name, value in node.attributes.items()
        }


_TARGET_VISITORS: dict[str, type[Visitor]] = {
    "react-dom": ReactDomVisitor,
    "preact": PreactVisitor,
    "react-native-svg": ReactNativeSvgVisitor,
}


def create_target_stage(target: Target) -> Stage | None:
    """Create the transform stage for a target.

    Args:
        target: Target identifier.

    Returns:
        Stage renaming/filtering the tree, or None for the custom target,
        where the caller's stages do all the work.
    """
    visitor_class = _TARGET_VISITORS.get(target)
    if visitor_class is None:
        return None

    def fn(root: Root, params: dict[str, Any]) -> Visitor:
        return visitor_class()

    return Stage(name=f"target-{target}", fn=fn)
