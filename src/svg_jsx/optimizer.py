"""Plugin-driven SVG optimizer pipeline.

The pipeline parses SVG text and runs an ordered list of stages over the
resulting tree. Each stage factory receives the tree and its params and may
return a ``Visitor`` that is walked over the whole tree.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Any, Callable
from xml.parsers import expat

from .xast import (
    Comment,
    Doctype,
    Element,
    Instruction,
    Node,
    Parent,
    Root,
    detach_node,
    parse_svg,
    visit,
)

logger = logging.getLogger(__name__)


class Visitor:
    """Tree visitor returned by a stage factory.

    Subclasses override ``enter`` and/or ``exit``; both receive the node and
    its parent (None for the root).
    """

    def enter(self, node: Node, parent: Parent | None) -> None:
        pass

    def exit(self, node: Node, parent: Parent | None) -> None:
        pass


StageFactory = Callable[[Root, dict[str, Any]], Visitor | None]


@dataclass
class Stage:
    """A named transform stage."""

    name: str
    fn: StageFactory
    params: dict[str, Any] = field(default_factory=dict)


@dataclass
class OptimizeResult:
    """Optimizer outcome: either a tree or an error message."""

    tree: Root | None = None
    error: str | None = None


def optimize(
    svg: str,
    path: str | None = None,
    stages: list[Stage] | tuple[Stage, ...] = (),
) -> OptimizeResult:
    """Parse SVG text and run stages over it.

    Failures never raise; they are reported through ``OptimizeResult.error``.

    Args:
        svg: SVG document text.
        path: Source path, used by stages and in error messages.
        stages: Stages to run in order.

    Returns:
        OptimizeResult holding the final tree or the error text.
    """
    try:
        root = parse_svg(svg)
    except expat.ExpatError as e:
        location = f"{path}:" if path else ""
        return OptimizeResult(error=f"SvgParserError: {location}{e}")

    for stage in stages:
        params = dict(stage.params)
        if path is not None:
            params.setdefault("path", path)
        logger.debug("Running stage %s", stage.name)
        try:
            visitor = stage.fn(root, params)
            if visitor is not None:
                visit(root, visitor.enter, visitor.exit)
        except Exception as e:
            return OptimizeResult(error=f"Error in stage '{stage.name}': {e}")

    return OptimizeResult(tree=root)


# Built-in stages


class _RemoveNodes(Visitor):
    def __init__(self, predicate: Callable[[Node], bool]) -> None:
        self.predicate = predicate

    def enter(self, node: Node, parent: Parent | None) -> None:
        if parent is not None and self.predicate(node):
            detach_node(node, parent)


def remove_doctype(root: Root, params: dict[str, Any]) -> Visitor:
    return _RemoveNodes(lambda node: isinstance(node, Doctype))


def remove_xml_proc_inst(root: Root, params: dict[str, Any]) -> Visitor:
    return _RemoveNodes(
        lambda node: isinstance(node, Instruction) and node.name == "xml"
    )


def remove_comments(root: Root, params: dict[str, Any]) -> Visitor:
    """Remove comments, keeping legal ``<!--! ... -->`` comments."""
    return _RemoveNodes(
        lambda node: isinstance(node, Comment) and not node.value.startswith("!")
    )


def remove_metadata(root: Root, params: dict[str, Any]) -> Visitor:
    return _RemoveNodes(
        lambda node: isinstance(node, Element) and node.name == "metadata"
    )


class _ElementVisitor(Visitor):
    def __init__(self, fn: Callable[[Element, Parent], None]) -> None:
        self.fn = fn

    def enter(self, node: Node, parent: Parent | None) -> None:
        if isinstance(node, Element) and parent is not None:
            self.fn(node, parent)


def remove_xmlns(root: Root, params: dict[str, Any]) -> Visitor:
    """Remove xmlns declarations from the outermost svg element."""

    def strip(node: Element, parent: Parent) -> None:
        if node.name == "svg" and isinstance(parent, Root):
            node.attributes = {
                name: value
                for name, value in node.attributes.items()
                if name != "xmlns" and not name.startswith("xmlns:")
            }

    return _ElementVisitor(strip)


def remove_dimensions(root: Root, params: dict[str, Any]) -> Visitor:
    """Drop width/height from the outermost svg when it has a viewBox."""

    def strip(node: Element, parent: Parent) -> None:
        if node.name == "svg" and isinstance(parent, Root) and "viewBox" in node.attributes:
            node.attributes.pop("width", None)
            node.attributes.pop("height", None)

    return _ElementVisitor(strip)


_URL_REFERENCE = re.compile(r"url\(\s*(['\"]?)#([^)'\"]+)\1\s*\)")
_REFERENCE_ATTRIBUTES = ("href", "xlink:href")


def _default_prefix(path: str | None) -> str:
    if not path:
        return "prefix"
    stem = PurePath(path).stem
    return re.sub(r"[. ]", "_", stem)


def prefix_ids(root: Root, params: dict[str, Any]) -> Visitor:
    """Prefix ids and references to them so several icons can share a page.

    Params:
        prefix: Prefix text (default: file name without extension).
        delimiter: Text placed between prefix and id (default: "__").
    """
    prefix = params.get("prefix") or _default_prefix(params.get("path"))
    delimiter = params.get("delimiter", "__")

    def add_prefix(value: str) -> str:
        return f"{prefix}{delimiter}{value}"

    def rewrite(node: Element, parent: Parent) -> None:
        attributes = {}
        for name, value in node.attributes.items():
            if name == "id":
                value = add_prefix(value)
            elif name in _REFERENCE_ATTRIBUTES and value.startswith("#"):
                value = "#" + add_prefix(value[1:])
            elif "url(" in value:
                value = _URL_REFERENCE.sub(
                    lambda m: f"url({m.group(1)}#{add_prefix(m.group(2))}{m.group(1)})",
                    value,
                )
            attributes[name] = value
        node.attributes = attributes

    return _ElementVisitor(rewrite)


def rename_tags(root: Root, params: dict[str, Any]) -> Visitor:
    """Rename element tags through a ``mapping`` param."""
    mapping: dict[str, str] = params.get("mapping", {})

    def rename(node: Element, parent: Parent) -> None:
        node.name = mapping.get(node.name, node.name)

    return _ElementVisitor(rename)


def rename_attributes(root: Root, params: dict[str, Any]) -> Visitor:
    """Rename attributes through a ``mapping`` param, keeping their order."""
    mapping: dict[str, str] = params.get("mapping", {})

    def rename(node: Element, parent: Parent) -> None:
        node.attributes = {
            mapping.get(name, name): value for name, value in node.attributes.items()
        }

    return _ElementVisitor(rename)


BUILTIN_STAGES: dict[str, StageFactory] = {
    "remove-doctype": remove_doctype,
    "remove-xml-proc-inst": remove_xml_proc_inst,
    "remove-comments": remove_comments,
    "remove-metadata": remove_metadata,
    "remove-xmlns": remove_xmlns,
    "remove-dimensions": remove_dimensions,
    "prefix-ids": prefix_ids,
    "rename-tags": rename_tags,
    "rename-attributes": rename_attributes,
}

DEFAULT_STAGE_NAMES = [
    "remove-doctype",
    "remove-xml-proc-inst",
    "remove-comments",
    "remove-metadata",
    "remove-xmlns",
    "prefix-ids",
]


def builtin_stage(name: str, params: dict[str, Any] | None = None) -> Stage:
    """Create a built-in stage by name.

    Args:
        name: Registered stage name.
        params: Stage params.

    Returns:
        The configured Stage.

    Raises:
        KeyError: If no built-in stage has that name.
    """
    if name not in BUILTIN_STAGES:
        valid = ", ".join(BUILTIN_STAGES)
        raise KeyError(f"Unknown stage '{name}'. Valid stages: {valid}")
    return Stage(name=name, fn=BUILTIN_STAGES[name], params=dict(params or {}))


def default_stages() -> list[Stage]:
    """Stages used when no plugins are configured."""
    return [builtin_stage(name) for name in DEFAULT_STAGE_NAMES]
