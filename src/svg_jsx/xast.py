"""Source tree model and SVG parsing.

The tree mirrors the XML document closely: prefixed names such as
``xlink:href`` are kept verbatim, attribute order is preserved and
comments, doctype and processing instructions become their own nodes.
"""

from dataclasses import dataclass, field
from typing import Callable, Union
from xml.parsers import expat

# Elements whose text content is significant and kept untrimmed
TEXT_ELEMENTS = frozenset(
    [
        "text",
        "tspan",
        "textPath",
        "title",
        "desc",
        "style",
        "script",
    ]
)


@dataclass
class Root:
    """Document root holding top-level nodes."""

    children: list["Child"] = field(default_factory=list)


@dataclass
class Element:
    """An XML element."""

    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list["Child"] = field(default_factory=list)
    detached: bool = field(default=False, init=False, compare=False, repr=False)


@dataclass
class Text:
    """Character data."""

    value: str
    detached: bool = field(default=False, init=False, compare=False, repr=False)


@dataclass
class Cdata:
    """A CDATA section."""

    value: str
    detached: bool = field(default=False, init=False, compare=False, repr=False)


@dataclass
class Comment:
    """An XML comment (value is trimmed)."""

    value: str
    detached: bool = field(default=False, init=False, compare=False, repr=False)


@dataclass
class Doctype:
    """A document type declaration."""

    value: str
    detached: bool = field(default=False, init=False, compare=False, repr=False)


@dataclass
class Instruction:
    """A processing instruction, including the XML declaration."""

    name: str
    value: str
    detached: bool = field(default=False, init=False, compare=False, repr=False)


Child = Union[Element, Text, Cdata, Comment, Doctype, Instruction]
Parent = Union[Root, Element]
Node = Union[Root, Child]


class _TreeBuilder:
    """Collects expat events into a source tree."""

    def __init__(self) -> None:
        self.root = Root()
        self._stack: list[Parent] = [self.root]
        self._in_cdata = False

    @property
    def _current(self) -> Parent:
        return self._stack[-1]

    def _append(self, node: "Child") -> None:
        self._current.children.append(node)

    def xml_decl(self, version: str | None, encoding: str | None, standalone: int) -> None:
        parts = []
        if version:
            parts.append(f'version="{version}"')
        if encoding:
            parts.append(f'encoding="{encoding}"')
        if standalone != -1:
            parts.append(f'standalone="{"yes" if standalone else "no"}"')
        self._append(Instruction(name="xml", value=" ".join(parts)))

    def start_doctype(
        self,
        name: str,
        system_id: str | None,
        public_id: str | None,
        has_internal_subset: int,
    ) -> None:
        value = name
        if public_id:
            value += f' PUBLIC "{public_id}"'
            if system_id:
                value += f' "{system_id}"'
        elif system_id:
            value += f' SYSTEM "{system_id}"'
        self._append(Doctype(value=value))

    def start_element(self, name: str, attributes: list[str]) -> None:
        # ordered_attributes gives a flat [name, value, name, value, ...] list
        attrs = dict(zip(attributes[::2], attributes[1::2]))
        element = Element(name=name, attributes=attrs)
        self._append(element)
        self._stack.append(element)

    def end_element(self, name: str) -> None:
        self._stack.pop()

    def character_data(self, data: str) -> None:
        if self._in_cdata:
            self._append(Cdata(value=data))
            return
        current = self._current
        if isinstance(current, Element) and current.name in TEXT_ELEMENTS:
            self._append(Text(value=data))
        elif data.strip():
            self._append(Text(value=data.strip()))

    def comment(self, data: str) -> None:
        self._append(Comment(value=data.strip()))

    def processing_instruction(self, target: str, data: str) -> None:
        self._append(Instruction(name=target, value=data))

    def start_cdata(self) -> None:
        self._in_cdata = True

    def end_cdata(self) -> None:
        self._in_cdata = False


def parse_svg(text: str) -> Root:
    """Parse SVG text into a source tree.

    Namespace processing is disabled so prefixed attribute and tag names
    are kept exactly as written.

    Args:
        text: SVG document text.

    Returns:
        Root node of the parsed document.

    Raises:
        expat.ExpatError: If the text is not well-formed XML.
    """
    builder = _TreeBuilder()
    parser = expat.ParserCreate()
    parser.ordered_attributes = True
    parser.buffer_text = True
    parser.XmlDeclHandler = builder.xml_decl
    parser.StartDoctypeDeclHandler = builder.start_doctype
    parser.StartElementHandler = builder.start_element
    parser.EndElementHandler = builder.end_element
    parser.CharacterDataHandler = builder.character_data
    parser.CommentHandler = builder.comment
    parser.ProcessingInstructionHandler = builder.processing_instruction
    parser.StartCdataSectionHandler = builder.start_cdata
    parser.EndCdataSectionHandler = builder.end_cdata
    parser.Parse(text.lstrip(), True)
    return builder.root


def detach_node(node: "Child", parent: Parent) -> None:
    """Mark a node for removal from its parent.

    Meant to be called from a ``visit`` callback: the walk skips marked
    nodes and drops them from the parent's children once all of them have
    been visited, so each removal costs constant time.
    """
    node.detached = True


VisitCallback = Callable[[Node, Parent | None], None]


def visit(
    node: Node,
    enter: VisitCallback | None = None,
    exit: VisitCallback | None = None,
    parent: Parent | None = None,
) -> None:
    """Walk a tree depth-first, calling enter/exit for every node.

    Detached nodes are not entered or descended into and ``exit`` is not
    called for them.

    Args:
        node: Node to start from.
        enter: Called before a node's children are visited.
        exit: Called after a node's children are visited.
        parent: Parent of ``node`` (None for the root).
    """
    if enter is not None:
        enter(node, parent)
        if parent is not None and node.detached:
            return
    if isinstance(node, (Root, Element)):
        for child in list(node.children):
            if not child.detached:
                visit(child, enter, exit, node)
        if any(child.detached for child in node.children):
            node.children = [child for child in node.children if not child.detached]
    if exit is not None:
        exit(node, parent)
