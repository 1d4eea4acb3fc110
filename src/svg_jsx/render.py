"""Rendering of a final source tree as JSX text."""

import json
from dataclasses import dataclass, field

from .errors import RenderError
from .props import SvgProps, compose_props
from .xast import Cdata, Comment, Doctype, Element, Instruction, Root, Text


@dataclass
class RenderContext:
    """State shared by one top-level render call.

    Attributes:
        svg_props: Override props for top-level elements.
        components: Capitalized tag names in first appearance order.
    """

    svg_props: SvgProps | None = None
    components: dict[str, None] = field(default_factory=dict)

    def add_component(self, name: str) -> None:
        self.components.setdefault(name, None)


def render_jsx(root: Root, svg_props: SvgProps | None = None) -> tuple[str, list[str]]:
    """Render a source tree as JSX.

    The tree is only read, never modified.

    Args:
        root: Final tree produced by the optimizer.
        svg_props: Override props applied to top-level elements.

    Returns:
        Tuple of (JSX text, referenced component names).

    Raises:
        RenderError: If the tree contains a node of unknown kind.
    """
    context = RenderContext(svg_props=svg_props)
    jsx = render_root(root, context)
    return jsx, list(context.components)


def render_root(root: Root, context: RenderContext) -> str:
    """Render top-level nodes, wrapping them in a fragment unless exactly one
    of them produces output."""
    rendered = []
    for child in root.children:
        text = render_node(child, context, top_level=True)
        if text:
            rendered.append(text)
    if len(rendered) == 1:
        return rendered[0]
    return f"<>{''.join(rendered)}</>"


def render_element(element: Element, context: RenderContext, top_level: bool = False) -> str:
    name = element.name
    if name[:1].isupper():
        context.add_component(name)
    props = compose_props(element, context.svg_props if top_level else None)
    attributes = props.render()
    if not element.children:
        return f"<{name}{attributes} />"
    children = "".join(render_node(child, context) for child in element.children)
    return f"<{name}{attributes}>{children}</{name}>"


def render_node(node: object, context: RenderContext, top_level: bool = False) -> str:
    """Render any non-root node."""
    if isinstance(node, Element):
        return render_element(node, context, top_level=top_level)
    if isinstance(node, (Text, Cdata)):
        return "{" + json.dumps(node.value, ensure_ascii=False) + "}"
    if isinstance(node, Comment):
        # "*/" would end the JSX comment early
        value = node.value.replace("*/", "* /")
        return f"{{/* {value} */}}"
    if isinstance(node, (Doctype, Instruction)):
        return ""
    raise RenderError(f'Unexpected node type "{type(node).__name__}"')
