"""Composition of JSX attributes for an element."""

import json
from dataclasses import dataclass
from typing import Iterator, Literal

from .style import render_style_expression
from .xast import Element

EmissionKind = Literal["bare", "quoted", "expression"]

# Caller-supplied override props: None means a bare marker such as {...props}
SvgProps = dict[str, str | None]


@dataclass(frozen=True)
class Emission:
    """How a single attribute is written."""

    kind: EmissionKind
    text: str = ""

    @classmethod
    def bare(cls) -> "Emission":
        return cls(kind="bare")

    @classmethod
    def quoted(cls, value: str) -> "Emission":
        return cls(kind="quoted", text=json.dumps(value, ensure_ascii=False))

    @classmethod
    def expression(cls, text: str) -> "Emission":
        return cls(kind="expression", text=text)

    @classmethod
    def from_override(cls, value: str | None) -> "Emission":
        """Classify an override value by its shape."""
        if value is None:
            return cls.bare()
        if value.startswith("{"):
            return cls.expression(value)
        return cls.quoted(value)


class Props:
    """Ordered association list of attribute name to emission."""

    def __init__(self) -> None:
        self._entries: list[tuple[str, Emission]] = []

    def __iter__(self) -> Iterator[tuple[str, Emission]]:
        return iter(self._entries)

    def set(self, name: str, emission: Emission) -> None:
        """Set an attribute, keeping its position if it already exists."""
        for i, (entry_name, _) in enumerate(self._entries):
            if entry_name == name:
                self._entries[i] = (name, emission)
                return
        self._entries.append((name, emission))

    def move_to_end(self, name: str, emission: Emission) -> None:
        """Remove any entry with this name, then append the new one."""
        self._entries = [entry for entry in self._entries if entry[0] != name]
        self._entries.append((name, emission))

    def render(self) -> str:
        """Render as JSX attribute text, each entry preceded by a space."""
        parts = []
        for name, emission in self:
            if emission.kind == "bare":
                parts.append(f" {name}")
            else:
                parts.append(f" {name}={emission.text}")
        return "".join(parts)


def compose_props(element: Element, svg_props: SvgProps | None = None) -> Props:
    """Build the JSX attributes of an element.

    Attribute names are expected to be renamed for the target already.
    Overrides are applied after the element's own attributes; an override
    with an existing name moves that attribute to the override's position.

    Args:
        element: Element to compose attributes for.
        svg_props: Override props, given only for top-level elements.

    Returns:
        Props in emission order.
    """
    props = Props()
    for name, value in element.attributes.items():
        if name == "style":
            props.set(name, Emission.expression(render_style_expression(value)))
        else:
            props.set(name, Emission.quoted(value))

    if svg_props:
        for name, value in svg_props.items():
            props.move_to_end(name, Emission.from_override(value))

    return props
