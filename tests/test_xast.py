"""Tests for svg_jsx.xast module."""

import pytest
from pathlib import Path
from xml.parsers import expat

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from svg_jsx.xast import (
    Cdata,
    Comment,
    Doctype,
    Element,
    Instruction,
    Root,
    Text,
    detach_node,
    parse_svg,
    visit,
)


class TestParseSvg:
    """Tests for parse_svg function."""

    def test_all_node_kinds(self):
        root = parse_svg(
            """
            <?xml version="1.0" encoding="UTF-8"?>
            <!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">
            <svg version="1.1">
              <!-- test rectangle -->
              <rect x="0" />
            </svg>
            """
        )
        instruction, doctype, svg = root.children
        assert instruction == Instruction(name="xml", value='version="1.0" encoding="UTF-8"')
        assert isinstance(doctype, Doctype)
        assert doctype.value.startswith('svg PUBLIC "-//W3C//DTD SVG 1.1//EN"')
        assert svg.name == "svg"
        assert svg.children == [
            Comment(value="test rectangle"),
            Element(name="rect", attributes={"x": "0"}),
        ]

    def test_prefixed_names_kept_verbatim(self):
        root = parse_svg(
            '<svg xmlns="http://www.w3.org/2000/svg" '
            'xmlns:xlink="http://www.w3.org/1999/xlink"><use xlink:href="#a"/></svg>'
        )
        svg = root.children[0]
        assert list(svg.attributes) == ["xmlns", "xmlns:xlink"]
        assert svg.children[0].attributes == {"xlink:href": "#a"}

    def test_attribute_order_preserved(self):
        root = parse_svg('<svg width="24" height="24" viewBox="0 0 24 24" fill="none"/>')
        assert list(root.children[0].attributes) == ["width", "height", "viewBox", "fill"]

    def test_whitespace_text_dropped(self):
        root = parse_svg("<svg>\n  <g>\n    <path d='M0 0'/>\n  </g>\n</svg>")
        svg = root.children[0]
        assert len(svg.children) == 1
        assert svg.children[0].children == [Element(name="path", attributes={"d": "M0 0"})]

    def test_text_trimmed_outside_text_elements(self):
        root = parse_svg("<svg>  stray  </svg>")
        assert root.children[0].children == [Text(value="stray")]

    def test_text_kept_inside_text_elements(self):
        root = parse_svg("<svg><text> Hello world </text></svg>")
        text = root.children[0].children[0]
        assert text.children == [Text(value=" Hello world ")]

    def test_cdata(self):
        root = parse_svg("<svg><style><![CDATA[.a{fill:red}]]></style></svg>")
        style = root.children[0].children[0]
        assert style.children == [Cdata(value=".a{fill:red}")]

    def test_top_level_comment(self):
        root = parse_svg("<!-- top level comment --><svg/>")
        assert root.children == [
            Comment(value="top level comment"),
            Element(name="svg"),
        ]

    def test_invalid_xml(self):
        with pytest.raises(expat.ExpatError):
            parse_svg("<svg><g></svg>")


class TestVisit:
    """Tests for visit and detach_node functions."""

    def test_enter_and_exit_order(self):
        root = parse_svg("<svg><g><rect/></g></svg>")
        events = []

        def enter(node, parent):
            if isinstance(node, Element):
                events.append(f"enter {node.name}")

        def exit(node, parent):
            if isinstance(node, Element):
                events.append(f"exit {node.name}")

        visit(root, enter, exit)
        assert events == [
            "enter svg",
            "enter g",
            "enter rect",
            "exit rect",
            "exit g",
            "exit svg",
        ]

    def test_detached_node_not_descended(self):
        root = parse_svg("<svg><g><rect/></g><circle/></svg>")
        seen = []

        def enter(node, parent):
            if isinstance(node, Element):
                seen.append(node.name)
                if node.name == "g":
                    detach_node(node, parent)

        visit(root, enter)
        assert seen == ["svg", "g", "circle"]
        assert [child.name for child in root.children[0].children] == ["circle"]

    def test_detach_keeps_siblings_visited(self):
        root = parse_svg("<svg><a/><b/><c/></svg>")
        seen = []

        def enter(node, parent):
            if isinstance(node, Element):
                seen.append(node.name)
                if node.name in ("a", "b"):
                    detach_node(node, parent)

        visit(root, enter)
        assert seen == ["svg", "a", "b", "c"]
        assert [child.name for child in root.children[0].children] == ["c"]

    def test_sibling_detached_ahead_is_skipped(self):
        root = parse_svg("<svg><a/><b/><c/></svg>")
        seen = []

        def enter(node, parent):
            if isinstance(node, Element):
                seen.append(node.name)
                if node.name == "a":
                    detach_node(parent.children[1], parent)

        visit(root, enter)
        assert seen == ["svg", "a", "c"]
        assert [child.name for child in root.children[0].children] == ["a", "c"]

    def test_wide_parent(self):
        svg = Element(name="svg", children=[Element(name="path") for _ in range(20000)])
        for i, child in enumerate(svg.children):
            child.attributes["i"] = str(i)
        root = Root(children=[svg])

        def enter(node, parent):
            if isinstance(node, Element) and node.name == "path":
                if int(node.attributes["i"]) % 2:
                    detach_node(node, parent)

        visit(root, enter)
        assert len(svg.children) == 10000
        assert all(int(child.attributes["i"]) % 2 == 0 for child in svg.children)

    def test_detached_flag_ignored_in_equality(self):
        a = Element(name="rect")
        b = Element(name="rect")
        detach_node(a, Root(children=[a]))
        assert a == b
