"""Conversion of inline ``style`` attributes into JSX style objects."""

import bisect
import json
import re

import tinycss2

_HYPHEN_SEGMENT = re.compile(r"-(\w|$)")
_IMPORTANT = re.compile(r"!\s*important$", re.IGNORECASE)


def convert_style_property(name: str) -> str:
    """Convert a CSS property name into its JSX style key.

    Custom properties are kept verbatim. Vendor prefixes become capitalized
    (``-webkit-`` -> ``Webkit``) except Microsoft's, which stays lowercase.

    Examples:
        >>> convert_style_property("fill-opacity")
        'fillOpacity'
        >>> convert_style_property("-webkit-appearance")
        'WebkitAppearance'
        >>> convert_style_property("-ms-appearance")
        'msAppearance'
        >>> convert_style_property("--custom")
        '--custom'
    """
    if name.startswith("--"):
        return name
    if name.startswith("-ms-"):
        name = name[1:]
    return _HYPHEN_SEGMENT.sub(lambda m: m.group(1).upper(), name.lower())


def convert_style_to_object(style: str) -> dict[str, str]:
    """Parse a CSS declaration list into an ordered property mapping.

    Values are passed through as written (trimmed, without ``!important``).
    Malformed declarations are skipped. A repeated property keeps its first
    position and its last value.

    Args:
        style: Declaration list such as ``"fill: #000; fill-opacity: 0.5"``.

    Returns:
        Mapping of JSX style key to raw value text.
    """
    # Same newline normalization as the tinycss2 tokenizer, so token
    # positions index into this string
    source = style.replace("\r\n", "\n").replace("\r", "\n").replace("\f", "\n")
    line_starts = [0] + [i + 1 for i, char in enumerate(source) if char == "\n"]

    def offset(token) -> int:
        return line_starts[token.source_line - 1] + token.source_column - 1

    terminators = [
        offset(token)
        for token in tinycss2.parse_component_value_list(source)
        if token.type == "literal" and token.value == ";"
    ]

    result: dict[str, str] = {}
    declarations = tinycss2.parse_declaration_list(
        source, skip_comments=True, skip_whitespace=True
    )
    for declaration in declarations:
        if declaration.type != "declaration":
            continue
        value = _raw_value(source, declaration, offset, terminators)
        result[convert_style_property(declaration.name)] = value
    return result


def _raw_value(source, declaration, offset, terminators: list[int]) -> str:
    """Slice a declaration value out of the source text as written."""
    tokens = [
        token for token in declaration.value if token.type not in ("whitespace", "comment")
    ]
    if not tokens:
        return ""
    start = offset(tokens[0])
    index = bisect.bisect_right(terminators, start)
    end = terminators[index] if index < len(terminators) else len(source)
    value = source[start:end].strip()
    if declaration.important:
        value = _IMPORTANT.sub("", value).rstrip()
    return value


def render_style_expression(style: str) -> str:
    """Render a style attribute value as a JSX object expression."""
    style_object = convert_style_to_object(style)
    return "{" + json.dumps(style_object, ensure_ascii=False, separators=(",", ":")) + "}"
