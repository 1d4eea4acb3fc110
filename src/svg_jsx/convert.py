"""SVG to JSX conversion entry point."""

import logging
from dataclasses import dataclass, field
from typing import Any

from .errors import ConfigurationError, OptimizationError, RenderError
from .mappings import VALID_TARGETS, Target
from .optimizer import Stage, Visitor, optimize
from .props import SvgProps
from .render import render_jsx
from .targets import create_target_stage
from .xast import Root

logger = logging.getLogger(__name__)


@dataclass
class ConversionRequest:
    """Input of a single conversion.

    Attributes:
        file: Source path, used for diagnostics only.
        svg: SVG document text.
        target: Rendering convention.
        svg_props: Override props for the top-level element. A None value
            is emitted bare, a value starting with ``{`` as a raw
            expression, anything else as a quoted string.
        plugins: Optimizer stages run before the target stage.
    """

    file: str
    svg: str
    target: Target = "react-dom"
    svg_props: SvgProps | None = None
    plugins: list[Stage] = field(default_factory=list)


@dataclass
class ConversionResult:
    """Output of a single conversion."""

    jsx: str
    components: list[str] = field(default_factory=list)


def validate_target(target: str) -> None:
    """Raise ConfigurationError unless target is a known identifier."""
    if target not in VALID_TARGETS:
        raise ConfigurationError(
            f'Target "{target}" is not valid. '
            f"Use one of the following: {', '.join(VALID_TARGETS)}."
        )


class _TreeExtractor:
    """Captures the final tree as the last optimizer stage."""

    def __init__(self) -> None:
        self.tree: Root | None = None

    def stage(self) -> Stage:
        return Stage(name="extract-tree", fn=self._extract)

    def _extract(self, root: Root, params: dict[str, Any]) -> Visitor | None:
        self.tree = root
        return None


def convert_svg_to_jsx(request: ConversionRequest) -> ConversionResult:
    """Convert an SVG document into JSX.

    Args:
        request: Conversion input.

    Returns:
        ConversionResult with the JSX text and referenced component names.

    Raises:
        ConfigurationError: If the target is unknown.
        OptimizationError: If the optimizer fails; the message is its own.
        RenderError: If rendering fails; the source file is appended.
    """
    validate_target(request.target)

    extractor = _TreeExtractor()
    stages = list(request.plugins)
    target_stage = create_target_stage(request.target)
    if target_stage is not None:
        stages.append(target_stage)
    stages.append(extractor.stage())

    result = optimize(request.svg, path=request.file, stages=stages)
    if result.error is not None:
        raise OptimizationError(result.error)
    if extractor.tree is None:
        raise RenderError(f"Optimizer produced no tree\nin {request.file}")

    try:
        jsx, components = render_jsx(extractor.tree, request.svg_props)
    except Exception as e:
        raise RenderError(f"{e}\nin {request.file}") from e

    logger.debug(
        "Converted %s (%s, %d components)", request.file, request.target, len(components)
    )
    return ConversionResult(jsx=jsx, components=components)


def convert(
    file: str,
    svg: str,
    target: Target = "react-dom",
    svg_props: SvgProps | None = None,
    plugins: list[Stage] | None = None,
) -> ConversionResult:
    """Keyword form of ``convert_svg_to_jsx``."""
    return convert_svg_to_jsx(
        ConversionRequest(
            file=file,
            svg=svg,
            target=target,
            svg_props=svg_props,
            plugins=list(plugins or []),
        )
    )
