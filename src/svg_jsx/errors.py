"""Error types raised by the SVG to JSX conversion."""


class SvgJsxError(Exception):
    """Base class for all conversion errors."""


class ConfigurationError(SvgJsxError, ValueError):
    """Invalid target or build configuration."""


class OptimizationError(SvgJsxError):
    """The optimizer pipeline reported a fatal error."""


class RenderError(SvgJsxError):
    """The source tree could not be rendered as JSX."""
