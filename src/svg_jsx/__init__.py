"""svg-jsx - Convert SVG documents into JSX components."""

__version__ = "0.1.0"

from .convert import (
    ConversionRequest,
    ConversionResult,
    convert,
    convert_svg_to_jsx,
)
from .errors import (
    ConfigurationError,
    OptimizationError,
    RenderError,
    SvgJsxError,
)
from .mappings import VALID_TARGETS, Target
from .optimizer import (
    OptimizeResult,
    Stage,
    Visitor,
    builtin_stage,
    optimize,
)
from .config import BuildConfig, parse_config_file
from .component import (
    BuildReport,
    build_components,
    format_build_report,
)

__all__ = [
    # Conversion
    "ConversionRequest",
    "ConversionResult",
    "convert",
    "convert_svg_to_jsx",
    "Target",
    "VALID_TARGETS",
    # Errors
    "SvgJsxError",
    "ConfigurationError",
    "OptimizationError",
    "RenderError",
    # Optimizer
    "OptimizeResult",
    "Stage",
    "Visitor",
    "builtin_stage",
    "optimize",
    # Build
    "BuildConfig",
    "parse_config_file",
    "BuildReport",
    "build_components",
    "format_build_report",
]
