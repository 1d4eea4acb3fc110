"""Generation of component source files from a directory of SVG icons."""

import logging
import os
import re
import time
from dataclasses import dataclass, field
from pathlib import Path
from string import Template

from .config import BuildConfig
from .convert import ConversionRequest, convert_svg_to_jsx
from .errors import SvgJsxError
from .mappings import Target

logger = logging.getLogger(__name__)

COMMON_TEMPLATE = Template(
    """\
// Generated from $source_file

export const $component_name = (props) => {
  return (
    $jsx
  );
}
"""
)

REACT_NATIVE_SVG_TEMPLATE = Template(
    """\
// Generated from $source_file

import {$components} from 'react-native-svg'

export const $component_name = (props) => {
  return (
    $jsx
  );
}
"""
)

_INVALID_NAME_RUN = re.compile(r"[^A-Za-z0-9]+([A-Za-z0-9])?")


def pascal_case(text: str) -> str:
    """Convert text to PascalCase, dropping non-alphanumeric characters.

    Examples:
        >>> pascal_case("cog-wheel")
        'CogWheel'
        >>> pascal_case("arrow_left 2")
        'ArrowLeft2'
    """
    text = _INVALID_NAME_RUN.sub(lambda m: (m.group(1) or "").upper(), text)
    return text[:1].upper() + text[1:]


def transform_component_name(filename: str) -> str:
    """Derive a component name from an SVG file name.

    A leading digit is prefixed with an underscore since identifiers cannot
    start with one.
    """
    name = pascal_case(Path(filename).stem)
    if name[:1].isdigit():
        name = "_" + name
    return name


def transform_filename(filename: str, extension: str = ".js") -> str:
    """Derive the output file name from an SVG file name."""
    return Path(filename).stem + extension


def render_component(
    target: Target,
    source_file: str,
    target_file: str,
    component_name: str,
    jsx: str,
    components: list[str],
    template: str | None = None,
) -> str:
    """Fill a component template.

    Custom templates are ``string.Template`` texts; placeholders they do not
    use, and stray ``$`` signs, are left alone.
    """
    values = {
        "target": target,
        "source_file": source_file,
        "target_file": target_file,
        "component_name": component_name,
        "jsx": jsx,
        "components": ", ".join(components),
    }
    if template is not None:
        return Template(template).safe_substitute(values)
    if target == "react-native-svg":
        return REACT_NATIVE_SVG_TEMPLATE.substitute(values)
    return COMMON_TEMPLATE.substitute(values)


@dataclass
class BuildTarget:
    """A generated component file."""

    file: str
    component_name: str
    components: list[str] = field(default_factory=list)


@dataclass
class BuildError:
    """A source file that failed to convert."""

    file: str
    message: str


@dataclass
class BuildReport:
    """Result of building a directory."""

    targets: list[BuildTarget] = field(default_factory=list)
    errors: list[BuildError] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    elapsed_ms: float = 0.0

    @property
    def has_errors(self) -> bool:
        """Check if any file failed."""
        return len(self.errors) > 0

    @property
    def total_files(self) -> int:
        """Number of SVG files attempted."""
        return len(self.targets) + len(self.errors)


def _relative(path: Path, base_dir: Path) -> str:
    return Path(os.path.relpath(path, base_dir)).as_posix()


def build_component(svg_file: Path, config: BuildConfig) -> BuildTarget:
    """Convert one SVG file and write its component file.

    Raises:
        OSError: If reading or writing fails.
        UnicodeDecodeError: If the file is not UTF-8 text.
        SvgJsxError: If conversion fails.
    """
    source_file = _relative(svg_file, config.base_dir)
    svg = svg_file.read_text(encoding="utf-8")
    result = convert_svg_to_jsx(
        ConversionRequest(
            file=source_file,
            svg=svg,
            target=config.target,
            svg_props=config.svg_props,
            plugins=config.plugins,
        )
    )

    component_name = transform_component_name(svg_file.name)
    if config.transform_filename is not None:
        output_name = config.transform_filename(svg_file.name)
    else:
        output_name = transform_filename(svg_file.name, config.file_extension)
    output_file = config.output_dir / output_name
    component = render_component(
        target=config.target,
        source_file=source_file,
        target_file=_relative(output_file, config.base_dir),
        component_name=component_name,
        jsx=result.jsx,
        components=result.components,
        template=config.template,
    )
    config.output_dir.mkdir(parents=True, exist_ok=True)
    output_file.write_text(component, encoding="utf-8")
    logger.debug("Wrote %s", output_file)
    return BuildTarget(
        file=output_name, component_name=component_name, components=result.components
    )


def build_components(config: BuildConfig) -> BuildReport:
    """Convert every SVG file in the input directory.

    A failing file is recorded in the report and does not stop the others.

    Args:
        config: Build configuration.

    Returns:
        BuildReport with generated targets sorted by file name.

    Raises:
        FileNotFoundError: If the input directory does not exist.
    """
    start = time.perf_counter()
    report = BuildReport()

    if not config.input_dir.is_dir():
        raise FileNotFoundError(f"Input directory not found: {config.input_dir}")

    for svg_file in sorted(config.input_dir.iterdir()):
        if not svg_file.is_file():
            continue
        if svg_file.suffix.lower() != ".svg":
            logger.info("Skipping non-SVG file %s", svg_file.name)
            report.skipped.append(svg_file.name)
            continue
        try:
            report.targets.append(build_component(svg_file, config))
        except (OSError, UnicodeDecodeError, SvgJsxError) as e:
            logger.warning("Failed to convert %s: %s", svg_file.name, e)
            report.errors.append(BuildError(file=svg_file.name, message=str(e)))

    report.targets.sort(key=lambda t: t.file)
    report.elapsed_ms = (time.perf_counter() - start) * 1000
    return report


def format_build_report(report: BuildReport) -> str:
    """Format a build report as text."""
    lines: list[str] = []

    for error in report.errors:
        lines.append(f"[ERROR] {error.file}")
        for message_line in error.message.splitlines():
            lines.append(f"  {message_line}")

    for name in report.skipped:
        lines.append(f"[SKIPPED] {name}")

    if lines:
        lines.append("")

    lines.append(f"Compiled {len(report.targets)} icons in {report.elapsed_ms:.0f}ms")
    if report.has_errors:
        lines.append(f"{len(report.errors)} of {report.total_files} files failed.")

    return "\n".join(lines)
