"""Build configuration loaded from YAML."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

import yaml

from .convert import validate_target
from .errors import ConfigurationError
from .mappings import Target
from .optimizer import Stage, builtin_stage, default_stages
from .props import SvgProps

DEFAULT_SVG_PROPS: SvgProps = {"{...props}": None}


@dataclass
class BuildConfig:
    """Settings for converting a directory of SVG files."""

    input_dir: Path
    output_dir: Path
    target: Target = "react-dom"
    svg_props: SvgProps | None = field(default_factory=lambda: dict(DEFAULT_SVG_PROPS))
    plugins: list[Stage] = field(default_factory=default_stages)
    template: str | None = None
    file_extension: str = ".js"
    # Python API only: maps an SVG file name to the output file name
    transform_filename: Callable[[str], str] | None = None
    base_dir: Path = field(default_factory=Path)


def parse_plugins(data: Any) -> list[Stage]:
    """Parse the plugins section.

    Each item is either a stage name or a mapping with ``name`` and optional
    ``params``.

    Raises:
        ConfigurationError: If an item is malformed or names no known stage.
    """
    if not isinstance(data, list):
        raise ConfigurationError("'plugins' must be a list")

    stages: list[Stage] = []
    for item in data:
        if isinstance(item, str):
            name, params = item, {}
        elif isinstance(item, dict):
            if "name" not in item:
                raise ConfigurationError("Each plugin must have 'name' field")
            name = item["name"]
            params = item.get("params") or {}
            if not isinstance(params, dict):
                raise ConfigurationError(f"Plugin '{name}': 'params' must be a mapping")
        else:
            raise ConfigurationError(f"Invalid plugin entry: {item!r}")

        try:
            stages.append(builtin_stage(str(name), params))
        except KeyError as e:
            raise ConfigurationError(e.args[0]) from e
    return stages


def parse_svg_props(data: Any) -> SvgProps | None:
    """Parse the svg_props section (None disables overrides)."""
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ConfigurationError("'svg_props' must be a mapping")
    props: SvgProps = {}
    for name, value in data.items():
        props[str(name)] = None if value is None else str(value)
    return props


def parse_config(data: Any, base_dir: Path) -> BuildConfig:
    """Build a BuildConfig from parsed YAML data.

    Args:
        data: Parsed YAML document.
        base_dir: Directory relative paths are resolved against.

    Returns:
        Parsed BuildConfig.

    Raises:
        ConfigurationError: If the format is invalid.
    """
    if not isinstance(data, dict):
        raise ConfigurationError("Config file must be a YAML dictionary")

    # Required fields
    if data.get("input_dir") is None:
        raise ConfigurationError("'input_dir' should be specified")
    if data.get("output_dir") is None:
        raise ConfigurationError("'output_dir' should be specified")

    config = BuildConfig(
        input_dir=base_dir / str(data["input_dir"]),
        output_dir=base_dir / str(data["output_dir"]),
        base_dir=base_dir,
    )

    if "target" in data:
        target = str(data["target"])
        validate_target(target)
        config.target = target  # type: ignore

    if "svg_props" in data:
        config.svg_props = parse_svg_props(data["svg_props"])

    if "plugins" in data:
        config.plugins = parse_plugins(data["plugins"])

    if "template" in data:
        config.template = str(data["template"])

    if "file_extension" in data:
        extension = str(data["file_extension"])
        if not extension.startswith("."):
            extension = "." + extension
        config.file_extension = extension

    return config


def parse_config_file(config_path: Path) -> BuildConfig:
    """Parse a YAML config file.

    Relative paths in the file are resolved against its directory.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Parsed BuildConfig.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file is not valid YAML.
        ConfigurationError: If the config format is invalid.
    """
    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    return parse_config(data, config_path.parent)
