"""Tests for svg_jsx.component module."""

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from svg_jsx.component import (
    BuildError,
    BuildReport,
    BuildTarget,
    build_components,
    format_build_report,
    pascal_case,
    render_component,
    transform_component_name,
    transform_filename,
)
from svg_jsx.config import parse_config_file

COG_SVG = (
    '<svg width="24" height="24" viewBox="0 0 24 24" '
    'xmlns="http://www.w3.org/2000/svg"><circle cx="12" cy="12" r="10"/></svg>'
)


class TestNames:
    """Tests for component and file name derivation."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("cog", "Cog"),
            ("cog-wheel", "CogWheel"),
            ("arrow_left 2", "ArrowLeft2"),
            ("--leading", "Leading"),
            ("trailing-", "Trailing"),
        ],
    )
    def test_pascal_case(self, text, expected):
        assert pascal_case(text) == expected

    def test_component_name(self):
        assert transform_component_name("cog-wheel.svg") == "CogWheel"

    def test_component_name_leading_digit(self):
        assert transform_component_name("1st-place.svg") == "_1stPlace"

    def test_filename(self):
        assert transform_filename("cog-wheel.svg") == "cog-wheel.js"
        assert transform_filename("cog.svg", ".tsx") == "cog.tsx"


class TestRenderComponent:
    """Tests for render_component function."""

    def test_common_template(self):
        text = render_component(
            target="react-dom",
            source_file="input/cog.svg",
            target_file="output/cog.js",
            component_name="Cog",
            jsx="<svg />",
            components=[],
        )
        assert text == (
            "// Generated from input/cog.svg\n"
            "\n"
            "export const Cog = (props) => {\n"
            "  return (\n"
            "    <svg />\n"
            "  );\n"
            "}\n"
        )

    def test_react_native_svg_template_imports_components(self):
        text = render_component(
            target="react-native-svg",
            source_file="input/cog.svg",
            target_file="output/cog.js",
            component_name="Cog",
            jsx="<Svg><Circle /></Svg>",
            components=["Svg", "Circle"],
        )
        assert "import {Svg, Circle} from 'react-native-svg'\n" in text

    def test_custom_template(self):
        text = render_component(
            target="custom",
            source_file="input/cog.svg",
            target_file="output/cog.js",
            component_name="Cog",
            jsx="<Svg />",
            components=["Svg"],
            template="import {$components} from 'react-custom'\n"
            "export const $component_name = () => `${x}` && $jsx;\n",
        )
        assert text == (
            "import {Svg} from 'react-custom'\n"
            "export const Cog = () => `${x}` && <Svg />;\n"
        )


class TestBuildComponents:
    """Tests for build_components function."""

    @pytest.fixture
    def project(self, tmp_path) -> Path:
        input_dir = tmp_path / "input"
        input_dir.mkdir()
        (input_dir / "cog.svg").write_text(COG_SVG)
        config_file = tmp_path / "svg-jsx.yaml"
        config_file.write_text("input_dir: ./input\noutput_dir: ./output\n")
        return config_file

    def test_default_config(self, project, tmp_path):
        report = build_components(parse_config_file(project))
        assert not report.has_errors
        assert report.targets == [BuildTarget(file="cog.js", component_name="Cog")]
        assert (tmp_path / "output" / "cog.js").read_text() == (
            "// Generated from input/cog.svg\n"
            "\n"
            "export const Cog = (props) => {\n"
            "  return (\n"
            '    <svg width="24" height="24" viewBox="0 0 24 24" {...props}>'
            '<circle cx="12" cy="12" r="10" /></svg>\n'
            "  );\n"
            "}\n"
        )

    def test_failures_isolated(self, project, tmp_path):
        (tmp_path / "input" / "broken.svg").write_text("<svg><g></svg>")
        (tmp_path / "input" / "notes.txt").write_text("not an icon")
        report = build_components(parse_config_file(project))
        assert report.has_errors
        assert [target.file for target in report.targets] == ["cog.js"]
        assert [error.file for error in report.errors] == ["broken.svg"]
        assert report.skipped == ["notes.txt"]
        assert report.total_files == 2
        assert not (tmp_path / "output" / "broken.js").exists()

    def test_undecodable_file_isolated(self, project, tmp_path):
        (tmp_path / "input" / "b.svg").write_bytes(b"<svg>\xff\xfe</svg>")
        (tmp_path / "input" / "d.svg").write_text("<svg/>")
        report = build_components(parse_config_file(project))
        assert [error.file for error in report.errors] == ["b.svg"]
        assert "utf-8" in report.errors[0].message
        assert [target.file for target in report.targets] == ["cog.js", "d.js"]
        assert (tmp_path / "output" / "d.js").exists()

    def test_transform_filename_hook(self, project, tmp_path):
        config = parse_config_file(project)
        config.transform_filename = lambda name: f"Icon{transform_component_name(name)}.jsx"
        report = build_components(config)
        assert [target.file for target in report.targets] == ["IconCog.jsx"]
        assert (tmp_path / "output" / "IconCog.jsx").exists()
        assert not (tmp_path / "output" / "cog.js").exists()

    def test_targets_sorted(self, project, tmp_path):
        (tmp_path / "input" / "arrow.svg").write_text("<svg/>")
        report = build_components(parse_config_file(project))
        assert [target.file for target in report.targets] == ["arrow.js", "cog.js"]

    def test_react_native_svg_components(self, project, tmp_path):
        project.write_text(
            "input_dir: ./input\noutput_dir: ./output\ntarget: react-native-svg\n"
        )
        report = build_components(parse_config_file(project))
        assert report.targets[0].components == ["Svg", "Circle"]
        output = (tmp_path / "output" / "cog.js").read_text()
        assert "import {Svg, Circle} from 'react-native-svg'" in output

    def test_missing_input_dir(self, tmp_path):
        config_file = tmp_path / "svg-jsx.yaml"
        config_file.write_text("input_dir: ./nowhere\noutput_dir: ./output\n")
        with pytest.raises(FileNotFoundError):
            build_components(parse_config_file(config_file))


class TestFormatBuildReport:
    """Tests for format_build_report function."""

    def test_success(self):
        report = BuildReport(
            targets=[BuildTarget(file="cog.js", component_name="Cog")], elapsed_ms=12.4
        )
        assert format_build_report(report) == "Compiled 1 icons in 12ms"

    def test_errors_listed(self):
        report = BuildReport(
            errors=[BuildError(file="broken.svg", message="bad\nin input/broken.svg")],
            skipped=["notes.txt"],
            elapsed_ms=3,
        )
        assert format_build_report(report) == (
            "[ERROR] broken.svg\n"
            "  bad\n"
            "  in input/broken.svg\n"
            "[SKIPPED] notes.txt\n"
            "\n"
            "Compiled 0 icons in 3ms\n"
            "1 of 1 files failed."
        )
