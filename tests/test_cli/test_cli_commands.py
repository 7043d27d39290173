"""Tests for the tailwindify command line."""

import json
from pathlib import Path

from click.testing import CliRunner

from tailwindify import __version__
from tailwindify.cli.main import cli

FIXTURES = Path(__file__).parent.parent / "fixtures"


# ---------------------------------------------------------------------------
# convert
# ---------------------------------------------------------------------------


class TestCLIConvert:
    def test_convert_prints_css(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["convert", str(FIXTURES / "simple.css"), "--rem-in-px", "16"])
        assert result.exit_code == 0
        assert result.output.startswith(".foo {\n  @apply text-center text-xs hover:blur-sm")
        assert "md:font-semibold;" in result.output

    def test_convert_json_with_config(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "convert",
                str(FIXTURES / "simple.css"),
                "--config",
                str(FIXTURES / "config.json"),
                "--json",
            ],
        )
        assert result.exit_code == 0
        (node,) = json.loads(result.output)
        assert node["selector"] == ".foo"
        assert node["classes"][:2] == ["tw-text-center", "tw-text-xs"]
        assert node["classes"][-2:] == ["hover:tw-text-base", "md:tw-font-semibold"]

    def test_convert_arbitrary_properties(self, tmp_path: Path) -> None:
        css_file = tmp_path / "input.css"
        css_file.write_text(".a { animation-delay: 200ms }")
        runner = CliRunner()
        result = runner.invoke(cli, ["convert", str(css_file), "--arbitrary-properties", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == [
            {"selector": ".a", "classes": ["[animation-delay:200ms]"]}
        ]

    def test_convert_no_reduce(self, tmp_path: Path) -> None:
        css_file = tmp_path / "input.css"
        css_file.write_text(".a { margin-top: 1rem; margin-bottom: 1rem }")
        runner = CliRunner()
        reduced = runner.invoke(cli, ["convert", str(css_file), "--json"])
        kept = runner.invoke(cli, ["convert", str(css_file), "--json", "--no-reduce"])
        assert json.loads(reduced.output)[0]["classes"] == ["my-4"]
        assert json.loads(kept.output)[0]["classes"] == ["mt-4", "mb-4"]

    def test_convert_invalid_css(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["convert", str(FIXTURES / "invalid.css")])
        assert result.exit_code == 1
        assert "Parse error" in result.output

    def test_convert_invalid_config(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")
        runner = CliRunner()
        result = runner.invoke(
            cli, ["convert", str(FIXTURES / "simple.css"), "--config", str(config_file)]
        )
        assert result.exit_code == 1
        assert "Config error" in result.output

    def test_convert_nonexistent_file(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["convert", "/nonexistent/file.css"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# reduce
# ---------------------------------------------------------------------------


class TestCLIReduce:
    def test_reduce(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["reduce", "mt-4 mr-4", "mb-4", "ml-4", "text-center"])
        assert result.exit_code == 0
        assert result.output == "text-center m-4\n"

    def test_reduce_with_separator(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["reduce", "hover:mt-4 hover:mb-4 mt-2", "--separator", ":"]
        )
        assert result.exit_code == 0
        assert sorted(result.output.split()) == ["hover:my-4", "mt-2"]

    def test_reduce_requires_classes(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["reduce"])
        assert result.exit_code != 0


class TestCLIGroup:
    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "convert" in result.output
        assert "reduce" in result.output
