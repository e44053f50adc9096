# this_file: tests/test_cli.py

"""Tests for the quadicon command line interface."""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from quadicon.base import GlyphSourceError
from quadicon.cli import cli

from conftest import StaticGlyphSource


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def source(tmp_path):
    return StaticGlyphSource(helper_dir=tmp_path / ".quadicon")


class TestGenerate:
    """Test the generate command."""

    def test_generates_icon(self, runner, source, tmp_path):
        out = tmp_path / "logo.svg"
        with patch("quadicon.cli.create_glyph_source", return_value=source) as create:
            result = runner.invoke(cli, ["generate", "hi", "Home", "Indicator", "-o", str(out), "--seed", "3"])
        assert result.exit_code == 0, result.output
        assert out.exists()
        assert "[INFO] Short name: HI" in result.output
        assert "[INFO] Full name: Home Indicator" in result.output
        assert f"[INFO] Generated icon at {out}" in result.output
        create.assert_called_once_with("auto", None, None)

    def test_backend_options_forwarded(self, runner, source, tmp_path):
        with patch("quadicon.cli.create_glyph_source", return_value=source) as create:
            result = runner.invoke(
                cli,
                ["generate", "A", "App", "-o", str(tmp_path / "a.svg"), "--backend", "harfbuzz",
                 "-f", "Font.ttf", "--helper-dir", str(tmp_path / "h")],
            )
        assert result.exit_code == 0, result.output
        create.assert_called_once_with("harfbuzz", "Font.ttf", str(tmp_path / "h"))

    def test_quiet(self, runner, source, tmp_path):
        with patch("quadicon.cli.create_glyph_source", return_value=source):
            result = runner.invoke(cli, ["generate", "A", "App", "-o", str(tmp_path / "a.svg"), "-q"])
        assert result.exit_code == 0
        assert result.output == ""

    def test_verbose_reports_layout(self, runner, source, tmp_path):
        with patch("quadicon.cli.create_glyph_source", return_value=source):
            result = runner.invoke(cli, ["generate", "AB", "App", "-o", str(tmp_path / "a.svg"), "--verbose"])
        assert result.exit_code == 0
        assert "spacing" in result.output
        assert "'engine': 'static'" in result.output

    def test_same_seed_same_file(self, runner, source, tmp_path):
        with patch("quadicon.cli.create_glyph_source", return_value=source):
            for name in ("a.svg", "b.svg"):
                runner.invoke(cli, ["generate", "ABC", "App", "-o", str(tmp_path / name), "--seed", "42"])
        assert (tmp_path / "a.svg").read_text() == (tmp_path / "b.svg").read_text()

    @pytest.mark.parametrize(
        "args, message",
        [
            (["generate", "ABCD", "App"], "Short name must be at most 3 characters"),
            (["generate", "AB"], "Missing required arguments"),
            (["generate", "  ", "App"], "Short name cannot be empty"),
        ],
    )
    def test_validation_errors(self, runner, tmp_path, args, message):
        out = tmp_path / "logo.svg"
        with patch("quadicon.cli.create_glyph_source") as create:
            result = runner.invoke(cli, args + ["-o", str(out)])
        assert result.exit_code == 1
        assert f"Error: {message}" in result.output
        assert "Usage: quadicon generate" in result.output
        create.assert_not_called()
        assert not out.exists()

    def test_glyph_source_failure(self, runner, tmp_path):
        failing = StaticGlyphSource(error=GlyphSourceError("AB", "font missing", 1), helper_dir=tmp_path)
        out = tmp_path / "logo.svg"
        with patch("quadicon.cli.create_glyph_source", return_value=failing):
            result = runner.invoke(cli, ["generate", "AB", "App", "-o", str(out)])
        assert result.exit_code == 1
        assert "Error: glyph tool failed (AB): font missing" in result.output
        assert not out.exists()


class TestSetup:
    """Test the example-app setup command."""

    def test_full_flow(self, runner, source, tmp_path):
        with patch("quadicon.cli.create_glyph_source", return_value=source) as create, patch(
            "quadicon.cli.ensure_capacitor_assets"
        ) as ensure, patch("quadicon.cli.run_capacitor_assets") as assets:
            result = runner.invoke(cli, ["setup", "HI", "Home Indicator", "-p", str(tmp_path)])

        assert result.exit_code == 0, result.output
        project = tmp_path.resolve()
        assert (project / "assets" / "logo.svg").exists()
        assert "[INFO] App id: app.capgo.plugin.HomeIndicator" in result.output
        assert "[INFO] Display name: Home Indicator example app" in result.output
        assert "[INFO] Setup completed successfully." in result.output
        assert ensure.call_args.args[0] == project
        assert assets.call_args.args[0] == project
        assert create.call_args.args[2] == project / ".quadicon"

    def test_skip_flags(self, runner, source, tmp_path):
        with patch("quadicon.cli.create_glyph_source", return_value=source), patch(
            "quadicon.cli.ensure_capacitor_assets"
        ) as ensure, patch("quadicon.cli.run_capacitor_assets") as assets:
            result = runner.invoke(
                cli, ["setup", "HI", "Home", "-p", str(tmp_path), "--skip-install", "--skip-assets"]
            )
        assert result.exit_code == 0, result.output
        ensure.assert_not_called()
        assets.assert_not_called()

    def test_validation_happens_first(self, runner, tmp_path):
        with patch("quadicon.cli.ensure_capacitor_assets") as ensure:
            result = runner.invoke(cli, ["setup", "TOOLONG", "App", "-p", str(tmp_path)])
        assert result.exit_code == 1
        ensure.assert_not_called()


class TestInfo:
    """Test the info command."""

    def test_lists_palettes(self, runner):
        result = runner.invoke(cli, ["info", "--palettes"])
        assert result.exit_code == 0
        assert "#77BEF0 #FFCB61 #FF894F #EA5B6F" in result.output

    def test_lists_backends(self, runner):
        with patch("quadicon.cli.list_available", return_value=["harfbuzz"]):
            result = runner.invoke(cli, ["info", "--backends"])
        assert result.exit_code == 0
        assert "  harfbuzz" in result.output
        assert "Palettes" not in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "quadicon" in result.output
