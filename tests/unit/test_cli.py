"""Unit tests for CLI commands.

This module tests the command-line interface for template-renderers including
the main group, single-value rendering, template rendering and configuration
validation.
"""

import json
from pathlib import Path

import pytest
import requests
from click.testing import CliRunner

from template_renderers import __version__
from template_renderers.cli.main import cli
from template_renderers.cli.render_commands import build_render_source
from template_renderers.cli.template_commands import content_type_for
from template_renderers.template_engine import ContentType


@pytest.fixture
def quiet_config(tmp_path: Path, clean_env) -> Path:
    """Configuration file logging warnings only, to keep CLI output clean."""
    config_file = tmp_path / "quiet.json"
    config_file.write_text(
        json.dumps(
            {
                "rendering": {"timezone": "UTC"},
                "logging": {"level": "WARNING", "log_file": str(tmp_path / "cli.log")},
            }
        )
    )
    return config_file


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestMainCLI:
    """Test cases for main CLI entry point."""

    def test_cli_help(self, runner):
        # Act
        result = runner.invoke(cli, ["--help"])

        # Assert
        assert result.exit_code == 0
        assert "Template Renderers" in result.output
        assert "--verbose" in result.output
        assert "--redact-card-numbers" in result.output

    def test_cli_version_option(self, runner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "template-renderers" in result.output
        assert __version__ in result.output

    def test_cli_version_command(self, runner, quiet_config):
        result = runner.invoke(cli, ["--config", str(quiet_config), "version"])

        assert result.exit_code == 0
        assert f"template-renderers version {__version__}" in result.output

    def test_cli_invalid_config_exits(self, runner, tmp_path, clean_env):
        # Arrange
        config_file = tmp_path / "bad.json"
        config_file.write_text("{not json")

        # Act
        result = runner.invoke(cli, ["--config", str(config_file), "list"])

        # Assert
        assert result.exit_code == 1
        assert "Error loading configuration" in result.output

    def test_cli_log_file_option(self, runner, quiet_config, tmp_path):
        log_file = tmp_path / "override.log"

        result = runner.invoke(
            cli,
            ["--config", str(quiet_config), "--log-file", str(log_file), "render", "uppercase", "x"],
        )

        assert result.exit_code == 0
        assert log_file.exists()


class TestRenderCommand:
    """Test the render command."""

    def test_render_uppercase(self, runner, quiet_config):
        # Act
        result = runner.invoke(
            cli, ["--config", str(quiet_config), "render", "uppercase", "hello world"]
        )

        # Assert
        assert result.exit_code == 0
        assert result.output == "HELLO WORLD\n"

    def test_render_with_properties(self, runner, quiet_config):
        result = runner.invoke(
            cli,
            [
                "--config", str(quiet_config),
                "render", "mask", "4342256562440179",
                "--properties", "unmasked=4\nmask=#",
            ],
        )

        assert result.exit_code == 0
        assert result.output == "############0179\n"

    def test_render_content_type(self, runner, quiet_config):
        result = runner.invoke(
            cli,
            ["--config", str(quiet_config), "render", "trim", " <b> ", "--content-type", "html"],
        )

        assert result.exit_code == 0
        assert result.output == "&lt;b&gt;\n"

    def test_render_unknown_renderer(self, runner, quiet_config):
        result = runner.invoke(cli, ["--config", str(quiet_config), "render", "nope", "x"])

        assert result.exit_code == 1
        assert "Unknown renderer: nope" in result.output

    def test_render_network_failure_falls_back(self, runner, quiet_config, mocker):
        # Arrange
        mocker.patch(
            "requests.Session.get", side_effect=requests.ConnectionError("offline")
        )

        # Act
        result = runner.invoke(
            cli, ["--config", str(quiet_config), "render", "qrCode", "hello"]
        )

        # Assert
        assert result.exit_code == 0
        assert "hello" in result.output

    def test_build_render_source(self):
        assert build_render_source("trim", None) == "{{render:trim:value/}}"
        assert build_render_source("mask", "unmasked=4") == (
            "{{render:mask:value}}unmasked=4{{/render}}"
        )


class TestListCommand:
    """Test the list command."""

    def test_list_renderers(self, runner, quiet_config):
        result = runner.invoke(cli, ["--config", str(quiet_config), "list"])

        names = result.output.split()
        assert result.exit_code == 0
        assert "abbreviate" in names
        assert "year" in names
        assert names == sorted(names)
        assert len(names) == 29


class TestTemplateRenderCommand:
    """Test the template render command."""

    def test_template_render_values_and_attributes(self, runner, quiet_config, tmp_path):
        # Arrange
        template_file = tmp_path / "greeting.txt"
        template_file.write_text(
            "Hi {{render:capitalizeWords:name/}}, up {{render:uptime:x/}}\n",
            encoding="utf-8",
        )

        # Act
        result = runner.invoke(
            cli,
            [
                "--config", str(quiet_config),
                "template", "render", str(template_file),
                "-v", "name=jane doe",
                "-a", "uptime=3660000",
            ],
        )

        # Assert
        assert result.exit_code == 0
        assert result.output == "Hi Jane Doe, up 1 hour 1 minute\n"

    def test_template_render_guesses_html(self, runner, quiet_config, tmp_path):
        template_file = tmp_path / "page.html"
        template_file.write_text("<p>{{name}}</p>", encoding="utf-8")

        result = runner.invoke(
            cli,
            ["--config", str(quiet_config), "template", "render", str(template_file), "-v", "name=a&b"],
        )

        assert result.exit_code == 0
        assert result.output == "<p>a&amp;b</p>"

    def test_template_render_to_output_file(self, runner, quiet_config, tmp_path):
        template_file = tmp_path / "t.txt"
        template_file.write_text("{{render:rot13:v/}}", encoding="utf-8")
        output = tmp_path / "out" / "t.txt"

        result = runner.invoke(
            cli,
            [
                "--config", str(quiet_config),
                "template", "render", str(template_file),
                "-v", "v=Hello", "-o", str(output),
            ],
        )

        assert result.exit_code == 0
        assert output.read_text(encoding="utf-8") == "Uryyb"

    def test_template_render_strict_missing_value(self, runner, quiet_config, tmp_path):
        template_file = tmp_path / "t.txt"
        template_file.write_text("{{missing}}", encoding="utf-8")

        result = runner.invoke(
            cli,
            ["--config", str(quiet_config), "template", "render", str(template_file), "--strict"],
        )

        assert result.exit_code == 1
        assert "Render failed" in result.output

    def test_template_render_bad_assignment(self, runner, quiet_config, tmp_path):
        template_file = tmp_path / "t.txt"
        template_file.write_text("x", encoding="utf-8")

        result = runner.invoke(
            cli,
            ["--config", str(quiet_config), "template", "render", str(template_file), "-v", "novalue"],
        )

        assert result.exit_code == 2
        assert "Expected name=value" in result.output

    def test_template_render_invalid_utf8(self, runner, quiet_config, tmp_path):
        template_file = tmp_path / "t.txt"
        template_file.write_bytes(b"\xff\xfe\xfa")

        result = runner.invoke(
            cli, ["--config", str(quiet_config), "template", "render", str(template_file)]
        )

        assert result.exit_code == 1
        assert "encoding error" in result.output


class TestConfigValidateCommand:
    """Test the config validate command."""

    def test_config_validate_valid(self, runner, quiet_config, temp_config_file):
        result = runner.invoke(
            cli, ["--config", str(quiet_config), "config", "validate", str(temp_config_file)]
        )

        assert result.exit_code == 0
        assert "Configuration is valid" in result.output
        assert "Time zone:   UTC" in result.output

    def test_config_validate_invalid(self, runner, quiet_config, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"services": {"shorten_url": "is.gd"}}))

        result = runner.invoke(
            cli, ["--config", str(quiet_config), "config", "validate", str(bad)]
        )

        assert result.exit_code == 1
        assert "Configuration validation failed" in result.output


class TestContentTypeFor:
    """Test content type guessing from template file names."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("page.html", ContentType.HTML),
            ("PAGE.HTM", ContentType.HTML),
            ("feed.xml", ContentType.XML),
            ("data.json", ContentType.JSON),
            ("notes.txt", ContentType.TXT),
            ("README", ContentType.TXT),
        ],
    )
    def test_content_type_for(self, name, expected):
        assert content_type_for(Path(name)) is expected
