"""Unit tests for the config commands."""

import tomllib
from pathlib import Path

from fileman.cli.main import app
from fileman.core.paths import get_config_path
from typer.testing import CliRunner

runner = CliRunner()


class TestConfigShow:
    """Tests for fileman config show."""

    def test_shows_defaults(self) -> None:
        """Without a config file the defaults are shown."""
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "list_marker" in result.output
        assert "confirm_destructive" in result.output
        assert "using defaults" in result.output

    def test_shows_file_values(self, tmp_path: Path) -> None:
        """Values from --config are shown."""
        config_file = tmp_path / "config.toml"
        config_file.write_text("show_menu = false\n")

        result = runner.invoke(app, ["--config", str(config_file), "config", "show"])

        assert result.exit_code == 0
        assert "False" in result.output
        assert "using defaults" not in result.output

    def test_invalid_config(self, tmp_path: Path) -> None:
        """An invalid config file is reported with exit code 1."""
        config_file = tmp_path / "config.toml"
        config_file.write_text("unknown_key = 1\n")

        result = runner.invoke(app, ["--config", str(config_file), "config", "show"])

        assert result.exit_code == 1
        assert "Error:" in result.output


class TestConfigInit:
    """Tests for fileman config init."""

    def test_writes_default_config(self) -> None:
        """init writes the defaults to the XDG config path."""
        result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 0
        with open(get_config_path(), "rb") as f:
            data = tomllib.load(f)
        assert data["list_marker"] == "- "
        assert data["confirm_destructive"] is True

    def test_refuses_to_overwrite(self, tmp_path: Path) -> None:
        """init does not overwrite an existing file without --force."""
        config_file = tmp_path / "config.toml"
        config_file.write_text('list_marker = "> "\n')

        result = runner.invoke(app, ["--config", str(config_file), "config", "init"])

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert config_file.read_text() == 'list_marker = "> "\n'

    def test_force_overwrites(self, tmp_path: Path) -> None:
        """init --force replaces an existing file."""
        config_file = tmp_path / "config.toml"
        config_file.write_text("broken [ toml")

        result = runner.invoke(app, ["--config", str(config_file), "config", "init", "--force"])

        assert result.exit_code == 0
        with open(config_file, "rb") as f:
            assert tomllib.load(f)["show_menu"] is True
