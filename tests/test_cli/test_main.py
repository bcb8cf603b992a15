"""Test main CLI functionality."""

from typer.testing import CliRunner

from weekly_digest.cli.main import app

runner = CliRunner()


def test_version_command() -> None:
    """Test version command."""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "Weekly Digest v" in result.stdout


def test_help_shorthand() -> None:
    """Test that -h is accepted like --help."""
    result = runner.invoke(app, ["report", "-h"])
    assert result.exit_code == 0
    assert "--repo" in result.stdout
    assert "--as-of" in result.stdout
