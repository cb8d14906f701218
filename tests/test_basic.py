"""Basic tests for linkaudit."""

from typer.testing import CliRunner

from linkaudit import __version__
from linkaudit.cli import app


def test_version() -> None:
    """Test that version is defined and follows semantic versioning."""
    import re

    assert __version__ is not None
    assert isinstance(__version__, str)
    version_pattern = r"^\d+\.\d+\.\d+$"
    assert re.match(
        version_pattern, __version__
    ), f"Version '{__version__}' doesn't follow semantic versioning"


def test_cli_help() -> None:
    """Test that CLI help works."""
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Find dead relative links" in result.stdout
