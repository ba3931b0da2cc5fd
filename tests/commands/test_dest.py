"""Dest command tests."""

from pathlib import Path

from click.testing import CliRunner

from sublercli.commands.dest.command import main as dest


def test_main(source: Path) -> None:
    """Test printing the numbered source."""
    (source.parent / "demo.0.mp4").touch()

    result = CliRunner().invoke(dest, [str(source)], catch_exceptions=False)

    assert result.exit_code == 0
    assert result.stdout == f"{source.parent / 'demo.1.mp4'}\n"


def test_main_free_dest(source: Path, tmp_path: Path) -> None:
    """Test a requested destination that does not exist yet."""
    requested = tmp_path / "out" / "final.mp4"

    result = CliRunner().invoke(
        dest, [str(source), "--dest", str(requested)], catch_exceptions=False
    )

    assert result.exit_code == 0
    assert result.stdout == f"{requested}\n"


def test_main_unresolvable(tmp_path: Path) -> None:
    """Test a FILE that can't be numbered."""
    source = tmp_path / "demo"
    source.touch()

    result = CliRunner().invoke(dest, [str(source)], catch_exceptions=False)

    assert result.exit_code == 1
    assert "Error:" in result.stderr
