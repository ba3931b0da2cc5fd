"""Tags command tests."""

import pytest
from click.testing import CliRunner
from syrupy.assertion import SnapshotAssertion

from sublercli.commands.tags.command import main as tags
from sublercli.commands.tags.command import tag_option_rows


def test_tag_option_rows(snapshot: SnapshotAssertion) -> None:
    """Test every known tag is listed with its option, in table order."""
    assert tag_option_rows() == snapshot


def test_main(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test printing the table, one tag per line."""
    monkeypatch.setattr("sublercli.commands.tags.command._CONSOLE_WIDTH", 999)

    result = CliRunner().invoke(tags, catch_exceptions=False)

    assert result.exit_code == 0
    assert not result.stderr
    lines = [line.split() for line in result.stdout.splitlines()]
    for tag, option in tag_option_rows():
        assert [*tag.split(), option] in lines
