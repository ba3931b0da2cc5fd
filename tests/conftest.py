"""pytest conventional configuration file."""

from collections.abc import Iterator
from pathlib import Path
from typing import Any
from unittest import mock

import pytest
import syrupy.types
from syrupy.assertion import SnapshotAssertion
from syrupy.extensions.amber import AmberSnapshotExtension


@pytest.fixture(autouse=True)
def cli_path(monkeypatch: pytest.MonkeyPatch) -> str:
    """Pin the SublerCLI path, regardless of the environment running the tests."""
    path = "/path/to/SublerCli"
    monkeypatch.setenv("SUBLER_CLI_PATH", path)
    return path


@pytest.fixture
def subprocess() -> Iterator[mock.Mock]:
    """Stub subprocess.run.

    The unit test module should not run or test external commands.
    """
    with mock.patch("subprocess.run") as mock_run:
        mock_run.return_value.returncode = 0
        mock_run.return_value.stdout = b""
        mock_run.return_value.stderr = b""
        yield mock_run


@pytest.fixture
def popen() -> Iterator[mock.Mock]:
    """Stub subprocess.Popen."""
    with mock.patch("subprocess.Popen") as mock_popen:
        mock_popen.return_value.pid = 4242
        yield mock_popen


@pytest.fixture
def source(tmp_path: Path) -> Path:
    """An existing media file to tag."""
    path = tmp_path / "demo.mp4"
    path.touch()
    return path


@pytest.fixture
def snapshot(
    monkeypatch: pytest.MonkeyPatch, snapshot: SnapshotAssertion, tmp_path: Path
) -> SnapshotAssertion:
    """Override. Make syrupy's snapshot fixture strip temporary paths from any paths within a snapshot.

    Temporary paths can change between test runs.

    In the case of console output, ensure no text wrapping occurs.
    """
    monkeypatch.setattr("sublercli.commands.tag.command._CONSOLE_WIDTH", 999)
    monkeypatch.setattr("sublercli.commands.tags.command._CONSOLE_WIDTH", 999)

    tmp_path_str = str(tmp_path)

    def matcher(data: Any, path: Any) -> Any:
        if isinstance(data, Path):
            return str(data).replace(tmp_path_str, "TMP_PATH_HERE")
        elif isinstance(data, str):
            return data.replace(tmp_path_str, "TMP_PATH_HERE")
        return data

    class WithoutTmpPathExtension(AmberSnapshotExtension):
        def serialize(self, data: syrupy.types.SerializableData, **kwargs: Any) -> str:
            """Override."""
            new_kwargs = kwargs | {"matcher": matcher}
            return super().serialize(data, **new_kwargs)

    return snapshot.use_extension(WithoutTmpPathExtension)
