"""Build and run SublerCLI tagging commands."""

import dataclasses
import os
import subprocess
from pathlib import Path
from typing import Any, Self

from .atoms import Atoms, MediaKind
from .consts import (
    CLI_PATH_ENVVAR,
    DEFAULT_CLI_PATH,
    DEST_FLAG,
    MAX_DEST_ATTEMPTS,
    OPTIMIZE_FLAG,
    SOURCE_FLAG,
)


class SourceNotFoundError(FileNotFoundError):
    """The file to tag does not exist."""


class DestinationNotFoundError(FileNotFoundError):
    """No destination path could be derived, e.g. the path has no file extension."""


class DestinationAttemptsError(OSError):
    """Every numbered destination candidate, up to the limit, already exists."""


def cli_executable() -> str:
    """Path to the SublerCLI executable.

    Defaults to a Homebrew install. Override with the SUBLER_CLI_PATH
    environment variable, read on every call.
    """
    return os.environ.get(CLI_PATH_ENVVAR, DEFAULT_CLI_PATH)


def next_available_path(
    path: Path, *, start: int = 0, limit: int = MAX_DEST_ATTEMPTS
) -> Path:
    """Return the first of `dir/stem.0.ext`, `dir/stem.1.ext`, ... that does not exist.

    Checking is not atomic. Another process may create the returned path
    before SublerCLI writes it.
    """
    if not path.stem or not path.suffix:
        raise DestinationNotFoundError(
            f"Cannot number destination without a file name and extension: {path}"
        )

    for i in range(start, start + limit):
        candidate = path.with_name(f"{path.stem}.{i}{path.suffix}")
        if not candidate.exists():
            return candidate

    raise DestinationAttemptsError(
        f"No free destination for {path} after {limit} numbered attempts"
    )


@dataclasses.dataclass(frozen=True)
class Subler:
    """A single SublerCLI tagging of the file at `source`.

    Defaults to tagging as a movie, with optimization. Setters return a new
    value, so calls chain:

        Subler("demo.mp4", atoms).with_dest("out/demo.mp4").with_optimize(False).tag()
    """

    source: Path
    atoms: Atoms = dataclasses.field(default_factory=Atoms)
    dest: Path | None = None
    optimize: bool = True
    media_kind: MediaKind | None = MediaKind.MOVIE

    def __post_init__(self) -> None:
        """Normalize paths given as strings."""
        object.__setattr__(self, "source", Path(self.source))
        if self.dest is not None:
            object.__setattr__(self, "dest", Path(self.dest))

    def with_atoms(self, atoms: Atoms) -> Self:
        """Replace the atoms to write."""
        return dataclasses.replace(self, atoms=atoms)

    def with_dest(self, dest: Path | str | None) -> Self:
        """Set the destination of the output file."""
        return dataclasses.replace(self, dest=dest)

    def with_optimize(self, optimize: bool) -> Self:
        """Set SublerCLI's optimization flag."""
        return dataclasses.replace(self, optimize=optimize)

    def with_media_kind(self, media_kind: MediaKind | None) -> Self:
        """Set the media kind. None omits the "Media Kind" atom."""
        return dataclasses.replace(self, media_kind=media_kind)

    @property
    def effective_atoms(self) -> Atoms:
        """The atoms to write, with the media kind atom last, if any."""
        if self.media_kind is None:
            return self.atoms
        return self.atoms.add_atom(self.media_kind.as_atom())

    def determine_dest(self) -> Path:
        """Find the destination path.

        An explicit destination is used as-is if it does not exist yet.
        Otherwise the destination, or the source if there is none, is numbered,
        starting from 0: `demo.mp4 -> demo.0.mp4`.
        """
        if self.dest is not None and not self.dest.exists():
            return self.dest
        return next_available_path(self.dest if self.dest is not None else self.source)

    def build_tag_command(self) -> list[str]:
        """The full SublerCLI command line, executable first."""
        if not self.source.exists():
            raise SourceNotFoundError(f"Source file does not exist: {self.source}")

        dest = self.determine_dest()

        cmd = [
            cli_executable(),
            SOURCE_FLAG,
            str(self.source),
            DEST_FLAG,
            str(dest),
            *self.effective_atoms.args(),
        ]
        if self.optimize:
            cmd.append(OPTIMIZE_FLAG)
        return cmd

    def tag(self, **kwargs: Any) -> "subprocess.CompletedProcess[bytes]":
        """Write the metadata to the destination file, waiting for SublerCLI to finish.

        Captures output. A nonzero exit status is returned, not raised.
        """
        cmd = self.build_tag_command()
        return subprocess.run(cmd, capture_output=True, check=False, **kwargs)

    def spawn_tag(self, **kwargs: Any) -> "subprocess.Popen[bytes]":
        """Start writing the metadata in a child process, returning a handle to it.

        Waiting on or killing the process is up to the caller. Dropping the
        handle while the process runs emits a ResourceWarning.
        """
        cmd = self.build_tag_command()
        return subprocess.Popen(cmd, **kwargs)
