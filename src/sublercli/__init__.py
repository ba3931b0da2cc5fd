"""A command line interface to SublerCLI, for writing metadata to media files on macOS.

Requires a SublerCLI install, e.g. `brew install --cask sublercli`.
"""

from .atoms import METADATA_TAGS, Atom, Atoms, MediaKind
from .subler import (
    DestinationAttemptsError,
    DestinationNotFoundError,
    SourceNotFoundError,
    Subler,
    cli_executable,
    next_available_path,
)

__all__ = [
    "METADATA_TAGS",
    "Atom",
    "Atoms",
    "DestinationAttemptsError",
    "DestinationNotFoundError",
    "MediaKind",
    "SourceNotFoundError",
    "Subler",
    "cli_executable",
    "next_available_path",
]
