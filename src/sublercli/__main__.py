#!/usr/bin/env python


"""Entry point for the `sublercli` command."""

import importlib
from pathlib import Path

import click

_COMMANDS_DIR = Path(__file__).parent / "commands"


@click.group(name="sublercli")
def cli() -> None:
    """Write metadata atoms to media with SublerCLI.

    Override the executable with SUBLER_CLI_PATH.
    """


def discover_commands() -> None:
    """Register the `main` of every `commands/<name>/command.py` as a subcommand."""
    for command_file in sorted(_COMMANDS_DIR.glob("*/command.py")):
        command_module = importlib.import_module(
            f"sublercli.commands.{command_file.parent.name}.command"
        )
        cli.add_command(command_module.main)


discover_commands()

if __name__ == "__main__":  # pragma: no cover
    cli()
