"""Dest command."""

from pathlib import Path

import click

from sublercli.subler import Subler


@click.command("dest")
@click.argument(
    "file",
    required=True,
    type=click.Path(dir_okay=False, exists=True, file_okay=True, path_type=Path),
)
@click.option(
    "--dest",
    help="Requested output file, as given to the `tag` command.",
    type=click.Path(dir_okay=False, file_okay=True, path_type=Path),
)
def main(file: Path, dest: Path | None) -> None:
    """Print where `tag` would write FILE.

    Does not create or modify any file.
    """
    try:
        path = Subler(file, dest=dest).determine_dest()
    except OSError as oserr:
        raise click.ClickException(str(oserr)) from oserr
    click.echo(path)
