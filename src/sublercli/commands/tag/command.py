"""Tag command."""

import shlex
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
import rich.console

from sublercli.atoms import MEDIA_KIND_TAG, METADATA_TAGS, Atom, Atoms, MediaKind
from sublercli.subler import Subler

# Test-only property. Set to a large number to avoid text wrapping in the console.
_CONSOLE_WIDTH: int | None = None

_NO_MEDIA_KIND = "none"

# Atoms from the command line, in the order given.
_ATOMS_META_KEY = "sublercli.atoms"


def _record_atom(
    ctx: click.Context, param: click.Parameter, tag: str, value: str
) -> None:
    try:
        atom = Atom(tag, value)
    except ValueError as verr:
        raise click.BadParameter(str(verr), ctx=ctx, param=param) from verr
    ctx.meta.setdefault(_ATOMS_META_KEY, []).append(atom)


def _record_tag_option(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> None:
    """Click calls back in command line order, so recording here keeps that order."""
    if value is not None and param.name is not None:
        _record_atom(ctx, param, METADATA_TAGS[param.name], value)


def _record_atom_option(
    ctx: click.Context, param: click.Parameter, value: tuple[tuple[str, str], ...]
) -> None:
    for tag, tag_value in value:
        _record_atom(ctx, param, tag, tag_value)


def _metadata_tag_options(f: Callable[..., Any]) -> Callable[..., Any]:
    """Add one option per known metadata tag, like `--release-date`."""
    for identifier, tag in reversed(METADATA_TAGS.items()):
        if tag == MEDIA_KIND_TAG:
            continue
        f = click.option(
            f"--{identifier.replace('_', '-')}",
            identifier,
            callback=_record_tag_option,
            expose_value=False,
            help=f'Set the "{tag}" atom.',
            metavar="VALUE",
        )(f)
    return f


@click.command("tag")
@click.argument(
    "file",
    required=True,
    type=click.Path(dir_okay=False, exists=True, file_okay=True, path_type=Path),
)
@click.option(
    "--atom",
    callback=_record_atom_option,
    expose_value=False,
    help=(
        "Set an atom by its SublerCLI tag name, e.g. `--atom Cast 'John Doe'`. May"
        " be repeated. Repeats are written together, where the first one is given."
    ),
    metavar="TAG VALUE",
    multiple=True,
    nargs=2,
)
@click.option(
    "--dest",
    help=(
        "Output file. Used as-is if it does not exist, otherwise numbered, like"
        " `out.0.mp4`. Defaults to numbering FILE."
    ),
    type=click.Path(dir_okay=False, file_okay=True, path_type=Path),
)
@click.option(
    "--dry-run",
    default=False,
    help="Print the SublerCLI command instead of running it.",
    is_flag=True,
)
@click.option(
    "--media-kind",
    default=MediaKind.MOVIE.display_name,
    help=f'Media kind of FILE. "{_NO_MEDIA_KIND}" omits the atom.',
    show_default=True,
    type=click.Choice(
        [kind.display_name for kind in MediaKind] + [_NO_MEDIA_KIND],
        case_sensitive=False,
    ),
)
@click.option(
    "--optimize/--no-optimize",
    default=True,
    help="Whether SublerCLI optimizes the output file.",
    show_default=True,
)
@click.option(
    "--spawn",
    default=False,
    help=(
        "Start SublerCLI in its own session and exit without waiting for it."
        " SublerCLI keeps running after this command exits."
    ),
    is_flag=True,
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Print the SublerCLI command before running it.",
)
@_metadata_tag_options
@click.pass_context
def main(
    ctx: click.Context,
    file: Path,
    dest: Path | None,
    dry_run: bool,
    media_kind: str,
    optimize: bool,
    spawn: bool,
    verbose: int,
) -> None:
    """Write metadata atoms to FILE.

    Atoms are written in the order their options are given, followed by the
    media kind.
    """
    try:
        subler = Subler(
            file,
            Atoms(tuple(ctx.meta.get(_ATOMS_META_KEY, ()))),
            dest=dest,
            optimize=optimize,
            media_kind=(
                None
                if media_kind.casefold() == _NO_MEDIA_KIND
                else MediaKind.parse(media_kind)
            ),
        )
        cmd = subler.build_tag_command()
    except ValueError as verr:
        raise click.BadParameter(str(verr)) from verr
    except OSError as oserr:
        raise click.ClickException(str(oserr)) from oserr

    if dry_run:
        click.echo(shlex.join(cmd))
        return

    console = rich.console.Console(stderr=True, width=_CONSOLE_WIDTH)
    if verbose:
        console.print(
            shlex.join(cmd), emoji=False, highlight=False, markup=False, soft_wrap=True
        )

    try:
        if spawn:
            proc = subler.spawn_tag(start_new_session=True)
            console.print(f"Started SublerCLI, pid {proc.pid}", highlight=False)
            return

        result = subler.tag()
    except OSError as oserr:
        raise click.ClickException(f"Could not run SublerCLI: {oserr}") from oserr

    click.echo(result.stdout, nl=False)
    click.echo(result.stderr, err=True, nl=False)
    if result.returncode != 0:
        raise click.exceptions.Exit(result.returncode)
