"""Tags command."""

import click
import rich.box
import rich.console
import rich.table

from sublercli.atoms import MEDIA_KIND_TAG, METADATA_TAGS

# Test-only property. Set to a large number to avoid text wrapping in the console.
_CONSOLE_WIDTH: int | None = None


@click.command("tags")
def main() -> None:
    """List the known metadata tags.

    Shows the `tag` command option setting each one.
    """
    table = rich.table.Table(box=rich.box.SIMPLE)
    table.add_column("Tag")
    table.add_column("Option")

    for row in tag_option_rows():
        table.add_row(*row)

    rich.console.Console(width=_CONSOLE_WIDTH).print(table)


def tag_option_rows() -> list[tuple[str, str]]:
    """(tag name, `tag` command option) for every known tag, in table order."""
    return [
        (
            tag,
            "--media-kind"
            if tag == MEDIA_KIND_TAG
            else f"--{identifier.replace('_', '-')}",
        )
        for identifier, tag in METADATA_TAGS.items()
    ]
