"""Command-line entry point for adkgen."""

import typer

from adkgen import __version__
from adkgen.cli.create_cmd import create

app = typer.Typer(
    name="adkgen",
    help="Generate ADK agent projects (TypeScript or JavaScript) ready for npm run web.",
    no_args_is_help=True,
)

app.command()(create)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"adkgen {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Print the adkgen version.",
        callback=_print_version,
        is_eager=True,
    ),
) -> None:
    """Generate a new ADK agent project with `adkgen create NAME`."""
