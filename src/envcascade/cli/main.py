"""
Main CLI entry point.
"""

import typer

from envcascade import __version__
from envcascade.cli import files, show


def version_callback(value: bool):
    """Callback to display version and exit."""
    if value:
        typer.echo(f"envcascade version {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="envcascade",
    help="envcascade - Inspect mode-aware .env file resolution",
    add_completion=False,
)

# Register subcommands
app.add_typer(files.app, name="files")
app.add_typer(show.app, name="show")


@app.callback(invoke_without_command=True)
def entrypoint(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
):
    """
    envcascade - Inspect mode-aware .env file resolution.

    Run 'envcascade <command> --help' for help on a specific command.
    """
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def main():
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
