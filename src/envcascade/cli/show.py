"""
envcascade show - Preview the variables an env file would publish.

Runs the full resolution against an in-memory environment, so the process
environment of the caller is never modified.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

app = typer.Typer(name="show", help="Preview variables from the winning env file", invoke_without_command=True)

console = Console()


@app.callback()
def show(
    ctx: typer.Context,
    mode: str | None = typer.Option(None, "--mode", "-m", help="Mode (default: value of APP_ENV)"),
    directory: Path | None = typer.Option(None, "--dir", "-d", help="Directory to scan (default: cwd)"),
    log_level: str = typer.Option("WARNING", "--log-level", "-l", help="Log level for diagnostics"),
) -> None:
    """
    Resolve and parse the env file, then print its exported variables.
    """
    if ctx.invoked_subcommand is None:
        from envcascade.environment import MemoryEnvironment
        from envcascade.resolver import resolve
        from envcascade.utils.logging import setup_logging

        setup_logging(level=log_level)

        environment = MemoryEnvironment()
        loaded = resolve(directory, mode=mode, environment=environment)

        if loaded is None:
            console.print("[red]No env file was loaded[/red]")
            raise typer.Exit(1)

        console.print(f"\nLoaded [bold]{escape(loaded.name)}[/bold] from {escape(str(loaded.parent))}\n")

        if not environment.variables:
            console.print("[dim]No variables exported[/dim]")
            return

        table = Table(title=f"Variables ({len(environment)})", show_header=True)
        table.add_column("Name", style="cyan")
        table.add_column("Value", style="green")
        for key, value in environment.variables.items():
            table.add_row(escape(key), escape(value))

        console.print(table)
