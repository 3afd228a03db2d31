"""
envcascade files - Show candidate env files.

Lists the candidate files for a mode in precedence order and marks the ones
present in the directory.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(name="files", help="Show candidate env files for a mode", invoke_without_command=True)

console = Console()


@app.callback()
def files(
    ctx: typer.Context,
    mode: str | None = typer.Option(None, "--mode", "-m", help="Mode (default: value of APP_ENV)"),
    directory: Path | None = typer.Option(None, "--dir", "-d", help="Directory to scan (default: cwd)"),
) -> None:
    """
    List candidate env files in precedence order.
    """
    if ctx.invoked_subcommand is None:
        from envcascade.resolver import candidate_paths

        candidates = candidate_paths(directory, mode=mode)
        if not candidates:
            console.print("[red]Could not read the directory[/red]")
            raise typer.Exit(1)

        table = Table(title="Candidate files", show_header=True)
        table.add_column("#", style="dim")
        table.add_column("File", style="cyan")
        table.add_column("Status")

        winner_marked = False
        for position, (path, exists) in enumerate(candidates, start=1):
            if exists and not winner_marked:
                status = "[green]present (first choice)[/green]"
                winner_marked = True
            elif exists:
                status = "[yellow]present[/yellow]"
            else:
                status = "[dim]missing[/dim]"
            table.add_row(str(position), path.name, status)

        console.print(table)

        if not winner_marked:
            console.print("[yellow]None of the candidate files exist[/yellow]")
