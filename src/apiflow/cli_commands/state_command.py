"""Persisted state CLI command."""

import typer
from rich.table import Table
from rich.text import Text

from apiflow.config import get_state_file
from apiflow.state import reset_state

from .shared import app, console, current_state


@app.command()
def state(
    action: str = typer.Argument("show", help="Action: show, reset"),
) -> None:
    """Show or clear the remembered request and response."""
    path = get_state_file()

    if action == "show":
        current = current_state()
        table = Table(title=f"Session state ({path})", show_header=False)
        table.add_column("Field", style="bold")
        table.add_column("Value")
        table.add_row("Method", current.selected_method.token)
        table.add_row("URL", Text(current.url))
        table.add_row("Request body", Text(current.request_body or "(empty)"))
        table.add_row("Response", Text(current.response_body or "(none)"))
        console.print(table)
        return

    if action == "reset":
        if reset_state(path):
            console.print(f"[green]Cleared session state:[/green] {path}")
        else:
            console.print("[dim]No session state to clear.[/dim]")
        return

    console.print(f"[red]Unknown action: {action}. Use 'show' or 'reset'.[/red]")
    raise typer.Exit(1)
