"""Shared CLI app objects and helpers."""

import json
import logging
from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.syntax import Syntax
from rich.text import Text

from apiflow.config import get_default_method, get_default_url, get_state_file
from apiflow.http import Outcome
from apiflow.state import SessionState, load_state
from apiflow.utils.debug import set_debug_enabled

app = typer.Typer(
    name="apiflow",
    help="Build and send HTTP requests from the terminal",
    no_args_is_help=True,
)
console = Console()


def setup_logging(verbose: bool) -> None:
    """Route apiflow logs through rich; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    set_debug_enabled(verbose)


def exit_with_error(error: Exception, hint: str = "") -> NoReturn:
    """Print an error (and optional hint) in red, then exit with status 1."""
    console.print(f"[red]Error: {error}[/red]", highlight=False)
    if hint:
        console.print(f"[dim]{hint}[/dim]")
    raise typer.Exit(1) from error


def current_state() -> SessionState:
    """Load the persisted state, seeding a fresh one from configuration."""
    try:
        path = get_state_file()
        if not path.exists():
            return SessionState(url=get_default_url(), selected_method=get_default_method())
    except ValueError as e:
        exit_with_error(e, "Check APIFLOW_* settings and ~/.apiflow/config.yml.")
    try:
        return load_state(path)
    except ValueError as e:
        exit_with_error(e, "Run 'apiflow state reset' to start over.")


def parse_body(text: str, raw: bool = False) -> Any:
    """Turn body text into a payload: parsed JSON when possible, else the text itself."""
    if not text.strip():
        return None
    if raw:
        return text
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def render_outcome(outcome: Outcome) -> None:
    """Show an outcome in a panel: the body on success, the message on failure."""
    if not outcome.ok:
        console.print(Panel(Text(outcome.text), title="Error", border_style="red"))
        return

    body = outcome.text
    content: Text | Syntax = Text(body)
    try:
        content = Syntax(json.dumps(json.loads(body), indent=2), "json", theme="monokai")
    except json.JSONDecodeError:
        pass
    console.print(Panel(content, title="Response", border_style="green"))
