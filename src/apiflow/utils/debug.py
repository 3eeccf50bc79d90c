"""Debug utilities for request visibility.

Thread-safe debug printing with rich formatting for CLI sessions.
"""

import json
import threading
from typing import Any

from rich.console import Console
from rich.syntax import Syntax

# Thread-local storage for debug state
_debug_state = threading.local()


def set_debug_enabled(enabled: bool) -> None:
    """Set debug mode for the current thread."""
    _debug_state.enabled = enabled


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled for the current thread."""
    return getattr(_debug_state, "enabled", False)


def debug_print(category: str, message: str, console: Console | None = None, **data: Any) -> None:
    """Print debug information if debug mode is enabled.

    Args:
        category: Debug category (request, outcome, config)
        message: Main message to display
        console: Console to print to (stderr by default)
        **data: Additional key-value pairs to display
    """
    if not is_debug_enabled():
        return
    console = console or Console(stderr=True)
    console.print(f"[DEBUG:{category}] {message}", style="bold cyan", markup=False)
    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, dict):
            try:
                json_str = json.dumps(value, indent=2)
                syntax = Syntax(json_str, "json", theme="monokai", line_numbers=False)
                console.print(f"  {key}:", style="dim")
                console.print(syntax)
            except (TypeError, ValueError):
                console.print(f"  {key}: {value}", style="dim", markup=False)
        elif isinstance(value, str) and len(value) > 100:
            # Truncate long strings
            console.print(f"  {key}: {value[:100]}... ({len(value)} chars)", style="dim", markup=False)
        else:
            console.print(f"  {key}: {value}", style="dim", markup=False)


def debug_request(method: str, url: str, headers: dict[str, str], body: Any) -> None:
    """Show an outgoing request in debug mode."""
    debug_print("request", f"{method} {url}", headers=dict(headers) or None, body=body)


def debug_outcome(ok: bool, text: str) -> None:
    """Show an outcome in debug mode."""
    debug_print("outcome", "success" if ok else "failure", text=text)
