"""apiflow CLI - build and send HTTP requests from the terminal."""

from apiflow.cli_commands import (  # noqa: F401  (registers commands)
    config_command,
    info_command,
    send_command,
    state_command,
)
from apiflow.cli_commands.shared import app, console

__all__ = ["app", "console", "main"]


def main() -> None:
    """Entry point for the apiflow command."""
    app()


if __name__ == "__main__":
    main()
