"""Configuration CLI command."""

import typer
import yaml

from apiflow.config import create_global_config, get_config_dir, load_global_config, load_user_env

from .shared import app, console


@app.command()
def config(
    action: str = typer.Argument("show", help="Action: show, init"),
) -> None:
    """Manage apiflow configuration."""
    if action == "init":
        config_path = create_global_config()
        console.print(f"[green]Global config:[/green] {config_path}")
        return

    if action == "show":
        try:
            config_data = load_global_config()
        except ValueError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1) from e
        config_dir = get_config_dir()
        console.print(f"[bold]Global Configuration ({config_dir / 'config.yml'}):[/bold]")
        if config_data:
            console.print(yaml.dump(config_data, default_flow_style=False))
        else:
            console.print("[dim]No global config found. Run 'apiflow config init'.[/dim]")

        env_config = load_user_env()
        if env_config:
            console.print(f"[bold]Environment File ({config_dir / '.env'}):[/bold]")
            for key, value in env_config.items():
                console.print(f"  {key}={value}", markup=False)
        return

    console.print(f"[red]Unknown action: {action}. Use 'show' or 'init'.[/red]")
    raise typer.Exit(1)
