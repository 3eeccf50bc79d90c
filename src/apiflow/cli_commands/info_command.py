"""Version and method listing CLI commands."""

from apiflow.http import HTTPMethod

from .shared import app, console


@app.command()
def version() -> None:
    """Show the installed apiflow version."""
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as pkg_version

    try:
        current_version = pkg_version("apiflow")
    except PackageNotFoundError:
        current_version = "0.0.0+unknown"

    console.print(f"apiflow {current_version}")


@app.command()
def methods() -> None:
    """List the HTTP methods that can be sent."""
    for method in HTTPMethod:
        console.print(method.token)
