"""Send CLI command."""

from typing import Optional

import typer

from apiflow.config import get_content_type, get_state_file, is_verbose
from apiflow.http import HTTPClientBuilder, HTTPMethod, parse_header
from apiflow.state import save_state
from apiflow.utils.debug import debug_outcome, debug_request

from .shared import (
    app,
    current_state,
    exit_with_error,
    parse_body,
    render_outcome,
    setup_logging,
)


@app.command()
def send(
    url: Optional[str] = typer.Argument(None, help="Request URL (default: last used)"),
    method: Optional[str] = typer.Option(
        None, "--method", "-X", help="HTTP method (default: last used)"
    ),
    header: Optional[list[str]] = typer.Option(
        None, "--header", "-H", help="Extra header as 'Name: value' (repeatable)"
    ),
    data: Optional[str] = typer.Option(
        None, "--data", "-d", help="Request body; JSON text is parsed, other text is sent as a string"
    ),
    raw: bool = typer.Option(False, "--raw", help="Send the body text as a string without parsing"),
    save: bool = typer.Option(True, "--save/--no-save", help="Remember this request and response"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug output"),
) -> None:
    """Send one HTTP request and show the response."""
    try:
        setup_logging(verbose or is_verbose())
        content_type = get_content_type()
    except ValueError as e:
        exit_with_error(e, "Check APIFLOW_* settings and ~/.apiflow/config.yml.")
    state = current_state()

    try:
        selected = HTTPMethod.parse(method) if method else state.selected_method
        extra_headers = [parse_header(line) for line in header or []]
    except ValueError as e:
        exit_with_error(e)

    target = url if url is not None else state.url
    body_text = data if data is not None else state.request_body
    payload = parse_body(body_text, raw=raw)

    builder = HTTPClientBuilder().with_method(selected).with_url(target)
    if content_type:
        builder.with_header("Content-Type", content_type)
    client = builder.with_headers(extra_headers).build()

    debug_request(selected.token, target, dict(client.descriptor.headers), payload)
    outcome = client.send(payload)
    debug_outcome(outcome.ok, outcome.text)
    render_outcome(outcome)

    if save:
        state.url = target
        state.selected_method = selected
        state.request_body = body_text
        state.record(outcome)
        save_state(get_state_file(), state)

    if not outcome.ok:
        raise typer.Exit(1)
