"""Persisted session state: the last request form and its response."""

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from apiflow.config import DEFAULT_URL
from apiflow.http import HTTPMethod, Outcome

logger = logging.getLogger(__name__)


@dataclass
class SessionState:
    """What the user last typed and what came back."""

    url: str = DEFAULT_URL
    request_body: str = ""
    response_body: str | None = None
    selected_method: HTTPMethod = HTTPMethod.GET

    def record(self, outcome: Outcome) -> None:
        """Replace the stored response with the text of a new outcome."""
        self.response_body = outcome.text

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["selected_method"] = self.selected_method.token
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SessionState":
        """Build state from saved data; unknown keys are ignored, missing ones defaulted.

        Raises ValueError when a known field holds a value of the wrong type.
        """
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        for key in ("url", "request_body"):
            if key in values and not isinstance(values[key], str):
                raise ValueError(f"{key} must be a string, got {type(values[key]).__name__}")
        response_body = values.get("response_body")
        if response_body is not None and not isinstance(response_body, str):
            raise ValueError(
                f"response_body must be a string or null, got {type(response_body).__name__}"
            )
        if "selected_method" in values:
            values["selected_method"] = HTTPMethod.parse(str(values["selected_method"]))
        return cls(**values)


def load_state(path: Path) -> SessionState:
    """Load state from ``path``, or return defaults when the file is missing."""
    if not path.exists():
        return SessionState()
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise ValueError(f"Corrupt state file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Corrupt state file {path}: expected a JSON object")
    try:
        return SessionState.from_dict(data)
    except ValueError as e:
        raise ValueError(f"Corrupt state file {path}: {e}") from e


def save_state(path: Path, state: SessionState) -> None:
    """Write state to ``path`` as JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(state.to_dict(), indent=2) + "\n")
    logger.debug("Saved session state to %s", path)


def reset_state(path: Path) -> bool:
    """Delete the state file. Returns True if one existed."""
    if path.exists():
        path.unlink()
        return True
    return False
