"""Test configuration and fixtures for apiflow."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

CONFIG_KEYS = (
    "APIFLOW_DEFAULT_URL",
    "APIFLOW_DEFAULT_METHOD",
    "APIFLOW_CONTENT_TYPE",
    "APIFLOW_STATE_FILE",
    "APIFLOW_VERBOSE",
)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fake_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point Path.home() at a temp dir and drop any APIFLOW_* settings."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    for key in CONFIG_KEYS:
        monkeypatch.delenv(key, raising=False)
    return home


@pytest.fixture
def state_file(fake_home: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Route persisted session state to a temp file."""
    path = fake_home / "state.json"
    monkeypatch.setenv("APIFLOW_STATE_FILE", str(path))
    return path
