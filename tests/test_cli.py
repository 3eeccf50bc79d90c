"""Tests for CLI commands."""

import json
from pathlib import Path

import pytest
import respx
from httpx import Response
from typer.testing import CliRunner

from apiflow.cli import app
from apiflow.cli_commands.shared import parse_body
from apiflow.http import HTTPMethod
from apiflow.state import SessionState, load_state, save_state

runner = CliRunner()


class TestParseBody:
    """Test body text handling."""

    def test_blank_is_no_body(self):
        assert parse_body("") is None
        assert parse_body("   \n") is None

    def test_json_is_parsed(self):
        assert parse_body('{"a": [1, 2]}') == {"a": [1, 2]}

    def test_plain_text_is_kept(self):
        assert parse_body("hello there") == "hello there"

    def test_raw_skips_parsing(self):
        assert parse_body('{"a": 1}', raw=True) == '{"a": 1}'


class TestSendCommand:
    """Test the send command."""

    @respx.mock
    def test_send_success_renders_and_saves(self, state_file: Path):
        route = respx.post("https://example.com/items").mock(
            return_value=Response(200, text='{"id": 7}')
        )

        result = runner.invoke(
            app, ["send", "https://example.com/items", "-X", "post", "-d", '{"name": "x"}']
        )

        assert result.exit_code == 0, result.output
        assert "Response" in result.output
        assert '"id": 7' in result.output

        request = route.calls.last.request
        assert json.loads(request.content) == {"name": "x"}
        assert request.headers["content-type"] == "application/json"

        state = load_state(state_file)
        assert state.url == "https://example.com/items"
        assert state.selected_method is HTTPMethod.POST
        assert state.request_body == '{"name": "x"}'
        assert state.response_body == '{"id": 7}'

    @respx.mock
    def test_send_failure_exits_nonzero(self, state_file: Path):
        respx.get("https://example.com/missing").mock(return_value=Response(404, text="nope"))

        result = runner.invoke(app, ["send", "https://example.com/missing"])

        assert result.exit_code == 1
        assert "HTTP Error: 404" in result.output
        assert load_state(state_file).response_body == "HTTP Error: 404"

    @respx.mock
    def test_send_uses_persisted_state(self, state_file: Path):
        save_state(
            state_file,
            SessionState(url="https://example.com/saved", selected_method=HTTPMethod.DELETE),
        )
        route = respx.delete("https://example.com/saved").mock(
            return_value=Response(200, text="gone")
        )

        result = runner.invoke(app, ["send"])

        assert result.exit_code == 0, result.output
        assert route.called
        assert "gone" in result.output

    @respx.mock
    def test_send_user_header_overrides_content_type(self, state_file: Path):
        route = respx.get("https://example.com").mock(return_value=Response(200, text="ok"))

        result = runner.invoke(
            app,
            [
                "send",
                "https://example.com",
                "-H",
                "Content-Type: text/plain",
                "-H",
                "X-Trace: 1",
                "--no-save",
            ],
        )

        assert result.exit_code == 0, result.output
        request = route.calls.last.request
        assert request.headers["content-type"] == "text/plain"
        assert request.headers["x-trace"] == "1"
        assert not state_file.exists()

    def test_send_bad_header_exits(self, state_file: Path):
        result = runner.invoke(app, ["send", "https://example.com", "-H", "broken"])

        assert result.exit_code == 1
        assert "Invalid header" in result.output

    def test_send_bad_method_exits(self, state_file: Path):
        result = runner.invoke(app, ["send", "https://example.com", "-X", "TRACE"])

        assert result.exit_code == 1
        assert "Unknown HTTP method" in result.output

    def test_send_corrupt_state_exits(self, state_file: Path):
        state_file.write_text("{oops")

        result = runner.invoke(app, ["send", "https://example.com"])

        assert result.exit_code == 1
        assert "state reset" in result.output

    def test_send_wrong_typed_state_exits(self, state_file: Path):
        state_file.write_text('{"url": 5}')

        result = runner.invoke(app, ["send"])

        assert result.exit_code == 1
        assert not isinstance(result.exception, TypeError)
        assert "Corrupt state file" in result.output
        assert "state reset" in result.output

    def test_send_bad_default_method_exits(
        self, state_file: Path, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setenv("APIFLOW_DEFAULT_METHOD", "FETCH")

        result = runner.invoke(app, ["send", "https://example.com"])

        assert result.exit_code == 1
        assert not isinstance(result.exception, ValueError)
        assert "Unknown HTTP method" in result.output

    def test_send_bad_config_file_exits(self, state_file: Path, fake_home: Path):
        (fake_home / ".apiflow").mkdir()
        (fake_home / ".apiflow" / "config.yml").write_text("key: [unclosed\n")

        result = runner.invoke(app, ["send", "https://example.com"])

        assert result.exit_code == 1
        assert "Invalid config file" in result.output

    @respx.mock
    def test_send_empty_content_type_env_disables_header(
        self, state_file: Path, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setenv("APIFLOW_CONTENT_TYPE", "")
        route = respx.get("https://example.com").mock(return_value=Response(200, text="ok"))

        result = runner.invoke(app, ["send", "https://example.com", "--no-save"])

        assert result.exit_code == 0, result.output
        assert "content-type" not in route.calls.last.request.headers


class TestStateCommand:
    """Test the state command."""

    def test_show_defaults(self, state_file: Path):
        result = runner.invoke(app, ["state", "show"])

        assert result.exit_code == 0, result.output
        assert "http://127.0.0.1" in result.output
        assert "GET" in result.output

    def test_reset(self, state_file: Path):
        save_state(state_file, SessionState())

        result = runner.invoke(app, ["state", "reset"])

        assert result.exit_code == 0
        assert not state_file.exists()

    def test_unknown_action(self, state_file: Path):
        result = runner.invoke(app, ["state", "purge"])

        assert result.exit_code == 1
        assert "Unknown action" in result.output


class TestInfoCommands:
    """Test methods, version and config commands."""

    def test_methods_lists_tokens(self):
        result = runner.invoke(app, ["methods"])

        assert result.exit_code == 0
        for method in HTTPMethod:
            assert method.token in result.output

    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert result.output.startswith("apiflow ")

    def test_config_init_and_show(self, fake_home: Path):
        result = runner.invoke(app, ["config", "init"])
        assert result.exit_code == 0
        assert (fake_home / ".apiflow" / "config.yml").exists()

        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "APIFLOW_DEFAULT_URL" in result.output
