"""
End-to-end tests for the command line entry point.
"""

import json
from unittest.mock import AsyncMock

import pytest

from tool_context.domain.exceptions.domain_exceptions import (
    ServerConnectionError,
    ToolInvocationError,
)
from tool_context.infrastructure.config.settings import Settings
from tool_context.presentation import cli


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)


class TestDescribeCommand:
    """Tests for 'tool-context describe'."""

    def test_describe_all(self, capsys):
        assert cli.main(["describe"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["total"] == 3
        assert data["tools"][0]["name"] == "add"

    def test_describe_one(self, capsys):
        assert cli.main(["describe", "add"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data == {
            "name": "add",
            "description": "Add two numbers.",
            "parameters": {
                "a": {"type": "int", "required": True},
                "b": {"type": "int", "required": True},
            },
            "returns": "int",
        }

    def test_describe_unknown(self, capsys):
        assert cli.main(["describe", "divide"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "divide" in captured.err


class TestRemoteCommands:
    """Tests for commands that talk to an MCP server."""

    @pytest.fixture
    def client(self, monkeypatch, mock_mcp_client) -> AsyncMock:
        monkeypatch.setattr(cli, "MCPClientManager", lambda servers: mock_mcp_client)
        return mock_mcp_client

    def test_list_remote(self, client, capsys):
        assert cli.main(["list-remote", "calculator"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["server"] == "calculator"
        assert [t["name"] for t in data["tools"]] == ["add", "search"]

    def test_call(self, client, capsys):
        assert cli.main(["call", "calculator", "add", '{"a": 2, "b": 3}']) == 0

        assert capsys.readouterr().out.strip() == "5"
        client.call_tool.assert_called_once_with("add", {"a": 2, "b": 3})
        client.disconnect.assert_called_once()

    def test_call_invalid_json(self, client, capsys):
        assert cli.main(["call", "calculator", "add", "{oops"]) == 2
        assert "Invalid arguments JSON" in capsys.readouterr().err

    def test_call_non_object_arguments(self, client, capsys):
        assert cli.main(["call", "calculator", "add", "[1, 2]"]) == 2
        client.call_tool.assert_not_called()

    def test_list_remote_unreachable(self, client, capsys):
        """Test a server that cannot be started exits with an error."""
        client.list_tools.side_effect = ServerConnectionError(
            "Cannot list tools of server calculator: No such file"
        )

        assert cli.main(["list-remote", "calculator"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: Cannot list tools" in captured.err


    def test_call_error_result(self, client, capsys):
        """Test a tool error reported by the server exits non-zero."""
        client.call_tool.side_effect = ToolInvocationError("Tool nope not found")

        assert cli.main(["call", "calculator", "nope"]) == 1
        assert "Tool nope not found" in capsys.readouterr().err
        client.disconnect.assert_called_once()


class TestServerConfiguration:
    """Tests for malformed MCP_SERVERS_JSON."""

    @pytest.fixture(autouse=True)
    def broken_settings(self, monkeypatch):
        monkeypatch.setenv("MCP_SERVERS_JSON", '{"fs": {"args": ["."]}}')
        settings = Settings(_env_file=None)
        monkeypatch.setattr(cli, "get_settings", lambda: settings)

    @pytest.mark.parametrize(
        "argv",
        [["list-remote", "fs"], ["call", "fs", "read", "{}"]],
    )
    def test_reported_as_error(self, argv, capsys):
        assert cli.main(argv) == 1
        assert "'command' is required" in capsys.readouterr().err


class TestParser:
    """Tests for argument parsing."""

    def test_command_required(self):
        with pytest.raises(SystemExit):
            cli.main([])

    def test_serve_runs_calculator(self, monkeypatch):
        called = []
        monkeypatch.setattr(cli.calculator_server, "main", lambda: called.append(True))

        assert cli.main(["serve"]) == 0
        assert called == [True]
