"""
MCP Client Manager.

This module provides a client to connect to MCP servers and invoke their tools.
It can connect to:
- The bundled calculator server
- Any stdio MCP server listed in MCP_SERVERS_JSON

Every request opens its own stdio session, so calls are sequential and
nothing is shared between them.
"""

import json
import logging
import sys
from dataclasses import dataclass, field
from typing import Any, Optional
from contextlib import asynccontextmanager

from mcp import ClientSession
from mcp.client.stdio import stdio_client, StdioServerParameters

from tool_context.application.interfaces.i_mcp_client import IMCPClient, MCPTool
from tool_context.domain.exceptions.domain_exceptions import (
    InvalidServerConfigError,
    ServerConnectionError,
    ServerNotConnectedError,
    ToolInvocationError,
    UnknownServerError,
)
from tool_context.infrastructure.config.settings import Settings

logger = logging.getLogger(__name__)

CALCULATOR_MODULE = "tool_context.infrastructure.mcp.servers.calculator_server"


@dataclass
class MCPServerConfig:
    """Configuration for an MCP server connection."""

    name: str
    command: str
    args: list[str] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)


def _parse_server_entry(name: str, entry: Any) -> MCPServerConfig:
    if not isinstance(entry, dict):
        raise InvalidServerConfigError(f"Server {name}: entry must be a JSON object")

    command = entry.get("command")
    if not isinstance(command, str) or not command:
        raise InvalidServerConfigError(f"Server {name}: 'command' is required")

    args = entry.get("args", [])
    if not isinstance(args, list) or not all(isinstance(a, str) for a in args):
        raise InvalidServerConfigError(
            f"Server {name}: 'args' must be a list of strings"
        )

    env = entry.get("env", {})
    if not isinstance(env, dict) or not all(
        isinstance(v, str) for v in env.values()
    ):
        raise InvalidServerConfigError(
            f"Server {name}: 'env' must map names to strings"
        )

    return MCPServerConfig(name=name, command=command, args=list(args), env=dict(env))


def load_server_configs(settings: Settings) -> dict[str, MCPServerConfig]:
    """Build server configurations from settings.

    The calculator server is always available; MCP_SERVERS_JSON may add
    more servers or override it.
    """
    configs = {
        settings.calculator_server_name: MCPServerConfig(
            name=settings.calculator_server_name,
            command=sys.executable,
            args=["-m", CALCULATOR_MODULE],
        )
    }

    if settings.mcp_servers_json:
        try:
            extra = json.loads(settings.mcp_servers_json)
        except json.JSONDecodeError as e:
            raise InvalidServerConfigError(
                f"Invalid JSON in MCP_SERVERS_JSON: {e}"
            ) from e

        if not isinstance(extra, dict):
            raise InvalidServerConfigError("MCP_SERVERS_JSON must be a JSON object")

        for name, entry in extra.items():
            configs[name] = _parse_server_entry(name, entry)

    return configs


class MCPClientManager(IMCPClient):
    """Manages connections to configured MCP servers.

    It handles:
    - Server selection
    - Tool discovery and invocation
    """

    def __init__(self, servers: dict[str, MCPServerConfig]):
        self._servers = servers
        self._current_server: Optional[str] = None

    @property
    def current_server(self) -> Optional[str]:
        return self._current_server

    @asynccontextmanager
    async def _connect_to_server(self, config: MCPServerConfig):
        """Context manager for server connection."""
        server_params = StdioServerParameters(
            command=config.command,
            args=config.args,
            env=config.env or None,
        )

        logger.debug("Starting %s: %s %s", config.name, config.command, config.args)
        async with stdio_client(server_params) as (read, write):
            async with ClientSession(read, write) as session:
                await session.initialize()
                yield session

    async def connect(self, server_name: str) -> None:
        """Select a configured MCP server by name."""
        if server_name not in self._servers:
            raise UnknownServerError(f"Unknown server: {server_name}")

        logger.info("Connected to MCP server %s", server_name)
        self._current_server = server_name

    async def disconnect(self) -> None:
        """Disconnect from current server."""
        self._current_server = None

    async def list_tools(self) -> list[MCPTool]:
        """List tools from the connected server."""
        if not self._current_server:
            return []

        config = self._get_config(self._current_server)

        try:
            async with self._connect_to_server(config) as session:
                result = await session.list_tools()
        except Exception as e:
            raise ServerConnectionError(
                f"Cannot list tools of server {config.name}: {e}"
            ) from e

        return [
            MCPTool(
                name=tool.name,
                description=tool.description or "",
                parameters=tool.inputSchema,
            )
            for tool in result.tools
        ]

    async def call_tool(self, tool_name: str, arguments: dict) -> Any:
        """Call a tool on the MCP server."""
        if not self._current_server:
            raise ServerNotConnectedError("Not connected to any server")

        config = self._get_config(self._current_server)

        try:
            async with self._connect_to_server(config) as session:
                result = await session.call_tool(tool_name, arguments)
        except Exception as e:
            raise ServerConnectionError(
                f"Cannot call {tool_name} on server {config.name}: {e}"
            ) from e

        text = None
        if result.content:
            text = "\n".join(c.text for c in result.content if hasattr(c, "text"))

        if result.isError:
            raise ToolInvocationError(text or f"Tool {tool_name} failed")
        return text

    def _get_config(self, server_name: str) -> MCPServerConfig:
        """Get server configuration by name."""
        try:
            return self._servers[server_name]
        except KeyError:
            raise UnknownServerError(f"Unknown server: {server_name}") from None
