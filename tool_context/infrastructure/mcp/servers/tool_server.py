"""
MCP Server for Registered Tools.

Exposes every tool in a ToolRegistry over MCP. The tool list is built from
the descriptors produced at registration, so the schema a client sees is
exactly what describe_tool extracted from the function.

Usage:
    registry = ToolRegistry()
    registry.register(my_function)
    server = ToolMCPServer(registry, "my-tools")
    await server.run()
"""

import json
import logging
from typing import Any

from mcp.server import Server, NotificationOptions
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from tool_context.domain.exceptions.domain_exceptions import DomainError
from tool_context.domain.repositories.i_tool_registry import IToolRegistry

logger = logging.getLogger(__name__)


class ToolMCPServer:
    """MCP Server exposing the tools of a registry."""

    def __init__(self, registry: IToolRegistry, name: str = "tool-context"):
        self.registry = registry
        self.name = name

        self.server = Server(name)
        self._register_handlers()

    def _register_handlers(self) -> None:
        """Register MCP tool handlers."""

        @self.server.list_tools()
        async def list_tools() -> list[Tool]:
            return self._list_tools()

        @self.server.call_tool()
        async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
            return await self._call_tool(name, arguments)

    def _list_tools(self) -> list[Tool]:
        """Build MCP tool definitions from the registry."""
        return [
            Tool(
                name=descriptor.name,
                description=descriptor.description,
                inputSchema=descriptor.to_input_schema(),
            )
            for descriptor in self.registry.descriptors()
        ]

    async def _call_tool(
        self, name: str, arguments: dict[str, Any] | None
    ) -> list[TextContent]:
        """Invoke a tool and render its result as text.

        Domain errors propagate; the SDK turns them into a result with
        ``isError`` set and the error message as text.
        """
        try:
            result = await self.registry.invoke(name, arguments or {})
        except DomainError as e:
            logger.warning("Call to %s rejected: %s", name, e)
            raise

        return [TextContent(type="text", text=self._render(result))]

    def _render(self, result: Any) -> str:
        if isinstance(result, str):
            return result
        return json.dumps(result, default=str)

    async def run(self) -> None:
        """Run the MCP server using stdio transport."""
        logger.info(
            "Serving %d tool(s) as %s over stdio", len(self.registry.descriptors()), self.name
        )
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            )
