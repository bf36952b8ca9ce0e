from abc import ABC, abstractmethod
from typing import Any, List
from dataclasses import dataclass, field

from tool_context.domain.entities.tool_descriptor import ToolDescriptor


@dataclass
class MCPTool:
    """Represents an MCP tool available from a server."""

    name: str
    description: str
    parameters: dict = field(default_factory=dict)

    def to_descriptor(self) -> ToolDescriptor:
        """Convert the advertised input schema into a ToolDescriptor."""
        return ToolDescriptor.from_input_schema(
            self.name, self.description, self.parameters
        )


class IMCPClient(ABC):
    """Interface for MCP (Model Context Protocol) client operations.

    The protocol itself is handled by the ``mcp`` package; implementations
    only choose a server and perform one request per call.
    """

    @abstractmethod
    async def connect(self, server_name: str) -> None:
        """Select an MCP server to talk to."""
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        """Forget the selected MCP server."""
        pass

    @abstractmethod
    async def list_tools(self) -> List[MCPTool]:
        """List available tools from the connected server."""
        pass

    @abstractmethod
    async def call_tool(self, tool_name: str, arguments: dict) -> Any:
        """Call a tool on the MCP server."""
        pass
