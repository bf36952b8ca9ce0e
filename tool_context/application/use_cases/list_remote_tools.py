import logging
from dataclasses import dataclass

from tool_context.application.interfaces.i_mcp_client import IMCPClient
from tool_context.application.dtos.tool_dtos import ToolDescriptorDTO, ToolListResponse

logger = logging.getLogger(__name__)


@dataclass
class ListRemoteToolsUseCase:
    """Use case for listing the tools an MCP server advertises."""

    mcp_client: IMCPClient

    async def execute(self, server_name: str) -> ToolListResponse:
        """Connect to a server, list its tools and disconnect.

        Raises:
            UnknownServerError: If the server is not configured
            ServerConnectionError: If the server cannot be started or talked to
        """
        await self.mcp_client.connect(server_name)
        try:
            tools = await self.mcp_client.list_tools()
        finally:
            await self.mcp_client.disconnect()

        logger.info("Server %s advertises %d tool(s)", server_name, len(tools))

        dtos = [ToolDescriptorDTO.from_descriptor(t.to_descriptor()) for t in tools]
        return ToolListResponse(server=server_name, tools=dtos, total=len(dtos))
