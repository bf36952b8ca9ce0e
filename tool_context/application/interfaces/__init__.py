from .i_mcp_client import IMCPClient, MCPTool

__all__ = ["IMCPClient", "MCPTool"]
