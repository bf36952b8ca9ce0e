"""Tool Context - turn Python functions into MCP tools and inspect them."""

__version__ = "1.0.0"
