# MCP (Model Context Protocol) Infrastructure
#
# This module provides:
# - An MCP server that exposes a ToolRegistry over stdio
# - The calculator server, a toy server with arithmetic tools
# - An MCP client for listing and calling tools on configured servers
#
# Framing, handshake and message schema all come from the `mcp` package.
