"""
Calculator MCP Server.

The smallest useful tool server: a handful of arithmetic functions
registered as tools and served over stdio.

Usage:
    python -m tool_context.infrastructure.mcp.servers.calculator_server
"""

import asyncio

from tool_context.infrastructure.config.logging_config import configure_logging
from tool_context.infrastructure.config.settings import get_settings
from tool_context.infrastructure.mcp.servers.tool_server import ToolMCPServer
from tool_context.infrastructure.repositories.in_memory_tool_registry import (
    ToolRegistry,
)

calculator = ToolRegistry()


@calculator.tool()
def add(a: int, b: int) -> int:
    """Add two numbers."""
    return a + b


@calculator.tool()
def subtract(a: int, b: int) -> int:
    """Subtract b from a."""
    return a - b


@calculator.tool()
def multiply(a: float, b: float) -> float:
    """Multiply two numbers.

    Accepts integers as well, the result is returned as a float.
    """
    return float(a * b)


def create_calculator_server() -> ToolMCPServer:
    return ToolMCPServer(calculator, name="calculator")


def main() -> None:
    configure_logging(get_settings().log_level)
    asyncio.run(create_calculator_server().run())


if __name__ == "__main__":
    main()
