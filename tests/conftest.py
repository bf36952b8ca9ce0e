"""
Shared pytest fixtures for all tests.
"""

import pytest
from unittest.mock import AsyncMock

from tool_context.domain.entities.tool_descriptor import ParameterSpec, ToolDescriptor
from tool_context.application.interfaces.i_mcp_client import IMCPClient, MCPTool
from tool_context.infrastructure.repositories.in_memory_tool_registry import (
    ToolRegistry,
)


# ============================================================================
# Sample Tool Functions
# ============================================================================


def add(a: int, b: int) -> int:
    """Add two numbers."""
    return a + b


def greet(name: str, punctuation: str = "!") -> str:
    """Greet someone by name.

    The greeting is returned, not printed.
    """
    return f"Hello, {name}{punctuation}"


def explode(message: str) -> None:
    """Always fails."""
    raise RuntimeError(message)


async def fetch_double(value: int) -> int:
    """Double a value asynchronously."""
    return value * 2


# ============================================================================
# Descriptor Fixtures
# ============================================================================


@pytest.fixture
def add_descriptor() -> ToolDescriptor:
    return ToolDescriptor(
        name="add",
        description="Add two numbers.",
        parameters={
            "a": ParameterSpec(type="int", required=True),
            "b": ParameterSpec(type="int", required=True),
        },
        returns="int",
    )


# ============================================================================
# Registry Fixtures
# ============================================================================


@pytest.fixture
def empty_registry() -> ToolRegistry:
    return ToolRegistry()


@pytest.fixture
def tool_registry() -> ToolRegistry:
    registry = ToolRegistry()
    registry.register(add)
    registry.register(greet)
    registry.register(explode)
    registry.register(fetch_double)
    return registry


# ============================================================================
# Mock Service Fixtures
# ============================================================================


@pytest.fixture
def remote_tools() -> list[MCPTool]:
    return [
        MCPTool(
            name="add",
            description="Add two numbers.",
            parameters={
                "type": "object",
                "properties": {
                    "a": {"type": "integer"},
                    "b": {"type": "integer"},
                },
                "required": ["a", "b"],
            },
        ),
        MCPTool(
            name="search",
            description="Search documents.",
            parameters={
                "type": "object",
                "properties": {
                    "query": {"type": "string"},
                    "limit": {"type": "integer", "default": 5},
                },
                "required": ["query"],
            },
        ),
    ]


@pytest.fixture
def mock_mcp_client(remote_tools) -> AsyncMock:
    """Mock IMCPClient."""
    mock = AsyncMock(spec=IMCPClient)
    mock.connect.return_value = None
    mock.disconnect.return_value = None
    mock.list_tools.return_value = remote_tools
    mock.call_tool.return_value = "5"
    return mock


# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "e2e: mark test as an end-to-end test"
    )
