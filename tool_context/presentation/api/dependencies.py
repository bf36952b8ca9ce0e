"""
Dependency Injection Configuration.

This module wires together the concrete implementations used by the API.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, status

from tool_context.infrastructure.config.settings import Settings, get_settings
from tool_context.infrastructure.mcp.client.mcp_client import (
    MCPClientManager,
    load_server_configs,
)
from tool_context.infrastructure.mcp.servers.calculator_server import calculator

from tool_context.application.interfaces.i_mcp_client import IMCPClient
from tool_context.domain.exceptions.domain_exceptions import InvalidServerConfigError
from tool_context.domain.repositories.i_tool_registry import IToolRegistry

from tool_context.application.use_cases.describe_tools import DescribeToolsUseCase
from tool_context.application.use_cases.invoke_tool import InvokeToolUseCase
from tool_context.application.use_cases.list_remote_tools import (
    ListRemoteToolsUseCase,
)


# Settings
def get_app_settings() -> Settings:
    return get_settings()


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


# Tool Registry
def get_tool_registry() -> IToolRegistry:
    return calculator


ToolRegistryDep = Annotated[IToolRegistry, Depends(get_tool_registry)]


# MCP Client
def get_mcp_client(settings: SettingsDep) -> IMCPClient:
    try:
        servers = load_server_configs(settings)
    except InvalidServerConfigError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
    return MCPClientManager(servers)


MCPClientDep = Annotated[IMCPClient, Depends(get_mcp_client)]


# Use Cases
def get_describe_tools_use_case(registry: ToolRegistryDep) -> DescribeToolsUseCase:
    return DescribeToolsUseCase(tool_registry=registry)


def get_invoke_tool_use_case(registry: ToolRegistryDep) -> InvokeToolUseCase:
    return InvokeToolUseCase(tool_registry=registry)


def get_list_remote_tools_use_case(
    mcp_client: MCPClientDep,
) -> ListRemoteToolsUseCase:
    return ListRemoteToolsUseCase(mcp_client=mcp_client)


DescribeToolsUseCaseDep = Annotated[
    DescribeToolsUseCase, Depends(get_describe_tools_use_case)
]
InvokeToolUseCaseDep = Annotated[InvokeToolUseCase, Depends(get_invoke_tool_use_case)]
ListRemoteToolsUseCaseDep = Annotated[
    ListRemoteToolsUseCase, Depends(get_list_remote_tools_use_case)
]
