"""
Servers Router - Endpoints for inspecting remote MCP servers.
"""

from fastapi import APIRouter, HTTPException, status

from tool_context.application.dtos.tool_dtos import ToolListResponse
from tool_context.domain.exceptions.domain_exceptions import (
    ServerConnectionError,
    UnknownServerError,
)
from tool_context.presentation.api.dependencies import ListRemoteToolsUseCaseDep

router = APIRouter(prefix="/servers", tags=["servers"])


@router.get(
    "/{server_name}/tools",
    response_model=ToolListResponse,
    summary="List remote tools",
    description="Connect to a configured MCP server and list the tools it advertises.",
)
async def list_remote_tools(server_name: str, use_case: ListRemoteToolsUseCaseDep):
    """List the tools of a configured MCP server."""
    try:
        return await use_case.execute(server_name)
    except UnknownServerError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ServerConnectionError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        )
