"""
Tools Router - Endpoints for describing and calling local tools.
"""

from fastapi import APIRouter, HTTPException, status

from tool_context.application.dtos.tool_dtos import (
    ToolDescriptorDTO,
    ToolInvocationRequest,
    ToolInvocationResponse,
    ToolListResponse,
)
from tool_context.domain.exceptions.domain_exceptions import (
    InvalidToolArgumentsError,
    ToolInvocationError,
    ToolNotFoundError,
)
from tool_context.presentation.api.dependencies import (
    DescribeToolsUseCaseDep,
    InvokeToolUseCaseDep,
)

router = APIRouter(prefix="/tools", tags=["tools"])


@router.get(
    "",
    response_model=ToolListResponse,
    summary="List tools",
    description="Describe every locally registered tool.",
)
async def list_tools(use_case: DescribeToolsUseCaseDep):
    """List all local tool descriptors."""
    return use_case.execute()


@router.get(
    "/{name}",
    response_model=ToolDescriptorDTO,
    summary="Describe a tool",
    description="Get the descriptor of a single tool.",
)
async def get_tool(name: str, use_case: DescribeToolsUseCaseDep):
    """Get one tool descriptor by name."""
    try:
        return use_case.execute(name=name)
    except ToolNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.post(
    "/{name}/invoke",
    response_model=ToolInvocationResponse,
    summary="Call a tool",
    description="Call a tool with named arguments and return its result.",
)
async def invoke_tool(
    name: str,
    request: ToolInvocationRequest,
    use_case: InvokeToolUseCaseDep,
):
    """Invoke a local tool."""
    try:
        return await use_case.execute(name, request)
    except ToolNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except InvalidToolArgumentsError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e),
        )
    except ToolInvocationError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
