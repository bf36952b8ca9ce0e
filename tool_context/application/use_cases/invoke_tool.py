from dataclasses import dataclass

from tool_context.domain.repositories.i_tool_registry import IToolRegistry
from tool_context.application.dtos.tool_dtos import (
    ToolInvocationRequest,
    ToolInvocationResponse,
)


@dataclass
class InvokeToolUseCase:
    """Use case for calling a locally registered tool."""

    tool_registry: IToolRegistry

    async def execute(
        self, name: str, request: ToolInvocationRequest
    ) -> ToolInvocationResponse:
        """Call a tool with the request's arguments.

        Raises:
            ToolNotFoundError: If the tool doesn't exist
            InvalidToolArgumentsError: If arguments are missing or unexpected
            ToolInvocationError: If the tool itself fails
        """
        result = await self.tool_registry.invoke(name, request.arguments)
        return ToolInvocationResponse(tool=name, result=result)
