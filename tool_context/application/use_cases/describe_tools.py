from dataclasses import dataclass
from typing import Optional, Union

from tool_context.domain.repositories.i_tool_registry import IToolRegistry
from tool_context.application.dtos.tool_dtos import ToolDescriptorDTO, ToolListResponse


@dataclass
class DescribeToolsUseCase:
    """Use case for printing the schemas of locally registered tools."""

    tool_registry: IToolRegistry

    def execute(
        self, name: Optional[str] = None
    ) -> Union[ToolListResponse, ToolDescriptorDTO]:
        """Describe one tool or all of them.

        Args:
            name: Tool to describe; all tools when omitted

        Returns:
            ToolDescriptorDTO for a single tool, ToolListResponse otherwise

        Raises:
            ToolNotFoundError: If ``name`` is not registered
        """
        if name is not None:
            tool = self.tool_registry.get(name)
            return ToolDescriptorDTO.from_descriptor(tool.descriptor)

        tools = [
            ToolDescriptorDTO.from_descriptor(d)
            for d in self.tool_registry.descriptors()
        ]
        return ToolListResponse(tools=tools, total=len(tools))
