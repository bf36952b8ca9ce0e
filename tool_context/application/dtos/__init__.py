from .tool_dtos import (
    ParameterDTO,
    ToolDescriptorDTO,
    ToolListResponse,
    ToolInvocationRequest,
    ToolInvocationResponse,
)

__all__ = [
    "ParameterDTO",
    "ToolDescriptorDTO",
    "ToolListResponse",
    "ToolInvocationRequest",
    "ToolInvocationResponse",
]
