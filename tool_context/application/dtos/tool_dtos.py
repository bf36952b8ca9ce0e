from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from tool_context.domain.entities.tool_descriptor import ToolDescriptor


class ParameterDTO(BaseModel):
    """DTO for one tool parameter."""

    type: str = "any"
    required: bool = True


class ToolDescriptorDTO(BaseModel):
    """DTO representing a tool's calling contract."""

    name: str
    description: str = ""
    parameters: Dict[str, ParameterDTO] = Field(default_factory=dict)
    returns: str = "any"

    class Config:
        json_schema_extra = {
            "example": {
                "name": "add",
                "description": "Add two numbers.",
                "parameters": {
                    "a": {"type": "int", "required": True},
                    "b": {"type": "int", "required": True},
                },
                "returns": "int",
            }
        }

    @classmethod
    def from_descriptor(cls, descriptor: ToolDescriptor) -> "ToolDescriptorDTO":
        return cls(
            name=descriptor.name,
            description=descriptor.description,
            parameters={
                name: ParameterDTO(type=spec.type, required=spec.required)
                for name, spec in descriptor.parameters.items()
            },
            returns=descriptor.returns,
        )


class ToolListResponse(BaseModel):
    """Response DTO for listing tools."""

    server: Optional[str] = None  # None for the local registry
    tools: List[ToolDescriptorDTO]
    total: int


class ToolInvocationRequest(BaseModel):
    """Request DTO for calling a tool."""

    arguments: Dict[str, Any] = Field(default_factory=dict)

    class Config:
        json_schema_extra = {"example": {"arguments": {"a": 2, "b": 3}}}


class ToolInvocationResponse(BaseModel):
    """Response DTO carrying a tool's result."""

    tool: str
    result: Any = None
