from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

from ..entities.registered_tool import RegisteredTool
from ..entities.tool_descriptor import ToolDescriptor


class IToolRegistry(ABC):
    """Abstract registry of locally registered tools."""

    @abstractmethod
    def register(
        self, func: Callable[..., Any], name: Optional[str] = None
    ) -> ToolDescriptor:
        """Describe a function and store it as a tool."""
        pass

    @abstractmethod
    def get(self, name: str) -> RegisteredTool:
        """Retrieve a registered tool by name."""
        pass

    @abstractmethod
    def descriptors(self) -> List[ToolDescriptor]:
        """List descriptors of all registered tools in registration order."""
        pass

    @abstractmethod
    async def invoke(self, name: str, arguments: dict) -> Any:
        """Validate arguments and call a registered tool."""
        pass
