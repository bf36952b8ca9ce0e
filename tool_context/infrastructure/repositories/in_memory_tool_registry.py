import inspect
import logging
from typing import Any, Callable, Iterator, List, Optional

from tool_context.domain.entities.registered_tool import RegisteredTool
from tool_context.domain.entities.tool_descriptor import ToolDescriptor
from tool_context.domain.exceptions.domain_exceptions import (
    DuplicateToolError,
    InvalidToolArgumentsError,
    ToolInvocationError,
    ToolNotFoundError,
)
from tool_context.domain.repositories.i_tool_registry import IToolRegistry
from tool_context.domain.services.describe_tool import describe_tool

logger = logging.getLogger(__name__)


class ToolRegistry(IToolRegistry):
    """In-memory tool registry.

    Tools are described once, when registered, and kept in registration
    order. Registration is expected to happen at import time, before the
    registry is shared with a server.
    """

    def __init__(self):
        self._tools: dict[str, RegisteredTool] = {}

    def register(
        self, func: Callable[..., Any], name: Optional[str] = None
    ) -> ToolDescriptor:
        descriptor = describe_tool(func, name)

        if descriptor.name in self._tools:
            raise DuplicateToolError(f"Tool already registered: {descriptor.name}")

        self._tools[descriptor.name] = RegisteredTool(descriptor=descriptor, func=func)
        logger.debug("Registered tool %s", descriptor.name)
        return descriptor

    def tool(self, name: Optional[str] = None) -> Callable:
        """Decorator form of :meth:`register`. Returns the function unchanged."""

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self.register(func, name)
            return func

        return decorator

    def get(self, name: str) -> RegisteredTool:
        try:
            return self._tools[name]
        except KeyError:
            raise ToolNotFoundError(f"Tool {name} not found") from None

    def descriptors(self) -> List[ToolDescriptor]:
        return [tool.descriptor for tool in self._tools.values()]

    def names(self) -> List[str]:
        return list(self._tools)

    async def invoke(self, name: str, arguments: dict) -> Any:
        tool = self.get(name)
        arguments = arguments or {}
        self._validate_arguments(tool.descriptor, arguments)

        logger.info("Calling tool %s with %s", name, arguments)
        try:
            result = tool.func(**arguments)
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            logger.warning("Tool %s failed: %s", name, e)
            raise ToolInvocationError(f"Tool {name} failed: {e}") from e

        logger.debug("Tool %s returned %r", name, result)
        return result

    def _validate_arguments(self, descriptor: ToolDescriptor, arguments: dict) -> None:
        missing = [p for p in descriptor.required_parameters if p not in arguments]
        unexpected = [a for a in arguments if a not in descriptor.parameters]

        problems = []
        if missing:
            problems.append(f"missing {', '.join(missing)}")
        if unexpected:
            problems.append(f"unexpected {', '.join(unexpected)}")
        if problems:
            raise InvalidToolArgumentsError(
                f"Invalid arguments for tool {descriptor.name}: {'; '.join(problems)}"
            )

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[RegisteredTool]:
        return iter(self._tools.values())
