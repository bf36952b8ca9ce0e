import inspect
from dataclasses import dataclass
from typing import Any, Callable

from .tool_descriptor import ToolDescriptor


@dataclass(frozen=True)
class RegisteredTool:
    """A tool function paired with the descriptor produced at registration."""

    descriptor: ToolDescriptor
    func: Callable[..., Any]

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def is_async(self) -> bool:
        return inspect.iscoroutinefunction(self.func) or inspect.iscoroutinefunction(
            getattr(self.func, "__call__", None)
        )
