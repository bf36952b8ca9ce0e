from .describe_tools import DescribeToolsUseCase
from .invoke_tool import InvokeToolUseCase
from .list_remote_tools import ListRemoteToolsUseCase

__all__ = [
    "DescribeToolsUseCase",
    "InvokeToolUseCase",
    "ListRemoteToolsUseCase",
]
