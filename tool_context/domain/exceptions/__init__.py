from .domain_exceptions import (
    DomainError,
    InvalidToolNameError,
    ToolIntrospectionError,
    DuplicateToolError,
    ToolNotFoundError,
    InvalidToolArgumentsError,
    ToolInvocationError,
    UnknownServerError,
    ServerNotConnectedError,
    ServerConnectionError,
    InvalidServerConfigError,
)

__all__ = [
    "DomainError",
    "InvalidToolNameError",
    "ToolIntrospectionError",
    "DuplicateToolError",
    "ToolNotFoundError",
    "InvalidToolArgumentsError",
    "ToolInvocationError",
    "UnknownServerError",
    "ServerNotConnectedError",
    "ServerConnectionError",
    "InvalidServerConfigError",
]
