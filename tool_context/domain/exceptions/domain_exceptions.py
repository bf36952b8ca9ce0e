class DomainError(Exception):
    """Base exception for all domain-level errors."""

    pass


class InvalidToolNameError(DomainError):
    """Raised when a tool name is empty or not a valid identifier."""

    pass


class ToolIntrospectionError(DomainError):
    """Raised when a callable cannot be described as a tool."""

    pass


class DuplicateToolError(DomainError):
    """Raised when a tool name is registered twice."""

    pass


class ToolNotFoundError(DomainError):
    """Raised when a requested tool does not exist."""

    pass


class InvalidToolArgumentsError(DomainError):
    """Raised when tool arguments are missing or unexpected."""

    pass


class ToolInvocationError(DomainError):
    """Raised when a tool function fails while being called."""

    pass


class UnknownServerError(DomainError):
    """Raised when an MCP server name has no configuration."""

    pass


class ServerNotConnectedError(DomainError):
    """Raised when a client operation needs a server but none is selected."""

    pass


class ServerConnectionError(DomainError):
    """Raised when an MCP server cannot be started or talked to."""

    pass


class InvalidServerConfigError(DomainError):
    """Raised when MCP server configuration is malformed."""

    pass
