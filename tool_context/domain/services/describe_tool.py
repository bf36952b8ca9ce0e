"""
Tool-descriptor extraction.

Builds a ToolDescriptor from a callable by reading its signature and
docstring. The result is a read-only snapshot; nothing about the callable
is changed.
"""

import inspect
from typing import Any, Callable, get_args, get_type_hints

from ..entities.tool_descriptor import ANY_TYPE, ParameterSpec, ToolDescriptor
from ..exceptions.domain_exceptions import ToolIntrospectionError
from ..value_objects.tool_name import ToolName

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def type_name(annotation: Any) -> str:
    """Render an annotation as a short type name, ``any`` when missing."""
    if annotation is inspect.Parameter.empty:
        return ANY_TYPE
    if annotation is None or annotation is type(None):
        return "None"
    if isinstance(annotation, str):
        return annotation
    if isinstance(annotation, type) and not get_args(annotation):
        return annotation.__name__
    return str(annotation).replace("typing.", "")


def first_paragraph(docstring: str | None) -> str:
    """Return the docstring text that precedes the first blank line."""
    if not docstring:
        return ""

    lines = []
    for line in docstring.splitlines():
        if not line.strip():
            if lines:
                break
            continue
        lines.append(line)
    return "\n".join(lines).strip()


def _resolve_hints(func: Callable) -> dict[str, Any]:
    # Unresolvable forward references fall back to the raw annotation text
    try:
        return get_type_hints(func)
    except (NameError, TypeError, AttributeError):
        return {}


def describe_tool(func: Callable, name: str | None = None) -> ToolDescriptor:
    """Describe a callable as a tool.

    Args:
        func: The function (or other callable) to describe
        name: Optional explicit tool name, defaults to ``func.__name__``

    Returns:
        ToolDescriptor with every parameter marked required

    Raises:
        ToolIntrospectionError: If the callable has no usable signature or
            accepts ``*args`` / ``**kwargs``
        InvalidToolNameError: If the resulting name is not a valid tool name
    """
    if not callable(func):
        raise ToolIntrospectionError(f"Not a callable: {func!r}")

    tool_name = name if name is not None else getattr(func, "__name__", None)
    if tool_name is None:
        raise ToolIntrospectionError(
            f"Cannot infer a tool name for {func!r}, pass one explicitly"
        )
    tool_name = str(ToolName(tool_name))

    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError) as e:
        raise ToolIntrospectionError(
            f"Cannot read the signature of tool '{tool_name}': {e}"
        ) from e

    hints = _resolve_hints(func)

    parameters = {}
    for param in signature.parameters.values():
        if param.kind in _VARIADIC:
            raise ToolIntrospectionError(
                f"Tool '{tool_name}' uses variadic parameter '{param.name}'"
            )
        annotation = hints.get(param.name, param.annotation)
        parameters[param.name] = ParameterSpec(
            type=type_name(annotation),
            required=True,
        )

    returns = hints.get("return", signature.return_annotation)

    return ToolDescriptor(
        name=tool_name,
        description=first_paragraph(inspect.getdoc(func)),
        parameters=parameters,
        returns=type_name(returns),
    )
