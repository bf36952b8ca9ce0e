from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

ANY_TYPE = "any"

# Python type name -> JSON Schema type
JSON_TYPES = {
    "int": "integer",
    "float": "number",
    "str": "string",
    "bool": "boolean",
    "list": "array",
    "tuple": "array",
    "set": "array",
    "frozenset": "array",
    "dict": "object",
}

# JSON Schema type -> Python type name
PYTHON_TYPES = {
    "integer": "int",
    "number": "float",
    "string": "str",
    "boolean": "bool",
    "array": "list",
    "object": "dict",
}


def json_schema_for(type_name: str) -> dict[str, Any]:
    """Map a declared type name onto a JSON Schema fragment.

    Parameterised containers map by their origin, case-insensitively
    (``list[int]`` and ``List[int]`` are both arrays). Anything else, including ``any`` and unions, maps to ``{}``.
    """
    origin = type_name.split("[", 1)[0].strip().lower()
    if "|" in type_name or origin not in JSON_TYPES:
        return {}
    return {"type": JSON_TYPES[origin]}


@dataclass(frozen=True)
class ParameterSpec:
    """Declared type and required-ness of one tool parameter."""

    type: str = ANY_TYPE
    required: bool = True


@dataclass(frozen=True)
class ToolDescriptor:
    """Read-only snapshot of a tool's calling contract."""

    name: str
    description: str = ""
    parameters: Mapping[str, ParameterSpec] = field(default_factory=dict)
    returns: str = ANY_TYPE

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "parameters", MappingProxyType(dict(self.parameters))
        )

    @property
    def required_parameters(self) -> list[str]:
        return [name for name, spec in self.parameters.items() if spec.required]

    def to_input_schema(self) -> dict[str, Any]:
        """Project the parameters onto an MCP ``inputSchema`` object."""
        return {
            "type": "object",
            "properties": {
                name: json_schema_for(spec.type)
                for name, spec in self.parameters.items()
            },
            "required": self.required_parameters,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "parameters": {
                name: {"type": spec.type, "required": spec.required}
                for name, spec in self.parameters.items()
            },
            "returns": self.returns,
        }

    @classmethod
    def from_input_schema(
        cls,
        name: str,
        description: str | None,
        input_schema: Mapping[str, Any] | None,
    ) -> "ToolDescriptor":
        """Build a descriptor from a tool listed by a remote server.

        Remote servers do not advertise return types, so ``returns`` is
        always ``any``.
        """
        schema = input_schema or {}
        properties = schema.get("properties") or {}
        required = set(schema.get("required") or [])

        parameters = {}
        for param_name, param_schema in properties.items():
            json_type = (
                param_schema.get("type") if isinstance(param_schema, dict) else None
            )
            parameters[param_name] = ParameterSpec(
                type=PYTHON_TYPES.get(json_type, ANY_TYPE)
                if isinstance(json_type, str)
                else ANY_TYPE,
                required=param_name in required,
            )

        return cls(
            name=name,
            description=description or "",
            parameters=parameters,
            returns=ANY_TYPE,
        )
