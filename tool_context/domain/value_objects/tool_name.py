import re
from dataclasses import dataclass

from ..exceptions.domain_exceptions import InvalidToolNameError


@dataclass(frozen=True)
class ToolName:
    """Immutable value object representing a tool identifier."""

    value: str

    MAX_LENGTH = 64
    NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_\-.]*$")

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise InvalidToolNameError("Tool name cannot be empty")

        if len(self.value) > self.MAX_LENGTH:
            raise InvalidToolNameError(
                f"Tool name longer than {self.MAX_LENGTH} characters: {self.value}"
            )

        if not self.NAME_PATTERN.fullmatch(self.value):
            raise InvalidToolNameError(f"Invalid tool name: {self.value}")

    def __str__(self) -> str:
        return self.value
