"""Tool discovery and invocation result models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ToolParameter(BaseModel):
    """A single named string parameter of a tool."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    required: bool = True


class ToolSummary(BaseModel):
    """Discovery view of a registered tool."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    parameters: tuple[ToolParameter, ...] = ()

    @property
    def required_parameters(self) -> list[str]:
        """Names of parameters that must be supplied."""
        return [p.name for p in self.parameters if p.required]

    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the arguments object, as advertised over MCP."""
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {
                p.name: {"type": "string", "description": p.description}
                for p in self.parameters
            },
        }
        required = self.required_parameters
        if required:
            schema["required"] = required
        return schema


class ToolInvocationResult(BaseModel):
    """Text payload returned by a tool."""

    text: str = Field(default="")
