"""Prompt models for the MCP prompt surface."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class PromptRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class PromptArgument(BaseModel):
    """A named string argument of a prompt."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    required: bool = True


class PromptSummary(BaseModel):
    """Discovery view of a registered prompt."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    arguments: tuple[PromptArgument, ...] = ()


class PromptMessage(BaseModel):
    role: PromptRole
    text: str


class PromptResult(BaseModel):
    """Rendered prompt returned to the caller."""

    description: str
    messages: list[PromptMessage]
