"""Prompt definitions and the prompt catalog."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from arch_mcp.exceptions import (
    DuplicatePromptError,
    MissingParameterError,
    UnknownPromptError,
)
from arch_mcp.models.prompt import PromptArgument, PromptResult, PromptSummary

logger = logging.getLogger(__name__)

PromptRenderer = Callable[[Mapping[str, str]], PromptResult]


@dataclass(frozen=True)
class Prompt:
    """A named prompt template with optional argument completions."""

    name: str
    description: str
    render: PromptRenderer
    arguments: tuple[PromptArgument, ...] = ()
    completions: tuple[str, ...] = field(default_factory=tuple)

    def summary(self) -> PromptSummary:
        return PromptSummary(
            name=self.name,
            description=self.description,
            arguments=self.arguments,
        )

    def complete(self, prefix: str | None) -> list[str]:
        """Candidates starting with ``prefix``, compared case-insensitively."""
        needle = (prefix or "").lower()
        return [c for c in self.completions if c.lower().startswith(needle)]


class PromptCatalog:
    """Ordered, read-only-after-start-up set of prompts."""

    def __init__(self) -> None:
        self._prompts: dict[str, Prompt] = {}

    def register(self, prompt: Prompt) -> None:
        if prompt.name in self._prompts:
            raise DuplicatePromptError(prompt.name)
        self._prompts[prompt.name] = prompt
        logger.debug(f"Registered prompt: {prompt.name}")

    def list(self) -> list[PromptSummary]:
        return [p.summary() for p in self._prompts.values()]

    def _lookup(self, name: str) -> Prompt:
        prompt = self._prompts.get(name)
        if prompt is None:
            raise UnknownPromptError(name)
        return prompt

    def get(self, name: str, arguments: Mapping[str, str] | None = None) -> PromptResult:
        """Render prompt ``name`` with ``arguments``.

        Raises:
            UnknownPromptError: If no prompt is registered under ``name``.
            MissingParameterError: If a required argument is absent.
        """
        prompt = self._lookup(name)
        arguments = dict(arguments or {})
        missing = [
            a.name for a in prompt.arguments
            if a.required and arguments.get(a.name) is None
        ]
        if missing:
            raise MissingParameterError(name, missing)
        return prompt.render(arguments)

    def complete(self, name: str, prefix: str | None) -> list[str]:
        return self._lookup(name).complete(prefix)

    def __len__(self) -> int:
        return len(self._prompts)

    def __contains__(self, name: str) -> bool:
        return name in self._prompts
