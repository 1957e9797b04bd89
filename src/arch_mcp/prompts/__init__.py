"""Prompt templates exposed over MCP."""

from arch_mcp.config import Profile
from arch_mcp.prompts.base import Prompt, PromptCatalog, PromptRenderer
from arch_mcp.prompts.design import DESIGN_PROMPT_NAME, design_prompt


def build_catalog(profile: Profile = Profile.ARCHITECTURE) -> PromptCatalog:
    """Catalog of the prompts offered by ``profile``; the greeting server has none."""
    catalog = PromptCatalog()
    if profile == Profile.ARCHITECTURE:
        catalog.register(design_prompt())
    return catalog


__all__ = [
    "DESIGN_PROMPT_NAME",
    "Prompt",
    "PromptCatalog",
    "PromptRenderer",
    "build_catalog",
    "design_prompt",
]
