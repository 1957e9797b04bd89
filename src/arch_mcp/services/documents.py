"""Plain-text documentation resources keyed by tool name."""

import logging
from importlib import resources
from string import Template

from arch_mcp.exceptions import DocumentNotFoundError

logger = logging.getLogger(__name__)

RESOURCE_PACKAGE = "arch_mcp.resources"


class DocumentLibrary:
    """Loads ``<name>.txt`` documents from a resource package.

    Documents are read once and cached. Placeholders use ``$name`` syntax
    because several documents contain literal braces.
    """

    def __init__(self, package: str = RESOURCE_PACKAGE) -> None:
        self._package = package
        self._cache: dict[str, str] = {}

    def load(self, name: str) -> str:
        """Return the raw text of document ``name``."""
        cached = self._cache.get(name)
        if cached is not None:
            return cached

        resource = resources.files(self._package).joinpath(f"{name}.txt")
        if not resource.is_file():
            raise DocumentNotFoundError(name)

        text = resource.read_text(encoding="utf-8")
        self._cache[name] = text
        logger.debug(f"Loaded document {name} ({len(text)} chars)")
        return text

    def render(self, name: str, **values: str) -> str:
        """Load document ``name`` and substitute ``$placeholders``."""
        return Template(self.load(name)).safe_substitute(values)

    def available(self) -> list[str]:
        """Names of all documents in the resource package."""
        return sorted(
            entry.name.removesuffix(".txt")
            for entry in resources.files(self._package).iterdir()
            if entry.name.endswith(".txt")
        )
