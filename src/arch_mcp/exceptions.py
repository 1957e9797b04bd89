"""Custom exceptions for Arch MCP."""


class ArchMcpError(Exception):
    """Base class for all Arch MCP errors."""


class DuplicateToolError(ArchMcpError):
    """Raised when a tool name is registered twice."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool '{name}' already registered")


class UnknownToolError(ArchMcpError):
    """Raised when an invocation names a tool that is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class MissingParameterError(ArchMcpError):
    """Raised when required parameters are absent from a call."""

    def __init__(self, target: str, missing: list[str]) -> None:
        self.target = target
        self.missing = missing
        super().__init__(
            f"Missing required parameter(s) for '{target}': {', '.join(missing)}"
        )


class DuplicatePromptError(ArchMcpError):
    """Raised when a prompt name is registered twice."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Prompt '{name}' already registered")


class UnknownPromptError(ArchMcpError):
    """Raised when a prompt request names a prompt that is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown prompt: {name}")


class DocumentNotFoundError(ArchMcpError):
    """Raised when a documentation resource does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Document '{name}' not found")


class HealthCheckFailure(ArchMcpError):
    """Raised by health predicates that cannot complete.

    Never escapes the health reporter; it is mapped to the ERROR status.
    """
