"""Greeting tools served by the hello profile."""

import logging
from datetime import datetime

from arch_mcp.models.notification import LogLevel
from arch_mcp.models.tool import ToolParameter
from arch_mcp.tools.base import Arguments, InvocationContext, Tool

logger = logging.getLogger(__name__)

DEFAULT_NAME = "World"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

GREETING_TEMPLATES = {
    "hi": "Hi there, {name}!",
    "hey": "Hey {name}! What's up?",
    "greetings": "Greetings, {name}! How do you do?",
}
DEFAULT_TEMPLATE = "Hello, {name}!"


async def hello(arguments: Arguments, context: InvocationContext) -> str:
    """Friendly greeting with progress reporting.

    Emits an INFO log, progress at 0%, 50% and 100% (only when the caller
    supplied a progress token), then a DEBUG log.
    """
    name = arguments.get("name")
    await context.log(
        LogLevel.INFO,
        f"Called hello tool with name: {name if name is not None else DEFAULT_NAME}",
    )

    await context.report_progress(0.0, 1.0, "Generating greeting")

    greeting_name = name if name and name.strip() else DEFAULT_NAME
    timestamp = datetime.now().strftime(TIMESTAMP_FORMAT)

    await context.report_progress(0.5, 1.0, "Formatting message")

    greeting = (
        f"Hello, {greeting_name}! Welcome to the MCP Hello Server.\n"
        f"Timestamp: {timestamp}"
    )

    await context.report_progress(1.0, 1.0, "Greeting completed")

    await context.log(
        LogLevel.DEBUG,
        f"Successfully generated greeting for: {greeting_name}",
    )
    return greeting


async def custom_greeting(arguments: Arguments, context: InvocationContext) -> str:
    """Greeting picked by type; unknown or empty types fall back to Hello."""
    name = arguments["name"]
    greeting_type = arguments.get("greetingType")
    logger.info(
        f"Called customGreeting tool with name: {name} and greetingType: {greeting_type}"
    )

    template = GREETING_TEMPLATES.get((greeting_type or "").lower(), DEFAULT_TEMPLATE)
    return template.format(name=name)


def greeting_tools() -> list[Tool]:
    """Tools of the hello profile, in discovery order."""
    return [
        Tool(
            name="hello",
            description="Generate a friendly greeting message with optional personalization",
            handler=hello,
            parameters=(
                ToolParameter(
                    name="name",
                    description="The name of the person to greet (optional)",
                    required=False,
                ),
            ),
        ),
        Tool(
            name="customGreeting",
            description=(
                "Get a custom greeting with a specific greeting type "
                "(hello, hi, hey, greetings)"
            ),
            handler=custom_greeting,
            parameters=(
                ToolParameter(
                    name="name",
                    description="The name of the person to greet",
                ),
                ToolParameter(
                    name="greetingType",
                    description="The type of greeting (hello, hi, hey, greetings)",
                    required=False,
                ),
            ),
        ),
    ]
