"""Guided Spring Boot microservice design prompt."""

import logging
import textwrap
from collections.abc import Mapping

from arch_mcp.models.prompt import (
    PromptArgument,
    PromptMessage,
    PromptResult,
    PromptRole,
)
from arch_mcp.prompts.base import Prompt

logger = logging.getLogger(__name__)

DESIGN_PROMPT_NAME = "design-spring-microservice"
APPROVED_STACKS = ("Spring-WebFlux-R2DBC", "Spring-MVC-JPA")

_TEMPLATE = textwrap.dedent(
    """\
    You are a Senior Spring Boot Architect.
    Design a microservice named: {service_name}.

    Core Requirements:
    - Features to include: {features}
    - Use Spring Cloud Stream for messaging.
    - Use R2DBC for reactive persistence.
    - Ensure all controllers return ProblemDetail for errors.

    Please provide:
    1. A high-level architecture diagram (Mermaid).
    2. The Maven pom.xml dependencies.
    3. A sample Reactive Controller implementation.
    """
)


def render_design_prompt(arguments: Mapping[str, str]) -> PromptResult:
    service_name = arguments["serviceName"]
    features = arguments["features"]
    logger.info(
        f"Generating prompt for microservice design: {service_name} "
        f"with features: {features}"
    )
    text = _TEMPLATE.format(service_name=service_name, features=features)
    return PromptResult(
        description="Guided Microservice Design",
        messages=[PromptMessage(role=PromptRole.USER, text=text)],
    )


def design_prompt() -> Prompt:
    return Prompt(
        name=DESIGN_PROMPT_NAME,
        description=(
            "Guides the AI to design a Spring Boot microservice following "
            "internal standards."
        ),
        render=render_design_prompt,
        arguments=(
            PromptArgument(
                name="serviceName",
                description="The name of the service (e.g., order-service)",
            ),
            PromptArgument(name="features", description="List of features needed"),
        ),
        completions=APPROVED_STACKS,
    )
