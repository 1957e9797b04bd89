"""Microservices architecture documentation tools.

Every tool returns a fixed text document from the resource package. The only
per-call logic is the ``all`` selector of getServiceDependencies, the service
name substitution and the registry timestamp.
"""

import logging
from datetime import datetime

from arch_mcp.exceptions import DocumentNotFoundError
from arch_mcp.models.tool import ToolParameter
from arch_mcp.services.documents import DocumentLibrary
from arch_mcp.tools.base import Arguments, InvocationContext, Tool, ToolHandler

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
ALL_SERVICES = "all"

# (tool name, description, server-side log line) for the argument-free tools
_STATIC_DOCUMENTS: list[tuple[str, str, str]] = [
    (
        "getDeploymentPatterns",
        "Get deployment patterns, infrastructure setup, and environment "
        "configurations for microservices",
        "Deployment patterns requested",
    ),
    (
        "getDatabasePatterns",
        "Get database patterns, schemas, and data management strategies for microservices",
        "Database patterns requested",
    ),
    (
        "getSecurityPatterns",
        "Get security best practices, authentication, and authorization patterns",
        "Security patterns requested",
    ),
    (
        "getObservabilityPatterns",
        "Get monitoring, logging, and observability strategy for microservices",
        "Observability patterns requested",
    ),
    (
        "getDesignPatterns",
        "Get design patterns, architectures, and anti-patterns for microservices",
        "Design patterns requested",
    ),
    (
        "getTestingStrategy",
        "Get testing strategies and test patterns for microservices",
        "Testing strategy requested",
    ),
    (
        "getTroubleshootingGuide",
        "Get troubleshooting, debugging, and incident response guidelines",
        "Troubleshooting guide requested",
    ),
    (
        "getTeamStandards",
        "Get team best practices, coding standards, and guidelines for "
        "microservices development",
        "Team standards requested",
    ),
    (
        "listAvailableTools",
        "List all available MCP tools provided by the Microservices Documentation service",
        "Available tools list requested",
    ),
]


class ArchitectureDocs:
    """Documentation tool handlers backed by a DocumentLibrary."""

    def __init__(self, documents: DocumentLibrary | None = None) -> None:
        self._documents = documents or DocumentLibrary()

    def document_names(self) -> list[str]:
        """Documents the tools read, including the dependency scope blocks."""
        return [
            "getMicroserviceRegistry",
            "getServiceDependencies",
            "getServiceDependencies.all",
            "getServiceDependencies.service",
            "getApiContracts",
            *(name for name, _, _ in _STATIC_DOCUMENTS),
        ]

    def verify_documents(self) -> None:
        """Raise DocumentNotFoundError for the first document missing from the package."""
        available = set(self._documents.available())
        for name in self.document_names():
            if name not in available:
                raise DocumentNotFoundError(name)

    async def microservice_registry(
        self, arguments: Arguments, context: InvocationContext
    ) -> str:
        logger.info("Microservice registry requested")
        return self._documents.render(
            "getMicroserviceRegistry",
            timestamp=datetime.now().strftime(TIMESTAMP_FORMAT),
        )

    async def service_dependencies(
        self, arguments: Arguments, context: InvocationContext
    ) -> str:
        service_name = arguments.get("serviceName") or ALL_SERVICES
        logger.info(f"Service dependencies requested for: {service_name}")

        if service_name.lower() == ALL_SERVICES:
            scope = self._documents.load("getServiceDependencies.all")
        else:
            scope = self._documents.render(
                "getServiceDependencies.service", service_name=service_name
            )
        return self._documents.render("getServiceDependencies", scope=scope)

    async def api_contracts(self, arguments: Arguments, context: InvocationContext) -> str:
        service_name = arguments["serviceName"]
        logger.info(f"API contracts requested for service: {service_name}")
        return self._documents.render("getApiContracts", service_name=service_name)

    def static_document(self, name: str, log_message: str) -> ToolHandler:
        """Handler returning document ``name`` unchanged."""

        async def handler(arguments: Arguments, context: InvocationContext) -> str:
            logger.info(log_message)
            return self._documents.load(name)

        handler.__name__ = name
        return handler

    def tools(self) -> list[Tool]:
        """Tools of the architecture profile, in discovery order."""
        tools = [
            Tool(
                name="getMicroserviceRegistry",
                description=(
                    "Get complete registry of all team microservices with "
                    "endpoints and responsibilities"
                ),
                handler=self.microservice_registry,
            ),
            Tool(
                name="getServiceDependencies",
                description=(
                    "Get service dependency graph and communication patterns "
                    "between microservices"
                ),
                handler=self.service_dependencies,
                parameters=(
                    ToolParameter(
                        name="serviceName",
                        description="Service name or 'all' for complete graph",
                        required=False,
                    ),
                ),
            ),
            Tool(
                name="getApiContracts",
                description="Get API contract documentation and request/response schemas",
                handler=self.api_contracts,
                parameters=(
                    ToolParameter(
                        name="serviceName",
                        description="Service name to get API contracts for",
                    ),
                ),
            ),
        ]
        for name, description, log_message in _STATIC_DOCUMENTS:
            tools.append(
                Tool(
                    name=name,
                    description=description,
                    handler=self.static_document(name, log_message),
                )
            )
        return tools
