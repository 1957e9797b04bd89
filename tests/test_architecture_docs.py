"""Tests for the architecture documentation tools."""

import re

import pytest
from unittest.mock import MagicMock

from arch_mcp.config import Profile
from arch_mcp.exceptions import DocumentNotFoundError, MissingParameterError
from arch_mcp.services.documents import DocumentLibrary
from arch_mcp.tools.architecture import ArchitectureDocs
from arch_mcp.tools.catalog import build_registry

STATIC_TOOLS = {
    "getDeploymentPatterns": "=== Microservice Deployment Patterns ===",
    "getDatabasePatterns": "=== Database Patterns for Microservices ===",
    "getSecurityPatterns": "=== Security Patterns for Microservices ===",
    "getObservabilityPatterns": "=== Observability Patterns ===",
    "getDesignPatterns": "=== Microservice Design Patterns ===",
    "getTestingStrategy": "=== Testing Strategy for Microservices ===",
    "getTroubleshootingGuide": "=== Troubleshooting & Debugging Guide ===",
    "getTeamStandards": "=== Team Best Practices & Standards ===",
    "listAvailableTools": "=== Available MCP Tools for Team Microservices ===",
}


# ---------------------------------------------------------------------------
# TestStaticDocuments
# ---------------------------------------------------------------------------

class TestStaticDocuments:
    """Argument-free tools return their document unchanged."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tool_name, header", list(STATIC_TOOLS.items()))
    async def test_returns_document(self, arch_invoker, channel, tool_name, header):
        result = await arch_invoker.invoke(tool_name, {}, channel)
        assert result.startswith(header + "\n")
        assert result == DocumentLibrary().load(tool_name)

    @pytest.mark.asyncio
    async def test_idempotent(self, arch_invoker, channel):
        first = await arch_invoker.invoke("getTeamStandards", {}, channel)
        second = await arch_invoker.invoke("getTeamStandards", {}, channel)
        assert first == second

    @pytest.mark.asyncio
    async def test_extra_arguments_ignored(self, arch_invoker, channel):
        plain = await arch_invoker.invoke("getDesignPatterns", {}, channel)
        extra = await arch_invoker.invoke("getDesignPatterns", {"foo": "bar"}, channel)
        assert plain == extra

    @pytest.mark.asyncio
    async def test_emit_no_events(self, arch_invoker, channel):
        await arch_invoker.invoke("getSecurityPatterns", {}, channel, progress_token="p")
        assert channel.events == []

    @pytest.mark.asyncio
    async def test_tool_listing_names_all_twelve(self, arch_invoker, channel):
        result = await arch_invoker.invoke("listAvailableTools", {}, channel)
        for name in arch_invoker.registry.names():
            assert f"{name}(" in result


# ---------------------------------------------------------------------------
# TestMicroserviceRegistry
# ---------------------------------------------------------------------------

class TestMicroserviceRegistry:
    """The registry document is stamped with the current time."""

    @pytest.mark.asyncio
    async def test_timestamp_substituted(self, arch_invoker, channel):
        result = await arch_invoker.invoke("getMicroserviceRegistry", {}, channel)
        assert result.startswith("=== Team Microservices Registry ===\n")
        assert re.search(r"^Last Updated: \d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$", result, re.M)
        assert "$timestamp" not in result


# ---------------------------------------------------------------------------
# TestServiceDependencies
# ---------------------------------------------------------------------------

class TestServiceDependencies:
    """The serviceName selector switches between graph and service views."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("service_name", ["all", "ALL", "All"])
    async def test_all_returns_complete_graph(self, arch_invoker, channel, service_name):
        result = await arch_invoker.invoke(
            "getServiceDependencies", {"serviceName": service_name}, channel
        )
        assert result.startswith("=== Microservice Dependencies ===\n\n")
        assert "COMPLETE DEPENDENCY GRAPH:" in result
        assert "order-service → payment-service" in result
        assert "SERVICE:" not in result
        assert "COMMUNICATION PATTERNS:" in result

    @pytest.mark.asyncio
    async def test_missing_name_defaults_to_all(self, arch_invoker, channel):
        default = await arch_invoker.invoke("getServiceDependencies", {}, channel)
        explicit = await arch_invoker.invoke(
            "getServiceDependencies", {"serviceName": "all"}, channel
        )
        assert default == explicit

    @pytest.mark.asyncio
    async def test_named_service(self, arch_invoker, channel):
        result = await arch_invoker.invoke(
            "getServiceDependencies", {"serviceName": "order-service"}, channel
        )
        assert "SERVICE: order-service\n" in result
        assert "Timeout: 5000ms" in result
        assert "COMPLETE DEPENDENCY GRAPH:" not in result
        assert result.index("SERVICE: order-service") < result.index("COMMUNICATION PATTERNS:")

    @pytest.mark.asyncio
    async def test_scope_block_precedes_patterns_with_blank_line(self, arch_invoker, channel):
        result = await arch_invoker.invoke(
            "getServiceDependencies", {"serviceName": "billing"}, channel
        )
        assert "Circuit Breaker: Enabled\n\nCOMMUNICATION PATTERNS:" in result


# ---------------------------------------------------------------------------
# TestApiContracts
# ---------------------------------------------------------------------------

class TestApiContracts:
    """The contract template is interpolated with the service name."""

    @pytest.mark.asyncio
    async def test_service_name_interpolated(self, arch_invoker, channel):
        result = await arch_invoker.invoke(
            "getApiContracts", {"serviceName": "user-service"}, channel
        )
        assert result.startswith("=== API Contracts for user-service ===\n")
        assert "BASE_URL: http://user-service:PORT" in result
        assert "$service_name" not in result

    @pytest.mark.asyncio
    async def test_literal_braces_kept(self, arch_invoker, channel):
        result = await arch_invoker.invoke(
            "getApiContracts", {"serviceName": "user-service"}, channel
        )
        assert "PATH: /api/v1/{resource}/{id}" in result

    @pytest.mark.asyncio
    async def test_service_name_required(self, arch_invoker, channel):
        with pytest.raises(MissingParameterError) as exc_info:
            await arch_invoker.invoke("getApiContracts", {}, channel)
        assert exc_info.value.missing == ["serviceName"]


# ---------------------------------------------------------------------------
# TestDocumentCheck
# ---------------------------------------------------------------------------

class TestDocumentCheck:
    """The architecture registry refuses to start without its documents."""

    def test_packaged_documents_complete(self):
        docs = ArchitectureDocs()
        docs.verify_documents()
        assert set(docs.document_names()) <= set(DocumentLibrary().available())

    def test_every_static_tool_has_document(self):
        names = ArchitectureDocs().document_names()
        for tool_name in STATIC_TOOLS:
            assert tool_name in names

    def test_missing_document_fails_build(self):
        available = [
            name for name in DocumentLibrary().available() if name != "getTeamStandards"
        ]
        library = MagicMock(spec=DocumentLibrary)
        library.available.return_value = available
        with pytest.raises(DocumentNotFoundError) as exc_info:
            build_registry(Profile.ARCHITECTURE, library)
        assert exc_info.value.name == "getTeamStandards"

    def test_missing_scope_block_fails_build(self):
        available = [
            name for name in DocumentLibrary().available()
            if name != "getServiceDependencies.service"
        ]
        library = MagicMock(spec=DocumentLibrary)
        library.available.return_value = available
        with pytest.raises(DocumentNotFoundError, match="getServiceDependencies.service"):
            build_registry(Profile.ARCHITECTURE, library)

    def test_hello_profile_skips_documents(self):
        library = MagicMock(spec=DocumentLibrary)
        build_registry(Profile.HELLO, library)
        library.available.assert_not_called()
