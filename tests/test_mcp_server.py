"""End-to-end tests of the MCP adapter over an in-memory client session."""

from importlib.metadata import version

import pytest

import mcp.types as types
from mcp.shared.memory import create_connected_server_and_client_session

from arch_mcp.config import Profile, Settings
from arch_mcp.main import build_components
from arch_mcp.mcp_server import create_mcp_server


def _server(profile: Profile):
    settings = Settings(_env_file=None, profile=profile, server_name="test-server")
    invoker, prompts = build_components(settings)
    return create_mcp_server(invoker, prompts, settings)


@pytest.fixture
def hello_server():
    return _server(Profile.HELLO)


@pytest.fixture
def arch_server():
    return _server(Profile.ARCHITECTURE)


# ---------------------------------------------------------------------------
# TestToolDiscovery
# ---------------------------------------------------------------------------

class TestToolDiscovery:
    """Verify tools/list reflects the registry."""

    @pytest.mark.asyncio
    async def test_hello_tools(self, hello_server):
        async with create_connected_server_and_client_session(hello_server) as client:
            result = await client.list_tools()
        assert [t.name for t in result.tools] == ["hello", "customGreeting"]
        custom = result.tools[1]
        assert custom.inputSchema["required"] == ["name"]
        assert set(custom.inputSchema["properties"]) == {"name", "greetingType"}

    @pytest.mark.asyncio
    async def test_architecture_tools(self, arch_server):
        async with create_connected_server_and_client_session(arch_server) as client:
            result = await client.list_tools()
        assert len(result.tools) == 12
        assert result.tools[0].name == "getMicroserviceRegistry"
        assert result.tools[-1].name == "listAvailableTools"


# ---------------------------------------------------------------------------
# TestToolCalls
# ---------------------------------------------------------------------------

class TestToolCalls:
    """Verify tools/call results, errors, and notifications."""

    @pytest.mark.asyncio
    async def test_call_returns_text(self, hello_server):
        async with create_connected_server_and_client_session(hello_server) as client:
            result = await client.call_tool(
                "customGreeting", {"name": "Bob", "greetingType": "hey"}
            )
        assert not result.isError
        assert result.content[0].type == "text"
        assert result.content[0].text == "Hey Bob! What's up?"

    @pytest.mark.asyncio
    async def test_unknown_tool_is_error(self, hello_server):
        async with create_connected_server_and_client_session(hello_server) as client:
            result = await client.call_tool("doesNotExist", {})
        assert result.isError
        assert "Unknown tool: doesNotExist" in result.content[0].text

    @pytest.mark.asyncio
    async def test_missing_parameter_is_error(self, arch_server):
        async with create_connected_server_and_client_session(arch_server) as client:
            result = await client.call_tool("getApiContracts", {})
        assert result.isError

    @pytest.mark.asyncio
    async def test_progress_and_logs_delivered(self, hello_server):
        progress: list[tuple[float, float | None, str | None]] = []
        logs: list[types.LoggingMessageNotificationParams] = []

        async def on_progress(value, total, message):
            progress.append((value, total, message))

        async def on_log(params):
            logs.append(params)

        async with create_connected_server_and_client_session(
            hello_server, logging_callback=on_log
        ) as client:
            result = await client.call_tool(
                "hello", {"name": "Ada"}, progress_callback=on_progress
            )

        assert result.content[0].text.startswith("Hello, Ada!")
        assert progress == [
            (0.0, 1.0, "Generating greeting"),
            (0.5, 1.0, "Formatting message"),
            (1.0, 1.0, "Greeting completed"),
        ]
        assert [(log.level, log.data) for log in logs] == [
            ("info", "Called hello tool with name: Ada"),
            ("debug", "Successfully generated greeting for: Ada"),
        ]
        assert all(log.logger == "test-server" for log in logs)


# ---------------------------------------------------------------------------
# TestPrompts
# ---------------------------------------------------------------------------

class TestPrompts:
    """Verify prompts/list, prompts/get, and completion/complete."""

    @pytest.mark.asyncio
    async def test_list_prompts(self, arch_server):
        async with create_connected_server_and_client_session(arch_server) as client:
            result = await client.list_prompts()
        assert [p.name for p in result.prompts] == ["design-spring-microservice"]
        assert [a.name for a in result.prompts[0].arguments] == ["serviceName", "features"]

    @pytest.mark.asyncio
    async def test_get_prompt(self, arch_server):
        async with create_connected_server_and_client_session(arch_server) as client:
            result = await client.get_prompt(
                "design-spring-microservice",
                {"serviceName": "order-service", "features": "checkout"},
            )
        assert result.description == "Guided Microservice Design"
        assert len(result.messages) == 1
        assert result.messages[0].role == "user"
        assert "Design a microservice named: order-service." in result.messages[0].content.text

    @pytest.mark.asyncio
    async def test_complete(self, arch_server):
        ref = types.PromptReference(type="ref/prompt", name="design-spring-microservice")
        async with create_connected_server_and_client_session(arch_server) as client:
            matching = await client.complete(ref, {"name": "techStack", "value": "sp"})
            none = await client.complete(ref, {"name": "techStack", "value": "zz"})
        assert matching.completion.values == ["Spring-WebFlux-R2DBC", "Spring-MVC-JPA"]
        assert none.completion.values == []


# ---------------------------------------------------------------------------
# TestSdkCompatibility
# ---------------------------------------------------------------------------

class TestSdkCompatibility:
    """The adapter targets the 1.x low-level server API."""

    def test_installed_sdk_is_1x(self):
        assert version("mcp").split(".")[0] == "1"

    def test_low_level_decorators_available(self, hello_server):
        for decorator in ("list_tools", "call_tool", "list_prompts", "get_prompt", "completion"):
            assert callable(getattr(hello_server, decorator))
