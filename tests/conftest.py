"""Global test configuration for Arch MCP."""

import os

import pytest

from arch_mcp.config import Profile
from arch_mcp.services.notifier import RecordingChannel
from arch_mcp.tools.catalog import build_registry
from arch_mcp.tools.invoker import ToolInvoker


@pytest.fixture(autouse=True, scope="session")
def _isolate_settings():
    """Keep tests independent of a developer's .env and exported variables.

    Settings fields that could change behaviour are removed from the
    environment for the session and restored afterwards.
    """
    keys = ["PROFILE", "TRANSPORT", "SERVER_NAME", "SERVER_VERSION", "LOG_LEVEL"]
    originals = {key: os.environ.pop(key, None) for key in keys}

    from arch_mcp.config import get_settings
    get_settings.cache_clear()

    yield

    for key, original in originals.items():
        if original is not None:
            os.environ[key] = original
    get_settings.cache_clear()


@pytest.fixture
def channel():
    """Notification channel that records events in order."""
    return RecordingChannel()


@pytest.fixture
def hello_invoker():
    return ToolInvoker(build_registry(Profile.HELLO))


@pytest.fixture
def arch_invoker():
    return ToolInvoker(build_registry(Profile.ARCHITECTURE))
