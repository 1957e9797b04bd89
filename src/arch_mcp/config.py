"""Configuration and environment loading for Arch MCP."""

from enum import Enum
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Profile(str, Enum):
    """Which tool server this process runs."""

    HELLO = "hello"
    ARCHITECTURE = "architecture"


class Transport(str, Enum):
    """MCP transport. SSE and stdio are mutually exclusive."""

    SSE = "sse"
    STDIO = "stdio"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # MCP server identity
    server_name: str = "arch-mcp-server"
    server_version: str = "0.1.0"
    profile: Profile = Profile.ARCHITECTURE

    # Transport
    transport: Transport = Transport.SSE
    sse_path: str = "/sse"
    message_path: str = "/messages/"

    # HTTP server (SSE mode only)
    host: str = "0.0.0.0"
    port: int = 8080
    debug: bool = False

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
