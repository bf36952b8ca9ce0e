from functools import lru_cache
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = Field(default="Tool Context", validation_alias="APP_NAME")

    # Logging
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # MCP Servers
    # JSON object of extra servers: {"name": {"command": ..., "args": [...], "env": {...}}}
    mcp_servers_json: str = Field(default="", validation_alias="MCP_SERVERS_JSON")
    calculator_server_name: str = Field(
        default="calculator", validation_alias="CALCULATOR_SERVER_NAME"
    )

    # Server
    host: str = Field(default="127.0.0.1", validation_alias="HOST")
    port: int = Field(default=8000, validation_alias="PORT")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
