"""
Load settings from .env. Never log or expose secret values.
All values come from environment variables (populated via .env file).
"""
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Upstreams (Open-Meteo)
    geocoding_url: str = Field(
        default="https://geocoding-api.open-meteo.com/v1/search",
        description="Geocoding endpoint (name -> coordinates)",
    )
    forecast_url: str = Field(
        default="https://api.open-meteo.com/v1/forecast",
        description="Forecast endpoint (coordinates -> weather)",
    )
    forecast_model: str = Field(default="ukmo_seamless", description="Named forecast model")
    geocoding_count: int = Field(default=1, ge=1, description="Candidates requested from geocoding")
    geocoding_language: str = Field(default="en", description="Language for geocoding results")

    # HTTP
    http_timeout: float = Field(default=10.0, gt=0, description="Per-request timeout in seconds")
    retry_max_attempts: int = Field(default=1, ge=1, description="Attempts per upstream call (1 = no retry)")
    retry_base_delay: float = Field(default=0.5, ge=0, description="Base delay between retries in seconds")

    # Server
    server_name: str = Field(default="MCP Data Server", description="MCP server name")
    mcp_transport: Literal["stdio", "sse", "streamable-http"] = Field(
        default="stdio", description="MCP transport"
    )

    # App
    log_level: str = Field(default="INFO", description="Log level")


@lru_cache
def get_settings() -> Settings:
    return Settings()
