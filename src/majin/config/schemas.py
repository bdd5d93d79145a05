"""Configuration schemas for Majin."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

DEFAULT_STATE_PATH = Path.home() / ".majin" / "state.yaml"


class MongoConfig(BaseModel):
    """Connection settings for the model registry store."""

    uri: str | None = Field(
        default=None, description="MongoDB connection string (required to connect)"
    )
    database: str = Field(default="Majin", min_length=1)
    models_collection: str = Field(default="models", min_length=1)
    results_collection: str = Field(default="results", min_length=1)
    server_selection_timeout_ms: int = Field(default=5000, gt=0)


class ProviderEndpointConfig(BaseModel):
    """Endpoint override for one provider."""

    base_url: str | None = Field(
        default=None,
        description="Alternative base URL or endpoint; the built-in default is used when unset",
    )


class ProvidersConfig(BaseModel):
    """Transport settings shared by all provider adapters."""

    request_timeout: float = Field(
        default=60.0, gt=0.0, description="Per-request transport timeout in seconds"
    )
    openai: ProviderEndpointConfig = Field(default_factory=ProviderEndpointConfig)
    gemini: ProviderEndpointConfig = Field(default_factory=ProviderEndpointConfig)
    deepseek: ProviderEndpointConfig = Field(default_factory=ProviderEndpointConfig)
    anthropic: ProviderEndpointConfig = Field(default_factory=ProviderEndpointConfig)
    grok: ProviderEndpointConfig = Field(default_factory=ProviderEndpointConfig)

    def endpoint_for(self, provider: str) -> str | None:
        endpoint = getattr(self, provider, None)
        return endpoint.base_url if isinstance(endpoint, ProviderEndpointConfig) else None


class FanOutConfig(BaseModel):
    """Limits applied when one prompt is sent to several models."""

    max_concurrency: int = Field(
        default=5, gt=0, description="Maximum number of provider calls in flight"
    )


class ServerConfig(BaseModel):
    host: str = "127.0.0.1"
    port: int = Field(default=8000, gt=0, lt=65536)


class AppConfig(BaseModel):
    """Top-level application configuration."""

    mongodb: MongoConfig = Field(default_factory=MongoConfig)
    providers: ProvidersConfig = Field(default_factory=ProvidersConfig)
    fanout: FanOutConfig = Field(default_factory=FanOutConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    state_path: Path = Field(default=DEFAULT_STATE_PATH)
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AppConfig:
        return cls.model_validate(data)
