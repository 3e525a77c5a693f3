"""Configuration management for the document store."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageConfig(BaseModel):
    """Backing store configuration."""

    backend: Literal["memory", "file"] = Field(
        default="memory", description="Collection store backend"
    )
    data_dir: Path = Field(
        default=Path("./scratch"), description="Directory holding collection files"
    )
    file_suffix: str = Field(
        default=".json", pattern=r"^\.[A-Za-z0-9]+$", description="Collection file suffix"
    )


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="json", description="Log format")
    metrics_enabled: bool = Field(default=False, description="Expose Prometheus metrics")
    metrics_port: int = Field(default=8001, ge=1, le=65535, description="Prometheus metrics port")
    otel_endpoint: str | None = Field(
        default=None, description="OpenTelemetry collector endpoint"
    )
    otel_service_name: str = Field(default="docstore", description="Service name for tracing")


class Config(BaseSettings):
    """Main configuration for the document store."""

    model_config = SettingsConfigDict(
        env_prefix="DOCSTORE_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    storage: StorageConfig = Field(default_factory=StorageConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    def ensure_directories(self) -> None:
        """Create the data directory when the file backend is selected."""
        if self.storage.backend == "file":
            self.storage.data_dir.mkdir(parents=True, exist_ok=True)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    config = Config()
    config.ensure_directories()
    return config
