"""Configuration management for the share registry service."""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = Field(default="Share Registry")
    version: str = Field(default="0.1.0")
    docs_url: str | None = Field(default="/docs")
    redoc_url: str | None = Field(default="/redoc")
    openapi_url: str = Field(default="/openapi.json")

    database_url: str = Field(default="postgresql+psycopg://registry:registry@db:5432/registry")

    aws_region: str = Field(default="ap-south-1")
    s3_endpoint_url: str | None = Field(default=None)
    audit_log_bucket: str | None = Field(default=None)
    audit_log_prefix: str = Field(default="audit/records")
    audit_log_sample_rate: float = Field(default=1.0)

    enable_metrics: bool = Field(default=True)
    enable_tracing: bool = Field(default=False)
    otel_exporter_endpoint: str | None = Field(default=None)

    default_page_size: int = Field(default=20)
    max_page_size: int = Field(default=100)

    demo_state_path: str = Field(default=".registry-demo-state.json")

    log_level: str | None = Field(default=None)
    log_config_path: str | None = Field(default=None)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()


__all__ = ["Settings", "get_settings"]
