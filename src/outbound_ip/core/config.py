"""Centralized configuration using Pydantic BaseSettings."""

from functools import lru_cache
from typing import Literal, Optional
from urllib.parse import urlsplit

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_AWS_BASE_URL = "http://ec2-34-202-126-158.compute-1.amazonaws.com"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    # Lookup target
    aws_base_url: str = DEFAULT_AWS_BASE_URL
    resolver_backend: Literal["system", "dnspython"] = "system"

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 3000

    # Number of reverse proxy hops trusted for X-Forwarded-For (0 = none)
    trusted_proxy_hops: int = Field(default=1, ge=0)

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Sentry configuration (optional)
    sentry_dsn: Optional[str] = None
    sentry_environment: str = "production"
    sentry_traces_sample_rate: float = 1.0

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def aws_hostname(self) -> Optional[str]:
        """Return the hostname part of the base URL, or None if it has none."""
        try:
            return urlsplit(self.aws_base_url.strip()).hostname
        except ValueError:
            return None

    @property
    def trusts_forwarded_for(self) -> bool:
        """Check if the X-Forwarded-For header should be honored."""
        return self.trusted_proxy_hops > 0


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
