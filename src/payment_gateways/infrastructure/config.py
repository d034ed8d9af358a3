from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GatewaySettings(BaseSettings):
    """Settings loaded from PAYMENT_GATEWAYS_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PAYMENT_GATEWAYS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "test", "staging", "production"] = Field(
        default="development",
        description="Deployment environment; selects the log renderer",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Minimum level for diagnostic logs",
    )

    # Dispatch
    default_gateway: str = Field(
        default="pagseguro",
        min_length=1,
        description="Gateway used when a caller does not name one",
    )
    reference_token_length: int = Field(
        default=16,
        ge=8,
        le=32,
        description="Hex characters of the random token in transaction references",
    )

    # Audit trail
    audit_stream: Literal["stdout", "stderr"] = Field(
        default="stdout",
        description="Stream receiving audit lines",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @field_validator("default_gateway")
    @classmethod
    def _normalize_gateway(cls, value: str) -> str:
        return value.strip().lower()


@lru_cache
def get_settings() -> GatewaySettings:
    """Return the process-wide settings (read once)."""
    return GatewaySettings()
