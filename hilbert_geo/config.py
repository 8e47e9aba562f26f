"""Codec configuration."""

from pydantic import ConfigDict, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from HILBERT_GEO_* environment variables."""

    # Codec defaults used by the CLI and the HTTP API
    default_precision: int = 10  # ~19m error with base16
    default_bits_per_char: int = 4
    max_curve_precision: int = 3  # curve() enumerates 2**(precision*bpc) cells

    # Logging
    log_level: str = "INFO"

    # HTTP API
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    @field_validator("default_bits_per_char")
    @classmethod
    def check_bits_per_char(cls, value: int) -> int:
        if value not in (2, 4, 6):
            raise ValueError("default_bits_per_char must be 2, 4 or 6")
        return value

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return value

    model_config = ConfigDict(
        env_prefix="HILBERT_GEO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra fields from .env
    )


# Global settings instance
settings = Settings()
