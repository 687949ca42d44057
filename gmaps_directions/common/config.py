"""
Configuration management for the Google Maps Directions client.

This module provides centralized configuration loading and validation using Pydantic.
Environment variables (optionally from a .env file) are read once at import time.
"""

import os
from typing import Optional
from pydantic import BaseModel, Field, field_validator
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class DirectionsConfig(BaseModel):
    """Directions API endpoint and transport configuration."""

    api_key: Optional[str] = Field(None, description="Google Maps API key")
    base_url: str = Field(
        default="https://maps.googleapis.com/maps/api/directions",
        description="Directions API base URL (without output format)",
    )
    output_format: str = Field(default="json", description="Response output format")

    # Transport behaviour; the request builder and interpreter never retry
    timeout_seconds: float = Field(default=30, description="Request timeout in seconds")
    max_retries: int = Field(default=0, description="Transport retry attempts")
    backoff_factor: float = Field(default=1.0, description="Exponential backoff factor")
    max_workers: int = Field(
        default=4, description="Worker threads for asynchronous requests"
    )

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v):
        """Only JSON responses can be interpreted."""
        if v.lower() != "json":
            raise ValueError("Only the 'json' output format is supported")
        return v.lower()

    @field_validator("max_retries")
    @classmethod
    def validate_max_retries(cls, v):
        if v < 0:
            raise ValueError("max_retries must be >= 0")
        return v

    @field_validator("max_workers")
    @classmethod
    def validate_max_workers(cls, v):
        if v < 1:
            raise ValueError("max_workers must be >= 1")
        return v

    @property
    def endpoint(self) -> str:
        """Full request URL including the output format."""
        return f"{self.base_url.rstrip('/')}/{self.output_format}"

    def base_params(self) -> dict:
        """Fixed query parameters sent with every request."""
        params = {}
        if self.api_key:
            params["key"] = self.api_key
        return params


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Logging level")
    format_str: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string",
    )
    enable_structured_logging: bool = Field(
        default=True, description="Enable structured JSON logging"
    )


class AppConfig(BaseModel):
    """Main application configuration."""

    directions: DirectionsConfig = Field(default_factory=DirectionsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Environment
    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Enable debug mode")


def load_config() -> AppConfig:
    """Load and validate configuration from environment variables."""

    config_dict = {
        "directions": {
            "api_key": os.getenv("GOOGLE_API_KEY") or None,
            "base_url": os.getenv(
                "DIRECTIONS_BASE_URL",
                "https://maps.googleapis.com/maps/api/directions",
            ),
            "output_format": os.getenv("DIRECTIONS_OUTPUT_FORMAT", "json"),
            "timeout_seconds": float(os.getenv("TIMEOUT_SECONDS", "30")),
            "max_retries": int(os.getenv("MAX_RETRIES", "0")),
            "backoff_factor": float(os.getenv("BACKOFF_FACTOR", "1.0")),
            "max_workers": int(os.getenv("MAX_WORKERS", "4")),
        },
        "logging": {
            "level": os.getenv("LOG_LEVEL", "INFO"),
            "enable_structured_logging": os.getenv(
                "ENABLE_STRUCTURED_LOGGING", "true"
            ).lower()
            == "true",
        },
        "environment": os.getenv("ENVIRONMENT", "development"),
        "debug": os.getenv("DEBUG", "false").lower() == "true",
    }

    return AppConfig(**config_dict)


# Global configuration instance
config = load_config()
