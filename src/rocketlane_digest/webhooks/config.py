"""
Webhook service configuration.
Server binding, route and the Basic credentials Rocketlane is configured to send.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("rocketlane_digest.config")


class WebhookConfig(BaseSettings):
    """
    Webhook service configuration loaded from ``WEBHOOK_*`` environment variables.

    Priority order:
    1. Init arguments
    2. Environment variables
    3. ``.env`` file
    4. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="WEBHOOK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Server Configuration ===
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")
    path: str = Field(default="/api/webhook", description="Webhook route path")
    debug: bool = Field(default=False, description="Debug mode")

    # === Authentication ===
    username: str = Field(default="", description="Expected Basic auth username")
    password: str = Field(default="", description="Expected Basic auth password")

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Route paths must be absolute."""
        v = v.strip()
        if not v.startswith("/"):
            raise ValueError(f"Webhook path must start with '/', got: {v}")
        return v.rstrip("/") or "/"

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError("Server port must be between 1 and 65535")
        return v

    @property
    def credentials_configured(self) -> bool:
        return bool(self.username and self.password)

    def log_configuration(self) -> None:
        """Log configuration (without sensitive data)."""
        logger.info("=== WEBHOOK CONFIGURATION ===")
        logger.info(f"Server: {self.host}:{self.port}")
        logger.info(f"Route: {self.path}")
        logger.info(
            f"Credentials: {'Configured' if self.credentials_configured else 'Not configured'}"
        )
