import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from rocketlane_digest.core.exceptions import ConfigurationError
from rocketlane_digest.utils.environment import (
    get_env_var, get_env_var_bool, get_env_var_int
)
from rocketlane_digest.webhooks.config import WebhookConfig

logger = logging.getLogger("rocketlane_digest.config")


@dataclass(frozen=True)
class GeminiSettings:
    """Google Gemini AI configuration."""
    api_key: str = ""
    model_name: str = "gemini-2.0-flash"

    @classmethod
    def from_environment(cls) -> "GeminiSettings":
        """Load Gemini settings from environment."""
        return cls(
            api_key=get_env_var("GEMINI_API_KEY", ""),
            model_name=get_env_var("GEMINI_MODEL_NAME", "gemini-2.0-flash"),
        )


@dataclass(frozen=True)
class SMTPSettings:
    """
    Mail transport configuration.

    ``use_ssl`` selects implicit TLS (``SMTP_SSL``, usually port 465). When it is
    off the connection is upgraded with STARTTLS instead.
    """
    host: str = ""
    port: int = 465
    username: str = ""
    password: str = ""
    use_ssl: bool = True

    @classmethod
    def from_environment(cls) -> "SMTPSettings":
        """Load SMTP settings from environment."""
        return cls(
            host=get_env_var("SMTP_HOST", ""),
            port=get_env_var_int("SMTP_PORT", 465),
            username=get_env_var("SMTP_USER", ""),
            password=get_env_var("SMTP_PASS", ""),
            use_ssl=get_env_var_bool("SMTP_USE_SSL", True),
        )


@dataclass(frozen=True)
class EmailSettings:
    """Sender and recipient of the digest email."""
    sender: str = ""
    recipient: str = ""

    @classmethod
    def from_environment(cls) -> "EmailSettings":
        return cls(
            sender=get_env_var("EMAIL_FROM", ""),
            recipient=get_env_var("EMAIL_TO", ""),
        )


@dataclass(frozen=True)
class LoggingSettings:
    """Log output configuration."""
    level: str = "INFO"
    json: bool = False

    @classmethod
    def from_environment(cls) -> "LoggingSettings":
        return cls(
            level=get_env_var("LOG_LEVEL", "INFO").upper(),
            json=get_env_var_bool("LOG_JSON", False),
        )


@dataclass(frozen=True)
class AppSettings:
    """Main application settings aggregator."""
    # Application info
    app_name: str = "Rocketlane Digest"
    app_version: str = "1.0.0"
    environment: str = "development"

    # Component settings
    gemini: GeminiSettings = field(default_factory=GeminiSettings.from_environment)
    smtp: SMTPSettings = field(default_factory=SMTPSettings.from_environment)
    email: EmailSettings = field(default_factory=EmailSettings.from_environment)
    log: LoggingSettings = field(default_factory=LoggingSettings.from_environment)
    webhook: WebhookConfig = field(default_factory=WebhookConfig)

    @classmethod
    def from_environment(cls) -> "AppSettings":
        """Load all settings from environment."""
        return cls(
            app_name=get_env_var("APP_NAME", "Rocketlane Digest"),
            app_version=get_env_var("APP_VERSION", "1.0.0"),
            environment=get_env_var("ENVIRONMENT", "development"),
        )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    def configuration_status(self) -> Dict[str, bool]:
        """Which required settings are present, keyed by environment variable."""
        return {
            "GEMINI_API_KEY": bool(self.gemini.api_key),
            "SMTP_HOST": bool(self.smtp.host),
            "SMTP_USER": bool(self.smtp.username),
            "SMTP_PASS": bool(self.smtp.password),
            "EMAIL_FROM": bool(self.email.sender),
            "EMAIL_TO": bool(self.email.recipient),
            "WEBHOOK_USERNAME": bool(self.webhook.username),
            "WEBHOOK_PASSWORD": bool(self.webhook.password),
        }

    def validate_configuration(self) -> Dict[str, Any]:
        """
        Report missing or suspicious configuration.

        Nothing here stops the service: a missing value only fails once the
        downstream call that needs it is attempted.
        """
        missing: List[str] = [
            name for name, present in self.configuration_status().items() if not present
        ]
        errors = [f"{name} is not set" for name in missing]
        warnings = []

        if not self.smtp.use_ssl and self.smtp.port == 465:
            warnings.append("SMTP_USE_SSL is off but SMTP_PORT is 465 (implicit TLS port)")

        if self.is_production and self.webhook.debug:
            errors.append("Debug mode must be disabled in production")

        return {
            "valid": len(errors) == 0,
            "errors": errors,
            "warnings": warnings,
            "missing": missing,
            "environment": self.environment,
        }


# Create global settings instance
try:
    settings = AppSettings.from_environment()
    logger.info(f"Configuration loaded for environment: {settings.environment}")
except Exception as exc:
    logger.critical("Failed to load configuration", exc_info=exc)
    raise ConfigurationError(
        f"Failed to load configuration: {exc}",
        error_code="CONFIGURATION_INVALID",
        details={"exception_type": type(exc).__name__},
    ) from exc

__all__ = ["settings", "AppSettings", "GeminiSettings", "SMTPSettings", "EmailSettings"]
