from unittest.mock import patch

import pytest
from pydantic import ValidationError

from rocketlane_digest.config.settings import (
    AppSettings,
    EmailSettings,
    GeminiSettings,
    SMTPSettings,
)
from rocketlane_digest.utils.environment import (
    get_env_var,
    get_env_var_bool,
    get_env_var_int,
)
from rocketlane_digest.webhooks.config import WebhookConfig


class TestEnvironmentHelpers:
    def test_missing_returns_default(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            assert get_env_var("SMTP_HOST", "") == ""
            assert get_env_var("SMTP_HOST") is None

    def test_int_conversion(self) -> None:
        with patch.dict("os.environ", {"SMTP_PORT": "587"}):
            assert get_env_var_int("SMTP_PORT", 465) == 587

    def test_invalid_int_falls_back(self) -> None:
        with patch.dict("os.environ", {"SMTP_PORT": "not-a-port"}):
            assert get_env_var_int("SMTP_PORT", 465) == 465

    @pytest.mark.parametrize("raw,expected", [("true", True), ("1", True), ("On", True), ("false", False), ("0", False)])
    def test_bool_conversion(self, raw: str, expected: bool) -> None:
        with patch.dict("os.environ", {"SMTP_USE_SSL": raw}):
            assert get_env_var_bool("SMTP_USE_SSL", not expected) is expected

    def test_unrecognized_bool_falls_back(self) -> None:
        with patch.dict("os.environ", {"SMTP_USE_SSL": "maybe"}):
            assert get_env_var_bool("SMTP_USE_SSL", True) is True


class TestComponentSettings:
    def test_gemini_from_environment(self) -> None:
        with patch.dict("os.environ", {"GEMINI_API_KEY": "key-123"}, clear=True):
            gemini = GeminiSettings.from_environment()
        assert gemini.api_key == "key-123"
        assert gemini.model_name == "gemini-2.0-flash"

    def test_smtp_from_environment(self) -> None:
        env = {
            "SMTP_HOST": "smtp.example.com",
            "SMTP_PORT": "587",
            "SMTP_USER": "mailer",
            "SMTP_PASS": "pw",
            "SMTP_USE_SSL": "false",
        }
        with patch.dict("os.environ", env, clear=True):
            smtp = SMTPSettings.from_environment()
        assert smtp == SMTPSettings(host="smtp.example.com", port=587, username="mailer", password="pw", use_ssl=False)

    def test_smtp_defaults(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            smtp = SMTPSettings.from_environment()
        assert smtp.port == 465
        assert smtp.use_ssl is True

    def test_email_from_environment(self) -> None:
        with patch.dict("os.environ", {"EMAIL_FROM": "a@example.com", "EMAIL_TO": "b@example.com"}, clear=True):
            email = EmailSettings.from_environment()
        assert (email.sender, email.recipient) == ("a@example.com", "b@example.com")


class TestWebhookConfig:
    """Test webhook configuration."""

    def test_defaults(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            config = WebhookConfig(_env_file=None)
        assert config.host == "0.0.0.0"
        assert config.port == 8000
        assert config.path == "/api/webhook"
        assert config.credentials_configured is False

    def test_environment_override(self) -> None:
        env = {
            "WEBHOOK_PORT": "9000",
            "WEBHOOK_HOST": "localhost",
            "WEBHOOK_USERNAME": "bot",
            "WEBHOOK_PASSWORD": "secret",
        }
        with patch.dict("os.environ", env, clear=True):
            config = WebhookConfig(_env_file=None)
        assert config.port == 9000
        assert config.host == "localhost"
        assert config.username == "bot"
        assert config.password == "secret"
        assert config.credentials_configured is True

    def test_invalid_path(self) -> None:
        with pytest.raises(ValidationError):
            WebhookConfig(path="api/webhook", _env_file=None)

    def test_invalid_port(self) -> None:
        with pytest.raises(ValidationError):
            WebhookConfig(port=70000, _env_file=None)


class TestAppSettings:
    def test_complete_configuration_is_valid(self, app_settings: AppSettings) -> None:
        report = app_settings.validate_configuration()
        assert report["valid"] is True
        assert report["missing"] == []

    def test_missing_values_are_listed(self, app_settings: AppSettings) -> None:
        settings = AppSettings(
            environment="test",
            gemini=GeminiSettings(api_key=""),
            smtp=app_settings.smtp,
            email=EmailSettings(sender="digest@example.com", recipient=""),
            log=app_settings.log,
            webhook=app_settings.webhook,
        )

        report = settings.validate_configuration()

        assert report["valid"] is False
        assert report["missing"] == ["GEMINI_API_KEY", "EMAIL_TO"]
        assert settings.configuration_status()["SMTP_HOST"] is True

    def test_starttls_on_ssl_port_warns(self, app_settings: AppSettings) -> None:
        settings = AppSettings(
            environment="test",
            gemini=app_settings.gemini,
            smtp=SMTPSettings(host="smtp.example.com", port=465, username="u", password="p", use_ssl=False),
            email=app_settings.email,
            log=app_settings.log,
            webhook=app_settings.webhook,
        )
        assert settings.validate_configuration()["warnings"]

    def test_is_production(self, app_settings: AppSettings) -> None:
        assert app_settings.is_production is False

    def test_missing_webhook_credentials_reported(self, app_settings: AppSettings) -> None:
        with patch.dict("os.environ", {}, clear=True):
            webhook = WebhookConfig(_env_file=None)
        settings = AppSettings(
            environment="test",
            gemini=app_settings.gemini,
            smtp=app_settings.smtp,
            email=app_settings.email,
            log=app_settings.log,
            webhook=webhook,
        )

        report = settings.validate_configuration()

        assert report["valid"] is False
        assert "WEBHOOK_USERNAME is not set" in report["errors"]
        assert "WEBHOOK_PASSWORD" in report["missing"]
