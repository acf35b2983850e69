from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from rocketlane_digest.api.main import create_app
from rocketlane_digest.config.settings import (
    AppSettings,
    EmailSettings,
    GeminiSettings,
    LoggingSettings,
    SMTPSettings,
)
from rocketlane_digest.core.auth import encode_basic_credentials
from rocketlane_digest.services.notifier import EmailNotifier
from rocketlane_digest.services.summarizer import GeminiSummarizer
from rocketlane_digest.webhooks.config import WebhookConfig

WEBHOOK_USERNAME = "bot"
WEBHOOK_PASSWORD = "secret"


@pytest.fixture
def smtp_settings() -> SMTPSettings:
    return SMTPSettings(
        host="smtp.example.com",
        port=465,
        username="mailer@example.com",
        password="mail-password",
        use_ssl=True,
    )


@pytest.fixture
def email_settings() -> EmailSettings:
    return EmailSettings(sender="digest@example.com", recipient="team@example.com")


@pytest.fixture
def app_settings(smtp_settings: SMTPSettings, email_settings: EmailSettings) -> AppSettings:
    """Fully configured settings, independent of the process environment."""
    return AppSettings(
        app_name="Rocketlane Digest",
        app_version="1.0.0",
        environment="test",
        gemini=GeminiSettings(api_key="test-gemini-key", model_name="gemini-2.0-flash"),
        smtp=smtp_settings,
        email=email_settings,
        log=LoggingSettings(level="DEBUG", json=False),
        webhook=WebhookConfig(
            username=WEBHOOK_USERNAME,
            password=WEBHOOK_PASSWORD,
            path="/api/webhook",
        ),
    )


@pytest.fixture
def summarizer() -> Mock:
    mock = Mock(spec=GeminiSummarizer)
    mock.summarize = AsyncMock(return_value="Task 42 done.")
    return mock


@pytest.fixture
def notifier() -> Mock:
    mock = Mock(spec=EmailNotifier)
    mock.send_summary = AsyncMock()
    return mock


@pytest.fixture
def client(app_settings: AppSettings, summarizer: Mock, notifier: Mock):
    app = create_app(settings=app_settings, summarizer=summarizer, notifier=notifier)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": encode_basic_credentials(WEBHOOK_USERNAME, WEBHOOK_PASSWORD)}
