"""
FastAPI application for Rocketlane Digest.
Service clients are constructed once in the lifespan and shared through app.state.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from rocketlane_digest.config.settings import AppSettings
from rocketlane_digest.config.settings import settings as default_settings
from rocketlane_digest.core.logging import setup_logging
from rocketlane_digest.core.middleware import RequestLoggingMiddleware
from rocketlane_digest.services.notifier import EmailNotifier
from rocketlane_digest.services.summarizer import GeminiSummarizer
from rocketlane_digest.webhooks.api import create_webhook_router, method_not_allowed_handler
from rocketlane_digest.webhooks.models import HealthStatus
from rocketlane_digest.webhooks.services import WebhookProcessor


def create_app(
    settings: Optional[AppSettings] = None,
    summarizer: Optional[GeminiSummarizer] = None,
    notifier: Optional[EmailNotifier] = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Application settings (defaults to the environment-loaded settings)
        summarizer: Summarization client (built from settings when omitted)
        notifier: Email notifier (built from settings when omitted)

    Returns:
        Configured FastAPI application

    Logging is set up here as well as in the CLI, since uvicorn reload
    workers import the factory in a fresh process.
    """
    settings = settings or default_settings
    setup_logging(log_level=settings.log.level, enable_json=settings.log.json)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Handle application startup and shutdown events."""
        logger.info(f"Starting {settings.app_name} v{settings.app_version}")

        report = settings.validate_configuration()
        for error in report["errors"]:
            logger.warning(f"Configuration: {error}")
        for warning in report["warnings"]:
            logger.warning(f"Configuration: {warning}")
        settings.webhook.log_configuration()

        if getattr(app.state, "webhook_processor", None) is None:
            app.state.webhook_processor = WebhookProcessor(
                summarizer=summarizer or GeminiSummarizer(settings.gemini),
                notifier=notifier or EmailNotifier(settings.smtp, settings.email),
            )

        yield

        logger.info(f"Shutting down {settings.app_name}")

    app = FastAPI(
        title=settings.app_name,
        description="Summarizes Rocketlane webhook events with Gemini and emails the result",
        version=settings.app_version,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.webhook_processor = None

    if summarizer is not None and notifier is not None:
        app.state.webhook_processor = WebhookProcessor(summarizer=summarizer, notifier=notifier)

    app.add_middleware(RequestLoggingMiddleware)
    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)
    app.include_router(create_webhook_router(settings.webhook))

    @app.get("/")
    async def root():
        """Root endpoint with service information."""
        return {
            "service": settings.app_name,
            "version": settings.app_version,
            "environment": settings.environment,
            "webhook_path": settings.webhook.path,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    @app.get("/health", response_model=HealthStatus)
    async def health_check() -> HealthStatus:
        """Liveness plus which required settings are present."""
        configuration = settings.configuration_status()
        return HealthStatus(
            status="healthy" if all(configuration.values()) else "degraded",
            service=settings.app_name,
            version=settings.app_version,
            configuration=configuration,
        )

    return app
