"""
Webhook API router.
Method gate, Basic authentication, then the summarize-and-email pipeline.
"""

import json
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.auth import validate_basic_auth
from ..core.exceptions import AuthenticationError
from .config import WebhookConfig
from .models import (
    ErrorResponse,
    WebhookFailureResponse,
    WebhookPayload,
    WebhookSuccessResponse,
)
from .services import WebhookProcessor

# Methods outside this list are rejected by the router itself and get the
# same 405 body through method_not_allowed_handler.
WEBHOOK_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """
    Return the webhook 405 body for methods the router rejects itself.

    Other HTTP errors keep the default FastAPI handling.
    """
    if exc.status_code != 405:
        return await http_exception_handler(request, exc)

    return JSONResponse(
        status_code=405,
        content=ErrorResponse(error="Method Not Allowed").model_dump(),
        headers=exc.headers,
    )


def get_webhook_processor(request: Request) -> WebhookProcessor:
    """Dependency injection for the processor built at startup."""
    return request.app.state.webhook_processor


def create_webhook_router(webhook_config: WebhookConfig) -> APIRouter:
    """
    Create the webhook router.

    Args:
        webhook_config: Route path and the expected Basic credentials

    Returns:
        Configured FastAPI router
    """
    router = APIRouter(tags=["webhooks"])

    logger.info(f"Webhook router configured at {webhook_config.path}")
    if not webhook_config.credentials_configured:
        logger.warning("Webhook credentials are not configured - all requests will be rejected")

    @router.api_route(webhook_config.path, methods=WEBHOOK_METHODS)
    async def handle_rocketlane_webhook(
        request: Request,
        webhook_processor: WebhookProcessor = Depends(get_webhook_processor),
    ) -> JSONResponse:
        """
        Handle a Rocketlane webhook.

        Summarizes the event data with Gemini and emails the result.
        """
        if request.method != "POST":
            return JSONResponse(
                status_code=405,
                content=ErrorResponse(error="Method Not Allowed").model_dump(),
            )

        try:
            is_valid = validate_basic_auth(
                request.headers.get("authorization"),
                webhook_config.username,
                webhook_config.password,
            )
            if not is_valid:
                raise AuthenticationError(
                    "Invalid or missing webhook credentials", error_code="UNAUTHORIZED"
                )

            request_data = await _parse_request_data(request)
            payload = WebhookPayload.from_webhook_data(request_data)

            logger.info(f"Received {payload.event} event from Rocketlane")
            logger.debug(f"Event data: {payload.data}")

            result = await webhook_processor.process_webhook(payload)

            if result.success:
                return JSONResponse(
                    status_code=200,
                    content=WebhookSuccessResponse(
                        summary=result.summary_preview
                    ).model_dump(),
                )

            return JSONResponse(
                status_code=500,
                content=WebhookFailureResponse(error=result.error_message or "").model_dump(),
            )

        except AuthenticationError as e:
            logger.warning(f"Rejected webhook: {e.message}")
            return JSONResponse(
                status_code=401,
                content=ErrorResponse(error="Unauthorized").model_dump(),
            )

        except Exception as e:
            logger.error(f"Error processing webhook: {e}")
            return JSONResponse(
                status_code=500,
                content=WebhookFailureResponse(error=str(e)).model_dump(),
            )

    return router


async def _parse_request_data(request: Request) -> Any:
    """
    Decode the JSON request body.

    An empty body decodes to an empty object.
    """
    body = await request.body()
    if not body:
        return {}

    return json.loads(body)
