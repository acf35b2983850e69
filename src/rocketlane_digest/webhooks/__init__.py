"""
Webhook handling package for Rocketlane Digest.
"""

from .models import ProcessingResult, ProcessingStatus, WebhookPayload

__all__ = ["WebhookPayload", "ProcessingResult", "ProcessingStatus"]
