"""
Custom exception classes for Rocketlane Digest.
"""

from typing import Any, Dict, Optional


class DigestError(Exception):
    """Base exception for all digest service errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class AuthenticationError(DigestError):
    """Raised when webhook credentials are missing or wrong."""
    pass


class SummarizationError(DigestError):
    """Raised when the AI summarization call fails."""
    pass


class NotificationError(DigestError):
    """Raised when the summary email cannot be sent."""
    pass


class ConfigurationError(DigestError):
    """Raised when configuration is invalid."""
    pass


def create_summarization_error(provider: str, model: str, error: Exception) -> SummarizationError:
    """Wrap a provider failure, keeping the provider's own message."""
    return SummarizationError(
        message=str(error),
        error_code="SUMMARIZATION_FAILED",
        details={"provider": provider, "model": model, "exception_type": type(error).__name__}
    )


def create_notification_error(host: str, recipient: str, error: Exception) -> NotificationError:
    """Wrap a mail transport failure, keeping the transport's own message."""
    return NotificationError(
        message=str(error),
        error_code="NOTIFICATION_FAILED",
        details={"smtp_host": host, "recipient": recipient, "exception_type": type(error).__name__}
    )
