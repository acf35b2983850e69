"""
Webhook processing service.
Runs the summarize-then-notify pipeline and reports an explicit result.
"""

import time

from loguru import logger

from ..core.exceptions import DigestError
from ..services.notifier import EmailNotifier
from ..services.summarizer import GeminiSummarizer
from .models import ProcessingResult, ProcessingStatus, WebhookPayload


class WebhookProcessor:
    """
    Main webhook processing service.

    Both collaborators are built once at startup and shared by all requests;
    the processor itself keeps no state between calls.
    """

    def __init__(self, summarizer: GeminiSummarizer, notifier: EmailNotifier):
        self.summarizer = summarizer
        self.notifier = notifier

        logger.info("WebhookProcessor initialized")

    async def process_webhook(self, payload: WebhookPayload) -> ProcessingResult:
        """
        Summarize the event data, then email the summary.

        A failure in either step ends processing. The summary from a
        successful first step is discarded when the email cannot be sent.

        Args:
            payload: Validated webhook payload

        Returns:
            Processing result with status and the summary on success
        """
        start_time = time.time()

        try:
            summary = await self.summarizer.summarize(payload.data)
            await self.notifier.send_summary(payload.event, summary)

        except DigestError as e:
            logger.error(f"Webhook processing failed ({e.error_code}): {e.message}")
            return self._failed(str(e), start_time)

        except Exception as e:
            logger.exception(f"Unexpected error while processing webhook: {e}")
            return self._failed(str(e), start_time)

        processing_time_ms = self._elapsed_ms(start_time)
        logger.info(f"Webhook processed successfully in {processing_time_ms} ms")

        return ProcessingResult(
            success=True,
            status=ProcessingStatus.COMPLETE,
            summary=summary,
            processing_time_ms=processing_time_ms,
        )

    def _failed(self, error_message: str, start_time: float) -> ProcessingResult:
        return ProcessingResult(
            success=False,
            status=ProcessingStatus.FAILED,
            error_message=error_message,
            processing_time_ms=self._elapsed_ms(start_time),
        )

    @staticmethod
    def _elapsed_ms(start_time: float) -> int:
        return int((time.time() - start_time) * 1000)
