"""
Outbound service clients: Gemini summarization and SMTP notification.
"""

from .notifier import EmailContent, EmailNotifier
from .summarizer import GeminiSummarizer

__all__ = ["EmailContent", "EmailNotifier", "GeminiSummarizer"]
