"""
Email notifier - renders the analysis email and sends it over SMTP.
"""

import asyncio
import html
import smtplib
import ssl
from dataclasses import dataclass
from datetime import date
from email.message import EmailMessage
from typing import Optional

from loguru import logger

from rocketlane_digest.config.settings import EmailSettings, SMTPSettings
from rocketlane_digest.core.exceptions import create_notification_error

SUBJECT_PREFIX = "Rocketlane Project Analysis"

EMAIL_TEMPLATE = """
<h2>Project Analysis Summary</h2>
<p><strong>Event Type:</strong> {event}</p>
<hr />
<h3>Analysis</h3>
<pre style="background: #f4f4f4; padding: 10px; border-radius: 5px; overflow-x: auto;">{summary}</pre>
<hr />
<p><small>Generated automatically by Rocketlane &rarr; Gemini AI &rarr; Email automation</small></p>
"""


@dataclass(frozen=True)
class EmailContent:
    """A fully rendered digest email."""
    sender: str
    recipient: str
    subject: str
    html: str

    def to_message(self) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = self.recipient
        message["Subject"] = self.subject
        message.set_content(self.html, subtype="html")
        return message


def format_subject(sent_on: date) -> str:
    """Subject line stamped with an unpadded M/D/YYYY date."""
    return f"{SUBJECT_PREFIX} - {sent_on.month}/{sent_on.day}/{sent_on.year}"


def render_email_html(event: Optional[str], summary: str) -> str:
    """Render the HTML body. Both the event tag and the summary are escaped."""
    return EMAIL_TEMPLATE.format(
        event=html.escape(event if event is not None else "unknown"),
        summary=html.escape(summary),
    )


class EmailNotifier:
    """Sends the summary email through the configured SMTP server."""

    def __init__(self, smtp_settings: SMTPSettings, email_settings: EmailSettings):
        self.smtp = smtp_settings
        self.email = email_settings
        logger.info(
            f"EmailNotifier initialized: {self.smtp.host or 'no host'}:{self.smtp.port} "
            f"({'SSL' if self.smtp.use_ssl else 'STARTTLS'})"
        )

    def build_email(
        self, event: Optional[str], summary: str, sent_on: Optional[date] = None
    ) -> EmailContent:
        """
        Build the digest email for an event.

        Args:
            event: Event type tag from the webhook
            summary: Summary text returned by the summarizer
            sent_on: Date for the subject line, today when omitted

        Returns:
            The rendered email
        """
        return EmailContent(
            sender=self.email.sender,
            recipient=self.email.recipient,
            subject=format_subject(sent_on or date.today()),
            html=render_email_html(event, summary),
        )

    async def send_summary(self, event: Optional[str], summary: str) -> EmailContent:
        """
        Render and send the digest email.

        Raises:
            NotificationError: if the SMTP exchange fails for any reason
        """
        content = self.build_email(event, summary)

        try:
            await asyncio.to_thread(self._deliver, content.to_message())
        except Exception as e:
            logger.error(f"Failed to send email to {content.recipient}: {e}")
            raise create_notification_error(self.smtp.host, content.recipient, e) from e

        logger.info(f"Email sent successfully to {content.recipient}")
        return content

    def _deliver(self, message: EmailMessage) -> None:
        """Blocking SMTP exchange: connect, secure, log in, send."""
        context = ssl.create_default_context()

        if self.smtp.use_ssl:
            with smtplib.SMTP_SSL(self.smtp.host, self.smtp.port, context=context) as server:
                self._login(server)
                server.send_message(message)
        else:
            with smtplib.SMTP(self.smtp.host, self.smtp.port) as server:
                server.starttls(context=context)
                self._login(server)
                server.send_message(message)

    def _login(self, server: smtplib.SMTP) -> None:
        if self.smtp.username:
            server.login(self.smtp.username, self.smtp.password)
