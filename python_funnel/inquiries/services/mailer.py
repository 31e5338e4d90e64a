"""
Email transport owned by whoever sends notifications.

A NotificationMailer wraps one Django email backend connection:
construct -> verify (optional) -> send -> close. It is used as a context
manager so the connection is opened once per batch of messages.
"""
import logging
import smtplib
from typing import List, Optional, Sequence

from django.conf import settings
from django.core.mail import EmailMultiAlternatives, get_connection
from django.utils.html import strip_tags

logger = logging.getLogger(__name__)


class NotificationMailer:
    """Sends HTML emails with a plain-text fallback over a single connection."""

    def __init__(self, connection=None, from_email: Optional[str] = None,
                 sales_recipients: Optional[Sequence[str]] = None):
        self.connection = connection or get_connection(fail_silently=False)
        self.from_email = from_email or settings.DEFAULT_FROM_EMAIL
        self.sales_recipients: List[str] = list(
            sales_recipients if sales_recipients is not None
            else getattr(settings, 'SALES_NOTIFICATION_EMAILS', [])
        )

    @classmethod
    def from_settings(cls) -> 'NotificationMailer':
        return cls()

    def __enter__(self):
        self.connection.open()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False

    def verify(self) -> bool:
        """
        Open and close the connection once to check credentials and reachability.

        Returns:
            True if the transport accepted the connection
        """
        try:
            self.connection.open()
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Email transport verification failed: {e}")
            return False
        self.connection.close()
        return True

    def send(self, subject: str, html_body: str, recipients: Sequence[str]) -> int:
        """
        Send one HTML message.

        Returns:
            Number of messages delivered to the backend (0 or 1)

        Raises:
            smtplib.SMTPException, OSError: On transport failure
        """
        if not recipients:
            logger.warning(f"No recipients for email '{subject}', skipping")
            return 0

        message = EmailMultiAlternatives(
            subject=subject,
            body=strip_tags(html_body),
            from_email=self.from_email,
            to=list(recipients),
            connection=self.connection,
        )
        message.attach_alternative(html_body, 'text/html')
        sent = message.send()
        logger.info(f"Email '{subject}' sent to {len(recipients)} recipient(s)")
        return sent

    def send_to_sales(self, subject: str, html_body: str) -> int:
        return self.send(subject, html_body, self.sales_recipients)

    def close(self) -> None:
        self.connection.close()
