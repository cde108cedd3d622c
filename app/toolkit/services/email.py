"""
Email service for centralized email sending.

This module provides the EmailService class for sending emails with:
- Plain text and HTML alternatives
- Custom headers (Message-ID, In-Reply-To, References) for threading
- Attachment handling

Configuration:
    Email settings are read from Django settings:
    - EMAIL_BACKEND
    - EMAIL_HOST, EMAIL_PORT
    - DEFAULT_FROM_EMAIL

Usage:
    from toolkit.services.email import EmailService

    EmailService.send_raw(
        to="user@example.com",
        subject="Quick note",
        body_text="Plain text content",
        body_html="<p>HTML content</p>",
        headers={"Message-ID": "<note-1@example.com>"},
    )
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.core.mail import EmailMultiAlternatives

from toolkit.helpers import mask_email

logger = logging.getLogger(__name__)


class EmailService:
    """
    Centralized email sending.

    Errors are logged and reported as ``False`` unless the caller passes
    ``fail_silently=False``, in which case they propagate so a Celery
    task can retry.
    """

    @staticmethod
    def send_raw(
        to: str | list[str],
        subject: str,
        body_text: str,
        body_html: str | None = None,
        from_email: str | None = None,
        reply_to: str | None = None,
        headers: dict[str, str] | None = None,
        attachments: list[tuple] | None = None,
        fail_silently: bool = True,
    ) -> bool:
        """
        Send email with raw content (no template).

        Args:
            to: Recipient email address(es)
            subject: Email subject line
            body_text: Plain text email body
            body_html: HTML email body (optional)
            from_email: Sender email (defaults to DEFAULT_FROM_EMAIL)
            reply_to: Reply-to address
            headers: Extra message headers
            attachments: List of (filename, content, mimetype) tuples
            fail_silently: Log and return False instead of raising

        Returns:
            True if email was sent successfully
        """
        if isinstance(to, str):
            to = [to]

        from_email = from_email or settings.DEFAULT_FROM_EMAIL

        email = EmailMultiAlternatives(
            subject=subject,
            body=body_text,
            from_email=from_email,
            to=to,
            reply_to=[reply_to] if reply_to else None,
            headers=headers or {},
        )

        if body_html:
            email.attach_alternative(body_html, "text/html")

        if attachments:
            for filename, content, mimetype in attachments:
                email.attach(filename, content, mimetype)

        recipients = ", ".join(mask_email(address) for address in to)
        try:
            email.send(fail_silently=False)
        except Exception as e:
            if not fail_silently:
                raise
            logger.error(f"Failed to send raw email to {recipients}: {e}")
            return False

        logger.info(f"Raw email sent to {recipients}: {subject}")
        return True
